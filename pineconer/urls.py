#pineconer/urls.py
from .errors import InvalidArgument


def _join(base, segments):
    parts = [base.rstrip("/")]
    parts += [str(s).strip("/") for s in segments if s is not None and str(s).strip("/")]
    return "/".join(parts)


def control_plane_url(base_url, *segments):
    """URL on the fixed controller host (indexes, collections, assistants, inference)."""
    return _join(base_url, segments)


def data_plane_url(host, *segments):
    """
    URL on a per-resource host returned by a describe call.
    Returns: https://<host>/<segments...>
    """
    if not host:
        raise InvalidArgument("host is required")
    base = host if "://" in host else f"https://{host}"
    return _join(base, segments)
