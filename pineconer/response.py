#pineconer/response.py
import logging
from collections import namedtuple

logger = logging.getLogger(__name__)

SUCCESS = (200,)
CREATED = (201,)
ACCEPTED = (202,)


class ResultEnvelope(namedtuple("ResultEnvelope", ["raw_response", "content", "status_code"])):
    """
    Uniform result of every API call.

    ``content`` is None when the status was not a success for the call,
    or when a successful response carried no JSON body.
    """

    __slots__ = ()

    def replace_content(self, content):
        """Return a copy with ``content`` swapped (e.g. for a FlatTable)."""
        return self._replace(content=content)


def _safe_json(resp):
    if resp is None or not getattr(resp, "content", None):
        return None
    try:
        return resp.json()
    except ValueError:
        return None


def normalize(raw_response, success_codes=SUCCESS):
    """Wrap a completed HTTP response into a ResultEnvelope. Never raises."""
    status_code = int(raw_response.status_code)
    if status_code not in success_codes:
        return ResultEnvelope(raw_response, None, status_code)

    content = _safe_json(raw_response)
    if content is None:
        logger.debug("Status %s with no JSON body", status_code)
    return ResultEnvelope(raw_response, content, status_code)


def error_excerpt(envelope, limit=200):
    """Short text of the server's error body, for log messages."""
    text = getattr(envelope.raw_response, "text", "") or ""
    return text if len(text) <= limit else text[:limit] + "..."
