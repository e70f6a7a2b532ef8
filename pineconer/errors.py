#pineconer/errors.py


class PineconerError(Exception):
    """Base class for errors raised by the client itself."""


class ConfigurationError(PineconerError):
    """Missing or invalid client configuration (e.g. no API key)."""


class InvalidArgument(PineconerError, ValueError):
    """A caller passed an argument of the wrong shape or value."""


class HostNotFound(PineconerError):
    """A describe call did not return a data-plane host."""

    def __init__(self, kind, name, status_code=None):
        self.kind = kind
        self.name = name
        self.status_code = status_code
        msg = f"Could not resolve host for {kind} '{name}'"
        if status_code is not None:
            msg += f" (describe returned {status_code})"
        super().__init__(msg)
