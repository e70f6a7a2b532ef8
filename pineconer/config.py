#pineconer/config.py
import os
import logging
from collections import namedtuple

from dotenv import dotenv_values

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

API_KEY_VAR = "PINECONE_API_KEY"
DEFAULT_CONTROLLER_URL = "https://api.pinecone.io"
DEFAULT_TIMEOUT = 30

# Environment variable -> config field
ENV_OVERRIDES = {
    "PINECONE_CONTROLLER_URL": "controller_url",
    "PINECONE_API_VERSION": "api_version",
    "PINECONE_TIMEOUT": "timeout",
}


class ClientConfig(namedtuple("ClientConfig", ["api_key", "controller_url", "api_version", "timeout"])):
    """Immutable settings owned by a single client instance."""

    __slots__ = ()

    def __new__(cls, api_key, controller_url=DEFAULT_CONTROLLER_URL, api_version=None, timeout=DEFAULT_TIMEOUT):
        if not api_key or not str(api_key).strip():
            raise ConfigurationError(f"API key is required (set {API_KEY_VAR})")
        try:
            timeout = float(timeout)
        except (TypeError, ValueError):
            raise ConfigurationError(f"timeout must be a number, got {timeout!r}") from None
        if timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {timeout}")
        controller_url = (controller_url or DEFAULT_CONTROLLER_URL).rstrip("/")
        return super().__new__(cls, str(api_key).strip(), controller_url, api_version or None, timeout)

    @classmethod
    def from_env(cls, environ=None, dotenv_path=None, **overrides):
        """
        Build a config from a .env file (optional) overlaid by the environment.
        Process environment values win over .env values, explicit ``overrides``
        (controller_url, api_version, timeout) win over both. Blank values
        count as unset in every source.
        """
        values = {}
        if dotenv_path is not None:
            if not os.path.exists(dotenv_path):
                raise ConfigurationError(f".env file not found at {dotenv_path}")
            logger.debug("Loading settings from %s", dotenv_path)
            values.update(_non_blank(dotenv_values(dotenv_path)))
        values.update(_non_blank(os.environ if environ is None else environ))

        api_key = values.get(API_KEY_VAR)
        if not api_key:
            raise ConfigurationError(f"variable {API_KEY_VAR} missing from environment")

        kwargs = {}
        for env_var, field in ENV_OVERRIDES.items():
            if env_var in values:
                kwargs[field] = values[env_var]
        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(api_key, **kwargs)

    def __repr__(self):
        # Never print the full key
        masked = self.api_key[:4] + "..." if len(self.api_key) > 4 else "..."
        return (
            f"ClientConfig(api_key='{masked}', controller_url='{self.controller_url}', "
            f"api_version={self.api_version!r}, timeout={self.timeout})"
        )


def _non_blank(source):
    return {k: v for k, v in source.items() if v is not None and str(v).strip()}
