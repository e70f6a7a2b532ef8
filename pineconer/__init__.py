# pineconer/__init__.py

from .api_client import PineconeClient
from .config import ClientConfig
from .response import ResultEnvelope, normalize
from .mapping import FlatTable, flatten
from .errors import PineconerError, ConfigurationError, InvalidArgument, HostNotFound

__all__ = [
    "PineconeClient",
    "ClientConfig",
    "ResultEnvelope",
    "normalize",
    "FlatTable",
    "flatten",
    "PineconerError",
    "ConfigurationError",
    "InvalidArgument",
    "HostNotFound",
]
