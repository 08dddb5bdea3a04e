"""
netservice: a thin request/response layer for JSON HTTP APIs.
"""

from .core.config import Config
from .core.exceptions import NetServiceError, ConfigError, LoggerError
from .core.logger import Logger

from .utils.api import (
    HTTPMethod,
    JSONEncoder,
    JSONDecoder,
    KeyStrategy,
    DateStrategy,
    Resource,
    NetworkError,
    NetworkErrorKind,
    InvalidURLError,
    EncodingError,
    DecodingError,
    BadRequestError,
    ServerResponseError,
    TransportError,
    RequestCancelledError,
    HTTPRequest,
    HTTPResponse,
    Transport,
    AiohttpTransport,
    NetworkService,
    NetworkSession
)

__version__ = "1.0.0"

__all__ = [
    'Config',
    'NetServiceError',
    'ConfigError',
    'LoggerError',
    'Logger',
    'HTTPMethod',
    'JSONEncoder',
    'JSONDecoder',
    'KeyStrategy',
    'DateStrategy',
    'Resource',
    'NetworkError',
    'NetworkErrorKind',
    'InvalidURLError',
    'EncodingError',
    'DecodingError',
    'BadRequestError',
    'ServerResponseError',
    'TransportError',
    'RequestCancelledError',
    'HTTPRequest',
    'HTTPResponse',
    'Transport',
    'AiohttpTransport',
    'NetworkService',
    'NetworkSession'
]
