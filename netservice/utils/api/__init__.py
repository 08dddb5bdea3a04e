# netservice/utils/api/__init__.py
# Created: 2025-02-03 18:40:02
# Author: Genterr

"""
API utilities for describing HTTP calls, performing them and classifying failures.
"""

from .http_method import (
    HTTPMethod,
    ACCEPTED_STATUS_CODES
)

from .codecs import (
    JSONEncoder,
    JSONDecoder,
    KeyStrategy,
    DateStrategy,
    CodecError
)

from .resource import Resource

from .network_error import (
    NetworkError,
    NetworkErrorKind,
    InvalidURLError,
    EncodingError,
    DecodingError,
    BadRequestError,
    ServerResponseError,
    TransportError,
    RequestCancelledError
)

from .transport import (
    HTTPRequest,
    HTTPResponse,
    Transport,
    AiohttpTransport
)

from .network_service import (
    NetworkService,
    NetworkSession
)

__all__ = [
    'HTTPMethod',
    'ACCEPTED_STATUS_CODES',
    'JSONEncoder',
    'JSONDecoder',
    'KeyStrategy',
    'DateStrategy',
    'CodecError',
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
