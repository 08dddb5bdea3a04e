# netservice/utils/api/network_error.py
# Created: 2025-02-03 18:55:31
# Author: Genterr

"""
Closed taxonomy of failures a single request can end in.

Every failure inside the request pipeline is mapped to exactly one of these
before it leaves the package. Equality is by kind, and for transport
failures also by the identity of the wrapped cause, so calling code can
branch on ``error == DecodingError()`` or ``isinstance`` alike.
"""

from typing import Any, Dict, Optional
from enum import Enum
import asyncio

from ...core.exceptions import NetServiceError

class NetworkErrorKind(Enum):
    """Kinds of network errors"""
    INVALID_URL = "invalid_url"
    ENCODING_ERROR = "encoding_error"
    DECODING_ERROR = "decoding_error"
    BAD_REQUEST = "bad_request"
    SERVER_RESPONSE = "server_response"
    ERROR = "error"

class NetworkError(NetServiceError):
    """Base exception for request pipeline failures"""
    kind: NetworkErrorKind
    default_message: str = "A network error occurred."

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message or self.default_message, details)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NetworkError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

class InvalidURLError(NetworkError):
    """Raised when the endpoint string fails URL parsing"""
    kind = NetworkErrorKind.INVALID_URL
    default_message = "The endpoint provided was invalid."

class EncodingError(NetworkError):
    """Raised when a request payload fails to serialize"""
    kind = NetworkErrorKind.ENCODING_ERROR
    default_message = "The request payload could not be encoded."

class DecodingError(NetworkError):
    """Raised when response bytes fail to deserialize into the expected type"""
    kind = NetworkErrorKind.DECODING_ERROR
    default_message = "The response could not be decoded."

class BadRequestError(NetworkError):
    """Raised when a patch field mapping fails to serialize to JSON"""
    kind = NetworkErrorKind.BAD_REQUEST
    default_message = "The request fields could not be serialized."

class ServerResponseError(NetworkError):
    """Raised when the status code is outside the method's accepted set"""
    kind = NetworkErrorKind.SERVER_RESPONSE
    default_message = "The server returned an unexpected response."

    def __init__(self, message: Optional[str] = None, status: Optional[int] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.status = status

class TransportError(NetworkError):
    """Raised when the transport fails to complete the request"""
    kind = NetworkErrorKind.ERROR
    default_message = "The request could not be completed."

    def __init__(self, cause: BaseException, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message or f"{self.default_message} ({type(cause).__name__}: {cause})", details)
        self.cause = cause

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NetworkError):
            return NotImplemented
        return isinstance(other, TransportError) and self.cause is other.cause

    def __hash__(self) -> int:
        return hash((self.kind, id(self.cause)))

class RequestCancelledError(TransportError, asyncio.CancelledError):
    """Raised when the calling task is cancelled while the request is in flight"""
    default_message = "The request was cancelled."

    def __init__(self, cause: Optional[BaseException] = None, message: Optional[str] = None):
        cause = cause if cause is not None else asyncio.CancelledError()
        super().__init__(cause, message or self.default_message)
