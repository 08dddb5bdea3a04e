# netservice/utils/api/network_service.py
# Created: 2025-02-03 21:34:52
# Author: Genterr

from typing import Any, Mapping, Optional, Protocol, Type, TypeVar, runtime_checkable
from datetime import datetime, UTC
import asyncio
import json
import logging
import yarl
from multidict import CIMultiDict, CIMultiDictProxy

from ...core.config import Config
from ...core.logger import Logger
from .http_method import HTTPMethod
from .network_error import (
    BadRequestError,
    DecodingError,
    EncodingError,
    InvalidURLError,
    NetworkError,
    RequestCancelledError,
    ServerResponseError,
    TransportError
)
from .resource import Resource
from .transport import AiohttpTransport, HTTPRequest, Transport

T = TypeVar('T')
logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Content-Type": "application/json"}

@runtime_checkable
class NetworkSession(Protocol):
    """Protocol for objects exposing the per-verb request entry points"""

    async def fetch(self, resource: Resource, type_: Optional[Type[T]] = None) -> T:
        ...

    async def post(self, resource: Resource, payload: Any, type_: Optional[Type[T]] = None) -> T:
        ...

    async def put(self, resource: Resource, payload: Any, type_: Optional[Type[T]] = None) -> T:
        ...

    async def patch(self, resource: Resource, fields: Mapping[str, Any], type_: Optional[Type[T]] = None) -> T:
        ...

    async def delete(self, resource: Resource) -> bytes:
        ...

class NetworkService:
    """
    Executes Resources against an injected transport.

    Each call runs a fixed pipeline: URL validation, body encoding, one
    transport round trip, status validation against the verb's accepted
    codes, then decoding. The first failing stage ends the call with its
    NetworkError. Nothing is retried and no state is kept between calls.
    """

    def __init__(self, transport: Transport):
        self.transport = transport

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> "NetworkService":
        """Build a service on an aiohttp transport, applying logging settings"""
        config = config or Config()
        Logger(config)
        return cls(AiohttpTransport(config))

    async def close(self) -> None:
        """Close the transport if it holds resources"""
        close = getattr(self.transport, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "NetworkService":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def fetch(self, resource: Resource, type_: Optional[Type[T]] = None) -> T:
        """
        Perform a GET request

        Args:
            resource: Resource describing the call
            type_: Type the response body decodes into

        Returns:
            Decoded response body
        """
        url = self._parse_endpoint(resource, HTTPMethod.GET)
        data = await self._make_request(resource, HTTPMethod.GET, url)
        return self._decode_data(resource, HTTPMethod.GET, data, type_)

    async def post(self, resource: Resource, payload: Any, type_: Optional[Type[T]] = None) -> T:
        """
        Perform a POST request

        Args:
            resource: Resource describing the call
            payload: Value encoded with the resource's encoder
            type_: Type the response body decodes into, defaults to type(payload)

        Returns:
            Decoded response body
        """
        return await self._send_encoded(HTTPMethod.POST, resource, payload, type_)

    async def put(self, resource: Resource, payload: Any, type_: Optional[Type[T]] = None) -> T:
        """Perform a PUT request, see post()"""
        return await self._send_encoded(HTTPMethod.PUT, resource, payload, type_)

    async def patch(self, resource: Resource, fields: Mapping[str, Any], type_: Optional[Type[T]] = None) -> T:
        """
        Perform a PATCH request

        The body is built from a plain field mapping with the generic JSON
        serializer rather than the resource's encoder, since partial updates
        are sparse and need not round-trip through a model type.

        Args:
            resource: Resource describing the call
            fields: Fields to update
            type_: Type the response body decodes into

        Returns:
            Decoded response body
        """
        url = self._parse_endpoint(resource, HTTPMethod.PATCH)
        body = self._serialize_fields(resource, fields)
        data = await self._make_request(resource, HTTPMethod.PATCH, url, body)
        return self._decode_data(resource, HTTPMethod.PATCH, data, type_)

    async def delete(self, resource: Resource) -> bytes:
        """
        Perform a DELETE request

        Returns:
            Raw response body, possibly empty. Callers decode it if they expect one.
        """
        url = self._parse_endpoint(resource, HTTPMethod.DELETE)
        return await self._make_request(resource, HTTPMethod.DELETE, url, resource.body)

    async def request(self, resource: Resource, payload: Any = None, type_: Optional[Type[T]] = None) -> Any:
        """Dispatch a resource through the entry point matching its own method"""
        method = resource.method
        if method is HTTPMethod.GET:
            return await self.fetch(resource, type_)
        if method is HTTPMethod.POST:
            return await self.post(resource, payload, type_)
        if method is HTTPMethod.PUT:
            return await self.put(resource, payload, type_)
        if method is HTTPMethod.PATCH:
            return await self.patch(resource, payload if payload is not None else {}, type_)
        return await self.delete(resource)

    async def _send_encoded(self, method: HTTPMethod, resource: Resource, payload: Any, type_: Optional[Type[T]]) -> T:
        url = self._parse_endpoint(resource, method)
        body = self._encode_data(resource, method, payload)
        data = await self._make_request(resource, method, url, body)
        return self._decode_data(resource, method, data, type_ if type_ is not None else type(payload))

    def _parse_endpoint(self, resource: Resource, method: HTTPMethod) -> yarl.URL:
        """Validate the resource endpoint as a URL"""
        endpoint = resource.endpoint
        try:
            if not isinstance(endpoint, str) or not endpoint.strip():
                raise ValueError("empty endpoint")
            if any(ch.isspace() or ord(ch) < 0x20 or ch == '\x7f' for ch in endpoint):
                raise ValueError("endpoint contains whitespace or control characters")
            url = yarl.URL(endpoint)
            if url.port is not None and not 0 < url.port < 65536:
                raise ValueError(f"port out of range: {url.port}")
        except (ValueError, TypeError) as e:
            logger.warning(f"Invalid endpoint: {str(e)}", extra=self._context(method, endpoint))
            raise InvalidURLError(details={"endpoint": endpoint}) from e
        return url

    def _build_request(self, resource: Resource, method: HTTPMethod, url: yarl.URL, body: Optional[bytes]) -> HTTPRequest:
        headers = CIMultiDict(DEFAULT_HEADERS)
        if resource.headers:
            for key, value in resource.headers.items():
                headers[key] = value
        return HTTPRequest(
            method=method.verb,
            url=str(url),
            headers=CIMultiDictProxy(headers),
            body=body
        )

    async def _make_request(self, resource: Resource, method: HTTPMethod, url: yarl.URL, body: Optional[bytes] = None) -> bytes:
        """Send the request and return the body of an accepted response"""
        context = self._context(method, resource.endpoint)
        if resource.method is not method:
            logger.warning(
                f"Resource declares {resource.method.verb} but is sent as {method.verb}",
                extra=context
            )

        request = self._build_request(resource, method, url, body)
        start_time = datetime.now(UTC)
        logger.debug("Dispatching request", extra=context)

        try:
            response = await self.transport.perform(request)
        except NetworkError:
            raise
        except asyncio.CancelledError as e:
            logger.warning("Request cancelled", extra=context)
            raise RequestCancelledError(e) from e
        except Exception as e:
            logger.error(f"Transport failure: {str(e)}", extra=context)
            raise TransportError(e) from e

        duration = (datetime.now(UTC) - start_time).total_seconds()
        if not method.accepts(response.status):
            logger.warning(
                f"Rejected status {response.status} after {duration:.3f}s",
                extra=context
            )
            raise ServerResponseError(status=response.status)

        logger.debug(f"Accepted status {response.status} after {duration:.3f}s", extra=context)
        return response.body

    def _decode_data(self, resource: Resource, method: HTTPMethod, data: bytes, type_: Optional[Type[T]]) -> T:
        try:
            return resource.decoder.decode(data, type_)
        except Exception as e:
            logger.warning(f"Failed to decode response: {str(e)}", extra=self._context(method, resource.endpoint))
            raise DecodingError(details={"reason": str(e)}) from e

    def _encode_data(self, resource: Resource, method: HTTPMethod, payload: Any) -> bytes:
        try:
            return resource.encoder.encode(payload)
        except Exception as e:
            logger.warning(f"Failed to encode payload: {str(e)}", extra=self._context(method, resource.endpoint))
            raise EncodingError(details={"reason": str(e)}) from e

    def _serialize_fields(self, resource: Resource, fields: Mapping[str, Any]) -> bytes:
        try:
            if not isinstance(fields, Mapping):
                raise TypeError(f"Expected a mapping of fields, got {type(fields).__name__}")
            return json.dumps(dict(fields), allow_nan=False).encode("utf-8")
        except (TypeError, ValueError, RecursionError) as e:
            logger.warning(f"Failed to serialize fields: {str(e)}", extra=self._context(HTTPMethod.PATCH, resource.endpoint))
            raise BadRequestError(details={"reason": str(e)}) from e

    @staticmethod
    def _context(method: HTTPMethod, endpoint: Any) -> dict:
        return {"method": method.verb, "endpoint": endpoint}
