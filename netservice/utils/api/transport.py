# netservice/utils/api/transport.py
# Created: 2025-02-03 20:11:05
# Author: Genterr

from typing import Dict, Mapping, Optional, Protocol, runtime_checkable
from dataclasses import dataclass, field
import logging
import aiohttp
import yarl

from ...core.config import Config

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class HTTPRequest:
    """Wire-level request handed to a transport"""
    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None

@dataclass(frozen=True)
class HTTPResponse:
    """Status code and raw body returned by a transport"""
    status: int
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)

@runtime_checkable
class Transport(Protocol):
    """Protocol for anything able to perform an HTTP request"""
    async def perform(self, request: HTTPRequest) -> HTTPResponse:
        """Send the request and return the response"""
        ...

class AiohttpTransport:
    """
    Transport backed by a shared aiohttp session.

    The session is created lazily and reused for every request, so one
    transport can serve many concurrent calls. Relative request URLs are
    joined onto ``transport.base_url`` when one is configured. Failures are
    left as the native aiohttp/asyncio exceptions for the caller to classify.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        base_url = self.config.get("transport.base_url")
        self.base_url: Optional[yarl.URL] = yarl.URL(base_url) if base_url else None
        self.verify_ssl: bool = self.config.get("transport.verify_ssl", True)
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session"""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(
                    total=self.config.get("transport.timeout"),
                    connect=self.config.get("transport.connect_timeout")
                ),
                headers={"User-Agent": self.config.get("transport.user_agent", "netservice/1.0")}
            )
        return self._session

    def resolve(self, url: str) -> yarl.URL:
        """Resolve a request URL against the configured base URL"""
        target = yarl.URL(url)
        if target.is_absolute() or self.base_url is None:
            return target
        path = target.path.lstrip('/')
        joined = self.base_url / path if path else self.base_url
        if target.query:
            joined = joined.with_query(target.query)
        if target.fragment:
            joined = joined.with_fragment(target.fragment)
        return joined

    async def perform(self, request: HTTPRequest) -> HTTPResponse:
        session = await self._get_session()
        url = self.resolve(request.url)
        logger.debug(f"{request.method} {url}")

        async with session.request(
            request.method,
            url,
            data=request.body,
            headers=dict(request.headers),
            ssl=self.verify_ssl
        ) as response:
            body = await response.read()
            headers: Dict[str, str] = dict(response.headers)
            return HTTPResponse(status=response.status, body=body, headers=headers)

    async def close(self) -> None:
        """Close the underlying session"""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "AiohttpTransport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
