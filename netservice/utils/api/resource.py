# netservice/utils/api/resource.py
# Created: 2025-02-03 19:02:16
# Author: Genterr

from typing import Mapping, Optional
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from .codecs import JSONDecoder, JSONEncoder
from .http_method import HTTPMethod

@dataclass(frozen=True)
class Resource:
    """
    Self-describing descriptor of a single HTTP call.

    The endpoint is stored as given and only parsed when the resource is
    dispatched, so a Resource can be assembled long before it is sent.
    """
    endpoint: str
    method: HTTPMethod = HTTPMethod.GET
    headers: Optional[Mapping[str, str]] = field(default=None, hash=False)
    body: Optional[bytes] = None
    decoder: JSONDecoder = field(default_factory=JSONDecoder, compare=False)
    encoder: JSONEncoder = field(default_factory=JSONEncoder, compare=False)

    def __post_init__(self) -> None:
        if self.headers is not None:
            object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))
        if self.body is not None and not self.method.carries_body:
            raise ValueError(f"{self.method.verb} requests do not carry a body")

    def with_headers(self, headers: Optional[Mapping[str, str]] = None, **extra: str) -> "Resource":
        """Return a copy with the given headers merged over the current ones"""
        merged = dict(self.headers or {})
        merged.update(headers or {})
        merged.update(extra)
        return replace(self, headers=merged)

    def with_body(self, body: Optional[bytes]) -> "Resource":
        """Return a copy carrying a different pre-encoded body"""
        return replace(self, body=body)
