# netservice/utils/api/http_method.py
# Created: 2025-02-03 18:42:10
# Author: Genterr

from typing import Dict, FrozenSet
from enum import Enum

class HTTPMethod(Enum):
    """HTTP request methods"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @property
    def verb(self) -> str:
        return self.value

    @property
    def accepted_status_codes(self) -> FrozenSet[int]:
        """Status codes treated as success for this verb"""
        return ACCEPTED_STATUS_CODES[self]

    @property
    def carries_body(self) -> bool:
        return self is not HTTPMethod.GET

    def accepts(self, status: int) -> bool:
        return status in ACCEPTED_STATUS_CODES[self]

ACCEPTED_STATUS_CODES: Dict[HTTPMethod, FrozenSet[int]] = {
    HTTPMethod.GET: frozenset({200}),                 # OK
    HTTPMethod.POST: frozenset({200, 201}),           # OK, Created
    HTTPMethod.PUT: frozenset({200, 204}),            # OK, No Content
    HTTPMethod.PATCH: frozenset({200, 204}),          # OK, No Content
    HTTPMethod.DELETE: frozenset({200, 202, 204}),    # OK, Accepted, No Content
}
