"""Tests for Resource descriptors and HTTP method acceptance sets."""
import dataclasses
import pytest

from netservice.utils.api import (
    ACCEPTED_STATUS_CODES,
    HTTPMethod,
    JSONDecoder,
    JSONEncoder,
    Resource
)

@pytest.mark.parametrize(
    "method,codes",
    [
        (HTTPMethod.GET, {200}),
        (HTTPMethod.POST, {200, 201}),
        (HTTPMethod.PUT, {200, 204}),
        (HTTPMethod.PATCH, {200, 204}),
        (HTTPMethod.DELETE, {200, 202, 204}),
    ],
)
def test_accepted_status_codes(method, codes):
    """Test each verb's acceptance set"""
    assert method.accepted_status_codes == codes
    assert ACCEPTED_STATUS_CODES[method] == codes
    for status in codes:
        assert method.accepts(status)

def test_acceptance_table_covers_every_method():
    """Test no verb is missing from the table"""
    assert set(ACCEPTED_STATUS_CODES) == set(HTTPMethod)

def test_get_rejects_no_content_and_delete_accepts_it():
    assert not HTTPMethod.GET.accepts(204)
    assert HTTPMethod.DELETE.accepts(204)

def test_method_verbs():
    """Test wire verbs match the enum values"""
    assert [m.verb for m in HTTPMethod] == ["GET", "POST", "PUT", "PATCH", "DELETE"]
    assert HTTPMethod("PATCH") is HTTPMethod.PATCH
    assert not HTTPMethod.GET.carries_body
    assert HTTPMethod.POST.carries_body

def test_resource_defaults():
    """Test a resource built from an endpoint alone"""
    resource = Resource(endpoint="some/api")
    assert resource.method is HTTPMethod.GET
    assert resource.headers is None
    assert resource.body is None
    assert isinstance(resource.decoder, JSONDecoder)
    assert isinstance(resource.encoder, JSONEncoder)

def test_resource_codecs_are_not_shared():
    """Test each resource gets its own default codecs"""
    assert Resource(endpoint="a").encoder is not Resource(endpoint="b").encoder

def test_resource_does_not_validate_endpoint():
    """Test construction defers URL validation to dispatch"""
    resource = Resource(endpoint="http://bad host", method=HTTPMethod.POST)
    assert resource.endpoint == "http://bad host"

def test_resource_is_immutable():
    """Test fields and headers cannot be changed after construction"""
    headers = {"X-Trace": "1"}
    resource = Resource(endpoint="some/api", headers=headers)

    with pytest.raises(dataclasses.FrozenInstanceError):
        resource.endpoint = "other/api"
    with pytest.raises(TypeError):
        resource.headers["X-Trace"] = "2"

    headers["X-Trace"] = "3"
    assert resource.headers["X-Trace"] == "1"

def test_get_resource_rejects_body():
    """Test GET descriptors cannot carry a body"""
    with pytest.raises(ValueError):
        Resource(endpoint="some/api", method=HTTPMethod.GET, body=b"{}")

def test_with_headers_returns_new_resource():
    """Test header helpers leave the original untouched"""
    resource = Resource(endpoint="some/api", headers={"Accept": "application/json"})
    updated = resource.with_headers({"Authorization": "Bearer t"}, X_Trace="1")

    assert resource.headers == {"Accept": "application/json"}
    assert updated.headers == {
        "Accept": "application/json",
        "Authorization": "Bearer t",
        "X_Trace": "1"
    }
    assert updated.decoder is resource.decoder

def test_with_body():
    resource = Resource(endpoint="some/api", method=HTTPMethod.DELETE)
    assert resource.with_body(b"[1]").body == b"[1]"
    assert resource.body is None

def test_resource_equality_ignores_codecs():
    assert Resource(endpoint="some/api") == Resource(endpoint="some/api")
    assert Resource(endpoint="some/api") != Resource(endpoint="some/api", method=HTTPMethod.DELETE)

def test_resource_is_hashable_with_headers():
    first = Resource(endpoint="some/api", headers={"A": "b"})
    second = Resource(endpoint="some/api", headers={"A": "b"})
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1
