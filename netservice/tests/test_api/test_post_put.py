"""Tests for POST and PUT requests."""
import json
import pytest

from netservice.utils.api import (
    DecodingError,
    EncodingError,
    HTTPMethod,
    InvalidURLError,
    JSONDecoder,
    JSONEncoder,
    KeyStrategy,
    NetworkService,
    Resource,
    ServerResponseError
)
from netservice.tests.mock_transport import MockTransport
from netservice.tests.models import Address, NonCodableUser, User

@pytest.fixture
def post_resource():
    return Resource(endpoint="some/api", method=HTTPMethod.POST)

@pytest.fixture
def put_resource():
    return Resource(endpoint="some/api/2", method=HTTPMethod.PUT)

@pytest.mark.asyncio
async def test_successful_post(post_resource):
    """Test POST echo returns a value equal to the payload"""
    expected_user = User(id=2, name="test", email="test@gmail.com")
    transport = MockTransport(status=201, echo=True)
    service = NetworkService(transport)

    user = await service.post(post_resource, expected_user)

    assert user == expected_user
    request = transport.requests[0]
    assert request.method == "POST"
    assert json.loads(request.body) == {"id": 2, "name": "test", "email": "test@gmail.com"}

@pytest.mark.asyncio
async def test_post_accepts_ok(post_resource):
    """Test POST accepts 200 as well as 201"""
    service = NetworkService(MockTransport(status=200, echo=True))

    assert await service.post(post_resource, {"a": 1}) == {"a": 1}

@pytest.mark.asyncio
async def test_post_decodes_into_explicit_type(post_resource):
    """Test the response type can differ from the payload type"""
    body = b'{"id": 7, "name": "created", "email": "c@x.io"}'
    service = NetworkService(MockTransport(data=body, status=201))

    user = await service.post(post_resource, {"name": "created"}, User)

    assert user == User(id=7, name="created", email="c@x.io")

@pytest.mark.asyncio
async def test_post_encoding_error_skips_transport(post_resource):
    """Test an unencodable payload fails before any network I/O"""
    transport = MockTransport(status=201, echo=True)
    service = NetworkService(transport)

    with pytest.raises(EncodingError):
        await service.post(post_resource, NonCodableUser(id=1, name="x"))
    assert transport.call_count == 0

@pytest.mark.asyncio
async def test_post_nan_is_encoding_error(post_resource):
    """Test non-finite floats are not valid JSON"""
    service = NetworkService(MockTransport(status=201, echo=True))

    with pytest.raises(EncodingError):
        await service.post(post_resource, {"value": float("nan")})

@pytest.mark.asyncio
async def test_post_invalid_url_precedes_encoding():
    """Test URL validation runs before payload encoding"""
    transport = MockTransport(status=201, echo=True)
    service = NetworkService(transport)
    resource = Resource(endpoint="", method=HTTPMethod.POST)

    with pytest.raises(InvalidURLError):
        await service.post(resource, NonCodableUser(id=1, name="x"))
    assert transport.call_count == 0

@pytest.mark.asyncio
async def test_put_invalid_url():
    """Test PUT with a malformed endpoint never reaches the transport"""
    transport = MockTransport(status=200, echo=True)
    service = NetworkService(transport)
    resource = Resource(endpoint="http://bad host", method=HTTPMethod.PUT)

    with pytest.raises(InvalidURLError):
        await service.put(resource, User(id=2, name="test", email="test@gmail.com"))
    assert transport.call_count == 0

@pytest.mark.asyncio
async def test_post_rejected_status(post_resource):
    """Test POST does not accept 204"""
    service = NetworkService(MockTransport(status=204, echo=True))

    with pytest.raises(ServerResponseError):
        await service.post(post_resource, User(id=2, name="test", email="test@gmail.com"))

@pytest.mark.asyncio
async def test_post_uses_resource_codecs():
    """Test the resource's encoder and decoder are used"""
    resource = Resource(
        endpoint="https://api.example.com/profiles",
        method=HTTPMethod.POST,
        encoder=JSONEncoder(key_encoding_strategy=KeyStrategy.CONVERT_CAMEL_CASE),
        decoder=JSONDecoder(key_decoding_strategy=KeyStrategy.CONVERT_CAMEL_CASE)
    )
    transport = MockTransport(status=201, echo=True)
    service = NetworkService(transport)

    address = Address(street="Main St", zip_code="10115")

    result = await service.post(resource, address)

    assert json.loads(transport.requests[0].body) == {"street": "Main St", "zipCode": "10115"}
    assert result == address

@pytest.mark.asyncio
async def test_successful_put(put_resource):
    """Test PUT sends the encoded payload with its own verb"""
    user = User(id=2, name="renamed", email="test@gmail.com")
    transport = MockTransport(status=200, echo=True)
    service = NetworkService(transport)

    assert await service.put(put_resource, user) == user
    assert transport.requests[0].method == "PUT"

@pytest.mark.asyncio
async def test_put_no_content_is_decoding_error(put_resource):
    """Test PUT accepts 204 but an empty body cannot decode into a model"""
    service = NetworkService(MockTransport(data=b"", status=204))

    with pytest.raises(DecodingError):
        await service.put(put_resource, User(id=2, name="x", email="x@x.io"))

@pytest.mark.asyncio
async def test_put_rejects_created(put_resource):
    """Test PUT does not accept 201"""
    service = NetworkService(MockTransport(status=201, echo=True))

    with pytest.raises(ServerResponseError):
        await service.put(put_resource, User(id=2, name="x", email="x@x.io"))

@pytest.mark.asyncio
async def test_put_encoding_error(put_resource):
    """Test PUT maps encoder failures"""
    transport = MockTransport(status=200, echo=True)
    service = NetworkService(transport)

    with pytest.raises(EncodingError):
        await service.put(put_resource, {1: "non-string key"})
    assert transport.call_count == 0
