"""Global test configuration and fixtures."""
import json
import pytest

from netservice.utils.api import HTTPMethod, NetworkService, Resource
from netservice.tests.mock_transport import MockTransport
from netservice.tests.models import User

@pytest.fixture
def expected_user():
    """Fixture for the user returned by the canned API"""
    return User(id=1, name="Test User", email="test@gmail.com")

@pytest.fixture
def user_bytes(expected_user):
    """Fixture for the wire form of expected_user"""
    return json.dumps({"id": 1, "name": "Test User", "email": "test@gmail.com"}).encode()

@pytest.fixture
def mock_transport():
    """Fixture for an unconfigured mock transport"""
    return MockTransport()

@pytest.fixture
def service(mock_transport):
    """Fixture for a service bound to the mock transport"""
    return NetworkService(mock_transport)

@pytest.fixture
def get_resource():
    return Resource(endpoint="some/api", method=HTTPMethod.GET)
