import pytest

from foursquare_merchant.client import MerchantClient
from foursquare_merchant.config import ClientConfig
from foursquare_merchant.connection import Connection


class FakeResponse:
    def __init__(self, status_code=200, json_data=None, json_raises=False, reason="OK"):
        self.status_code = status_code
        self.reason = reason
        self._json_data = json_data
        self._json_raises = json_raises

    def json(self):
        if self._json_raises:
            raise ValueError("Invalid JSON")
        return self._json_data


def _envelope(response, code=200):
    return {"meta": {"code": code}, "response": response, "notifications": []}


@pytest.fixture
def fake_response():
    """Factory for fake requests responses."""
    return FakeResponse


@pytest.fixture
def envelope():
    """Wraps a payload the way the API does."""
    return _envelope


@pytest.fixture
def config():
    return ClientConfig(
        client_id="cid",
        client_secret="csecret",
        access_token="token123",
        endpoint="https://api.example.com/v2",
    )


@pytest.fixture
def client(config):
    return MerchantClient(config)


@pytest.fixture
def transport(mocker):
    """
    Patches Connection.request so no network I/O happens.
    Defaults to an empty successful envelope; set `.return_value` to change it.
    """
    return mocker.patch.object(
        Connection, "request", return_value=FakeResponse(200, _envelope({}))
    )
