from unittest.mock import MagicMock, patch

import pytest
import structlog

from bbb_client import BigBlueButton, ClientConfig, RandomIdentifiers

SERVER_URL = "https://bbb.example.com/bigbluebutton"
SECRET = "639259d4-9dd8-4b25-bf01-95f9567eaf4b"


def fake_response(body, status_code=200):
    """A stand-in for requests.Response carrying an XML (or other) body."""
    response = MagicMock()
    response.status_code = status_code
    response.content = body.encode('utf-8')
    response.text = body
    return response


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def config():
    return ClientConfig(SERVER_URL, SECRET)


@pytest.fixture
def bbb(config):
    return BigBlueButton(config, identifiers=RandomIdentifiers(seed=42))


@pytest.fixture
def http_get():
    with patch('bbb_client.api.requests.get') as get:
        yield get


@pytest.fixture
def respond(http_get):
    """Make the next requests.get return the given body."""
    def _respond(body, status_code=200):
        http_get.return_value = fake_response(body, status_code)
        return http_get
    return _respond
