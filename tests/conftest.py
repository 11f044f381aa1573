import httpx
import pytest

from http_executor.client import DefaultHttpClient
from http_executor.models import Callbacks


class Recorder:
    """Collects callback invocations so tests can assert exactly one fired."""

    def __init__(self):
        self.responses = []
        self.errors = []

    def on_response(self, response):
        self.responses.append(response)

    def on_error(self, response):
        self.errors.append(response)

    @property
    def callbacks(self) -> Callbacks:
        return Callbacks(response=self.on_response, error=self.on_error)

    @property
    def calls(self) -> int:
        return len(self.responses) + len(self.errors)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_client():
    """Build a DefaultHttpClient whose requests are answered by `handler`."""

    def _make(handler):
        return DefaultHttpClient(http_transport=httpx.MockTransport(handler))

    return _make
