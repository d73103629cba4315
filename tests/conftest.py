import io
from typing import Callable, List, Optional

import pytest
import requests


class Body(io.BytesIO):
    """In-memory response body that remembers how far it was read."""

    @property
    def drained(self) -> bool:
        return self.tell() == len(self.getvalue())


class TrackedResponse(requests.Response):
    def __init__(self):
        super().__init__()
        self.close_calls = 0

    def close(self):
        self.close_calls += 1
        super().close()


def make_response(status: int = 200, body: bytes = b"", url: str = "http://example.com/") -> TrackedResponse:
    response = TrackedResponse()
    response.status_code = status
    response.raw = Body(body)
    response.url = url
    return response


class FakeClient:
    """Stands in for requests.Session: records every send and answers from ``respond``."""

    def __init__(self, respond: Optional[Callable[[requests.PreparedRequest], requests.Response]] = None):
        self.respond = respond or (lambda request: make_response(200, b"ok", request.url))
        self.requests: List[requests.PreparedRequest] = []
        self.kwargs: List[dict] = []
        self.responses: List[TrackedResponse] = []

    def send(self, request, **kwargs):
        self.requests.append(request)
        self.kwargs.append(kwargs)
        response = self.respond(request)
        self.responses.append(response)
        return response


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def client_returning():
    """Build a FakeClient whose every response has the given status and body."""

    def build(status: int, body: bytes = b"") -> FakeClient:
        return FakeClient(lambda request: make_response(status, body, request.url))

    return build
