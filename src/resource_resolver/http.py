# src/resource_resolver/http.py
"""
Helpers around the HTTP client used by HTTP resources.

A client is anything with ``send(request: requests.PreparedRequest, **kwargs)``
returning a ``requests.Response``; ``requests.Session`` is the usual one.
The ``with_*`` functions decorate a client so that every request it sends is
adjusted first, e.g.::

    client = with_timeout(10, with_header("Accept", "application/json", session))
"""
import functools
import io
from typing import Any, Callable, Mapping, Optional

import requests
from requests.structures import CaseInsensitiveDict

CHUNK_SIZE = 64 * 1024


@functools.lru_cache(maxsize=None)
def default_client() -> requests.Session:
    """The process-wide session used when a resource is given no client."""
    return requests.Session()


class HTTPClientFunc:
    """Adapts a plain function ``fn(request, **kwargs) -> Response`` to the client interface."""

    def __init__(self, fn: Callable[..., requests.Response]):
        self._fn = fn

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        return self._fn(request, **kwargs)


def _ensure_headers(request: requests.PreparedRequest) -> None:
    if request.headers is None:
        request.headers = CaseInsensitiveDict()


def with_method(method: str, client) -> HTTPClientFunc:
    def send(request, **kwargs):
        request.method = method
        return client.send(request, **kwargs)

    return HTTPClientFunc(send)


def with_header(name: str, value: str, client) -> HTTPClientFunc:
    def send(request, **kwargs):
        _ensure_headers(request)
        request.headers[name] = value
        return client.send(request, **kwargs)

    return HTTPClientFunc(send)


def with_headers(headers: Optional[Mapping[str, str]], client):
    """
    Apply a fixed set of headers to every request.
    The mapping is copied here, so later changes by the caller have no effect.
    """
    if not headers:
        return client

    fixed = CaseInsensitiveDict(headers)

    def send(request, **kwargs):
        _ensure_headers(request)
        request.headers.update(fixed)
        return client.send(request, **kwargs)

    return HTTPClientFunc(send)


def with_close(client) -> HTTPClientFunc:
    return with_header("Connection", "close", client)


def with_timeout(seconds: float, client) -> HTTPClientFunc:
    def send(request, **kwargs):
        kwargs["timeout"] = seconds
        return client.send(request, **kwargs)

    return HTTPClientFunc(send)


def drain(response: requests.Response) -> None:
    """Read and discard whatever is left of the body, then close the response."""
    try:
        for _ in response.iter_content(CHUNK_SIZE):
            pass
    finally:
        response.close()


class DrainOnClose(io.RawIOBase):
    """
    Readable binary stream over a streamed response body.

    Closing it discards any unread content before closing the response, so the
    underlying connection can go back to the pool.
    """

    def __init__(self, response: requests.Response):
        super().__init__()
        self._response = response
        self._chunks = response.iter_content(CHUNK_SIZE)
        self._pending = b""

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        if not self._pending:
            self._pending = next(self._chunks, b"")
            if not self._pending:
                return 0

        n = min(len(buffer), len(self._pending))
        buffer[:n] = self._pending[:n]
        self._pending = self._pending[n:]
        return n

    def close(self) -> None:
        if self.closed:
            return
        try:
            self._pending = b""
            try:
                for _ in self._chunks:
                    pass
            finally:
                self._response.close()
        finally:
            super().close()
