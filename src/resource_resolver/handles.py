# src/resource_resolver/handles.py
"""
Resource handles: the uniform result of resolving a resource string.

Every handle can describe where its data lives (``location``), open a binary
stream the caller must close (``open``), and copy all of its data into a sink
in one call (``write_to``). File and HTTP handles touch the outside world only
when opened or streamed, never at construction.
"""
import io
import shutil
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO, Optional

import requests

from .errors import HTTPStatusError
from .http import CHUNK_SIZE, DrainOnClose, default_client, drain

DEFAULT_OPEN_METHOD = "GET"


class Resource(ABC):
    @abstractmethod
    def location(self) -> str:
        """Human-readable description of where the data lives."""

    @abstractmethod
    def open(self) -> BinaryIO:
        """Open the resource for reading. The caller is responsible for closing the stream."""

    @abstractmethod
    def write_to(self, sink) -> int:
        """
        Copy the whole resource into ``sink`` (anything with ``write(bytes)``).
        Returns the number of bytes written. Any stream opened here is closed before returning.
        """


@dataclass(frozen=True)
class StringResource(Resource):
    text: str

    def location(self) -> str:
        return "string"

    def open(self) -> BinaryIO:
        return io.BytesIO(self.text.encode("utf-8"))

    def write_to(self, sink) -> int:
        data = self.text.encode("utf-8")
        sink.write(data)
        return len(data)


@dataclass(frozen=True)
class BytesResource(Resource):
    data: bytes

    def location(self) -> str:
        return "bytes"

    def open(self) -> BinaryIO:
        return io.BytesIO(self.data)

    def write_to(self, sink) -> int:
        sink.write(self.data)
        return len(self.data)


class _CountingSink:
    def __init__(self, sink):
        self._sink = sink
        self.count = 0

    def write(self, data: bytes) -> int:
        self._sink.write(data)
        self.count += len(data)
        return len(data)


@dataclass(frozen=True)
class FileResource(Resource):
    path: str

    def location(self) -> str:
        return self.path

    def open(self) -> BinaryIO:
        return open(self.path, "rb")

    def write_to(self, sink) -> int:
        counter = _CountingSink(sink)
        with self.open() as f:
            shutil.copyfileobj(f, counter, CHUNK_SIZE)
        return counter.count


@dataclass(frozen=True)
class HttpResource(Resource):
    """
    A resource behind an HTTP(S) URL.
    Each ``open``/``write_to`` performs a new transaction; nothing is cached.
    """

    url: str
    # verb used to fetch the data; empty means GET
    open_method: str = ""
    # any object with send(PreparedRequest, **kwargs); None means the shared default session
    client: Optional[object] = None

    def location(self) -> str:
        return self.url

    def _transact(self) -> requests.Response:
        method = self.open_method or DEFAULT_OPEN_METHOD
        request = requests.Request(method, self.url).prepare()
        client = self.client if self.client is not None else default_client()
        return client.send(request, stream=True)

    def _checked_response(self) -> requests.Response:
        response = self._transact()
        if response.status_code < 200 or response.status_code > 299:
            drain(response)
            raise HTTPStatusError(self.url, response.status_code)
        return response

    def open(self) -> BinaryIO:
        return DrainOnClose(self._checked_response())

    def write_to(self, sink) -> int:
        response = self._checked_response()
        count = 0
        try:
            for chunk in response.iter_content(CHUNK_SIZE):
                sink.write(chunk)
                count += len(chunk)
        finally:
            response.close()
        return count
