# src/resource_resolver/resolvers.py
"""
Terminal resolvers: each one turns a resource string into a concrete handle.

String, Bytes and File ignore whatever scheme is on the value, so they can be
registered under any scheme name.
"""
import base64
import os
from typing import Callable, Optional

from urllib3.util import parse_url

from .base import Resolver
from .handles import BytesResource, FileResource, HttpResource, Resource, StringResource
from .scheme import split


def standard_b64decode(value: str) -> bytes:
    """Strict standard-alphabet base64: padding required, stray characters rejected."""
    return base64.b64decode(value, validate=True)


def urlsafe_b64decode(value: str) -> bytes:
    return base64.urlsafe_b64decode(value)


class StringResolver(Resolver):
    def resolve(self, value: str) -> Resource:
        _, value = split(value)
        return StringResource(value)


class BytesResolver(Resolver):
    """Decodes the value into in-memory bytes; standard base64 unless told otherwise."""

    def __init__(self, decoder: Optional[Callable[[str], bytes]] = None):
        self.decoder = decoder or standard_b64decode

    def resolve(self, value: str) -> Resource:
        _, value = split(value)
        return BytesResource(self.decoder(value))


class FileResolver(Resolver):
    """
    Treats the value as a file system path, relative to an optional root.

    With a root set, the value always lands under it, even when it starts with
    a path separator (``file:///etc/hosts`` -> ``<root>/etc/hosts``).
    The file is not touched until the handle is opened.
    """

    def __init__(self, root: str = ""):
        self.root = root

    def resolve(self, value: str) -> Resource:
        _, value = split(value)
        if self.root:
            value = os.path.join(self.root, value.lstrip("/" + os.sep))
        return FileResource(os.path.abspath(value))


class HttpResolver(Resolver):
    """Resolves URLs into lazy HTTP handles. The value must be a parseable URL."""

    def __init__(self, open_method: str = "", client=None):
        self.open_method = open_method
        self.client = client

    def resolve(self, value: str) -> Resource:
        parse_url(value)
        return HttpResource(url=value, open_method=self.open_method, client=self.client)
