# src/resource_resolver/scheme.py
import threading
from typing import Dict, Iterator, Optional, Tuple

from .base import Resolver
from .errors import NoSchemeError, SchemeError
from .handles import Resource

SCHEME_SEPARATOR = "://"

STRING_SCHEME = "string"
BYTES_SCHEME = "bytes"
FILE_SCHEME = "file"
HTTP_SCHEME = "http"
HTTPS_SCHEME = "https"


def split(value: str) -> Tuple[str, str]:
    """
    Split a resource string into (scheme, value) on the first "://".

    Much looser than a URI parser on purpose: "string://hello world!" or
    "bytes://<base64>" are fine even though they are not valid URIs.
    Without a separator the scheme is "" and the value is returned untouched.
    """
    i = value.find(SCHEME_SEPARATOR)
    if i >= 0:
        return value[:i], value[i + len(SCHEME_SEPARATOR):]
    return "", value


class Resolvers:
    """
    Mapping of scheme name -> Resolver.

    The backing dict is only created on the first ``set``; an uninitialized
    registry and an empty one both answer "not found". Keys are case sensitive.
    """

    def __init__(self, mapping: Optional[Dict[str, Resolver]] = None):
        self._mapping: Optional[Dict[str, Resolver]] = dict(mapping) if mapping else None
        self._lock = threading.Lock()

    def get(self, key: str) -> Tuple[Optional[Resolver], bool]:
        mapping = self._mapping
        if mapping:
            resolver = mapping.get(key)
            return resolver, resolver is not None
        return None, False

    def set(self, key: str, resolver: Resolver) -> None:
        with self._lock:
            if self._mapping is None:
                self._mapping = {}
            self._mapping[key] = resolver

    def delete(self, key: str) -> None:
        with self._lock:
            if self._mapping:
                self._mapping.pop(key, None)

    def copy(self) -> "Resolvers":
        return Resolvers(self._mapping)

    def __contains__(self, key: str) -> bool:
        return self.get(key)[1]

    def __len__(self) -> int:
        return len(self._mapping) if self._mapping else 0

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._mapping or ()))

    def __repr__(self) -> str:
        return f"Resolvers({self._mapping or {}!r})"


class SchemeResolver(Resolver):
    """
    Routes resource strings to a Resolver chosen by scheme.

    The chosen resolver always receives the original, unsplit string; resolvers
    that care about the scheme strip it themselves. Strings without a scheme go
    to ``no_scheme`` when one is configured.
    """

    def __init__(self, resolvers: Optional[Resolvers] = None, no_scheme: Optional[Resolver] = None):
        self.resolvers = resolvers
        self.no_scheme = no_scheme

    def set(self, scheme: str, resolver: Resolver) -> None:
        if self.resolvers is None:
            self.resolvers = Resolvers()
        self.resolvers.set(scheme, resolver)

    def resolve(self, value: str) -> Resource:
        scheme, _ = split(value)
        if scheme:
            resolver, found = self.resolvers.get(scheme) if self.resolvers is not None else (None, False)
            if not found:
                raise SchemeError(value, scheme)
            return resolver.resolve(value)

        if self.no_scheme is None:
            raise NoSchemeError(value)
        return self.no_scheme.resolve(value)
