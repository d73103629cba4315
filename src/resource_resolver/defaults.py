# src/resource_resolver/defaults.py
import functools
from typing import Optional

from .base import Resolver
from .handles import Resource
from .resolvers import BytesResolver, FileResolver, HttpResolver, StringResolver
from .scheme import (
    BYTES_SCHEME,
    FILE_SCHEME,
    HTTP_SCHEME,
    HTTPS_SCHEME,
    STRING_SCHEME,
    Resolvers,
    SchemeResolver,
)
from .template import TemplateResolver


def default_scheme_resolvers() -> Resolvers:
    """
    A new registry with the standard mappings:

      string       -> StringResolver
      bytes        -> BytesResolver (standard base64)
      file         -> FileResolver (no root)
      http, https  -> HttpResolver (default session)

    Handy as a starting point for a custom SchemeResolver.
    """
    fr = FileResolver()
    hr = HttpResolver()
    return Resolvers({
        STRING_SCHEME: StringResolver(),
        BYTES_SCHEME: BytesResolver(),
        FILE_SCHEME: fr,
        HTTP_SCHEME: hr,
        HTTPS_SCHEME: hr,
    })


@functools.lru_cache(maxsize=None)
def default_resolver() -> Resolver:
    """
    The shared resolver: template expansion in front of the default scheme
    dispatch, with scheme-less strings treated as file paths. Built once.
    """
    return TemplateResolver(
        SchemeResolver(resolvers=default_scheme_resolvers(), no_scheme=FileResolver())
    )


def resolve(value: str, resolver: Optional[Resolver] = None) -> Resource:
    return (resolver or default_resolver()).resolve(value)


def must(value: str, resolver: Optional[Resolver] = None) -> Resource:
    """
    Resolve ``value`` or abort. Failures become SystemExit, chained to the original error,
    for start-up code where a missing resource means the process cannot continue.
    """
    try:
        return resolve(value, resolver)
    except Exception as e:
        raise SystemExit(f"Cannot resolve resource {value!r}: {e}") from e
