"""
Resolve resource strings into handles that can open or stream their data.

    >>> from resource_resolver import must
    >>> must("string://hello world").location()
    'string'

Strings look like ``<scheme>://<value>``; the scheme selects a Resolver
(string, bytes, file, http and https by default) and strings without one are
treated as file paths. Before dispatch, the default resolver expands the
string as a Jinja2 template with an ``env(name, default)`` function.
"""
from .base import Resolver, ResolverFunc
from .defaults import default_resolver, default_scheme_resolvers, must, resolve
from .errors import HTTPStatusError, NoSchemeError, ResourceError, SchemeError, TooManyDefaultsError
from .handles import BytesResource, FileResource, HttpResource, Resource, StringResource
from .resolvers import (
    BytesResolver,
    FileResolver,
    HttpResolver,
    StringResolver,
    standard_b64decode,
    urlsafe_b64decode,
)
from .scheme import (
    BYTES_SCHEME,
    FILE_SCHEME,
    HTTP_SCHEME,
    HTTPS_SCHEME,
    SCHEME_SEPARATOR,
    STRING_SCHEME,
    Resolvers,
    SchemeResolver,
    split,
)
from .template import DEFAULT_ENV_FUNC, TemplateResolver, configure_template_defaults, getenv

__all__ = [
    "Resolver",
    "ResolverFunc",
    "default_resolver",
    "default_scheme_resolvers",
    "must",
    "resolve",
    "HTTPStatusError",
    "NoSchemeError",
    "ResourceError",
    "SchemeError",
    "TooManyDefaultsError",
    "BytesResource",
    "FileResource",
    "HttpResource",
    "Resource",
    "StringResource",
    "BytesResolver",
    "FileResolver",
    "HttpResolver",
    "StringResolver",
    "standard_b64decode",
    "urlsafe_b64decode",
    "BYTES_SCHEME",
    "FILE_SCHEME",
    "HTTP_SCHEME",
    "HTTPS_SCHEME",
    "SCHEME_SEPARATOR",
    "STRING_SCHEME",
    "Resolvers",
    "SchemeResolver",
    "split",
    "DEFAULT_ENV_FUNC",
    "TemplateResolver",
    "configure_template_defaults",
    "getenv",
]
