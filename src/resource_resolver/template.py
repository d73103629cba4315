# src/resource_resolver/template.py
"""
Template expansion of resource strings before they are resolved.

Resource strings are rendered with Jinja2, so configuration can say things like::

    file://{{ env("DATA_DIR", "/var/data") }}/input.csv

``env`` is installed on every default environment; call
``configure_template_defaults`` to add it to an environment of your own.
"""
import os
import threading
from typing import Any, Mapping, Optional

import jinja2

from .base import Resolver
from .errors import TooManyDefaultsError
from .handles import Resource

DEFAULT_ENV_FUNC = "env"


def getenv(key: str, *defaults: str) -> str:
    """
    Like os.getenv, with at most one default used when the variable is unset or empty.
    """
    if len(defaults) > 1:
        raise TooManyDefaultsError()

    value = os.environ.get(key, "")
    if value:
        return value
    if defaults:
        return defaults[0]
    return ""


def configure_template_defaults(environment: jinja2.Environment) -> jinja2.Environment:
    environment.globals[DEFAULT_ENV_FUNC] = getenv
    return environment


def _newline_sequence(value: str) -> str:
    # Jinja rewrites every line ending in literal text to one sequence; use the one the string already has
    for sequence in ("\r\n", "\n", "\r"):
        if sequence in value:
            return sequence
    return "\n"


def new_environment(newline_sequence: str = "\n") -> jinja2.Environment:
    """
    Environment for expanding resource strings. Only ``{{ ... }}`` is likely to
    appear by accident in a URL or a literal, so statements and comments use
    ``{{% ... %}}`` and ``{{# ... #}}`` instead of Jinja's ``{% %}`` and ``{# #}``.
    Text is never escaped and trailing newlines are kept.
    """
    return configure_template_defaults(
        jinja2.Environment(
            block_start_string="{{%",
            block_end_string="%}}",
            comment_start_string="{{#",
            comment_end_string="#}}",
            autoescape=False,
            keep_trailing_newline=True,
            newline_sequence=newline_sequence,
            undefined=jinja2.StrictUndefined,
        )
    )


class TemplateResolver(Resolver):
    """
    Decorator that renders a resource string as a template and hands the result to ``resolver``.

    If ``environment`` is given it is used for every parse, guarded by a lock;
    don't share one environment between several TemplateResolvers. Without one,
    a fresh default environment is created per call.

    ``data`` is the render context. A mapping supplies the template variables
    directly; any other object is exposed as ``data``, e.g. ``{{ data.region }}``.
    """

    def __init__(
            self,
            resolver: Resolver,
            environment: Optional[jinja2.Environment] = None,
            data: Any = None,
    ):
        self.resolver = resolver
        self.environment = environment
        self.data = data
        self._parse_lock = threading.Lock()

    def _context(self) -> Mapping[str, Any]:
        if self.data is None:
            return {}
        if isinstance(self.data, Mapping):
            return self.data
        return {"data": self.data}

    def _parse(self, value: str) -> jinja2.Template:
        if self.environment is not None:
            with self._parse_lock:
                return self.environment.from_string(value)
        return new_environment(_newline_sequence(value)).from_string(value)

    def resolve(self, value: str) -> Resource:
        template = self._parse(value)
        rendered = template.render(self._context())
        return self.resolver.resolve(rendered)
