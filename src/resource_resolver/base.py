# src/resource_resolver/base.py
from abc import ABC, abstractmethod
from typing import Callable

from .handles import Resource


class Resolver(ABC):
    """
    Strategy that turns a resource string into a handle.
    Implementations must allow ``resolve`` to be called from several threads at once.
    """

    @abstractmethod
    def resolve(self, value: str) -> Resource:
        ...


class ResolverFunc(Resolver):
    """Adapts a plain function ``fn(value) -> Resource`` to the Resolver interface."""

    def __init__(self, fn: Callable[[str], Resource]):
        self._fn = fn

    def resolve(self, value: str) -> Resource:
        return self._fn(value)

    def __repr__(self) -> str:
        return f"ResolverFunc({self._fn!r})"
