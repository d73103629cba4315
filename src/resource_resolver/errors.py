# src/resource_resolver/errors.py


class ResourceError(Exception):
    """Base class for failures raised by this package itself."""


class SchemeError(ResourceError):
    """A scheme was present on a resource string but nothing is registered for it."""

    def __init__(self, value: str, scheme: str):
        self.value = value
        self.scheme = scheme
        super().__init__(f"Cannot resolve {value}: no resolver registered for scheme {scheme}")


class NoSchemeError(ResourceError):
    """No scheme was supplied and the dispatcher has no fallback resolver."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Cannot resolve {value}: no scheme supplied")


class TooManyDefaultsError(ResourceError):
    def __init__(self):
        super().__init__("Too many default values")


class HTTPStatusError(ResourceError):
    """
    The HTTP transaction completed, but with a non-2xx status.
    The response body has already been drained and closed when this is raised.
    """

    def __init__(self, url: str, code: int):
        self.url = url
        self.code = code
        super().__init__(f"HTTP resource {url} failed with status code {code}")

    @property
    def status_code(self) -> int:
        return self.code
