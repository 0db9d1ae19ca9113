# ABOUTME: Exception hierarchy for the Dark Sky client.
# ABOUTME: Separates decode failures (bad document) from transport and parsing failures.

from typing import Any


class DarkSkyError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(DarkSkyError):
    """Raised when required settings are missing from the environment."""


class DecodeError(DarkSkyError):
    """The API returned a document that does not match the forecast model."""

    def _key(self) -> tuple:
        # True == 1 in Python, so values are compared together with their types
        return tuple((type(arg), arg) for arg in self.args)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self), repr(self._key())))


class MissingField(DecodeError):
    """A required field was absent from an object."""

    def __init__(self, field: str):
        super().__init__(field)
        self.field = field

    def __str__(self) -> str:
        return f"missing required field '{self.field}'"


class TypeMismatch(DecodeError):
    """A field was present but could not be converted to its expected type.

    ``field`` is None when the mismatch has no field context, i.e. the document
    root itself was the wrong shape. ``actual`` is the offending value verbatim.
    """

    def __init__(self, field: str | None, expected: str, actual: Any):
        super().__init__(field, expected, actual)
        self.field = field
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        where = f"field '{self.field}'" if self.field is not None else "document"
        return f"{where}: expected {self.expected}, got {self.actual!r}"


class TransportError(DarkSkyError):
    """The request could not be completed or the API answered with an error status.

    ``status_code`` is set when the API answered with a non-2xx response.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponse(DarkSkyError):
    """The response body was not valid JSON."""
