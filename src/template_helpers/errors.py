"""Error taxonomy shared by every template helper.

Each error carries the structured context needed to build its message (argument
position, declared name, format, failing path segment) and the name of the helper
that raised it. The invoking wrapper in ``core.registry`` fills in ``helper`` when
the implementation did not know its own name.
"""

from __future__ import annotations


class HelperError(Exception):
    """Base class for errors raised while invoking a template helper."""

    def __init__(self, message: str, *, helper: str | None = None):
        super().__init__(message)
        self.message = message
        self.helper = helper

    def __str__(self) -> str:
        if self.helper:
            return f"{self.helper}: {self.message}"
        return self.message


class MissingParameter(HelperError):
    """A required positional or keyword argument was not supplied."""

    def __init__(
        self,
        *,
        position: int | None,
        name: str,
        signature: str,
        helper: str | None = None,
    ):
        self.position = position
        self.name = name
        self.signature = signature
        if position is None:
            message = f"missing param '{name}' of '{signature}'"
        else:
            message = f"missing param {position} '{name}' of '{signature}'"
        super().__init__(message, helper=helper)


class TypeMismatch(HelperError):
    """An argument or intermediate value is not of the expected kind."""

    def __init__(
        self,
        *,
        expected: str,
        actual: str,
        name: str | None = None,
        position: int | None = None,
        helper: str | None = None,
    ):
        self.expected = expected
        self.actual = actual
        self.name = name
        self.position = position
        where = ""
        if name is not None and position is not None:
            where = f" for param {position} '{name}'"
        elif name is not None:
            where = f" for param '{name}'"
        super().__init__(f"expected {expected}{where}, got {actual}", helper=helper)


class UnexpectedParameter(TypeMismatch):
    """Too many positional arguments, or a keyword the helper does not declare."""


class DecodeFailure(HelperError):
    """A raw document could not be parsed in the requested format."""

    def __init__(self, *, format: str, message: str, helper: str | None = None):  # noqa: A002
        self.format = format
        self.detail = message
        super().__init__(f"failed to decode {format}: {message}", helper=helper)


class PathNotFound(HelperError):
    """A path expression could not be resolved against a document."""

    def __init__(
        self,
        *,
        path: str,
        at_segment: int,
        segment: str,
        reason: str = "not found",
        helper: str | None = None,
    ):
        self.path = path
        self.at_segment = at_segment
        self.segment = segment
        self.reason = reason
        super().__init__(
            f"path '{path}' not resolved at segment {at_segment} '{segment}': {reason}",
            helper=helper,
        )


class HelperIOError(HelperError):
    """A file or network read/write performed by a helper failed."""

    def __init__(self, *, target: str, message: str, helper: str | None = None):
        self.target = target
        self.detail = message
        super().__init__(f"{target}: {message}", helper=helper)


class RegistryFrozenError(RuntimeError):
    """Raised when registering into a registry whose setup phase has completed."""


class UnknownHelperError(LookupError):
    """Raised when looking up a helper name that is not registered."""


__all__ = [
    "HelperError",
    "MissingParameter",
    "TypeMismatch",
    "UnexpectedParameter",
    "DecodeFailure",
    "PathNotFound",
    "HelperIOError",
    "RegistryFrozenError",
    "UnknownHelperError",
]
