"""Exceptions raised by classiest."""

from __future__ import annotations

from typing import Any, Sequence


class ClassiestError(Exception):
    """Base class for every error raised by classiest."""


class InvalidNameError(ClassiestError, ValueError):
    """The requested type name is not a valid class name."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Invalid class name: {name!r}")


class SpecificationError(ClassiestError, TypeError):
    """The descriptor function returned a malformed type specification."""

    def __init__(self, message: str, errors: Sequence[dict[str, Any]] = ()) -> None:
        self.errors = list(errors)
        super().__init__(message)

    @classmethod
    def from_validation_error(cls, exc) -> "SpecificationError":
        """Build from a pydantic ``ValidationError``, reporting its first error."""
        errors = exc.errors()
        first = errors[0]
        where = ".".join(str(part) for part in first["loc"]) or "<root>"
        return cls(f"Invalid type specification at {where}: {first['msg']}", errors)


class NoOverloadMatchError(ClassiestError, TypeError):
    """No overload of a member accepts the actual call arguments."""

    def __init__(self, qualname: str, args: Sequence[Any], signatures: Sequence[str] = ()) -> None:
        self.qualname = qualname
        self.call_args = tuple(args)
        self.signatures = list(signatures)
        called = ", ".join(type(a).__name__ for a in self.call_args)
        message = f"No valid overload found for {qualname} (called with ({called}))"
        if self.signatures:
            message += "; candidates: " + ", ".join(self.signatures)
        super().__init__(message)
