"""Typed exceptions for generation requests, construction and field assignment."""

from __future__ import annotations


def type_name(tp: object) -> str:
    module = getattr(tp, "__module__", None)
    qualname = getattr(tp, "__qualname__", None) or getattr(tp, "__name__", None)
    if qualname is None:
        return repr(tp)
    if module in (None, "builtins"):
        return str(qualname)
    return f"{module}.{qualname}"


class DummyGenError(Exception):
    """Base class for all errors raised by the package."""


class InvalidRequestError(DummyGenError, ValueError):
    """Raised when a generation request is malformed (e.g. no target type)."""


class ConstructionError(DummyGenError):
    """Raised when a target type cannot be instantiated without arguments."""

    def __init__(self, target: type, reason: str) -> None:
        self.target = target
        super().__init__(
            f"Cannot create instance of class: {type_name(target)}. {reason}"
        )


class FieldAssignmentError(DummyGenError):
    """Raised when a generated value cannot be written to a field."""

    def __init__(self, target: type, field: str) -> None:
        self.target = target
        self.field = field
        super().__init__(f"Cannot assign field {field!r} of {type_name(target)}")


class PopulationError(DummyGenError):
    """Raised when populating the requested type fails.

    The message names the root requested type.  ``failed_type`` names the
    type whose construction or assignment actually failed, and the original
    exception is chained as ``__cause__``.
    """

    def __init__(self, target: type, failed_type: type | None = None) -> None:
        self.target = target
        self.failed_type = failed_type if failed_type is not None else target
        super().__init__(f"Failed to populate class: {type_name(target)}")


__all__ = [
    "DummyGenError",
    "InvalidRequestError",
    "ConstructionError",
    "FieldAssignmentError",
    "PopulationError",
    "type_name",
]
