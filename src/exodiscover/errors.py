"""Local error taxonomy for exodiscover.

The kinematics core is pure computation, so the only failure mode is a
parameter that violates a documented constraint. We keep a small, stable
error enum/envelope that callers (session layer, CLI, a web front end) can
translate into their own error formats.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorType(str, Enum):
    INVALID_PARAMETER = "INVALID_PARAMETER"
    UNKNOWN_ENTITY = "UNKNOWN_ENTITY"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    type: ErrorType
    message: str
    context: dict[str, Any] = Field(default_factory=dict)


def make_error(error_type: ErrorType, message: str, **context: Any) -> ErrorEnvelope:
    return ErrorEnvelope(type=error_type, message=message, context=dict(context))


class InvalidParameterError(ValueError):
    """Raised when an input violates a generator or orbit constraint.

    Raised synchronously, before any output is produced, so callers never
    see a partially computed or silently clamped result.

    Attributes:
        parameter: Name of the offending parameter.
        value: The rejected value.
        constraint: Human-readable description of the violated constraint.
    """

    def __init__(self, parameter: str, value: Any, constraint: str) -> None:
        self.parameter = parameter
        self.value = value
        self.constraint = constraint
        super().__init__(f"Invalid {parameter}={value!r}: expected {constraint}")

    def to_envelope(self) -> ErrorEnvelope:
        return make_error(
            ErrorType.INVALID_PARAMETER,
            str(self),
            parameter=self.parameter,
            value=_jsonable(self.value),
            constraint=self.constraint,
        )


class MissingOptionalDependencyError(ImportError):
    """Raised when an optional dependency is required but not installed.

    Attributes:
        extra: The pip extra that provides the dependency (e.g., "plotting").
        install_hint: Installation command hint.
    """

    def __init__(self, extra: str, install_hint: str | None = None) -> None:
        self.extra = extra
        self.install_hint = install_hint or f"pip install 'exodiscover[{extra}]'"
        super().__init__(
            f"This feature requires the '{extra}' extra. Install with: {self.install_hint}"
        )


def _jsonable(value: Any) -> Any:
    if isinstance(value, (bool, int, float, str)) or value is None:
        return value
    return repr(value)


__all__ = [
    "ErrorType",
    "ErrorEnvelope",
    "make_error",
    "InvalidParameterError",
    "MissingOptionalDependencyError",
]
