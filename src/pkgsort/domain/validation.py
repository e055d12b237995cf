"""Input validation for package measurements.

Four rules, checked in order across all inputs. The first rule that any
input breaks decides the reported error kind, so ``(-1, nan, ...)`` is an
``InvalidNumber`` failure, not a ``NegativeValue`` one:

1. every input is a real number (``bool`` and ``None`` are not)
2. no input is NaN or infinite
3. no input is negative
4. every dimension is strictly positive (zero mass is allowed)
"""

from __future__ import annotations

import math
import numbers
from typing import Any

from pydantic import BaseModel

from pkgsort.domain.measurement import DIMENSION_FIELDS, PackageMeasurement
from pkgsort.domain.types import ValidationErrorKind


class ValidationIssue(BaseModel):
    """The first rule a set of measurements breaks."""

    model_config = {"frozen": True}

    kind: ValidationErrorKind
    message: str
    field: str


class ValidationResult(BaseModel):
    """Tagged outcome of :func:`validate_measurement`.

    Exactly one of ``measurement`` and ``error`` is set.
    """

    model_config = {"frozen": True}

    ok: bool
    measurement: PackageMeasurement | None = None
    error: ValidationIssue | None = None


class ValidationError(ValueError):
    """Raised by :func:`pkgsort.classify` when the inputs are unusable."""

    def __init__(self, kind: ValidationErrorKind, message: str, field: str | None = None) -> None:
        super().__init__(f"Invalid package parameters: {message}")
        self.kind = kind
        self.message = message
        self.field = field

    @classmethod
    def from_issue(cls, issue: ValidationIssue) -> ValidationError:
        return cls(issue.kind, issue.message, issue.field)


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _fail(kind: ValidationErrorKind, field: str, message: str) -> ValidationResult:
    return ValidationResult(
        ok=False,
        error=ValidationIssue(kind=kind, message=message, field=field),
    )


def validate_measurement(width: Any, height: Any, length: Any, mass: Any) -> ValidationResult:
    """Check four raw inputs and build a :class:`PackageMeasurement`.

    Never raises; the outcome is reported through the returned result.
    """
    values: dict[str, Any] = {
        "width": width,
        "height": height,
        "length": length,
        "mass": mass,
    }

    for name, value in values.items():
        if not _is_real(value):
            return _fail(
                ValidationErrorKind.NOT_A_NUMBER,
                name,
                f"All parameters must be numbers ({name} is {type(value).__name__})",
            )

    floats: dict[str, float] = {}
    for name, value in values.items():
        try:
            floats[name] = float(value)
        except OverflowError:
            return _fail(
                ValidationErrorKind.INVALID_NUMBER,
                name,
                f"Parameters must be finite ({name} does not fit in a float)",
            )

    for name, value in floats.items():
        if math.isnan(value):
            return _fail(
                ValidationErrorKind.INVALID_NUMBER,
                name,
                f"Parameters cannot be NaN ({name})",
            )
        if math.isinf(value):
            return _fail(
                ValidationErrorKind.INVALID_NUMBER,
                name,
                f"Parameters must be finite ({name} is {value})",
            )

    for name, value in floats.items():
        if value < 0:
            return _fail(
                ValidationErrorKind.NEGATIVE_VALUE,
                name,
                f"Dimensions and mass must be non-negative ({name} is {value:g})",
            )

    for name in DIMENSION_FIELDS:
        if floats[name] == 0:
            return _fail(
                ValidationErrorKind.NON_POSITIVE_DIMENSION,
                name,
                f"Dimensions must be greater than zero ({name} is 0)",
            )

    return ValidationResult(ok=True, measurement=PackageMeasurement(**floats))


def require_valid(width: Any, height: Any, length: Any, mass: Any) -> PackageMeasurement:
    """Like :func:`validate_measurement`, but raise :class:`ValidationError` on failure."""
    result = validate_measurement(width, height, length, mass)
    if result.error is not None:
        raise ValidationError.from_issue(result.error)
    assert result.measurement is not None
    return result.measurement
