"""pkgsort — dispatch packages to the standard, special, or rejected stack."""

from __future__ import annotations

from pkgsort.domain.classifier import classify, sort
from pkgsort.domain.types import Classification, ValidationErrorKind
from pkgsort.domain.validation import ValidationError, validate_measurement

__version__ = "0.1.0"

__all__ = [
    "Classification",
    "ValidationError",
    "ValidationErrorKind",
    "__version__",
    "classify",
    "sort",
    "validate_measurement",
]
