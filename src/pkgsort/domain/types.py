"""Classification and validation-error enums."""

from __future__ import annotations

from enum import StrEnum


class Classification(StrEnum):
    """Stack a package is dispatched to."""

    STANDARD = "STANDARD"
    SPECIAL = "SPECIAL"
    REJECTED = "REJECTED"


class ValidationErrorKind(StrEnum):
    """Why a set of measurements was refused.

    Listed in the order the validator checks them.
    """

    NOT_A_NUMBER = "NotANumber"
    INVALID_NUMBER = "InvalidNumber"
    NEGATIVE_VALUE = "NegativeValue"
    NON_POSITIVE_DIMENSION = "NonPositiveDimension"


class SortReason(StrEnum):
    """Measurement that pushed a package over a threshold."""

    VOLUME = "volume"
    WIDTH = "width"
    HEIGHT = "height"
    LENGTH = "length"
    MASS = "mass"
