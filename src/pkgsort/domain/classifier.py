"""Package classification.

A package is *bulky* when its volume or any single dimension reaches the
bulky limits, and *heavy* when its mass reaches the mass limit:

====== ====== ==========
bulky  heavy  stack
====== ====== ==========
yes    yes    REJECTED
yes    no     SPECIAL
no     yes    SPECIAL
no     no     STANDARD
====== ====== ==========

Volume is the plain float product of the three dimensions. No rounding is
applied before comparing it to the threshold.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from pkgsort.domain.measurement import DIMENSION_FIELDS, PackageMeasurement
from pkgsort.domain.thresholds import DEFAULT_THRESHOLDS, SortThresholds
from pkgsort.domain.types import Classification, SortReason
from pkgsort.domain.validation import require_valid


class SortDecision(BaseModel):
    """Classification plus the facts it was derived from."""

    model_config = {"frozen": True}

    classification: Classification
    bulky: bool
    heavy: bool
    volume_cm3: float
    reasons: list[SortReason]


def bulky_reasons(
    measurement: PackageMeasurement,
    thresholds: SortThresholds = DEFAULT_THRESHOLDS,
) -> list[SortReason]:
    """Return every volume/dimension limit the package reaches."""
    reasons: list[SortReason] = []
    if measurement.volume >= thresholds.volume_cm3:
        reasons.append(SortReason.VOLUME)
    for name in DIMENSION_FIELDS:
        if getattr(measurement, name) >= thresholds.dimension_cm:
            reasons.append(SortReason(name))
    return reasons


def is_bulky(
    measurement: PackageMeasurement,
    thresholds: SortThresholds = DEFAULT_THRESHOLDS,
) -> bool:
    return bool(bulky_reasons(measurement, thresholds))


def is_heavy(
    measurement: PackageMeasurement,
    thresholds: SortThresholds = DEFAULT_THRESHOLDS,
) -> bool:
    return measurement.mass >= thresholds.mass_kg


def stack_for(bulky: bool, heavy: bool) -> Classification:
    """Map the two predicates onto a stack."""
    if bulky and heavy:
        return Classification.REJECTED
    if bulky or heavy:
        return Classification.SPECIAL
    return Classification.STANDARD


def decide(
    measurement: PackageMeasurement,
    thresholds: SortThresholds = DEFAULT_THRESHOLDS,
) -> SortDecision:
    """Classify an already-validated measurement and explain the result."""
    reasons = bulky_reasons(measurement, thresholds)
    bulky = bool(reasons)
    heavy = is_heavy(measurement, thresholds)
    if heavy:
        reasons.append(SortReason.MASS)
    return SortDecision(
        classification=stack_for(bulky, heavy),
        bulky=bulky,
        heavy=heavy,
        volume_cm3=measurement.volume,
        reasons=reasons,
    )


def classify_measurement(measurement: PackageMeasurement) -> Classification:
    """Classify an already-validated measurement. Never raises."""
    return stack_for(is_bulky(measurement), is_heavy(measurement))


def classify(width: Any, height: Any, length: Any, mass: Any) -> Classification:
    """Dispatch a package to the correct stack.

    Args:
        width: Package width in centimeters.
        height: Package height in centimeters.
        length: Package length in centimeters.
        mass: Package mass in kilograms.

    Returns:
        ``Classification.STANDARD``, ``SPECIAL``, or ``REJECTED``. The enum
        compares equal to the plain strings ``"STANDARD"`` etc.

    Raises:
        ValidationError: If an input is not a number, is NaN or infinite,
            is negative, or is a zero dimension.
    """
    return classify_measurement(require_valid(width, height, length, mass))


sort = classify
