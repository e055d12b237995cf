"""Fixed sorting thresholds.

All comparisons against these values are inclusive: a package sitting
exactly on a threshold counts as over it.
"""

from __future__ import annotations

from pydantic import BaseModel


class SortThresholds(BaseModel):
    """Bulky and heavy limits used by the classifier."""

    model_config = {"frozen": True}

    volume_cm3: float = 1_000_000
    dimension_cm: float = 150
    mass_kg: float = 20


DEFAULT_THRESHOLDS = SortThresholds()
