"""Package measurement model."""

from __future__ import annotations

from pydantic import BaseModel

DIMENSION_FIELDS: tuple[str, ...] = ("width", "height", "length")


class PackageMeasurement(BaseModel):
    """Dimensions in centimeters, mass in kilograms.

    Only :func:`pkgsort.domain.validation.validate_measurement` should build
    these; it guarantees finite values, positive dimensions, and a
    non-negative mass.
    """

    model_config = {"frozen": True}

    width: float
    height: float
    length: float
    mass: float

    @property
    def volume(self) -> float:
        """Volume in cubic centimeters."""
        return self.width * self.height * self.length
