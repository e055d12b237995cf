"""SortService — classify a package and report the outcome as a ServiceResult."""

from __future__ import annotations

import logging
from typing import Any

from pkgsort.domain.classifier import decide
from pkgsort.domain.thresholds import DEFAULT_THRESHOLDS
from pkgsort.domain.validation import validate_measurement
from pkgsort.services.result import ServiceError, ServiceResult
from pkgsort.services.telemetry import traced

logger = logging.getLogger(__name__)


class SortService:
    """Stateless front door to the classifier.

    Unlike :func:`pkgsort.classify`, invalid input does not raise: it comes
    back as a failed result whose ``error.code`` is the validation error kind.
    """

    @traced
    def classify(self, width: Any, height: Any, length: Any, mass: Any) -> ServiceResult:
        op = "classify"
        checked = validate_measurement(width, height, length, mass)
        if checked.error is not None:
            issue = checked.error
            logger.debug("Rejected package input: %s (%s)", issue.kind, issue.field)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=str(issue.kind),
                    message=issue.message,
                    detail={"field": issue.field},
                ),
            )

        measurement = checked.measurement
        assert measurement is not None
        decision = decide(measurement)
        logger.debug(
            "Classified package as %s (bulky=%s, heavy=%s)",
            decision.classification,
            decision.bulky,
            decision.heavy,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "classification": str(decision.classification),
                "bulky": decision.bulky,
                "heavy": decision.heavy,
                "volume_cm3": decision.volume_cm3,
                "reasons": [str(r) for r in decision.reasons],
                "measurement": measurement.model_dump(),
            },
        )

    @traced
    def thresholds(self) -> ServiceResult:
        """Report the fixed thresholds the classifier applies."""
        return ServiceResult(
            ok=True,
            op="thresholds",
            data=DEFAULT_THRESHOLDS.model_dump(),
        )
