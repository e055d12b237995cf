"""Tests for classification and error-kind enums."""

from pkgsort.domain.thresholds import DEFAULT_THRESHOLDS, SortThresholds
from pkgsort.domain.types import Classification, SortReason, ValidationErrorKind


class TestClassification:
    def test_members(self) -> None:
        assert {c.value for c in Classification} == {"STANDARD", "SPECIAL", "REJECTED"}

    def test_compares_equal_to_string(self) -> None:
        assert Classification.STANDARD == "STANDARD"
        assert str(Classification.REJECTED) == "REJECTED"


class TestValidationErrorKind:
    def test_members_in_check_order(self) -> None:
        assert [k.value for k in ValidationErrorKind] == [
            "NotANumber",
            "InvalidNumber",
            "NegativeValue",
            "NonPositiveDimension",
        ]


class TestSortReason:
    def test_members(self) -> None:
        assert {r.value for r in SortReason} == {"volume", "width", "height", "length", "mass"}


class TestThresholds:
    def test_defaults(self) -> None:
        assert DEFAULT_THRESHOLDS.volume_cm3 == 1_000_000
        assert DEFAULT_THRESHOLDS.dimension_cm == 150
        assert DEFAULT_THRESHOLDS.mass_kg == 20

    def test_frozen(self) -> None:
        thresholds = SortThresholds()
        try:
            thresholds.mass_kg = 30  # type: ignore[misc]
            raise AssertionError("Should have raised")
        except Exception:
            pass  # Expected — frozen model
