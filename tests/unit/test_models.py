"""Unit tests for rating domain models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from premium_estimator.models.rating import (
    CoverageLevel,
    CoverageRow,
    RatingFactors,
    RatingInput,
    RatingResult,
    UsState,
    VehicleType,
)


class TestEnumerations:
    """Closed enumerations for the form selects."""

    def test_vehicle_types(self) -> None:
        assert [v.value for v in VehicleType] == [
            "sedan",
            "suv",
            "truck",
            "sports",
            "luxury",
            "electric",
        ]

    def test_coverage_levels(self) -> None:
        assert [c.value for c in CoverageLevel] == ["minimum", "standard", "full"]

    def test_state_roster(self) -> None:
        assert len(UsState) == 51
        assert UsState("DC") is UsState.DC


class TestRatingInput:
    """Validation of the engine input."""

    def test_enum_fields_accept_values(self) -> None:
        rating_input = RatingInput(
            driver_age=35, state="CA", vehicle_type="sedan", coverage_level="full"
        )
        assert rating_input.vehicle_type is VehicleType.SEDAN
        assert rating_input.coverage_level is CoverageLevel.FULL

    def test_unknown_vehicle_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RatingInput(
                driver_age=35,
                state="CA",
                vehicle_type="hovercraft",
                coverage_level="full",
            )

    def test_unknown_coverage_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RatingInput(
                driver_age=35,
                state="CA",
                vehicle_type="sedan",
                coverage_level="platinum",
            )

    def test_all_fields_required(self) -> None:
        with pytest.raises(ValidationError):
            RatingInput(driver_age=35, state="CA", vehicle_type="sedan")  # type: ignore[call-arg]

    def test_extra_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RatingInput(
                driver_age=35,
                state="CA",
                vehicle_type="sedan",
                coverage_level="full",
                zip_code="90210",  # type: ignore[call-arg]
            )

    def test_age_not_range_checked(self) -> None:
        """Clamping belongs to the caller."""
        rating_input = RatingInput(
            driver_age=7, state="CA", vehicle_type="sedan", coverage_level="full"
        )
        assert rating_input.driver_age == 7

    def test_input_is_immutable(self) -> None:
        rating_input = RatingInput(
            driver_age=35, state="CA", vehicle_type="sedan", coverage_level="full"
        )
        with pytest.raises(ValidationError):
            rating_input.driver_age = 40  # type: ignore[misc]


class TestRatingResult:
    """Derived coverage counts."""

    def test_counts(self) -> None:
        result = RatingResult(
            annual_cost=1200,
            monthly_cost=100,
            coverage_rows=(
                CoverageRow(label="Collision", included=True),
                CoverageRow(label="Comprehensive", included=False),
            ),
            factors=RatingFactors(
                base_rate=1200,
                age_factor=Decimal("1.00"),
                state_factor=Decimal("1.00"),
                vehicle_factor=Decimal("1.00"),
            ),
        )
        assert result.coverage_included_count == 1
        assert result.coverage_total_count == 2

    def test_factors_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            RatingFactors(
                base_rate=840,
                age_factor=Decimal("0"),
                state_factor=Decimal("1.00"),
                vehicle_factor=Decimal("1.00"),
            )
