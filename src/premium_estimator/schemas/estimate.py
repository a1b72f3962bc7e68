# Premium Estimator - Car Insurance Cost Estimation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""API schemas for premium estimates."""

from pydantic import BaseModel, ConfigDict, Field

from ..models.rating import (
    CoverageLevel,
    CoverageRow,
    RatingFactors,
    RatingInput,
    RatingResult,
    VehicleType,
)

__all__ = [
    "EstimateOptions",
    "EstimateRequest",
    "EstimateResponse",
]


class EstimateRequest(BaseModel):
    """Raw estimate form values.

    Enumerated fields are plain strings so unknown values produce a
    business-level error response instead of a schema validation failure.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
        validate_default=True,
    )

    driver_age: int = Field(..., description="Driver age; clamped to the form bounds")
    state: str = Field(..., min_length=1, max_length=10, description="Postal code")
    vehicle_type: str = Field(..., min_length=1, max_length=20)
    coverage_level: str = Field(..., min_length=1, max_length=20)


class EstimateResponse(BaseModel):
    """Premium estimate returned to the form."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
        validate_default=True,
    )

    input: RatingInput = Field(..., description="Input after clamping and normalisation")
    annual_cost: int = Field(..., ge=0, description="Annual premium in dollars")
    monthly_cost: int = Field(..., ge=0, description="Monthly premium in dollars")
    coverage_rows: list[CoverageRow] = Field(...)
    coverage_included_count: int = Field(..., ge=0)
    coverage_total_count: int = Field(..., ge=0)
    factors: RatingFactors = Field(...)

    @classmethod
    def from_result(
        cls, rating_input: RatingInput, result: RatingResult
    ) -> "EstimateResponse":
        """Build the response payload from an engine result."""
        return cls(
            input=rating_input,
            annual_cost=result.annual_cost,
            monthly_cost=result.monthly_cost,
            coverage_rows=list(result.coverage_rows),
            coverage_included_count=result.coverage_included_count,
            coverage_total_count=result.coverage_total_count,
            factors=result.factors,
        )


class EstimateOptions(BaseModel):
    """Fixed choices and defaults for the estimate form controls."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
        validate_default=True,
    )

    states: list[str] = Field(..., min_length=1)
    vehicle_types: list[VehicleType] = Field(..., min_length=1)
    coverage_levels: list[CoverageLevel] = Field(..., min_length=1)
    min_driver_age: int = Field(..., ge=0)
    max_driver_age: int = Field(..., ge=0)
    default_driver_age: int = Field(..., ge=0)
    default_state: str = Field(..., min_length=2, max_length=2)
    default_vehicle_type: VehicleType = Field(...)
    default_coverage_level: CoverageLevel = Field(...)
