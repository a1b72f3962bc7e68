# Premium Estimator - Car Insurance Cost Estimation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Rating domain models: closed enumerations, rating input and result."""

from decimal import Decimal
from enum import Enum

from pydantic import Field, computed_field

from .base import BaseModelConfig


class VehicleType(str, Enum):
    """Vehicle classes with a distinct rating multiplier."""

    SEDAN = "sedan"
    SUV = "suv"
    TRUCK = "truck"
    SPORTS = "sports"
    LUXURY = "luxury"
    ELECTRIC = "electric"


class CoverageLevel(str, Enum):
    """Bundled protection tiers, cheapest first."""

    MINIMUM = "minimum"
    STANDARD = "standard"
    FULL = "full"


class UsState(str, Enum):
    """Postal codes offered by the estimate form (50 states + DC)."""

    AL = "AL"
    AK = "AK"
    AZ = "AZ"
    AR = "AR"
    CA = "CA"
    CO = "CO"
    CT = "CT"
    DE = "DE"
    FL = "FL"
    GA = "GA"
    HI = "HI"
    ID = "ID"
    IL = "IL"
    IN = "IN"
    IA = "IA"
    KS = "KS"
    KY = "KY"
    LA = "LA"
    ME = "ME"
    MD = "MD"
    MA = "MA"
    MI = "MI"
    MN = "MN"
    MS = "MS"
    MO = "MO"
    MT = "MT"
    NE = "NE"
    NV = "NV"
    NH = "NH"
    NJ = "NJ"
    NM = "NM"
    NY = "NY"
    NC = "NC"
    ND = "ND"
    OH = "OH"
    OK = "OK"
    OR = "OR"
    PA = "PA"
    RI = "RI"
    SC = "SC"
    SD = "SD"
    TN = "TN"
    TX = "TX"
    UT = "UT"
    VT = "VT"
    VA = "VA"
    WA = "WA"
    WV = "WV"
    WI = "WI"
    WY = "WY"
    DC = "DC"


class RatingInput(BaseModelConfig):
    """The four factors a premium estimate is rated on.

    ``driver_age`` is not range-checked here; callers clamp it first.
    ``state`` accepts any code so unlisted codes can still be rated with the
    default state multiplier.
    """

    driver_age: int = Field(..., description="Driver age in whole years")
    state: str = Field(..., min_length=1, description="Two-letter postal code")
    vehicle_type: VehicleType = Field(..., description="Vehicle class")
    coverage_level: CoverageLevel = Field(..., description="Coverage tier")


class CoverageRow(BaseModelConfig):
    """One line of the coverage inclusion table."""

    label: str = Field(..., min_length=1, max_length=100)
    included: bool = Field(...)


class RatingFactors(BaseModelConfig):
    """Base rate and the multipliers applied to it."""

    base_rate: int = Field(..., gt=0, description="Annual base rate in dollars")
    age_factor: Decimal = Field(..., gt=Decimal("0"))
    state_factor: Decimal = Field(..., gt=Decimal("0"))
    vehicle_factor: Decimal = Field(..., gt=Decimal("0"))


class RatingResult(BaseModelConfig):
    """Premium estimate with the coverage table for the requested tier."""

    annual_cost: int = Field(..., ge=0, description="Annual premium in dollars")
    monthly_cost: int = Field(..., ge=0, description="Monthly premium in dollars")
    coverage_rows: tuple[CoverageRow, ...] = Field(...)
    factors: RatingFactors = Field(...)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def coverage_included_count(self) -> int:
        """Number of coverages included at this tier."""
        return sum(1 for row in self.coverage_rows if row.included)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def coverage_total_count(self) -> int:
        """Number of rows in the coverage table."""
        return len(self.coverage_rows)
