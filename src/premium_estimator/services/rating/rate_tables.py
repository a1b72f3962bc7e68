"""Rate tables for the premium estimator.

All tables are built once at import and exposed read-only: mappings are
wrapped in ``MappingProxyType`` and sequences are tuples of frozen models.
Multipliers are ``Decimal`` so the rated product is exact before rounding.
"""

from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType
from typing import Final

from beartype import beartype

from ...core.result_types import Err, Ok, Result
from ...models.rating import CoverageLevel, CoverageRow, UsState, VehicleType

__all__ = [
    "AGE_BANDS",
    "BASE_RATES",
    "COVERAGE_INCLUSION",
    "COVERAGE_LABELS",
    "DEFAULT_STATE_MULTIPLIER",
    "STATE_CODES",
    "STATE_MULTIPLIERS",
    "VEHICLE_MULTIPLIERS",
    "get_age_multiplier",
    "get_base_rate",
    "get_coverage_rows",
    "get_state_multiplier",
    "get_vehicle_multiplier",
    "validate_rate_tables",
]

# Annual base premium in whole dollars
BASE_RATES: Final[Mapping[CoverageLevel, int]] = MappingProxyType(
    {
        CoverageLevel.MINIMUM: 840,
        CoverageLevel.STANDARD: 1440,
        CoverageLevel.FULL: 2160,
    }
)

DEFAULT_STATE_MULTIPLIER: Final = Decimal("1.00")

# States rated above the default; every other code uses DEFAULT_STATE_MULTIPLIER
STATE_MULTIPLIERS: Final[Mapping[str, Decimal]] = MappingProxyType(
    {
        UsState.MI.value: Decimal("1.45"),
        UsState.LA.value: Decimal("1.40"),
        UsState.FL.value: Decimal("1.35"),
        UsState.NY.value: Decimal("1.30"),
        UsState.CA.value: Decimal("1.25"),
        UsState.NJ.value: Decimal("1.28"),
        UsState.TX.value: Decimal("1.20"),
    }
)

STATE_CODES: Final[tuple[str, ...]] = tuple(state.value for state in UsState)

VEHICLE_MULTIPLIERS: Final[Mapping[VehicleType, Decimal]] = MappingProxyType(
    {
        VehicleType.SEDAN: Decimal("1.00"),
        VehicleType.SUV: Decimal("1.10"),
        VehicleType.TRUCK: Decimal("1.08"),
        VehicleType.SPORTS: Decimal("1.45"),
        VehicleType.LUXURY: Decimal("1.55"),
        VehicleType.ELECTRIC: Decimal("1.15"),
    }
)

# (exclusive upper bound, factor); the final band is open-ended
AGE_BANDS: Final[tuple[tuple[int | None, Decimal], ...]] = (
    (20, Decimal("1.85")),
    (25, Decimal("1.55")),
    (30, Decimal("1.20")),
    (65, Decimal("1.00")),
    (75, Decimal("1.15")),
    (None, Decimal("1.35")),
)

BODILY_INJURY_LIABILITY: Final = "Bodily Injury Liability"
PROPERTY_DAMAGE: Final = "Property Damage"
COLLISION: Final = "Collision"
COMPREHENSIVE: Final = "Comprehensive"
UNINSURED_MOTORIST: Final = "Uninsured Motorist"
MEDICAL_PAYMENTS: Final = "Medical Payments"

COVERAGE_LABELS: Final[tuple[str, ...]] = (
    BODILY_INJURY_LIABILITY,
    PROPERTY_DAMAGE,
    COLLISION,
    COMPREHENSIVE,
    UNINSURED_MOTORIST,
    MEDICAL_PAYMENTS,
)


def _coverage_table(*included: bool) -> tuple[CoverageRow, ...]:
    return tuple(
        CoverageRow(label=label, included=flag)
        for label, flag in zip(COVERAGE_LABELS, included, strict=True)
    )


COVERAGE_INCLUSION: Final[Mapping[CoverageLevel, tuple[CoverageRow, ...]]] = (
    MappingProxyType(
        {
            CoverageLevel.MINIMUM: _coverage_table(
                True, True, False, False, False, False
            ),
            CoverageLevel.STANDARD: _coverage_table(
                True, True, True, False, True, True
            ),
            CoverageLevel.FULL: _coverage_table(True, True, True, True, True, True),
        }
    )
)


@beartype
def get_age_multiplier(driver_age: int) -> Decimal:
    """Return the age factor for ``driver_age``.

    Bands are half-open with an inclusive lower bound, so 20 rates in the
    20-24 band and 75 in the open-ended 75+ band.
    """
    for upper_bound, factor in AGE_BANDS:
        if upper_bound is None or driver_age < upper_bound:
            return factor
    raise AssertionError("AGE_BANDS must end with an open-ended band")


@beartype
def get_state_multiplier(state: str) -> Decimal:
    """Return the state factor, falling back to the default for unlisted codes.

    The lookup is exact; callers normalise codes before rating.
    """
    if state in STATE_MULTIPLIERS:
        return STATE_MULTIPLIERS[state]
    return DEFAULT_STATE_MULTIPLIER


@beartype
def get_vehicle_multiplier(vehicle_type: VehicleType) -> Decimal:
    return VEHICLE_MULTIPLIERS[vehicle_type]


@beartype
def get_base_rate(coverage_level: CoverageLevel) -> int:
    return BASE_RATES[coverage_level]


@beartype
def get_coverage_rows(coverage_level: CoverageLevel) -> tuple[CoverageRow, ...]:
    return COVERAGE_INCLUSION[coverage_level]


@beartype
def validate_rate_tables() -> Result[bool, str]:
    """Check the table invariants the engine relies on.

    Returns:
        Ok(True) when every table is complete and positive, otherwise an Err
        describing the first violation found.
    """
    for level in CoverageLevel:
        if level not in BASE_RATES:
            return Err(f"Missing base rate for coverage level: {level.value}")
        if BASE_RATES[level] <= 0:
            return Err(f"Base rate must be positive: {level.value}")
        rows = COVERAGE_INCLUSION.get(level)
        if rows is None:
            return Err(f"Missing coverage table for coverage level: {level.value}")
        if tuple(row.label for row in rows) != COVERAGE_LABELS:
            return Err(f"Coverage rows out of order for: {level.value}")

    for vehicle in VehicleType:
        if vehicle not in VEHICLE_MULTIPLIERS:
            return Err(f"Missing vehicle multiplier: {vehicle.value}")

    multipliers = [
        *VEHICLE_MULTIPLIERS.values(),
        *STATE_MULTIPLIERS.values(),
        DEFAULT_STATE_MULTIPLIER,
        *(factor for _, factor in AGE_BANDS),
    ]
    if any(factor <= 0 for factor in multipliers):
        return Err("Rating multipliers must be strictly positive")

    unknown_states = set(STATE_MULTIPLIERS) - set(STATE_CODES)
    if unknown_states:
        return Err(f"State overrides for unknown codes: {sorted(unknown_states)}")

    bounds = [bound for bound, _ in AGE_BANDS[:-1]]
    if AGE_BANDS[-1][0] is not None or bounds != sorted(bounds):
        return Err("Age bands must ascend and end open-ended")

    previous = 0
    for level in CoverageLevel:
        if BASE_RATES[level] <= previous:
            return Err("Base rates must increase with coverage level")
        previous = BASE_RATES[level]

    return Ok(True)
