# Premium Estimator - Car Insurance Cost Estimation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Caller-side preparation of rating inputs.

Raw form values are clamped and converted here before they reach the rating
engine. Conversion failures come back as ``Err`` values instead of raising.
"""

from beartype import beartype

from ...core.config import Settings, get_settings
from ...core.logging_utils import get_logger
from ...core.result_types import Err, Ok, Result
from ...models.rating import CoverageLevel, RatingInput, VehicleType
from ...schemas.estimate import EstimateOptions
from .rate_tables import STATE_CODES

logger = get_logger(__name__)

DEFAULT_DRIVER_AGE = 35
DEFAULT_STATE = "CA"
DEFAULT_VEHICLE_TYPE = VehicleType.SEDAN
DEFAULT_COVERAGE_LEVEL = CoverageLevel.STANDARD


@beartype
def clamp_driver_age(driver_age: int, minimum: int = 16, maximum: int = 99) -> int:
    """Clamp an age into ``[minimum, maximum]``."""
    if minimum > maximum:
        raise ValueError(f"Invalid age bounds: {minimum} > {maximum}")
    return max(minimum, min(maximum, driver_age))


@beartype
def normalize_state_code(state: str) -> Result[str, str]:
    """Upper-case and strip a postal code, rejecting anything not two letters.

    Codes outside the published roster are accepted; they rate with the
    default state multiplier.
    """
    code = state.strip().upper()
    if len(code) != 2 or not code.isalpha():
        return Err(f"Invalid state code: {state!r}")
    return Ok(code)


@beartype
def parse_vehicle_type(value: str | VehicleType) -> Result[VehicleType, str]:
    try:
        return Ok(
            VehicleType(value.strip().lower() if isinstance(value, str) else value)
        )
    except ValueError:
        return Err(f"Invalid vehicle type: {value!r}")


@beartype
def parse_coverage_level(value: str | CoverageLevel) -> Result[CoverageLevel, str]:
    try:
        return Ok(
            CoverageLevel(value.strip().lower() if isinstance(value, str) else value)
        )
    except ValueError:
        return Err(f"Invalid coverage level: {value!r}")


@beartype
def build_rating_input(
    driver_age: int,
    state: str,
    vehicle_type: str | VehicleType,
    coverage_level: str | CoverageLevel,
    *,
    settings: Settings | None = None,
) -> Result[RatingInput, str]:
    """Turn raw form values into a ``RatingInput``.

    Args:
        driver_age: Age as entered; clamped to the configured bounds
        state: Postal code, any case
        vehicle_type: Vehicle class name or enum member
        coverage_level: Coverage tier name or enum member
        settings: Settings providing the age bounds (defaults to the cached ones)

    Returns:
        Result containing the rating input or the first conversion error
    """
    settings = settings or get_settings()

    state_result = normalize_state_code(state)
    if isinstance(state_result, Err):
        logger.debug("Rejected estimate input: %s", state_result.error)
        return state_result

    vehicle_result = parse_vehicle_type(vehicle_type)
    if isinstance(vehicle_result, Err):
        logger.debug("Rejected estimate input: %s", vehicle_result.error)
        return vehicle_result

    coverage_result = parse_coverage_level(coverage_level)
    if isinstance(coverage_result, Err):
        logger.debug("Rejected estimate input: %s", coverage_result.error)
        return coverage_result

    age = clamp_driver_age(
        driver_age, settings.min_driver_age, settings.max_driver_age
    )
    if age != driver_age:
        logger.debug("Clamped driver age %d to %d", driver_age, age)

    return Ok(
        RatingInput(
            driver_age=age,
            state=state_result.value,
            vehicle_type=vehicle_result.value,
            coverage_level=coverage_result.value,
        )
    )


@beartype
def form_options(settings: Settings | None = None) -> EstimateOptions:
    """Fixed choices and defaults offered by the estimate form."""
    settings = settings or get_settings()
    return EstimateOptions(
        states=list(STATE_CODES),
        vehicle_types=list(VehicleType),
        coverage_levels=list(CoverageLevel),
        min_driver_age=settings.min_driver_age,
        max_driver_age=settings.max_driver_age,
        default_driver_age=clamp_driver_age(
            DEFAULT_DRIVER_AGE, settings.min_driver_age, settings.max_driver_age
        ),
        default_state=DEFAULT_STATE,
        default_vehicle_type=DEFAULT_VEHICLE_TYPE,
        default_coverage_level=DEFAULT_COVERAGE_LEVEL,
    )
