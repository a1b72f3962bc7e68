# Premium Estimator - Car Insurance Cost Estimation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Premium rating engine.

``estimate`` is a pure function of its input: it reads only the immutable
rate tables, so concurrent callers need no locking and identical inputs
always rate to identical results.
"""

from beartype import beartype

from ...models.rating import RatingFactors, RatingInput, RatingResult
from .calculators import PremiumCalculator
from .rate_tables import (
    get_age_multiplier,
    get_base_rate,
    get_coverage_rows,
    get_state_multiplier,
    get_vehicle_multiplier,
)


@beartype
def calculate_factors(rating_input: RatingInput) -> RatingFactors:
    """Look up the base rate and the three risk multipliers for an input."""
    return RatingFactors(
        base_rate=get_base_rate(rating_input.coverage_level),
        age_factor=get_age_multiplier(rating_input.driver_age),
        state_factor=get_state_multiplier(rating_input.state),
        vehicle_factor=get_vehicle_multiplier(rating_input.vehicle_type),
    )


@beartype
def estimate(rating_input: RatingInput) -> RatingResult:
    """Rate an input into annual and monthly premiums plus its coverage table.

    The annual premium is ``base * age * state * vehicle`` rounded to whole
    dollars. The monthly premium is the rounded annual figure divided by
    twelve and rounded again.
    """
    factors = calculate_factors(rating_input)
    premium = PremiumCalculator.apply_multiplicative_factors(
        factors.base_rate,
        (factors.age_factor, factors.state_factor, factors.vehicle_factor),
    )
    annual_cost = PremiumCalculator.round_dollars(premium)

    return RatingResult(
        annual_cost=annual_cost,
        monthly_cost=PremiumCalculator.annual_to_monthly(annual_cost),
        coverage_rows=get_coverage_rows(rating_input.coverage_level),
        factors=factors,
    )
