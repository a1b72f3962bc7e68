# Premium Estimator - Car Insurance Cost Estimation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Premium arithmetic: multiplicative factors and whole-dollar rounding."""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from beartype import beartype

_WHOLE_DOLLAR = Decimal("1")
_MONTHS_PER_YEAR = Decimal("12")


class PremiumCalculator:
    """Exact premium calculation with a single rounding rule.

    Amounts are rounded half-up to whole dollars. Every amount this engine
    produces is positive, so half-up and half-away-from-zero agree.
    """

    @beartype
    @staticmethod
    def apply_multiplicative_factors(
        base_rate: int | Decimal, factors: Iterable[Decimal]
    ) -> Decimal:
        """Multiply the base rate by every factor without rounding.

        Args:
            base_rate: Annual base rate in dollars
            factors: Rating multipliers, applied in the given order

        Returns:
            Exact unrounded premium
        """
        premium = Decimal(base_rate)
        for factor in factors:
            premium *= factor
        return premium

    @beartype
    @staticmethod
    def round_dollars(amount: Decimal) -> int:
        """Round to the nearest whole dollar, halves rounding up."""
        return int(amount.quantize(_WHOLE_DOLLAR, rounding=ROUND_HALF_UP))

    @beartype
    @staticmethod
    def annual_to_monthly(annual_cost: int) -> int:
        """Monthly figure derived from the already rounded annual premium."""
        return PremiumCalculator.round_dollars(Decimal(annual_cost) / _MONTHS_PER_YEAR)
