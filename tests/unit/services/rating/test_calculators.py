"""Unit tests for premium arithmetic and whole-dollar rounding."""

from decimal import Decimal

import pytest

from premium_estimator.services.rating.calculators import PremiumCalculator


class TestApplyMultiplicativeFactors:
    """Exact products, no intermediate rounding."""

    def test_product_is_exact(self) -> None:
        premium = PremiumCalculator.apply_multiplicative_factors(
            2160, (Decimal("1.85"), Decimal("1.45"), Decimal("1.45"))
        )
        assert premium == Decimal("8401.5900")

    def test_no_factors_returns_base(self) -> None:
        assert PremiumCalculator.apply_multiplicative_factors(840, ()) == Decimal("840")

    def test_accepts_decimal_base(self) -> None:
        premium = PremiumCalculator.apply_multiplicative_factors(
            Decimal("1440"), [Decimal("1.25")]
        )
        assert premium == Decimal("1800.00")


class TestRoundDollars:
    """Half-up rounding to whole dollars."""

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            ("1800.00", 1800),
            ("8401.59", 8402),
            ("1718.64", 1719),
            ("1718.49", 1718),
            ("2.5", 3),
            ("3.5", 4),
            ("150.5", 151),
        ],
    )
    def test_rounding(self, amount: str, expected: int) -> None:
        assert PremiumCalculator.round_dollars(Decimal(amount)) == expected

    def test_halves_round_up_not_to_even(self) -> None:
        """2.5 would be 2 under banker's rounding."""
        assert PremiumCalculator.round_dollars(Decimal("2.5")) != round(2.5)


class TestAnnualToMonthly:
    """Monthly figures come from the rounded annual premium."""

    @pytest.mark.parametrize(
        ("annual", "monthly"),
        [
            (1800, 150),
            (8402, 700),
            (1719, 143),
            (1806, 151),
            (1818, 152),
            (840, 70),
        ],
    )
    def test_monthly(self, annual: int, monthly: int) -> None:
        assert PremiumCalculator.annual_to_monthly(annual) == monthly

    def test_two_stage_rounding_differs_from_single_stage(self) -> None:
        """Rounding the annual figure first can move the monthly figure up a dollar."""
        unrounded = Decimal("17.98")
        single_stage = PremiumCalculator.round_dollars(unrounded / 12)
        two_stage = PremiumCalculator.annual_to_monthly(
            PremiumCalculator.round_dollars(unrounded)
        )
        assert single_stage == 1
        assert two_stage == 2
