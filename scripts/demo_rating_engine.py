#!/usr/bin/env python3
"""Demo script printing premium estimates for a handful of driver profiles.

This script demonstrates:
1. Converting raw form values into rating inputs (age clamping included)
2. Rating each input with the premium engine
3. The factor breakdown and coverage table behind each figure
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from premium_estimator.services.rating import build_rating_input, estimate

PROFILES = [
    (35, "CA", "sedan", "standard"),
    (18, "MI", "sports", "full"),
    (22, "TX", "suv", "minimum"),
    (68, "WY", "electric", "full"),
    (12, "ny", "luxury", "standard"),
    (40, "DC", "hovercraft", "full"),
]


def main() -> int:
    """Rate every demo profile and print the results."""
    print("🚗 Car Insurance Cost Estimator - rating engine demo")
    print("=" * 60)

    for driver_age, state, vehicle_type, coverage_level in PROFILES:
        result = build_rating_input(driver_age, state, vehicle_type, coverage_level)
        if result.is_err():
            print(f"❌ {driver_age}/{state}/{vehicle_type}/{coverage_level}: {result.unwrap_err()}")
            continue

        rating_input = result.unwrap()
        rating = estimate(rating_input)
        factors = rating.factors

        print(
            f"\n👤 Age {rating_input.driver_age}, {rating_input.state}, "
            f"{rating_input.vehicle_type.value}, {rating_input.coverage_level.value}"
        )
        print(
            f"   ${factors.base_rate} x age {factors.age_factor} x state "
            f"{factors.state_factor} x vehicle {factors.vehicle_factor}"
        )
        print(f"💵 Annual: ${rating.annual_cost:,}  Monthly: ${rating.monthly_cost:,}")
        print(
            f"🛡️  Coverage: {rating.coverage_included_count} of "
            f"{rating.coverage_total_count}"
        )
        for row in rating.coverage_rows:
            mark = "✅" if row.included else "❌"
            print(f"     {mark} {row.label}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
