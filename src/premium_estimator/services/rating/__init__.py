# Premium Estimator - Car Insurance Cost Estimation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Rating engine services package.

This package provides the premium rating engine with:
- Immutable rate tables and factor lookups
- Exact multiplicative premium calculation with whole-dollar rounding
- Caller-side clamping and conversion of raw form values
"""

from .calculators import PremiumCalculator
from .inputs import (
    build_rating_input,
    clamp_driver_age,
    form_options,
    normalize_state_code,
    parse_coverage_level,
    parse_vehicle_type,
)
from .rate_tables import (
    get_age_multiplier,
    get_base_rate,
    get_coverage_rows,
    get_state_multiplier,
    get_vehicle_multiplier,
    validate_rate_tables,
)
from .rating_engine import calculate_factors, estimate

__all__ = [
    # Main engine
    "estimate",
    "calculate_factors",
    # Calculators
    "PremiumCalculator",
    # Rate tables
    "get_age_multiplier",
    "get_base_rate",
    "get_coverage_rows",
    "get_state_multiplier",
    "get_vehicle_multiplier",
    "validate_rate_tables",
    # Input preparation
    "build_rating_input",
    "clamp_driver_age",
    "form_options",
    "normalize_state_code",
    "parse_coverage_level",
    "parse_vehicle_type",
]
