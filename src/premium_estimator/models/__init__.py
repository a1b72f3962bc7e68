# Premium Estimator - Car Insurance Cost Estimation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Domain models package for the premium estimator."""

from .base import BaseModelConfig
from .rating import (
    CoverageLevel,
    CoverageRow,
    RatingFactors,
    RatingInput,
    RatingResult,
    UsState,
    VehicleType,
)

__all__ = [
    "BaseModelConfig",
    "CoverageLevel",
    "CoverageRow",
    "RatingFactors",
    "RatingInput",
    "RatingResult",
    "UsState",
    "VehicleType",
]
