# Premium Estimator - Car Insurance Cost Estimation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Business logic service layer."""

from premium_estimator.core.result_types import Err, Ok, Result

from .rating import build_rating_input, estimate

__all__ = [
    "Result",
    "Ok",
    "Err",
    "build_rating_input",
    "estimate",
]
