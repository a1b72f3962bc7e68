# Premium Estimator - Car Insurance Cost Estimation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Request and response schemas for the HTTP API."""

from .common import APIInfo, HealthResponse
from .estimate import EstimateOptions, EstimateRequest, EstimateResponse

__all__ = [
    "APIInfo",
    "HealthResponse",
    "EstimateOptions",
    "EstimateRequest",
    "EstimateResponse",
]
