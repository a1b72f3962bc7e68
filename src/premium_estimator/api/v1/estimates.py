# Premium Estimator - Car Insurance Cost Estimation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Premium estimate endpoints."""

from fastapi import APIRouter, Depends

from ...core.config import Settings, get_settings
from ...core.logging_utils import get_logger
from ...schemas.estimate import EstimateOptions, EstimateRequest, EstimateResponse
from ...services.rating import build_rating_input, estimate, form_options
from ..response_patterns import APIResponseHandler

logger = get_logger(__name__)

router = APIRouter(prefix="/estimates", tags=["estimates"])


@router.get("/options", response_model=EstimateOptions)
def get_estimate_options(
    settings: Settings = Depends(get_settings),
) -> EstimateOptions:
    """Return the fixed choices and defaults for the estimate form."""
    return form_options(settings)


@router.post("", response_model=EstimateResponse)
def create_estimate(
    request: EstimateRequest,
    settings: Settings = Depends(get_settings),
) -> EstimateResponse:
    """Rate the submitted form values into a premium estimate."""
    rating_input = APIResponseHandler.unwrap_or_raise(
        build_rating_input(
            request.driver_age,
            request.state,
            request.vehicle_type,
            request.coverage_level,
            settings=settings,
        )
    )

    result = estimate(rating_input)
    logger.info(
        "Estimated %s/%s/%s age %d: annual=%d monthly=%d",
        rating_input.state,
        rating_input.vehicle_type.value,
        rating_input.coverage_level.value,
        rating_input.driver_age,
        result.annual_cost,
        result.monthly_cost,
    )
    return EstimateResponse.from_result(rating_input, result)
