# Premium Estimator - Car Insurance Cost Estimation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Mapping of service ``Result`` values onto HTTP semantics."""

from typing import Any, TypeVar

from fastapi import HTTPException

from ..core.result_types import Err, Ok

T = TypeVar("T")


class APIResponseHandler:
    """Translate service layer results into responses or HTTP errors."""

    # Every Err reaching the API comes from converting raw request values.
    CONVERSION_ERROR_STATUS = 400

    @staticmethod
    def unwrap_or_raise(result: Ok[T] | Err[Any]) -> T:
        """Return the success value or raise ``HTTPException`` for an ``Err``."""
        if isinstance(result, Err):
            error_msg = str(result.unwrap_err())
            raise HTTPException(
                status_code=APIResponseHandler.CONVERSION_ERROR_STATUS,
                detail=error_msg,
            )
        return result.unwrap()
