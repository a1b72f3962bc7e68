"""Unit tests for the API result handler."""

import pytest
from fastapi import HTTPException

from premium_estimator.api.response_patterns import APIResponseHandler
from premium_estimator.core.result_types import Err, Ok


class TestUnwrapOrRaise:
    def test_ok_is_unwrapped(self) -> None:
        assert APIResponseHandler.unwrap_or_raise(Ok(1800)) == 1800

    @pytest.mark.parametrize(
        "message",
        [
            "Invalid vehicle type: hovercraft",
            "Invalid coverage level: platinum",
            "Invalid state code: California",
        ],
    )
    def test_conversion_errors_are_bad_requests(self, message: str) -> None:
        with pytest.raises(HTTPException) as exc_info:
            APIResponseHandler.unwrap_or_raise(Err(message))
        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == message
