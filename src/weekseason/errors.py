"""Failures raised while fetching weekly data or validating arguments."""

from __future__ import annotations

from enum import Enum


class SeasonalityErrorCode(Enum):
    """Why a fetch or call was rejected."""

    RATE_LIMITED = "rate_limited"
    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"
    PROVIDER_ERROR = "provider_error"
    INVALID_ARGUMENT = "invalid_argument"
    NO_DATA = "no_data"


class SeasonalityError(Exception):
    """A weekly-data source failed or a caller passed a bad argument.

    Empty series and degenerate week statistics never raise this; they
    come back as analysis statuses and defined values.

    Attributes:
        code: Reason for the failure.
        retryable: True when the analyzer may move on to the next
            configured data source instead of giving up.
    """

    def __init__(
        self,
        message: str,
        code: SeasonalityErrorCode = SeasonalityErrorCode.PROVIDER_ERROR,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.retryable = retryable
