"""Stellar Explain error hierarchy."""

from typing import Any


class ExplainServiceError(Exception):
    """Base exception for Stellar Explain errors."""

    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(ExplainServiceError):
    """Invalid request parameters."""

    code = "BAD_REQUEST"
    status_code = 400


class NotFoundError(ExplainServiceError):
    """Transaction or account does not exist upstream."""

    code = "NOT_FOUND"
    status_code = 404


class UpstreamError(ExplainServiceError):
    """Horizon unreachable or returned something unusable."""

    code = "UPSTREAM_ERROR"
    status_code = 502


class InternalError(ExplainServiceError):
    """Internal server error."""

    code = "INTERNAL_ERROR"
    status_code = 500


class EmptyTransactionError(ExplainServiceError):
    """Transaction has no operations, so there is nothing to explain."""

    code = "EMPTY_TRANSACTION"
    status_code = 400

    def __init__(
        self,
        message: str = "This transaction contains no operations.",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)


ERROR_STATUS_MAP: dict[type[ExplainServiceError], int] = {
    ValidationError: 400,
    NotFoundError: 404,
    UpstreamError: 502,
    InternalError: 500,
    EmptyTransactionError: 400,
}


def get_status_code(error: ExplainServiceError) -> int:
    """Get HTTP status code for error."""
    return ERROR_STATUS_MAP.get(type(error), error.status_code)
