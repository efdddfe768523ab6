"""Errors raised by the cloud API client."""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cloudctl.models.records import HealthReport


class CloudAPIError(Exception):
    """Base exception for failed API calls."""


class APITimeoutError(CloudAPIError):
    """Raised when a call does not complete within its deadline."""

    def __init__(self, operation: str, timeout: float) -> None:
        super().__init__(f"{operation} timed out after {timeout:g}s")
        self.operation = operation
        self.timeout = timeout


class APIStatusError(CloudAPIError):
    """Raised when the API answers with a non-success status code."""

    def __init__(self, operation: str, status_code: int, detail: str = "") -> None:
        message = f"{operation} failed with status {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.operation = operation
        self.status_code = status_code
        self.detail = detail


class ForbiddenError(APIStatusError):
    """Raised on HTTP 403; the caller lacks permission for the resource."""

    def __init__(self, operation: str, detail: str = "") -> None:
        super().__init__(operation, int(HTTPStatus.FORBIDDEN), detail)


class UnhealthyResponse(APIStatusError):
    """Raised when the health endpoint answers 500 with a health payload.

    The payload is still a valid health report, so callers can unwrap it.
    """

    def __init__(self, report: HealthReport) -> None:
        super().__init__("health", int(HTTPStatus.INTERNAL_SERVER_ERROR), report.message)
        self.report = report


__all__ = [
    "APIStatusError",
    "APITimeoutError",
    "CloudAPIError",
    "ForbiddenError",
    "UnhealthyResponse",
]
