"""Cloud API client package."""

from cloudctl.api.client import CloudClient
from cloudctl.api.errors import (
    APIStatusError,
    APITimeoutError,
    CloudAPIError,
    ForbiddenError,
    UnhealthyResponse,
)

__all__ = [
    "APIStatusError",
    "APITimeoutError",
    "CloudAPIError",
    "CloudClient",
    "ForbiddenError",
    "UnhealthyResponse",
]
