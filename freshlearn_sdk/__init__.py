"""Freshlearn SDK for Python.

Typed client for the Freshlearn integration API (members and enrollments).

Public API:
    FreshlearnClient - Blocking client
    AsyncFreshlearnClient - asyncio client
    FreshlearnConfig - Immutable client configuration

Internal (not for direct use):
    _internal.dispatch - Request dispatcher and response classification
"""

from freshlearn_sdk._version import __version__
from freshlearn_sdk.client import AsyncFreshlearnClient, FreshlearnClient
from freshlearn_sdk.config import DEFAULT_BASE_URL, FreshlearnConfig
from freshlearn_sdk.exceptions import (
    FreshlearnAPIError,
    FreshlearnConfigError,
    FreshlearnError,
    FreshlearnValidationError,
)
from freshlearn_sdk.models import ApiResponse, RequestOptions

__all__ = [
    "__version__",
    "FreshlearnClient",
    "AsyncFreshlearnClient",
    "FreshlearnConfig",
    "DEFAULT_BASE_URL",
    "ApiResponse",
    "RequestOptions",
    "FreshlearnError",
    "FreshlearnAPIError",
    "FreshlearnConfigError",
    "FreshlearnValidationError",
]
