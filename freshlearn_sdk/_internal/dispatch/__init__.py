"""Request dispatcher for the Freshlearn SDK.

WARNING: This is an internal module used by FreshlearnClient and
AsyncFreshlearnClient. Do not call directly from user code.
"""

from freshlearn_sdk._internal.dispatch.client import RequestDispatcher
from freshlearn_sdk._internal.dispatch.models import DispatchRequest
from freshlearn_sdk._internal.dispatch.redaction import redact_payload

__all__ = [
    "RequestDispatcher",
    "DispatchRequest",
    "redact_payload",
]
