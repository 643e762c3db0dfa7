"""Response envelope and per-call options."""

from typing import Generic, TypeVar

from pydantic import BaseModel

from freshlearn_sdk.exceptions import FreshlearnAPIError

T = TypeVar("T")


class RequestOptions(BaseModel):
    """Per-call overrides.

    Optional fields:
        headers: Extra headers merged over the client defaults
        timeout: Deadline for the call in milliseconds (0 or None disables it)
    """

    headers: dict[str, str] | None = None
    timeout: int | None = None

    model_config = {"frozen": True}


class ApiResponse(BaseModel, Generic[T]):
    """Uniform result of every operation.

    On failure ``error`` holds the message and ``data`` still carries the
    parsed (or raw text) error body.
    """

    success: bool
    data: T | None = None
    error: str | None = None
    status_code: int | None = None

    model_config = {"frozen": True}

    def raise_for_error(self) -> "ApiResponse[T]":
        """Raise FreshlearnAPIError if the call failed, else return self."""
        if not self.success:
            raise FreshlearnAPIError(
                self.error or "Request failed",
                status_code=self.status_code,
            )
        return self
