"""Client configuration for the Freshlearn SDK."""

import os

from pydantic import BaseModel, field_validator

from freshlearn_sdk.exceptions import FreshlearnConfigError

DEFAULT_BASE_URL = "https://api.freshlearn.com/v1"


class FreshlearnConfig(BaseModel):
    """Immutable client configuration.

    Required fields:
        api_key: Key sent in the ``api-key`` header of every request

    Optional fields:
        base_url: API origin, requests go to ``base_url + path``
        debug: Print request/response debug lines to stderr
    """

    model_config = {"frozen": True}

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    debug: bool = False

    @field_validator("api_key", mode="before")
    @classmethod
    def api_key_not_empty(cls, v: str | None) -> str | None:
        # Raised as-is: pydantic only wraps ValueError/AssertionError.
        if not v:
            raise FreshlearnConfigError("API key is required")
        return v

    @field_validator("base_url", mode="before")
    @classmethod
    def base_url_default(cls, v: str | None) -> str:
        return v or DEFAULT_BASE_URL

    @classmethod
    def from_env(cls) -> "FreshlearnConfig":
        """Create a configuration from environment variables.

        Required environment variables:
            FRESHLEARN_API_KEY: The integration API key.

        Optional environment variables:
            FRESHLEARN_BASE_URL: Override the API origin.
            FRESHLEARN_DEBUG: Set to "1" to enable debug logging.

        Raises:
            FreshlearnConfigError: If FRESHLEARN_API_KEY is missing or empty.
        """
        return cls(
            api_key=os.environ.get("FRESHLEARN_API_KEY"),  # type: ignore[arg-type]
            base_url=os.environ.get("FRESHLEARN_BASE_URL"),  # type: ignore[arg-type]
            debug=os.environ.get("FRESHLEARN_DEBUG", "") == "1",
        )
