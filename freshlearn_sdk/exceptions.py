"""Public exceptions for the Freshlearn SDK."""


class FreshlearnError(Exception):
    """Base exception for all Freshlearn SDK errors."""


class FreshlearnAPIError(FreshlearnError):
    """Error reported by the Freshlearn API for a failed response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class FreshlearnConfigError(FreshlearnError):
    """Configuration error (missing API key, invalid config)."""


class FreshlearnValidationError(FreshlearnError):
    """Validation error for request data."""
