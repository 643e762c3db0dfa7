"""Request descriptor passed from request construction to the transport."""

from pydantic import BaseModel

# =============================================================================
# Constants
# =============================================================================

BODY_METHODS = frozenset({"POST", "PUT"})
JSON_CONTENT_TYPE = "application/json"
API_KEY_HEADER = "api-key"


class DispatchRequest(BaseModel):
    """A fully built request, ready to send.

    Fields:
        method: Upper-cased HTTP verb
        url: base URL + path, concatenated as given
        headers: Client defaults merged with per-call overrides
        content: Serialized JSON body (POST/PUT only), None otherwise
        timeout_ms: Per-call deadline in milliseconds, None for no deadline
    """

    method: str
    url: str
    headers: dict[str, str]
    content: str | None = None
    timeout_ms: int | None = None

    model_config = {"frozen": True}

    @property
    def timeout_seconds(self) -> float | None:
        """Deadline converted to seconds for httpx/asyncio."""
        if self.timeout_ms is None:
            return None
        return self.timeout_ms / 1000
