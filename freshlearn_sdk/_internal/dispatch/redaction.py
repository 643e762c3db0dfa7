"""Redaction of sensitive values before they reach debug output."""

from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "api-key",
    "api_key",
    "apikey",
    "authorization",
    "proxy-authorization",
    "cookie",
    "set-cookie",
    "token",
    "secret",
    "password",
})

REDACTED_VALUE = "[REDACTED]"


def redact_payload(payload: Any) -> Any:
    """Recursively redact sensitive keys.

    Key matching is case-insensitive. Creates a copy - the original is never
    mutated.

    Args:
        payload: Headers, a JSON body, or any nested dict/list structure.

    Returns:
        A new structure with sensitive values replaced by "[REDACTED]".
    """
    if isinstance(payload, dict):
        result = {}
        for key, value in payload.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = redact_payload(value)
        return result
    elif isinstance(payload, list):
        return [redact_payload(item) for item in payload]
    else:
        return payload
