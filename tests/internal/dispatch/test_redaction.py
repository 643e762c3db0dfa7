"""Tests for redaction logic."""

from freshlearn_sdk._internal.dispatch.redaction import REDACTED_VALUE, redact_payload


class TestRedactPayload:
    """Tests for redact_payload function."""

    def test_redacts_api_key_header(self):
        """Should redact the api-key header."""
        headers = {"api-key": "secret123", "Accept": "application/json"}
        result = redact_payload(headers)
        assert result["api-key"] == REDACTED_VALUE
        assert result["Accept"] == "application/json"

    def test_case_insensitive_keys(self):
        """Should match sensitive keys regardless of casing, keeping the original key."""
        headers = {"Authorization": "Bearer abc", "API-Key": "k", "X-Trace-Id": "t"}
        result = redact_payload(headers)
        assert result["Authorization"] == REDACTED_VALUE
        assert result["API-Key"] == REDACTED_VALUE
        assert result["X-Trace-Id"] == "t"

    def test_redacts_nested_dicts_and_lists(self):
        """Should redact sensitive keys at any depth."""
        payload = {
            "config": {"api_key": "nested_key", "host": "localhost"},
            "users": [{"name": "Alice", "password": "pass1"}],
        }
        result = redact_payload(payload)
        assert result["config"]["api_key"] == REDACTED_VALUE
        assert result["config"]["host"] == "localhost"
        assert result["users"][0]["name"] == "Alice"
        assert result["users"][0]["password"] == REDACTED_VALUE

    def test_does_not_mutate_original(self):
        """Should return a copy and leave the input untouched."""
        headers = {"api-key": "secret123"}
        redact_payload(headers)
        assert headers["api-key"] == "secret123"

    def test_scalars_pass_through(self):
        """Should return non-container values unchanged."""
        assert redact_payload("text") == "text"
        assert redact_payload(None) is None
        assert redact_payload(42) == 42
