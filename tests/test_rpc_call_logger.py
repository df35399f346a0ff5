"""Tests for RPC call logger."""

from unittest.mock import MagicMock, patch

import pytest

from vibrovolt.adapters.rpc_call_logger import REDACTED, log_rpc_call, redact, should_log_calls


class TestShouldLogCalls:
    """Tests for should_log_calls function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given VIBROVOLT_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("VIBROVOLT_LOG_REQUESTS", raising=False)

        assert should_log_calls() is False

    @pytest.mark.parametrize("value", ["true", "True", "TRUE"])
    def test_when_env_set_to_true_then_returns_true(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        """Given VIBROVOLT_LOG_REQUESTS=true in any case, when checking, then returns True."""
        monkeypatch.setenv("VIBROVOLT_LOG_REQUESTS", value)

        assert should_log_calls() is True

    def test_when_env_set_to_other_value_then_returns_false(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given VIBROVOLT_LOG_REQUESTS=1, when checking, then returns False."""
        monkeypatch.setenv("VIBROVOLT_LOG_REQUESTS", "1")

        assert should_log_calls() is False


class TestRedact:
    """Tests for redaction of sensitive values."""

    def test_nested_password_is_redacted(self) -> None:
        """Given a nested password field, when redacting, then only that value is replaced."""
        payload = {"email": "demo@vibrovolt.com", "auth": {"Password": "demo123"}}

        result = redact(payload)

        assert result == {"email": "demo@vibrovolt.com", "auth": {"Password": REDACTED}}
        assert payload["auth"]["Password"] == "demo123"

    def test_tokens_in_lists_are_redacted(self) -> None:
        """Given tokens inside a list, when redacting, then each is replaced."""
        assert redact([{"token": "abc"}, {"id": 1}]) == [{"token": REDACTED}, {"id": 1}]

    def test_scalars_are_returned_unchanged(self) -> None:
        """Given a scalar, when redacting, then it is returned as is."""
        assert redact(42) == 42


class TestLogRpcCall:
    """Tests for log_rpc_call function."""

    @patch("vibrovolt.adapters.rpc_call_logger.should_log_calls")
    @patch("vibrovolt.adapters.rpc_call_logger.logger")
    def test_when_logging_disabled_then_does_not_log(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given logging disabled, when logging a call, then nothing is logged."""
        mock_should_log.return_value = False

        log_rpc_call("->", "wallet.get")

        mock_logger.info.assert_not_called()

    @patch("vibrovolt.adapters.rpc_call_logger.should_log_calls")
    @patch("vibrovolt.adapters.rpc_call_logger.logger")
    def test_when_logging_enabled_then_logs_procedure_and_status(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given logging enabled, when logging a response, then procedure and status are included."""
        mock_should_log.return_value = True

        log_rpc_call("<-", "wallet.addFunds", {"success": True}, status_code=200)

        mock_logger.info.assert_called_once()
        message = mock_logger.info.call_args[0][0]
        assert "<- wallet.addFunds [200]" in message
        assert '"success": true' in message

    @patch("vibrovolt.adapters.rpc_call_logger.should_log_calls")
    @patch("vibrovolt.adapters.rpc_call_logger.logger")
    def test_when_logging_credentials_then_password_is_hidden(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given a login payload, when logging, then the password does not appear."""
        mock_should_log.return_value = True

        log_rpc_call("->", "auth.login", {"email": "demo@vibrovolt.com", "password": "demo123"})

        message = mock_logger.info.call_args[0][0]
        assert "demo123" not in message
        assert REDACTED in message
