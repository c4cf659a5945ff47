"""Tests for the exception hierarchy and error handlers."""

import logging

import pytest

from rkconfigurator.exceptions import (
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    EncodingError,
    ErrorContext,
    MissingColorError,
    MissingCustomColorsError,
    RkConfiguratorError,
    format_error_for_display,
)


class TestHierarchy:
    """Test exception types and messages."""

    @pytest.mark.unit
    def test_encoding_errors(self):
        """Encoding errors share a base."""
        assert issubclass(MissingCustomColorsError, EncodingError)
        assert issubclass(MissingColorError, EncodingError)
        assert issubclass(EncodingError, RkConfiguratorError)

    @pytest.mark.unit
    def test_config_errors(self):
        """Config errors share a base."""
        assert issubclass(ConfigFileInvalidError, ConfigurationError)
        assert issubclass(ConfigValidationError, ConfigurationError)

    @pytest.mark.unit
    def test_messages(self):
        """User and technical messages are separate."""
        error = MissingCustomColorsError(mode_bit=0, family="rgb")

        assert str(error) == "Custom lighting mode needs per-key colors"
        assert "custom_colors" in error.technical_message
        assert error.recoverable is True
        assert "custom_colors" in error.recovery_hint

    @pytest.mark.unit
    def test_trailing_comma_hint(self):
        """Trailing comma parse errors get a specific message."""
        error = ConfigFileInvalidError("cfg.json", "trailing comma at line 1 column 5")
        assert error.user_message == "Configuration file has a trailing comma"
        assert "cfg.json" in error.recovery_hint

    @pytest.mark.unit
    def test_technical_defaults_to_user(self):
        """Technical message falls back to the user message."""
        error = RkConfiguratorError("Something broke")
        assert error.technical_message == "Something broke"
        assert error.recovery_hint is None


class TestHandlers:
    """Test display and context helpers."""

    @pytest.mark.unit
    def test_format_custom_error(self):
        """Custom errors show their own message and hint."""
        message, hint = format_error_for_display(MissingColorError(16))
        assert message == "Lighting mode needs a base color"
        assert hint is not None

    @pytest.mark.unit
    def test_format_standard_error(self):
        """Standard errors show their type."""
        message, hint = format_error_for_display(FileNotFoundError("x.json"))
        assert message == "FileNotFoundError: x.json"
        assert hint is None

    @pytest.mark.unit
    def test_error_context_reraises(self, caplog):
        """Failures are logged and re-raised by default."""
        with caplog.at_level(logging.ERROR):
            with pytest.raises(MissingColorError):
                with ErrorContext("build frames"):
                    raise MissingColorError(16)

        assert "Failed to build frames" in caplog.text

    @pytest.mark.unit
    def test_error_context_suppresses(self):
        """re_raise=False keeps the error on the context."""
        with ErrorContext("build frames", re_raise=False) as ctx:
            raise ValueError("bad")

        assert isinstance(ctx.error, ValueError)
