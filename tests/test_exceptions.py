"""Unit tests for the exception hierarchy and error handlers."""

import logging
from unittest.mock import Mock

import pytest
from pydantic import BaseModel, ValidationError

from hexpicker.exceptions import (
    ColorParseError,
    ConfigFileInvalidError,
    ConfigValidationError,
    ErrorContext,
    HexPickerError,
    InvalidHexFormatError,
    format_error_for_display,
    handle_errors,
    wrap_pydantic_error,
)


class TestHexPickerError:
    """Base error behaviour."""

    @pytest.mark.unit
    def test_messages(self):
        error = HexPickerError("Something failed", technical_message="stack detail", recovery_hint="Retry")
        assert str(error) == "Something failed"
        assert error.technical_message == "stack detail"
        assert error.get_full_message() == "Something failed\n\nSuggestion: Retry"
        assert not error.recoverable

    @pytest.mark.unit
    def test_technical_message_defaults_to_user_message(self):
        assert HexPickerError("oops").technical_message == "oops"

    @pytest.mark.unit
    def test_invalid_hex_format(self):
        error = InvalidHexFormatError("#zzz")
        assert isinstance(error, ColorParseError)
        assert error.user_message == "'#zzz' is not a hex color"
        assert "'#zzz'" in error.technical_message
        assert error.recoverable
        assert "#cc85c5" in error.recovery_hint

    @pytest.mark.unit
    def test_invalid_hex_format_non_string(self):
        assert InvalidHexFormatError(None).user_message == "'NoneType' is not a hex color"

    @pytest.mark.unit
    def test_config_file_trailing_comma(self):
        error = ConfigFileInvalidError("/tmp/config.json", "trailing comma at line 3")
        assert error.user_message == "Configuration file has a trailing comma"
        assert "/tmp/config.json" in error.recovery_hint


class TestHandleErrors:
    """The handle_errors decorator."""

    @pytest.mark.unit
    def test_passes_through_results(self):
        @handle_errors(operation_name="add")
        def add(a, b):
            return a + b

        assert add(1, 2) == 3

    @pytest.mark.unit
    def test_notifies_and_returns_fallback(self):
        notify = Mock()

        @handle_errors(operation_name="parse", user_notification=notify, re_raise=False, fallback_value="keep")
        def parse():
            raise InvalidHexFormatError("nope")

        assert parse() == "keep"
        notify.assert_called_once()
        assert "'nope' is not a hex color" in notify.call_args.args[0]

    @pytest.mark.unit
    def test_recoverable_errors_log_as_warning(self, caplog):
        @handle_errors(operation_name="parse", re_raise=False)
        def parse():
            raise InvalidHexFormatError("nope")

        with caplog.at_level(logging.WARNING, logger="hexpicker.exceptions.handlers"):
            parse()
        assert [r.levelno for r in caplog.records] == [logging.WARNING]

    @pytest.mark.unit
    def test_unrecoverable_errors_log_as_error(self, caplog):
        @handle_errors(operation_name="load", re_raise=False)
        def load():
            raise HexPickerError("broken", recoverable=False)

        with caplog.at_level(logging.WARNING, logger="hexpicker.exceptions.handlers"):
            load()
        assert [r.levelno for r in caplog.records] == [logging.ERROR]

    @pytest.mark.unit
    def test_unexpected_errors_are_reraised(self):
        @handle_errors(operation_name="explode")
        def explode():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            explode()

    @pytest.mark.unit
    def test_unexpected_errors_notify(self):
        notify = Mock()

        @handle_errors(operation_name="explode", user_notification=notify, re_raise=False)
        def explode():
            raise RuntimeError("boom")

        assert explode() is None
        notify.assert_called_once_with("Error: boom")


class TestErrorContext:
    """The ErrorContext context manager."""

    @pytest.mark.unit
    def test_reraises_by_default(self):
        with pytest.raises(ValueError):
            with ErrorContext("do work"):
                raise ValueError("bad")

    @pytest.mark.unit
    def test_suppresses_and_records(self):
        with ErrorContext("do work", re_raise=False) as ctx:
            raise InvalidHexFormatError("x")
        assert isinstance(ctx.error, InvalidHexFormatError)

    @pytest.mark.unit
    def test_no_error(self):
        with ErrorContext("do work") as ctx:
            pass
        assert ctx.error is None


class TestFormatting:
    """Display helpers."""

    @pytest.mark.unit
    def test_format_custom_error(self):
        message, hint = format_error_for_display(InvalidHexFormatError("x"))
        assert message == "'x' is not a hex color"
        assert hint is not None

    @pytest.mark.unit
    def test_format_other_error(self):
        assert format_error_for_display(KeyError("k")) == ("KeyError: 'k'", None)

    @pytest.mark.unit
    def test_wrap_single_validation_error(self):
        class Model(BaseModel):
            count: int

        with pytest.raises(ValidationError) as exc_info:
            Model.model_validate({"count": "many"})

        wrapped = wrap_pydantic_error(exc_info.value, "settings.json")
        assert isinstance(wrapped, ConfigValidationError)
        assert wrapped.field == "count"
        assert wrapped.value == "many"
        assert wrapped.file_path == "settings.json"

    @pytest.mark.unit
    def test_wrap_multiple_validation_errors(self):
        class Model(BaseModel):
            a: int
            b: int

        with pytest.raises(ValidationError) as exc_info:
            Model.model_validate({"a": "x", "b": "y"})

        wrapped = wrap_pydantic_error(exc_info.value, "settings.json")
        assert wrapped.field == "multiple fields"
        assert "2 validation errors" in wrapped.user_message

    @pytest.mark.unit
    def test_wrap_invalid_json(self):
        class Model(BaseModel):
            count: int

        with pytest.raises(ValidationError) as exc_info:
            Model.model_validate_json("{not json")

        wrapped = wrap_pydantic_error(exc_info.value, "settings.json")
        assert isinstance(wrapped, ConfigFileInvalidError)
        assert "[type=" not in wrapped.technical_message
