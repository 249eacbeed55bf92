"""
Tests for badge_checker.exceptions — every project error is a
BadgeCheckerError and carries its keyword attributes.
"""

from __future__ import annotations

import pytest

from badge_checker.exceptions import (
    BadgeCheckerError,
    ConfigurationError,
    ConversionError,
    DecodeError,
)


class TestExceptionHierarchy:

    @pytest.mark.parametrize("exc_cls", [DecodeError, ConversionError, ConfigurationError])
    def test_is_badge_checker_error(self, exc_cls):
        assert issubclass(exc_cls, BadgeCheckerError)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            raise ConfigurationError("bad", field="palette")

    def test_attributes(self):
        assert DecodeError("x", path="a.png").path == "a.png"
        err = ConversionError("x", input_path="a.png", output_path="a_converted.png")
        assert (err.input_path, err.output_path) == ("a.png", "a_converted.png")
        assert ConfigurationError("x", field="color_threshold").field == "color_threshold"

    def test_message_preserved(self):
        assert str(DecodeError("cannot decode")) == "cannot decode"
