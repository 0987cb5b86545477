"""
Tests for the limit exception hierarchy.

Tests key exception features including:
- Base LimitError with context
- Specific exception classes and their attributes
- Exception inheritance
"""

import pytest

from actionlimits.exceptions import (
    ConfigError,
    InvalidArgumentError,
    LimitError,
    MalformedValueError,
)

# =============================================================================
# Test LimitError Base Class
# =============================================================================


@pytest.mark.unit
class TestLimitError:
    """Test LimitError base class."""

    def test_with_message(self):
        """Test LimitError with simple message."""
        error = LimitError("Test error")
        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.context == {}

    def test_str_with_context(self):
        """Test string representation includes context."""
        error = LimitError("bad limit", path="action.yaml", section="limits")
        assert str(error) == "bad limit (path=action.yaml, section=limits)"
        assert error.message == "bad limit"


# =============================================================================
# Test Specific Errors
# =============================================================================


@pytest.mark.unit
class TestSpecificErrors:
    """Test InvalidArgumentError, MalformedValueError and ConfigError."""

    def test_invalid_argument_attributes(self):
        """Test InvalidArgumentError keeps value and threshold."""
        error = InvalidArgumentError("too small", value=64, threshold=128)
        assert str(error) == "too small"
        assert error.value == 64
        assert error.threshold == 128

    def test_invalid_argument_threshold_optional(self):
        """Test threshold defaults to None."""
        assert InvalidArgumentError("not an int", value="x").threshold is None

    @pytest.mark.parametrize(
        "error_cls", [InvalidArgumentError, MalformedValueError, ConfigError]
    )
    def test_inherits_from_limit_error(self, error_cls):
        """Test every error can be caught as LimitError."""
        if error_cls is InvalidArgumentError:
            error = error_cls("message", value=1)
        else:
            error = error_cls("message")
        with pytest.raises(LimitError):
            raise error

    def test_value_errors(self):
        """Test validation errors are ValueErrors, config errors are not."""
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(MalformedValueError, ValueError)
        assert not issubclass(ConfigError, ValueError)
