"""
Exception hierarchy for action limits.

Every error raised by this package derives from LimitError, so callers that
load action definitions can reject a bad definition with a single except
clause while still telling validation and parsing failures apart.
"""

from typing import Any


class LimitError(Exception):
    """
    Base exception for invalid limits and unreadable limit sources.

    The message describes the rejected limit; keyword arguments record where
    it came from (file path, section) and are appended to str() so they show
    up in CLI error lines and log records.

    Example:
        try:
            limits = load_limits_file("action.yaml")
        except LimitError as e:
            lg.error("rejecting action definition", extra={"exception": e})
    """

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if not self.context:
            return self.message
        where = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.message} ({where})"


class InvalidArgumentError(LimitError, ValueError):
    """
    Raised by a limit factory when the argument violates its requirements.

    Attributes:
        value: The rejected argument
        threshold: The bound that was violated, or None for type failures
    """

    def __init__(self, message: str, value: Any, threshold: int | None = None) -> None:
        super().__init__(message)
        self.value = value
        self.threshold = threshold


class MalformedValueError(LimitError, ValueError):
    """
    Raised when a serialized limit cannot be turned back into a limit.

    The triggering error, if any, is available as __cause__.
    """

    pass


class ConfigError(LimitError):
    """
    Raised when a limits configuration cannot be loaded.

    Examples:
        - Config file too large
        - Invalid YAML syntax
        - Limits section is not a mapping
        - Limit value rejected by the schema
    """

    pass
