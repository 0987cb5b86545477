"""
Memory limit for actions.

A MemoryLimit is the memory, in megabytes, an action is allowed to use. It is
an immutable value: every instance is range-checked on construction, so a
MemoryLimit that exists is always a valid one.

On the wire and in stored action definitions the limit is a bare JSON
integer, e.g. ``256``.

Example Usage:
    >>> MemoryLimit.create(384).megabytes
    384

    >>> MemoryLimit.default()
    MemoryLimit(megabytes=256)

    >>> deserialize(serialize(MemoryLimit.create(128)))
    MemoryLimit(megabytes=128)

    >>> MemoryLimit.from_json("512").to_json()
    '512'
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from .exceptions import InvalidArgumentError, MalformedValueError
from .normalizer import ArgNormalizer

# Permissible range, in megabytes
MIN_MEMORY = 128
MAX_MEMORY = 512
STD_MEMORY = 256

BYTES_PER_MB = 1024**2

# Whole Decimals with more digits than this are out of range without conversion
_MAX_DECIMAL_DIGITS = 64


def _below_minimum(megabytes: Any) -> InvalidArgumentError:
    return InvalidArgumentError(
        f"memory {megabytes} (megabytes) below allowed threshold "
        f"of {MIN_MEMORY} (megabytes)",
        value=megabytes,
        threshold=MIN_MEMORY,
    )


def _above_maximum(megabytes: Any) -> InvalidArgumentError:
    return InvalidArgumentError(
        f"memory {megabytes} (megabytes) exceeds allowed threshold "
        f"of {MAX_MEMORY} (megabytes)",
        value=megabytes,
        threshold=MAX_MEMORY,
    )


def _validate_megabytes(megabytes: Any) -> None:
    """
    Check a raw megabyte count against the permissible range.

    The lower bound is checked before the upper bound.

    Raises:
        InvalidArgumentError: If megabytes is not an int or is out of range
    """
    if isinstance(megabytes, bool) or not isinstance(megabytes, int):
        raise InvalidArgumentError(
            f"memory limit must be an integer, got {type(megabytes).__name__}",
            value=megabytes,
        )
    if megabytes < MIN_MEMORY:
        raise _below_minimum(megabytes)
    if megabytes > MAX_MEMORY:
        raise _above_maximum(megabytes)


def _whole_number(value: Any) -> int:
    """
    Convert a decoded JSON number to int.

    Raises:
        TypeError: If value is not a JSON number
        MalformedValueError: If value has a fractional part or is not finite
        InvalidArgumentError: If value is a whole Decimal too large to
            convert, which is always out of range
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise TypeError(f"expected a JSON number, got {type(value).__name__}")
    if isinstance(value, int):
        return value

    if isinstance(value, Decimal):
        if not value.is_finite() or value != value.to_integral_value():
            raise MalformedValueError("memory limit must be whole number")
        if value.adjusted() >= _MAX_DECIMAL_DIGITS:
            raise _below_minimum(value) if value < 0 else _above_maximum(value)
        return int(value)

    if not math.isfinite(value) or not value.is_integer():
        raise MalformedValueError("memory limit must be whole number")
    return int(value)


@dataclass(frozen=True, slots=True, order=True)
class MemoryLimit:
    """
    Allowed memory for an action, in megabytes.

    Equality, hashing and ordering follow megabytes. Use create() or
    default() to build instances; direct construction runs the same checks.

    Attributes:
        megabytes: The limit, within [MIN_MEMORY, MAX_MEMORY]
    """

    megabytes: int

    def __post_init__(self) -> None:
        _validate_megabytes(self.megabytes)

    @classmethod
    def default(cls) -> "MemoryLimit":
        """Get the standard memory limit (STD_MEMORY)."""
        return cls(STD_MEMORY)

    @classmethod
    def create(cls, megabytes: int) -> "MemoryLimit":
        """
        Create a memory limit, iff megabytes is within the permissible range.

        Args:
            megabytes: The limit in megabytes

        Returns:
            MemoryLimit holding exactly megabytes

        Raises:
            InvalidArgumentError: If megabytes is not an int, is below
                MIN_MEMORY or exceeds MAX_MEMORY
        """
        return cls(megabytes)

    @classmethod
    def deserialize(cls, value: Any) -> "MemoryLimit":
        """Build a memory limit from a decoded JSON value. See deserialize()."""
        return deserialize(value)

    @classmethod
    def from_json(cls, text: str) -> "MemoryLimit":
        """Build a memory limit from JSON text."""
        return _normalizer.from_json(text)

    @classmethod
    def parse(cls, text: str) -> "MemoryLimit | None":
        """Build a memory limit from JSON text, or None if it is not one."""
        return _normalizer.parse(text)

    def serialize(self) -> int:
        """Get the decoded JSON form of this limit."""
        return self.megabytes

    def to_json(self) -> str:
        """Get the JSON text of this limit."""
        return _normalizer.to_json(self)

    @property
    def size_bytes(self) -> int:
        """The limit in bytes."""
        return self.megabytes * BYTES_PER_MB

    def __int__(self) -> int:
        return self.megabytes

    def __str__(self) -> str:
        return f"{self.megabytes}MB"


def default() -> MemoryLimit:
    """Get the standard memory limit (STD_MEMORY megabytes)."""
    return MemoryLimit.default()


def create(megabytes: int) -> MemoryLimit:
    """Create a validated memory limit. See MemoryLimit.create()."""
    return MemoryLimit.create(megabytes)


def serialize(limit: MemoryLimit) -> int:
    """
    Convert a memory limit to its JSON form.

    Args:
        limit: The limit to convert

    Returns:
        The megabyte count, which json.dumps() emits as a bare integer
    """
    return limit.megabytes


def deserialize(value: Any) -> MemoryLimit:
    """
    Convert a decoded JSON value to a memory limit.

    The value must be a JSON number with no fractional part (256 and 256.0
    are both accepted) and must lie within the permissible range. The
    whole-number check runs before the range check.

    Args:
        value: Value as produced by json.loads()

    Returns:
        The validated MemoryLimit

    Raises:
        MalformedValueError: If value is not a number ("memory limit
            malformed"), is not whole, or is out of range (the range
            message from create() is kept, with the original error
            chained as __cause__)
    """
    try:
        return MemoryLimit.create(_whole_number(value))
    except TypeError as e:
        raise MalformedValueError("memory limit malformed") from e
    except InvalidArgumentError as e:
        raise MalformedValueError(e.message) from e


class _MemoryLimitNormalizer(ArgNormalizer[MemoryLimit]):
    def serialize(self, value: MemoryLimit) -> int:
        return serialize(value)

    def deserialize(self, json_value: Any) -> MemoryLimit:
        return deserialize(json_value)


_normalizer = _MemoryLimitNormalizer()


# Public API
__all__ = [
    "MIN_MEMORY",
    "MAX_MEMORY",
    "STD_MEMORY",
    "BYTES_PER_MB",
    "MemoryLimit",
    "default",
    "create",
    "serialize",
    "deserialize",
]
