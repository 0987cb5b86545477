"""
Argument normalizer interface.

A normalizer owns the JSON form of a validated value type: subclasses supply
serialize() and deserialize(), and get JSON text helpers on top of them.
"""

import json
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Generic, TypeVar

from .exceptions import LimitError

T = TypeVar("T")


class ArgNormalizer(ABC, Generic[T]):
    """
    Abstract base class for value types with a JSON representation.

    Example:
        class PortNormalizer(ArgNormalizer[Port]):
            def serialize(self, value: Port) -> Any:
                return value.number

            def deserialize(self, json_value: Any) -> Port:
                return Port.create(json_value)

        port = PortNormalizer().from_json("8080")
    """

    @abstractmethod
    def serialize(self, value: T) -> Any:
        """
        Convert a value to its decoded JSON form.

        Args:
            value: Value to convert

        Returns:
            A value json.dumps() accepts
        """
        pass  # pragma: no cover

    @abstractmethod
    def deserialize(self, json_value: Any) -> T:
        """
        Convert a decoded JSON value back into a validated value.

        Args:
            json_value: Value as produced by json.loads()

        Returns:
            The validated value

        Raises:
            MalformedValueError: If json_value does not describe a valid value
        """
        pass  # pragma: no cover

    def from_json(self, text: str) -> T:
        """
        Parse JSON text and deserialize it.

        Text that is not valid JSON is treated as a JSON string, so bare
        words reach deserialize() and fail there with a proper error.
        Fractional numbers are decoded as Decimal to keep them exact.

        Args:
            text: JSON text

        Returns:
            The validated value
        """
        try:
            json_value = json.loads(text, parse_float=Decimal)
        except ValueError:
            # JSONDecodeError, or an integer literal past the int digit limit
            json_value = text
        return self.deserialize(json_value)

    def to_json(self, value: T) -> str:
        """Render a value as JSON text."""
        return json.dumps(self.serialize(value))

    def parse(self, text: str) -> T | None:
        """
        Like from_json(), but return None instead of raising.

        Args:
            text: JSON text

        Returns:
            The validated value, or None if text does not describe one
        """
        try:
            return self.from_json(text)
        except LimitError:
            return None
