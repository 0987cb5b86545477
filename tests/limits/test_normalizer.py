"""Tests for the ArgNormalizer interface."""

from decimal import Decimal
from typing import Any

import pytest

from actionlimits.exceptions import MalformedValueError
from actionlimits.normalizer import ArgNormalizer


class _Recorder(ArgNormalizer[int]):
    """Normalizer for even integers that records what deserialize() saw."""

    def __init__(self) -> None:
        self.seen: list[Any] = []

    def serialize(self, value: int) -> Any:
        return value

    def deserialize(self, json_value: Any) -> int:
        self.seen.append(json_value)
        if not isinstance(json_value, int) or json_value % 2:
            raise MalformedValueError("not an even integer")
        return json_value


@pytest.mark.unit
class TestArgNormalizer:
    """Test helpers provided by ArgNormalizer."""

    def test_cannot_instantiate_abstract(self):
        """Test the base class is abstract."""
        with pytest.raises(TypeError):
            ArgNormalizer()  # type: ignore[abstract]

    def test_from_json_passes_decoded_value(self):
        """Test from_json decodes before deserializing."""
        normalizer = _Recorder()
        assert normalizer.from_json("42") == 42
        assert normalizer.seen == [42]

    def test_from_json_decodes_fractions_as_decimal(self):
        """Test fractional literals arrive as exact Decimals."""
        normalizer = _Recorder()
        assert normalizer.parse("0.1") is None
        assert normalizer.seen == [Decimal("0.1")]

    def test_from_json_invalid_text_becomes_string(self):
        """Test text that is not JSON reaches deserialize as a string."""
        normalizer = _Recorder()
        with pytest.raises(MalformedValueError):
            normalizer.from_json("forty-two")
        assert normalizer.seen == ["forty-two"]

    def test_to_json(self):
        """Test to_json renders serialize() output."""
        assert _Recorder().to_json(8) == "8"

    def test_parse(self):
        """Test parse returns None on failure."""
        normalizer = _Recorder()
        assert normalizer.parse("4") == 4
        assert normalizer.parse("5") is None
