"""Tests for typed retrieval and the canonical value parsers."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import enum
from decimal import Decimal
from pathlib import Path

import pytest

from cmdflags.accessor import TypedAccessor
from cmdflags.conversion import BOOL, FLOAT, I8, INT, U8, U64, ValueType, integer_type, resolve_target
from cmdflags.exceptions import FailedToParseFlagValueError, NoSuchFlagError
from cmdflags.flag import FlagValue


class Color(enum.Enum):
    RED = "red"
    BLUE = "blue"


@pytest.fixture
def accessor() -> TypedAccessor:
    return TypedAccessor(
        [
            FlagValue("name", "Ollie"),
            FlagValue("age", "who?"),
            FlagValue("cranberries", "314159265358979"),
            FlagValue("is-wonderful", "true"),
            FlagValue("ratio", "0.25"),
            FlagValue("color", "blue"),
        ]
    )


@pytest.mark.unit
class TestConversion:
    """Test the strict canonical parsers."""

    @pytest.mark.parametrize("text,expected", [("true", True), ("false", False)])
    def test_bool_literals(self, text, expected):
        assert BOOL(text) is expected

    @pytest.mark.parametrize("text", ["True", "1", "yes", "", " true"])
    def test_bool_rejects_other_spellings(self, text):
        with pytest.raises(ValueError):
            BOOL(text)

    @pytest.mark.parametrize("text,expected", [("42", 42), ("+7", 7), ("-3", -3)])
    def test_int(self, text, expected):
        assert INT(text) == expected

    @pytest.mark.parametrize("text", ["1_000", " 5", "5 ", "0x10", "4.0", ""])
    def test_int_rejects_loose_literals(self, text):
        with pytest.raises(ValueError):
            INT(text)

    def test_unsigned_range(self):
        assert U8("255") == 255
        with pytest.raises(ValueError):
            U8("256")
        with pytest.raises(ValueError):
            U8("-1")

    def test_signed_range(self):
        assert I8("-128") == -128
        assert I8("127") == 127
        with pytest.raises(ValueError):
            I8("128")

    def test_u64_bounds(self):
        assert U64("18446744073709551615") == 2**64 - 1
        with pytest.raises(ValueError):
            U64("18446744073709551616")

    def test_float(self):
        assert FLOAT("0.25") == 0.25
        assert FLOAT("1e3") == 1000.0
        with pytest.raises(ValueError):
            FLOAT("1_0.5")
        with pytest.raises(ValueError):
            FLOAT(" 1.5")

    def test_integer_type_name(self):
        assert integer_type("u16", 16, signed=False).name == "u16"

    def test_resolve_target(self):
        assert resolve_target(bool) is BOOL
        assert resolve_target(int) is INT
        assert resolve_target(U8) is U8
        path_type = resolve_target(Path)
        assert path_type.name == "Path"
        assert isinstance(path_type, ValueType)

    def test_resolve_target_rejects_non_callable(self):
        with pytest.raises(TypeError):
            resolve_target(42)


@pytest.mark.unit
class TestTypedAccessor:
    """Test lookup and conversion failures."""

    def test_get_string(self, accessor):
        assert accessor.get_string("name") == "Ollie"

    def test_get_defaults_to_str(self, accessor):
        assert accessor.get("name") == "Ollie"

    def test_get_converts(self, accessor):
        assert accessor.get("cranberries", U64) == 314159265358979
        assert accessor.get("cranberries", int) == 314159265358979
        assert accessor.get("is-wonderful", bool) is True
        assert accessor.get("ratio", float) == 0.25

    def test_get_with_arbitrary_types(self, accessor):
        assert accessor.get("ratio", Decimal) == Decimal("0.25")
        assert accessor.get("name", Path) == Path("Ollie")
        assert accessor.get("color", Color) is Color.BLUE

    def test_unknown_flag(self, accessor):
        with pytest.raises(NoSuchFlagError) as exc_info:
            accessor.get("missing", int)

        assert exc_info.value.name == "missing"
        assert str(exc_info.value) == "No such flag exists with name missing"

    def test_get_string_unknown_flag(self, accessor):
        with pytest.raises(NoSuchFlagError):
            accessor.get_string("missing")

    def test_conversion_failure_names_flag_and_type(self, accessor):
        with pytest.raises(FailedToParseFlagValueError) as exc_info:
            accessor.get("age", U8)

        assert exc_info.value == FailedToParseFlagValueError("age", "u8")
        assert exc_info.value.type_name == "u8"
        assert str(exc_info.value) == "Could not parse age as type of u8"
        assert isinstance(exc_info.value.original_error, ValueError)

    def test_arbitrary_type_failures_are_wrapped(self, accessor):
        with pytest.raises(FailedToParseFlagValueError) as exc_info:
            accessor.get("name", Decimal)
        assert exc_info.value.type_name == "Decimal"

        with pytest.raises(FailedToParseFlagValueError) as exc_info:
            accessor.get("name", Color)
        assert exc_info.value.type_name == "Color"

    def test_failed_get_leaves_values_untouched(self, accessor):
        before = accessor.values

        with pytest.raises(FailedToParseFlagValueError):
            accessor.get("age", int)

        assert accessor.values == before

    def test_empty_accessor(self):
        with pytest.raises(NoSuchFlagError):
            TypedAccessor().get("anything")
