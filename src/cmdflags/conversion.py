#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Canonical string parsers for typed flag retrieval.

Each retrieval target is a :class:`ValueType`: a display name used in error
messages plus a strict parse function. The plain Python types ``bool``,
``int``, ``float`` and ``str`` map onto the built-in targets below, and the
width-checked integer targets (``U8`` through ``I64``) reject values outside
their range. Any other type is treated as its own parser.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable

from cmdflags.constants import FALSE_LITERAL, TRUE_LITERAL

_SIGNED_PATTERN = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class ValueType:
    """A named retrieval target.

    Parameters
    ----------
    name : str
        Type name reported when conversion fails
    parse : Callable[[str], Any]
        Converts the stored string, raising ``ValueError`` or ``TypeError``
        when it cannot

    """

    name: str
    parse: Callable[[str], Any]

    def __call__(self, text: str) -> Any:
        return self.parse(text)


def parse_bool(text: str) -> bool:
    """Parse exactly ``"true"`` or ``"false"``."""
    if text == TRUE_LITERAL:
        return True
    if text == FALSE_LITERAL:
        return False
    raise ValueError(f"invalid boolean literal: {text!r}")


def parse_float(text: str) -> float:
    """Parse a float, rejecting padding and digit separators that ``float()`` tolerates."""
    if text != text.strip() or "_" in text:
        raise ValueError(f"invalid float literal: {text!r}")
    return float(text)


def parse_int(text: str) -> int:
    if not _SIGNED_PATTERN.fullmatch(text):
        raise ValueError(f"invalid integer literal: {text!r}")
    return int(text)


def integer_type(name: str, bits: int, signed: bool) -> ValueType:
    """Build a width-checked integer target.

    Parameters
    ----------
    name : str
        Display name, e.g. ``"u8"``
    bits : int
        Width in bits
    signed : bool
        Whether negative values are allowed

    Returns
    -------
    ValueType
        Target that rejects values outside the representable range

    """
    if signed:
        minimum, maximum = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        pattern = _SIGNED_PATTERN
    else:
        minimum, maximum = 0, (1 << bits) - 1
        pattern = _UNSIGNED_PATTERN

    def parse(text: str) -> int:
        if not pattern.fullmatch(text):
            raise ValueError(f"invalid {name} literal: {text!r}")
        value = int(text)
        if not minimum <= value <= maximum:
            raise ValueError(f"{value} out of range for {name}")
        return value

    return ValueType(name, parse)


BOOL = ValueType("bool", parse_bool)
INT = ValueType("int", parse_int)
FLOAT = ValueType("float", parse_float)
STR = ValueType("str", str)

U8 = integer_type("u8", 8, signed=False)
U16 = integer_type("u16", 16, signed=False)
U32 = integer_type("u32", 32, signed=False)
U64 = integer_type("u64", 64, signed=False)
I8 = integer_type("i8", 8, signed=True)
I16 = integer_type("i16", 16, signed=True)
I32 = integer_type("i32", 32, signed=True)
I64 = integer_type("i64", 64, signed=True)

_BUILTIN_TARGETS: dict[type, ValueType] = {
    bool: BOOL,
    int: INT,
    float: FLOAT,
    str: STR,
}


def resolve_target(target: ValueType | type | Callable[[str], Any]) -> ValueType:
    """Return the :class:`ValueType` for a retrieval target.

    Parameters
    ----------
    target : ValueType, type or callable
        A ``ValueType``, one of the built-in Python types, or any callable
        that accepts a string (``pathlib.Path``, ``decimal.Decimal``, an Enum)

    Returns
    -------
    ValueType
        The parser to use

    Raises
    ------
    TypeError
        If ``target`` is not callable

    """
    if isinstance(target, ValueType):
        return target
    if isinstance(target, type) and target in _BUILTIN_TARGETS:
        return _BUILTIN_TARGETS[target]
    if not callable(target):
        raise TypeError(f"Cannot convert flag values to {target!r}")
    return ValueType(getattr(target, "__name__", repr(target)), target)
