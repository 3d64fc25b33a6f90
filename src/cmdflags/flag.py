#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Flag definitions and stored flag values.

A :class:`FlagDefinition` describes a registered flag; a :class:`FlagValue`
holds the string form of a value, either a registered default or the result
of parsing. Both are frozen once created.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from cmdflags.constants import FALSE_LITERAL, TRUE_LITERAL


class FlagKind(str, Enum):
    """Semantic value kind of a flag.

    The kind only decides whether a flag may appear without a value
    (``BOOLEAN``) and how it is described; conversion happens at retrieval time
    against whatever type the caller asks for.
    """

    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"

    @classmethod
    def from_value(cls, value: Any) -> FlagKind:
        """Infer the kind of a default value."""
        # bool is a subclass of int, so it must be checked first
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, int):
            return cls.INTEGER
        if isinstance(value, float):
            return cls.FLOAT
        return cls.TEXT

    @classmethod
    def coerce(cls, kind: FlagKind | type | str) -> FlagKind:
        """Normalize a kind given as a :class:`FlagKind`, a Python type, or a kind name.

        Parameters
        ----------
        kind : FlagKind, type or str
            ``FlagKind.INTEGER``, ``int`` and ``"integer"`` all name the same kind.
            Types other than ``bool``, ``int`` and ``float`` are treated as text.

        Returns
        -------
        FlagKind
            The normalized kind

        Raises
        ------
        ValueError
            If a string does not name a known kind

        """
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, str):
            return cls(kind.lower())
        if isinstance(kind, type):
            if issubclass(kind, bool):
                return cls.BOOLEAN
            if issubclass(kind, int):
                return cls.INTEGER
            if issubclass(kind, float):
                return cls.FLOAT
            return cls.TEXT
        raise ValueError(f"Cannot interpret {kind!r} as a flag kind")


@dataclass(frozen=True)
class FlagDefinition:
    """A registered flag.

    Parameters
    ----------
    name : str
        Unique flag name, without the ``--`` prefix
    description : str
        Human-readable description shown in help output
    required : bool
        Whether parsing fails when the flag is absent
    kind : FlagKind
        Semantic value kind

    """

    name: str
    description: str
    required: bool
    kind: FlagKind = FlagKind.TEXT

    @property
    def is_boolean(self) -> bool:
        return self.kind is FlagKind.BOOLEAN


@dataclass(frozen=True)
class FlagValue:
    """String form of a flag value, before any type conversion."""

    name: str
    str_value: str


def to_canonical_string(value: Any) -> str:
    """Convert a Python value to the string form stored for a flag.

    Booleans use the lowercase literals understood by the boolean parser;
    enum members use their value; everything else uses ``str()``.
    """
    if isinstance(value, bool):
        return TRUE_LITERAL if value else FALSE_LITERAL
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
