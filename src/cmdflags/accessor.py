#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Typed retrieval of resolved flag values."""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from cmdflags.conversion import ValueType, resolve_target
from cmdflags.exceptions import FailedToParseFlagValueError, NoSuchFlagError
from cmdflags.flag import FlagValue

logger = logging.getLogger(__name__)


class TypedAccessor:
    """Convert stored flag strings into caller-requested types on demand.

    The registered :class:`~cmdflags.flag.FlagKind` is not consulted here: a
    caller asking for a type that does not fit the stored string gets a
    conversion failure rather than a kind mismatch. Lookups never modify the
    stored values.

    Parameters
    ----------
    values : Sequence[FlagValue]
        Resolved values from a successful parse

    """

    def __init__(self, values: Sequence[FlagValue] = ()) -> None:
        self._values: tuple[FlagValue, ...] = tuple(values)

    @property
    def values(self) -> tuple[FlagValue, ...]:
        return self._values

    def get_string(self, name: str) -> str:
        """Return the stored string for ``name`` without conversion.

        Raises
        ------
        NoSuchFlagError
            If no value is stored under ``name``

        """
        for value in self._values:
            if value.name == name:
                return value.str_value
        raise NoSuchFlagError(name)

    def get(self, name: str, target: ValueType | type | Callable[[str], Any] = str) -> Any:
        """Return the value of ``name`` converted to ``target``.

        Parameters
        ----------
        name : str
            Flag name
        target : ValueType, type or callable, default str
            Requested type, see :func:`cmdflags.conversion.resolve_target`

        Returns
        -------
        Any
            The converted value

        Raises
        ------
        NoSuchFlagError
            If no value is stored under ``name``
        FailedToParseFlagValueError
            If the stored string cannot be converted

        """
        raw = self.get_string(name)
        value_type = resolve_target(target)

        try:
            return value_type.parse(raw)
        except (ValueError, TypeError, ArithmeticError) as e:
            logger.debug("Could not convert flag %s to %s: %s", name, value_type.name, e)
            raise FailedToParseFlagValueError(name, value_type.name, original_error=e) from e
