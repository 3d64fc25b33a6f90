#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Ordered registry of flag definitions and their declared defaults."""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from cmdflags.constants import DEFAULT_HELP_FLAG
from cmdflags.exceptions import FlagAlreadyExistsError, InvalidFlagNameError
from cmdflags.flag import FlagDefinition, FlagValue

logger = logging.getLogger(__name__)


class FlagRegistry:
    """Holds registered flags in registration order.

    Registries are small, so lookups are plain linear scans. Every check runs
    before anything is appended, which keeps a failed registration from
    leaving the registry half-updated.

    Parameters
    ----------
    reserved_names : tuple of str, optional
        Names that may never be registered, defaults to the help flag

    """

    def __init__(self, reserved_names: tuple[str, ...] = (DEFAULT_HELP_FLAG,)) -> None:
        self.reserved_names = reserved_names
        self._flags: list[FlagDefinition] = []
        self._defaults: dict[str, FlagValue] = {}

    def __len__(self) -> int:
        return len(self._flags)

    def __iter__(self) -> Iterator[FlagDefinition]:
        return iter(self._flags)

    def __contains__(self, name: object) -> bool:
        return self.find(name) is not None if isinstance(name, str) else False

    @property
    def flags(self) -> list[FlagDefinition]:
        """Registered flags in registration order (a copy)."""
        return list(self._flags)

    @property
    def defaults(self) -> dict[str, FlagValue]:
        """Default values of the optional flags, keyed by name (a copy)."""
        return dict(self._defaults)

    def find(self, name: str) -> Optional[FlagDefinition]:
        """Return the flag registered under ``name``, or None."""
        for definition in self._flags:
            if definition.name == name:
                return definition
        return None

    def default_for(self, name: str) -> Optional[FlagValue]:
        """Return the default value registered for ``name``, or None."""
        return self._defaults.get(name)

    def register(self, definition: FlagDefinition) -> None:
        """Register a flag that has no default value.

        Raises
        ------
        InvalidFlagNameError
            If the name is empty
        FlagAlreadyExistsError
            If the name is already registered or reserved

        """
        self._check_name(definition.name)
        self._flags.append(definition)
        logger.debug("Registered flag %s (%s, required=%s)", definition.name, definition.kind.value, definition.required)

    def register_with_default(self, definition: FlagDefinition, default: str) -> None:
        """Register an optional flag together with its default string.

        Parameters
        ----------
        definition : FlagDefinition
            The flag to register, must not be required
        default : str
            Canonical string form of the default value

        Raises
        ------
        ValueError
            If ``definition`` is marked required
        InvalidFlagNameError
            If the name is empty
        FlagAlreadyExistsError
            If the name is already registered or reserved

        """
        if definition.required:
            raise ValueError(f"Flag {definition.name} is required and cannot carry a default")

        self._check_name(definition.name)
        self._flags.append(definition)
        self._defaults[definition.name] = FlagValue(name=definition.name, str_value=default)
        logger.debug("Registered flag %s (%s, default=%r)", definition.name, definition.kind.value, default)

    def _check_name(self, name: str) -> None:
        if not name:
            raise InvalidFlagNameError(name)

        if name in self.reserved_names or self.find(name) is not None:
            raise FlagAlreadyExistsError(name)
