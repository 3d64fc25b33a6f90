#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Resolve tokenized arguments into one stored string per registered flag."""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from cmdflags.constants import TRUE_LITERAL
from cmdflags.exceptions import RequiredArgNotGivenError
from cmdflags.flag import FlagDefinition, FlagValue
from cmdflags.logging_utils import sanitize_for_log

logger = logging.getLogger(__name__)


class ValueResolver:
    """Combine tokenizer output, configuration values and defaults.

    Resolution is all-or-nothing: :meth:`resolve` either returns a complete
    list with exactly one value per flag, or raises on the first flag (in
    registration order) that cannot be satisfied. It never mutates its inputs,
    so the caller decides when to commit the result.
    """

    def resolve(
        self,
        flags: Sequence[FlagDefinition],
        tokenized: Mapping[str, Optional[str]],
        defaults: Mapping[str, FlagValue],
        config_values: Optional[Mapping[str, str]] = None,
    ) -> list[FlagValue]:
        """Resolve every registered flag to its stored string.

        For each flag, in order of precedence:

        1. a value given on the command line is stored as-is;
        2. a boolean flag given without a value stores ``"true"``;
        3. any other flag given without a value fails;
        4. a value from the configuration layer is stored;
        5. a required flag fails;
        6. an optional flag stores its registered default.

        Parameters
        ----------
        flags : Sequence[FlagDefinition]
            Registered flags in registration order
        tokenized : Mapping[str, Optional[str]]
            Output of :meth:`ArgumentTokenizer.tokenize`
        defaults : Mapping[str, FlagValue]
            Default values of the optional flags
        config_values : Mapping[str, str], optional
            Values from the configuration layer, already in string form

        Returns
        -------
        list of FlagValue
            One resolved value per flag, in registration order

        Raises
        ------
        RequiredArgNotGivenError
            If a required flag is missing, or a value-bearing flag has no value

        """
        config_values = config_values or {}
        resolved: list[FlagValue] = []

        for definition in flags:
            name = definition.name

            if name in tokenized:
                given = tokenized[name]
                if given is not None:
                    logger.debug("Flag %s taken from the command line", name)
                    resolved.append(FlagValue(name, given))
                elif definition.is_boolean:
                    logger.debug("Flag %s toggled on", name)
                    resolved.append(FlagValue(name, TRUE_LITERAL))
                else:
                    raise RequiredArgNotGivenError(name)
            elif name in config_values:
                logger.debug("Flag %s taken from configuration: %s", name, sanitize_for_log(config_values[name]))
                resolved.append(FlagValue(name, config_values[name]))
            elif definition.required:
                raise RequiredArgNotGivenError(name)
            else:
                default = defaults.get(name)
                if default is None:
                    # Only reachable when the registry invariant was bypassed
                    raise RequiredArgNotGivenError(name)
                logger.debug("Flag %s falls back to default %s", name, sanitize_for_log(default.str_value))
                resolved.append(FlagValue(name, default.str_value))

        return resolved
