#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Map raw command-line tokens onto flag names.

The tokenizer is deliberately small: it knows the flag prefix and asks the
registry whether a flag takes a value, nothing more. Deciding what a missing
value means is left to :mod:`cmdflags.resolver`.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from cmdflags.constants import DEFAULT_ARG_PREFIX
from cmdflags.logging_utils import sanitize_for_log
from cmdflags.registry import FlagRegistry

logger = logging.getLogger(__name__)

TokenizedArgs = dict[str, Optional[str]]


class ArgumentTokenizer:
    """Scan a token list for flag markers and their candidate values.

    Parameters
    ----------
    prefix : str, default "--"
        Prefix identifying a flag marker

    Examples
    --------
    >>> from cmdflags.flag import FlagDefinition, FlagKind
    >>> registry = FlagRegistry()
    >>> registry.register(FlagDefinition("count", "", True, FlagKind.INTEGER))
    >>> ArgumentTokenizer().tokenize(["--count", "5", "--verbose"], registry)
    {'count': '5', 'verbose': None}

    """

    def __init__(self, prefix: str = DEFAULT_ARG_PREFIX) -> None:
        self.prefix = prefix

    def is_flag_marker(self, token: str) -> bool:
        """Return True when ``token`` looks like ``--name``."""
        return token.startswith(self.prefix)

    def strip_prefix(self, token: str) -> str:
        return token[len(self.prefix) :] if self.is_flag_marker(token) else token

    def tokenize(self, tokens: Sequence[str], registry: FlagRegistry) -> TokenizedArgs:
        """Produce a mapping from bare flag name to its value token, if any.

        For every marker the following token becomes its value when it exists
        and either the flag is registered with a non-boolean kind, or the token
        is not itself a marker. A boolean flag followed by another marker is
        therefore left without a value, while ``--count --x`` stores ``--x``
        as the value of ``count``.

        Markers that match no registered flag are kept in the mapping but have
        no effect downstream. When a name occurs more than once, the last
        occurrence wins.

        Parameters
        ----------
        tokens : Sequence[str]
            Raw argument vector, without the program name
        registry : FlagRegistry
            Registered flags, consulted for their kinds

        Returns
        -------
        dict
            Bare flag name mapped to its value token, or None

        """
        given: TokenizedArgs = {}

        for index, token in enumerate(tokens):
            if not self.is_flag_marker(token):
                continue

            name = self.strip_prefix(token)
            definition = registry.find(name)
            requires_value = definition is not None and not definition.is_boolean

            value: Optional[str] = None
            if index + 1 < len(tokens):
                candidate = tokens[index + 1]
                if requires_value or not self.is_flag_marker(candidate):
                    value = candidate

            if name in given:
                logger.debug("Flag %s given more than once, keeping the last occurrence", sanitize_for_log(name))
            given[name] = value

        logger.debug("Tokenized %d argument(s) into %d flag marker(s)", len(tokens), len(given))
        return given
