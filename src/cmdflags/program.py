#  Copyright (c) 2025 Tom Villani, Ph.D.
"""The :class:`Program` builder: register flags, parse, then retrieve values.

Example
-------
>>> from cmdflags import Program
>>> from cmdflags.conversion import U16
>>> program = (
...     Program()
...     .with_description("An HTTP server")
...     .with_required_flag("port", "Port number", kind=int)
...     .with_optional_flag("use-tls", False, "TLS PLS?")
...     .parse_from_list(["--port", "8080"])
... )
>>> program.get("port", U16)
8080
>>> program.get("use-tls", bool)
False

"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Sequence

from cmdflags.accessor import TypedAccessor
from cmdflags.config import ParserOptions, load_config_file, normalize_config_values
from cmdflags.constants import DEFAULT_APP_NAME
from cmdflags.conversion import ValueType
from cmdflags.exceptions import HelpRequested
from cmdflags.flag import FlagDefinition, FlagKind, FlagValue, to_canonical_string
from cmdflags.help import generate_help_text
from cmdflags.logging_utils import sanitize_for_log
from cmdflags.registry import FlagRegistry
from cmdflags.resolver import ValueResolver
from cmdflags.tokenizer import ArgumentTokenizer

logger = logging.getLogger(__name__)


class Program:
    """Declarative description of a command line and the values parsed from it.

    ``with_*`` methods mutate the program and return it so calls can be
    chained. Each of them validates before changing anything: a call that
    raises leaves the program exactly as it was. Parsing is all-or-nothing
    in the same way, so values from an earlier successful parse survive a
    failed one.

    A Program is not thread-safe; keep it on one thread from registration
    through retrieval.

    Parameters
    ----------
    description : str, default ""
        Free-text description shown at the top of the help text
    options : ParserOptions, optional
        Flag syntax options, defaults to ``ParserOptions()``

    """

    def __init__(self, description: str = "", options: Optional[ParserOptions] = None) -> None:
        self.description = description
        self.options = options or ParserOptions()
        self._registry = FlagRegistry(reserved_names=self.options.reserved_names)
        self._tokenizer = ArgumentTokenizer(prefix=self.options.prefix)
        self._resolver = ValueResolver()
        self._accessor = TypedAccessor()
        self._config: dict[str, str] = {}
        self._parsed = False

    def __repr__(self) -> str:
        return f"Program(description={self.description!r}, flags={[f.name for f in self._registry]!r})"

    @property
    def flags(self) -> list[FlagDefinition]:
        """Registered flags in registration order."""
        return self._registry.flags

    @property
    def defaults(self) -> dict[str, FlagValue]:
        """Default values of the optional flags, keyed by flag name."""
        return self._registry.defaults

    @property
    def values(self) -> tuple[FlagValue, ...]:
        """Resolved values of the last successful parse (empty before any)."""
        return self._accessor.values

    @property
    def config_values(self) -> dict[str, str]:
        return dict(self._config)

    @property
    def is_parsed(self) -> bool:
        return self._parsed

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def with_description(self, description: str) -> Program:
        self.description = description
        return self

    def with_required_flag(
        self,
        name: str,
        description: str = "",
        kind: FlagKind | type | str = FlagKind.TEXT,
    ) -> Program:
        """Register a flag that must be given on the command line.

        Parameters
        ----------
        name : str
            Flag name without the prefix
        description : str, default ""
            Description shown in help output
        kind : FlagKind, type or str, default FlagKind.TEXT
            Value kind; ``bool`` flags may be given without a value

        Returns
        -------
        Program
            This program, for chaining

        Raises
        ------
        FlagAlreadyExistsError
            If ``name`` is already registered or reserved
        InvalidFlagNameError
            If ``name`` is empty

        """
        definition = FlagDefinition(name=name, description=description, required=True, kind=FlagKind.coerce(kind))
        self._registry.register(definition)
        return self

    def with_optional_flag(
        self,
        name: str,
        default: Any,
        description: str = "",
        kind: FlagKind | type | str | None = None,
    ) -> Program:
        """Register a flag that falls back to ``default`` when absent.

        The default is converted to its string form now; later changes to the
        object passed in do not affect it.

        Parameters
        ----------
        name : str
            Flag name without the prefix
        default : Any
            Default value, stored via its canonical string form
        description : str, default ""
            Description shown in help output
        kind : FlagKind, type or str, optional
            Value kind, inferred from ``default`` when omitted

        Returns
        -------
        Program
            This program, for chaining

        Raises
        ------
        FlagAlreadyExistsError
            If ``name`` is already registered or reserved
        InvalidFlagNameError
            If ``name`` is empty

        """
        resolved_kind = FlagKind.from_value(default) if kind is None else FlagKind.coerce(kind)
        definition = FlagDefinition(name=name, description=description, required=False, kind=resolved_kind)
        self._registry.register_with_default(definition, to_canonical_string(default))
        return self

    def with_config(self, config: Mapping[str, Any], source: Path | str | None = None) -> Program:
        """Layer configured values between the command line and the defaults.

        Values given on the command line still win; configured values win
        over registered defaults and also satisfy required flags. Repeated
        calls merge, with later values replacing earlier ones.

        Raises
        ------
        ConfigError
            If a configured value is not a scalar

        """
        self._config.update(normalize_config_values(config, source=source))
        return self

    def with_config_file(self, config_path: Path | str, app_name: str = DEFAULT_APP_NAME) -> Program:
        """Load a configuration file and layer its values, see :meth:`with_config`."""
        return self.with_config(load_config_file(config_path, app_name=app_name), source=config_path)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, argv: Optional[Sequence[str]] = None) -> Program:
        """Parse ``argv``, or the process arguments when omitted.

        See :meth:`parse_from_list` for the failure modes.
        """
        return self.parse_from_list(sys.argv[1:] if argv is None else argv)

    def parse_from_list(self, tokens: Sequence[str]) -> Program:
        """Parse a list of raw argument tokens.

        Parameters
        ----------
        tokens : Sequence[str]
            Argument vector without the program name

        Returns
        -------
        Program
            This program, ready for retrieval

        Raises
        ------
        HelpRequested
            If the help flag was given; checked before any other failure
        RequiredArgNotGivenError
            If a required flag is missing or a value-bearing flag has no value

        """
        tokenized = self._tokenizer.tokenize(tokens, self._registry)

        if self.options.help_enabled and self.options.help_flag in tokenized:
            logger.debug("Help flag given, skipping resolution")
            raise HelpRequested(self.help_text())

        for name in tokenized:
            if name not in self._registry:
                logger.debug("Ignoring unrecognized flag %s", sanitize_for_log(name))
        for name in self._config:
            if name not in self._registry:
                logger.warning("Configuration value for unknown flag %s is ignored", sanitize_for_log(name))

        resolved = self._resolver.resolve(self._registry.flags, tokenized, self._registry.defaults, self._config)

        self._accessor = TypedAccessor(resolved)
        self._parsed = True
        logger.debug("Parsed %d flag(s)", len(resolved))
        return self

    # ------------------------------------------------------------------
    # Retrieval
    # ------------------------------------------------------------------

    def get(self, name: str, target: ValueType | type | Callable[[str], Any] = str) -> Any:
        """Return the parsed value of ``name`` converted to ``target``.

        Raises
        ------
        NoSuchFlagError
            If the flag was never registered or no parse has succeeded yet
        FailedToParseFlagValueError
            If the stored string cannot convert to ``target``

        """
        return self._accessor.get(name, target)

    def get_string(self, name: str) -> str:
        """Return the parsed value of ``name`` as stored, without conversion."""
        return self._accessor.get_string(name)

    def help_text(self) -> str:
        return generate_help_text(self.description, self.flags, self.defaults, prefix=self.options.prefix)
