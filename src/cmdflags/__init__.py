"""cmdflags - declarative command-line flag parsing.

Construct a :class:`Program` by registering flags with
:meth:`Program.with_required_flag` and :meth:`Program.with_optional_flag`,
parse the command line, then read values back with :meth:`Program.get` or
:meth:`Program.get_string`.

Flag Syntax
-----------
- ``--name value`` gives a flag its value
- ``--name`` on its own toggles a boolean flag on
- ``--help`` is reserved and raises :class:`HelpRequested`

Examples
--------
Building a config object from the command line:

    >>> from dataclasses import dataclass
    >>> from cmdflags import Program
    >>> from cmdflags.conversion import U16
    >>>
    >>> @dataclass
    ... class Config:
    ...     port: int
    ...     use_tls: bool
    >>>
    >>> program = (
    ...     Program()
    ...     .with_description("An HTTP server")
    ...     .with_required_flag("port", "Port number", kind=int)
    ...     .with_optional_flag("use-tls", False, "TLS PLS?")
    ...     .parse_from_list(["--port", "8080"])
    ... )
    >>> Config(port=program.get("port", U16), use_tls=program.get("use-tls", bool))
    Config(port=8080, use_tls=False)

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from cmdflags.accessor import TypedAccessor
from cmdflags.config import ParserOptions, find_config_in_parents, load_config_file
from cmdflags.conversion import ValueType
from cmdflags.exceptions import (
    ConfigError,
    FailedToParseFlagValueError,
    FlagAlreadyExistsError,
    HelpRequested,
    InvalidFlagNameError,
    NoSuchFlagError,
    ProgramError,
    RequiredArgNotGivenError,
)
from cmdflags.flag import FlagDefinition, FlagKind, FlagValue
from cmdflags.help import generate_help_text
from cmdflags.program import Program
from cmdflags.registry import FlagRegistry
from cmdflags.resolver import ValueResolver
from cmdflags.tokenizer import ArgumentTokenizer

__version__ = "0.1.0"

__all__ = [
    "ArgumentTokenizer",
    "ConfigError",
    "FailedToParseFlagValueError",
    "FlagAlreadyExistsError",
    "FlagDefinition",
    "FlagKind",
    "FlagRegistry",
    "FlagValue",
    "HelpRequested",
    "InvalidFlagNameError",
    "NoSuchFlagError",
    "ParserOptions",
    "Program",
    "ProgramError",
    "RequiredArgNotGivenError",
    "TypedAccessor",
    "ValueResolver",
    "ValueType",
    "find_config_in_parents",
    "generate_help_text",
    "load_config_file",
]
