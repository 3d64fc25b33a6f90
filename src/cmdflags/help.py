#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Plain-text help rendering for a program's registered flags.

The layout is one line per flag, with the name and the required/default
column padded to the widest entry::

    A bunny observing tool!

    	--rabbit-name  (required)     : Name of the rabbit to observe
    	--closing-pats (default: true): Pat the rabbit when finished?

"""

from __future__ import annotations

from typing import Mapping, Sequence

from cmdflags.constants import DEFAULT_ARG_PREFIX, HELP_DEFAULT_TEMPLATE, HELP_NO_ARGS, HELP_REQUIRED_MARKER
from cmdflags.flag import FlagDefinition, FlagValue


def describe_requirement(definition: FlagDefinition, defaults: Mapping[str, FlagValue]) -> str:
    """Return ``(required)`` or ``(default: X)`` for a flag."""
    if definition.required:
        return HELP_REQUIRED_MARKER
    default = defaults.get(definition.name)
    return HELP_DEFAULT_TEMPLATE.format(value=default.str_value if default is not None else "")


def generate_help_text(
    description: str,
    flags: Sequence[FlagDefinition],
    defaults: Mapping[str, FlagValue],
    prefix: str = DEFAULT_ARG_PREFIX,
) -> str:
    """Render the help text for a program.

    Parameters
    ----------
    description : str
        Free-text program description
    flags : Sequence[FlagDefinition]
        Registered flags in registration order
    defaults : Mapping[str, FlagValue]
        Default values of the optional flags
    prefix : str, default "--"
        Flag prefix shown before each name

    Returns
    -------
    str
        Multi-line help text, starting and ending with a newline

    """
    rows = [(flag.name, describe_requirement(flag, defaults), flag.description) for flag in flags]

    if rows:
        name_width = max(len(name) for name, _, _ in rows)
        requirement_width = max(len(requirement) for _, requirement, _ in rows)
        body = "\n".join(
            f"\t{prefix}{name.ljust(name_width)} {requirement.ljust(requirement_width)}: {flag_description}"
            for name, requirement, flag_description in rows
        )
    else:
        body = HELP_NO_ARGS

    return f"\n{description}\n\n{body}\n"
