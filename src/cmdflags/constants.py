#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the cmdflags library.

This module centralizes the literals shared by the tokenizer, resolver,
help renderer and CLI helpers so none of them carry magic strings of their own.
"""

from __future__ import annotations

# =============================================================================
# Flag Syntax
# =============================================================================

# Prefix that marks a token as a flag, e.g. ``--name``
DEFAULT_ARG_PREFIX = "--"

# Reserved flag that requests help output instead of a normal parse
DEFAULT_HELP_FLAG = "help"

# Canonical string forms for boolean values
TRUE_LITERAL = "true"
FALSE_LITERAL = "false"

# =============================================================================
# Help Rendering
# =============================================================================

HELP_REQUIRED_MARKER = "(required)"
HELP_DEFAULT_TEMPLATE = "(default: {value})"
HELP_NO_ARGS = "(no args)"

# =============================================================================
# Configuration Files
# =============================================================================

DEFAULT_APP_NAME = "cmdflags"
CONFIG_EXTENSIONS = (".toml", ".yaml", ".yml", ".json")

# =============================================================================
# Exit Codes
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_CONFIG_ERROR = 4
