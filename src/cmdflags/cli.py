#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Process-level helpers for scripts built on :class:`~cmdflags.program.Program`.

The core never prints or exits. :func:`parse_or_exit` is the thin layer that
does, for scripts that just want the conventional behaviour::

    program = parse_or_exit(
        Program("An HTTP server")
        .with_required_flag("port", "Port number", kind=int)
    )
    port = program.get("port", int)

"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence, TextIO

from cmdflags.constants import EXIT_CONFIG_ERROR, EXIT_ERROR, EXIT_SUCCESS, EXIT_VALIDATION_ERROR
from cmdflags.exceptions import ConfigError, HelpRequested, ProgramError
from cmdflags.logging_utils import configure_logging
from cmdflags.program import Program

logger = logging.getLogger(__name__)


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate process exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, HelpRequested):
        return EXIT_SUCCESS

    if isinstance(exception, ConfigError):
        return EXIT_CONFIG_ERROR

    if isinstance(exception, ProgramError):
        return EXIT_VALIDATION_ERROR

    return EXIT_ERROR


def parse_or_exit(
    program: Program,
    argv: Optional[Sequence[str]] = None,
    *,
    stdout: Optional[TextIO] = None,
    log_level: int | str | None = None,
) -> Program:
    """Parse ``argv`` and exit the process on help or failure.

    Parameters
    ----------
    program : Program
        The program to parse
    argv : Sequence[str], optional
        Argument vector without the program name, defaults to ``sys.argv[1:]``
    stdout : TextIO, optional
        Stream that receives the help text, defaults to ``sys.stdout``
    log_level : int or str, optional
        When given, configure root logging at this level first

    Returns
    -------
    Program
        The parsed program

    Raises
    ------
    SystemExit
        With code 0 after printing help, or a non-zero code on a parse error

    """
    if log_level is not None:
        configure_logging(log_level)

    try:
        return program.parse(argv)
    except HelpRequested as e:
        (stdout or sys.stdout).write(e.help_text)
        sys.exit(get_exit_code_for_exception(e))
    except ProgramError as e:
        logger.error(e.message)
        logger.info("Run with %s%s for usage", program.options.prefix, program.options.help_flag)
        sys.exit(get_exit_code_for_exception(e))
