#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the cmdflags library.

Every failure the library reports is a subclass of :class:`ProgramError`, so
callers can handle registration, parsing and retrieval problems with a single
``except`` clause and decide for themselves whether to exit, print or retry.

Exception Hierarchy
-------------------
- ProgramError (base exception)

  - FlagAlreadyExistsError (duplicate or reserved flag name)
  - InvalidFlagNameError (empty flag name)
  - RequiredArgNotGivenError (required flag or flag value missing)
  - NoSuchFlagError (retrieval of an unknown flag)
  - FailedToParseFlagValueError (stored value cannot convert)
  - HelpRequested (the help flag was given)
  - ConfigError (configuration file problems)

"""

from __future__ import annotations

from pathlib import Path


class ProgramError(Exception):
    """Base exception class for all cmdflags-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class FlagAlreadyExistsError(ProgramError):
    """Exception raised when a flag is registered under a name already in use.

    Flag names must be unique, otherwise there would be no way to tell which
    flag a ``--name`` token refers to.

    Parameters
    ----------
    name : str
        The conflicting flag name

    """

    def __init__(self, name: str):
        """Initialize the error with the conflicting flag name."""
        super().__init__(f"Flag already exists with name {name}")
        self.name = name


class InvalidFlagNameError(ProgramError):
    """Exception raised when a flag name is empty."""

    def __init__(self, name: str):
        """Initialize the error with the rejected flag name."""
        super().__init__(f"Invalid flag name {name!r}")
        self.name = name


class RequiredArgNotGivenError(ProgramError):
    """Exception raised when a required flag, or a flag's value, is missing.

    Parameters
    ----------
    name : str
        Name of the flag that was not satisfied

    """

    def __init__(self, name: str):
        """Initialize the error with the unsatisfied flag name."""
        super().__init__(f"Required args was not given with name {name}")
        self.name = name


class NoSuchFlagError(ProgramError):
    """Exception raised when retrieving a flag that has no resolved value."""

    def __init__(self, name: str):
        """Initialize the error with the unknown flag name."""
        super().__init__(f"No such flag exists with name {name}")
        self.name = name


class FailedToParseFlagValueError(ProgramError):
    """Exception raised when a stored flag value cannot convert to the requested type.

    Parameters
    ----------
    name : str
        Name of the flag being retrieved
    type_name : str
        Name of the requested target type (e.g. ``"u8"``)
    original_error : Exception, optional
        The conversion error raised by the target type, if any

    """

    def __init__(self, name: str, type_name: str, original_error: Exception | None = None):
        """Initialize the error with flag and target type details."""
        super().__init__(f"Could not parse {name} as type of {type_name}", original_error=original_error)
        self.name = name
        self.type_name = type_name


class HelpRequested(ProgramError):
    """Signal raised from parsing when the help flag was present.

    This is not a failure of the input; callers are expected to display
    :attr:`help_text` and stop without retrieving any values.

    Parameters
    ----------
    help_text : str
        The rendered help text for the program

    """

    def __init__(self, help_text: str = ""):
        """Initialize the signal with the rendered help text."""
        super().__init__("Help flag was given")
        self.help_text = help_text


class ConfigError(ProgramError):
    """Exception raised when a configuration file or mapping cannot be used."""

    def __init__(self, message: str, path: Path | str | None = None, original_error: Exception | None = None):
        """Initialize the error with an optional offending path."""
        super().__init__(message, original_error=original_error)
        self.path = Path(path) if path is not None else None
