#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Parser options and configuration file loading for cmdflags.

This module holds the :class:`ParserOptions` that tune the flag syntax, and
the loaders that read flag values from JSON, TOML, YAML or ``pyproject.toml``
files so they can be layered between the command line and the registered
defaults.
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

if sys.version_info >= (3, 11):
    import tomllib
    from typing import Self
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
    from typing_extensions import Self

import yaml

from cmdflags.constants import CONFIG_EXTENSIONS, DEFAULT_APP_NAME, DEFAULT_ARG_PREFIX, DEFAULT_HELP_FLAG
from cmdflags.exceptions import ConfigError
from cmdflags.flag import to_canonical_string

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParserOptions:
    """Syntax options for a :class:`~cmdflags.program.Program`.

    Parameters
    ----------
    prefix : str, default "--"
        Prefix that marks a token as a flag
    help_flag : str, default "help"
        Reserved flag name that requests help output
    help_enabled : bool, default True
        Whether the help flag is recognised at all. When disabled the name is
        no longer reserved and may be registered like any other flag.

    """

    prefix: str = field(default=DEFAULT_ARG_PREFIX, metadata={"help": "Prefix marking a flag token"})
    help_flag: str = field(default=DEFAULT_HELP_FLAG, metadata={"help": "Reserved flag that requests help"})
    help_enabled: bool = field(default=True, metadata={"help": "Recognise the help flag"})

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If the prefix or help flag name is empty.

        """
        if not self.prefix:
            raise ValueError("prefix must not be empty")
        if not self.help_flag:
            raise ValueError("help_flag must not be empty")

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @property
    def reserved_names(self) -> tuple[str, ...]:
        return (self.help_flag,) if self.help_enabled else ()


def _load_pyproject_section(pyproject_path: Path, app_name: str) -> Dict[str, Any]:
    """Load the ``[tool.<app_name>]`` table from a pyproject.toml file.

    Returns an empty dict when the table does not exist.
    """
    data = _load_toml_config(pyproject_path)
    tool = data.get("tool", {})
    if not isinstance(tool, dict):
        raise ConfigError(
            f"[tool] in {pyproject_path} must be a table, got {type(tool).__name__}",
            path=pyproject_path,
        )
    config = tool.get(app_name, {})
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.{app_name}] section in {pyproject_path} must be a table, got {type(config).__name__}",
            path=pyproject_path,
        )
    return config


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Invalid TOML in config file {config_path}: {e}", path=config_path, original_error=e) from e


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {config_path}: {e}", path=config_path, original_error=e) from e

    # An empty YAML document loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"YAML config file must contain a mapping at root level, got {type(config).__name__}",
            path=config_path,
        )
    return config


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {config_path}: {e}", path=config_path, original_error=e) from e

    if not isinstance(config, dict):
        raise ConfigError(
            f"JSON config file must contain an object at root level, got {type(config).__name__}",
            path=config_path,
        )
    return config


def load_config_file(config_path: Path | str, app_name: str = DEFAULT_APP_NAME) -> Dict[str, Any]:
    """Load flag values from a JSON, TOML, YAML, or pyproject.toml file.

    Auto-detects format based on file extension and name:

    - ``.json`` files: loaded as JSON
    - ``.toml`` files: loaded as TOML
    - ``.yaml``/``.yml`` files: loaded as YAML
    - ``pyproject.toml``: the ``[tool.<app_name>]`` table

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file
    app_name : str, default "cmdflags"
        Table name looked up in pyproject.toml

    Returns
    -------
    dict
        Flag name mapped to its configured value

    Raises
    ------
    ConfigError
        If the file cannot be read, parsed, or has an unsupported format

    Examples
    --------
    >>> config = load_config_file(".cmdflags.toml")
    >>> print(config.get("port"))
    8080

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file does not exist: {config_path}", path=config_path)

    if not config_path.is_file():
        raise ConfigError(f"Configuration path is not a file: {config_path}", path=config_path)

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    try:
        if filename == "pyproject.toml":
            config = _load_pyproject_section(config_path, app_name)
        elif ext == ".toml":
            config = _load_toml_config(config_path)
        elif ext in (".yaml", ".yml"):
            config = _load_yaml_config(config_path)
        elif ext == ".json":
            config = _load_json_config(config_path)
        else:
            raise ConfigError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", path=config_path)
    except ConfigError:
        raise
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error reading config file {config_path}: {e}", path=config_path, original_error=e) from e

    logger.debug("Loaded %d value(s) from %s", len(config), config_path)
    return config


def find_config_in_parents(start_dir: Optional[Path] = None, app_name: str = DEFAULT_APP_NAME) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from ``start_dir`` to the filesystem root, checking each
    directory for ``.<app_name>.toml``, ``.yaml``, ``.yml`` and ``.json`` in
    that order, then for a ``pyproject.toml`` with a ``[tool.<app_name>]``
    table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory
    app_name : str, default "cmdflags"
        Base name of the configuration files

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        for ext in CONFIG_EXTENSIONS:
            config_path = current / f".{app_name}{ext}"
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path, app_name):
                    return pyproject_path
            except (ConfigError, OSError):
                logger.debug("Skipping unreadable %s", pyproject_path)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def normalize_config_values(config: Mapping[str, Any], source: Path | str | None = None) -> Dict[str, str]:
    """Convert configured values to the canonical strings stored for flags.

    Parameters
    ----------
    config : Mapping[str, Any]
        Flag name mapped to a scalar value
    source : Path or str, optional
        Where the mapping came from, used in error messages

    Returns
    -------
    dict
        Flag name mapped to its canonical string

    Raises
    ------
    ConfigError
        If a value is a table, a list or null

    """
    normalized: Dict[str, str] = {}
    origin = f" in {source}" if source is not None else ""

    for name, value in config.items():
        if value is None or isinstance(value, (dict, list, tuple, set)):
            raise ConfigError(
                f"Configuration value for {name!r}{origin} must be a scalar, got {type(value).__name__}",
                path=source,
            )
        normalized[str(name)] = to_canonical_string(value)

    return normalized
