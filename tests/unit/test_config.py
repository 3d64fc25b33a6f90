"""Tests for parser options and configuration file loading."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import json
from pathlib import Path

import pytest

from cmdflags.config import ParserOptions, find_config_in_parents, load_config_file, normalize_config_values
from cmdflags.exceptions import ConfigError


@pytest.mark.unit
class TestParserOptions:
    """Test option defaults, validation and cloning."""

    def test_defaults(self):
        options = ParserOptions()

        assert options.prefix == "--"
        assert options.help_flag == "help"
        assert options.reserved_names == ("help",)

    def test_disabled_help_reserves_nothing(self):
        assert ParserOptions(help_enabled=False).reserved_names == ()

    @pytest.mark.parametrize("kwargs", [{"prefix": ""}, {"help_flag": ""}])
    def test_empty_values_are_rejected(self, kwargs):
        with pytest.raises(ValueError):
            ParserOptions(**kwargs)

    def test_create_updated(self):
        options = ParserOptions()

        updated = options.create_updated(prefix="/")

        assert updated.prefix == "/"
        assert options.prefix == "--"


@pytest.mark.unit
class TestLoadConfigFile:
    """Test loading each supported format."""

    def test_toml(self, tmp_path: Path):
        path = tmp_path / "flags.toml"
        path.write_text('port = 8080\nhost = "localhost"\n', encoding="utf-8")

        assert load_config_file(path) == {"port": 8080, "host": "localhost"}

    def test_yaml(self, tmp_path: Path):
        path = tmp_path / "flags.yaml"
        path.write_text("port: 8080\nverbose: true\n", encoding="utf-8")

        assert load_config_file(path) == {"port": 8080, "verbose": True}

    def test_empty_yaml(self, tmp_path: Path):
        path = tmp_path / "flags.yml"
        path.write_text("", encoding="utf-8")

        assert load_config_file(path) == {}

    def test_json(self, tmp_path: Path):
        path = tmp_path / "flags.json"
        path.write_text(json.dumps({"port": 8080}), encoding="utf-8")

        assert load_config_file(str(path)) == {"port": 8080}

    def test_pyproject_section(self, tmp_path: Path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n\n[tool.myapp]\nport = 9\n', encoding="utf-8")

        assert load_config_file(path, app_name="myapp") == {"port": 9}
        assert load_config_file(path, app_name="other") == {}

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError) as exc_info:
            load_config_file(tmp_path / "nope.toml")

        assert exc_info.value.path == tmp_path / "nope.toml"

    def test_directory(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config_file(tmp_path)

    def test_unsupported_extension(self, tmp_path: Path):
        path = tmp_path / "flags.ini"
        path.write_text("[x]\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="Unsupported config file format"):
            load_config_file(path)

    @pytest.mark.parametrize(
        "filename,content",
        [
            ("bad.toml", "port = = 1"),
            ("bad.json", "{not json"),
            ("bad.yaml", "port: [1, 2"),
            ("list.json", "[1, 2]"),
            ("list.yaml", "- 1\n- 2\n"),
        ],
    )
    def test_malformed_files(self, tmp_path: Path, filename, content):
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")

        with pytest.raises(ConfigError):
            load_config_file(path)

    @pytest.mark.parametrize("filename", ["latin.toml", "latin.json", "latin.yaml", "pyproject.toml"])
    def test_undecodable_bytes(self, tmp_path: Path, filename):
        path = tmp_path / filename
        path.write_bytes(b'name = "\xff\xfe"\n')

        with pytest.raises(ConfigError) as exc_info:
            load_config_file(path, app_name="myapp")

        assert exc_info.value.path == path

    def test_pyproject_tool_not_a_table(self, tmp_path: Path):
        path = tmp_path / "pyproject.toml"
        path.write_text("tool = 1\n", encoding="utf-8")

        with pytest.raises(ConfigError, match=r"\[tool\].*must be a table"):
            load_config_file(path, app_name="myapp")


@pytest.mark.unit
class TestFindConfigInParents:
    """Test upward config discovery."""

    def test_finds_file_in_parent(self, tmp_path: Path):
        config_path = tmp_path / ".cmdflags.yaml"
        config_path.write_text("port: 1\n", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_in_parents(nested) == config_path.resolve()

    def test_toml_preferred_over_json(self, tmp_path: Path):
        (tmp_path / ".cmdflags.json").write_text("{}", encoding="utf-8")
        (tmp_path / ".cmdflags.toml").write_text("", encoding="utf-8")

        assert find_config_in_parents(tmp_path) == (tmp_path / ".cmdflags.toml").resolve()

    def test_pyproject_with_section(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text("[tool.myapp]\nport = 1\n", encoding="utf-8")

        assert find_config_in_parents(tmp_path, app_name="myapp") == (tmp_path / "pyproject.toml").resolve()

    def test_custom_app_name(self, tmp_path: Path):
        (tmp_path / ".cmdflags.toml").write_text("", encoding="utf-8")
        (tmp_path / ".myapp.json").write_text("{}", encoding="utf-8")

        assert find_config_in_parents(tmp_path, app_name="myapp") == (tmp_path / ".myapp.json").resolve()

    @pytest.mark.parametrize("content", [b"tool = 1\n", b'name = "\xff\xfe"\n', b"[tool.\n"])
    def test_unusable_pyproject_is_skipped(self, tmp_path: Path, content):
        (tmp_path / "pyproject.toml").write_bytes(content)

        assert find_config_in_parents(tmp_path, app_name="zzunusedflagsapp") is None


@pytest.mark.unit
class TestNormalizeConfigValues:
    """Test conversion of configured scalars to stored strings."""

    def test_scalars(self):
        result = normalize_config_values({"verbose": False, "port": 80, "ratio": 0.5, "name": "x"})

        assert result == {"verbose": "false", "port": "80", "ratio": "0.5", "name": "x"}

    @pytest.mark.parametrize("value", [None, [1, 2], {"a": 1}])
    def test_non_scalars_are_rejected(self, value):
        with pytest.raises(ConfigError, match="must be a scalar"):
            normalize_config_values({"key": value}, source="flags.toml")
