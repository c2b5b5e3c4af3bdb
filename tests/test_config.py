"""Tests for configuration file support."""

import sys
import warnings

import pytest

from pickplace_tools.config import (
    Config,
    ConfigError,
    DefaultsConfig,
    PnpConfig,
    _find_project_config,
    _load_toml_file,
    generate_template,
    get_config_paths,
)
from pickplace_tools.exceptions import ConfigurationError
from pickplace_tools.export.pnp import PickPlaceConfig


@pytest.fixture
def no_user_config(tmp_path, monkeypatch):
    """Point the user config at a file that does not exist."""
    monkeypatch.setattr("pickplace_tools.config.USER_CONFIG_PATH", tmp_path / "no-exist.toml")


class TestConfigDataclasses:
    """Test configuration dataclass defaults."""

    def test_defaults_config_defaults(self):
        config = DefaultsConfig()
        assert config.verbose is False
        assert config.quiet is False

    def test_pnp_config_defaults(self):
        config = PnpConfig()
        assert config.include_fiducials is True
        assert config.designator_separator == ":"

    def test_config_defaults(self):
        config = Config()
        assert isinstance(config.defaults, DefaultsConfig)
        assert isinstance(config.pnp, PnpConfig)


class TestConfigDiscovery:
    """Test config file discovery."""

    def test_find_project_config_in_current_dir(self, tmp_path):
        config_file = tmp_path / ".pickplace-tools.toml"
        config_file.write_text("[pnp]\ninclude_fiducials = false\n")

        assert _find_project_config(tmp_path) == config_file

    def test_find_project_config_alternate_name(self, tmp_path):
        config_file = tmp_path / "pickplace-tools.toml"
        config_file.write_text("[pnp]\n")

        assert _find_project_config(tmp_path) == config_file

    def test_find_project_config_prefers_hidden(self, tmp_path):
        (tmp_path / "pickplace-tools.toml").write_text("[pnp]\n")
        hidden = tmp_path / ".pickplace-tools.toml"
        hidden.write_text("[pnp]\n")

        assert _find_project_config(tmp_path) == hidden

    def test_find_project_config_walks_up(self, tmp_path):
        parent_config = tmp_path / ".pickplace-tools.toml"
        parent_config.write_text("[pnp]\n")

        subdir = tmp_path / "boards" / "main"
        subdir.mkdir(parents=True)

        assert _find_project_config(subdir) == parent_config

    def test_find_project_config_stops_at_git(self, tmp_path):
        """Config above the .git directory is not used."""
        parent = tmp_path / "parent"
        project = parent / "project"
        (project / ".git").mkdir(parents=True)
        (parent / ".pickplace-tools.toml").write_text("[pnp]\n")

        assert _find_project_config(project) is None


class TestLoadToml:
    """Test TOML file loading."""

    def test_load_valid_toml(self, tmp_path):
        config_file = tmp_path / "config.toml"
        config_file.write_text('[pnp]\ndesignator_separator = "-"\n')

        result = _load_toml_file(config_file)
        assert result["pnp"]["designator_separator"] == "-"

    def test_load_invalid_toml(self, tmp_path):
        config_file = tmp_path / "config.toml"
        config_file.write_text("invalid [ toml syntax")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            _load_toml_file(config_file)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read"):
            _load_toml_file(tmp_path / "nonexistent.toml")

    def test_config_error_is_configuration_error(self):
        assert issubclass(ConfigError, ConfigurationError)


class TestConfigLoad:
    """Test Config.load() method."""

    def test_load_defaults_only(self, tmp_path, no_user_config):
        (tmp_path / ".git").mkdir()

        config = Config.load(tmp_path)
        assert config.pnp.include_fiducials is True
        assert config.get_source("pnp.include_fiducials") == "default"

    def test_project_overrides_user(self, tmp_path, monkeypatch):
        (tmp_path / ".git").mkdir()

        user_config = tmp_path / "user-config.toml"
        user_config.write_text(
            '[defaults]\nverbose = true\n\n[pnp]\ndesignator_separator = "/"\n'
        )
        project_config = tmp_path / ".pickplace-tools.toml"
        project_config.write_text('[pnp]\ndesignator_separator = "-"\n')

        monkeypatch.setattr("pickplace_tools.config.USER_CONFIG_PATH", user_config)

        config = Config.load(tmp_path)
        assert config.pnp.designator_separator == "-"
        assert config.defaults.verbose is True
        assert ".pickplace-tools.toml" in config.get_source("pnp.designator_separator")
        assert "user-config.toml" in config.get_source("defaults.verbose")

    def test_pnp_config(self, tmp_path, no_user_config):
        (tmp_path / ".git").mkdir()
        (tmp_path / ".pickplace-tools.toml").write_text(
            '[pnp]\ninclude_fiducials = false\ndesignator_separator = "#"\n'
        )

        pnp = Config.load(tmp_path).pnp_config()
        assert isinstance(pnp, PickPlaceConfig)
        assert pnp.include_fiducials is False
        assert pnp.designator_separator == "#"

    def test_pnp_config_rejects_empty_separator(self):
        config = Config()
        config.pnp.designator_separator = ""

        with pytest.raises(ConfigError, match="designator_separator"):
            config.pnp_config()


class TestConfigWarnings:
    """Test warnings for unknown config keys."""

    def test_warn_unknown_section(self, tmp_path, no_user_config):
        (tmp_path / ".git").mkdir()
        (tmp_path / ".pickplace-tools.toml").write_text('[unknown_section]\nkey = "value"\n')

        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            Config.load(tmp_path)

            assert len(w) == 1
            assert "unknown_section" in str(w[0].message)

    def test_warn_unknown_key_in_section(self, tmp_path, no_user_config):
        (tmp_path / ".git").mkdir()
        (tmp_path / ".pickplace-tools.toml").write_text("[pnp]\nsort = true\n")

        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            Config.load(tmp_path)

            assert len(w) == 1
            assert "pnp.sort" in str(w[0].message)


class TestGenerateTemplate:
    """Test template generation."""

    def test_generate_template_valid_toml(self):
        if sys.version_info >= (3, 11):
            import tomllib
        else:
            import tomli as tomllib

        result = tomllib.loads(generate_template())
        assert isinstance(result, dict)

    def test_generate_template_has_sections(self):
        template = generate_template()
        assert "[defaults]" in template
        assert "[pnp]" in template
        assert "designator_separator" in template


class TestGetConfigPaths:
    """Test get_config_paths function."""

    def test_returns_none_for_missing_files(self, tmp_path, monkeypatch, no_user_config):
        (tmp_path / ".git").mkdir()
        monkeypatch.chdir(tmp_path)

        paths = get_config_paths()
        assert paths["user"] is None
        assert paths["project"] is None

    def test_returns_paths_for_existing_files(self, tmp_path, monkeypatch):
        (tmp_path / ".git").mkdir()
        project_config = tmp_path / ".pickplace-tools.toml"
        project_config.write_text("[pnp]\n")
        user_config = tmp_path / "user.toml"
        user_config.write_text("[defaults]\n")

        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("pickplace_tools.config.USER_CONFIG_PATH", user_config)

        paths = get_config_paths()
        assert paths["user"] == user_config
        assert paths["project"] == project_config
