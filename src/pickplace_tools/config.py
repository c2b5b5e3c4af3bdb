"""
Configuration file support for pickplace-tools.

Provides hierarchical configuration loading from:
1. Project config: .pickplace-tools.toml or pickplace-tools.toml in project root
2. User config: ~/.config/pickplace-tools/config.toml

Project config overrides user config, which overrides built-in defaults.
"""

import sys
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .exceptions import ConfigurationError
from .export.pnp import PickPlaceConfig

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]

# Config file names to search for in project directories
CONFIG_FILENAMES = [".pickplace-tools.toml", "pickplace-tools.toml"]

# User-level config path
USER_CONFIG_PATH = Path.home() / ".config" / "pickplace-tools" / "config.toml"

# All known config keys for validation
KNOWN_KEYS = {
    "defaults": {"verbose", "quiet"},
    "pnp": {"include_fiducials", "designator_separator"},
}


@dataclass
class DefaultsConfig:
    """General options."""

    verbose: bool = False
    quiet: bool = False


@dataclass
class PnpConfig:
    """Pick-and-place generation options."""

    include_fiducials: bool = True
    designator_separator: str = ":"


@dataclass
class Config:
    """Merged configuration from all sources."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    pnp: PnpConfig = field(default_factory=PnpConfig)

    # Track which file each setting came from
    _sources: dict = field(default_factory=dict, repr=False)

    @classmethod
    def load(cls, start_dir: Path | None = None) -> "Config":
        """
        Load configuration with precedence: project > user > defaults.

        Args:
            start_dir: Directory to start searching from (default: current directory)

        Returns:
            Merged configuration object
        """
        if start_dir is None:
            start_dir = Path.cwd()

        config = cls()
        sources: dict[str, str] = {}

        # Load user config first (lower precedence)
        if USER_CONFIG_PATH.exists():
            user_data = _load_toml_file(USER_CONFIG_PATH)
            if user_data:
                _merge_config(config, user_data, str(USER_CONFIG_PATH), sources)

        # Load project config (higher precedence)
        project_config = _find_project_config(start_dir)
        if project_config:
            project_data = _load_toml_file(project_config)
            if project_data:
                _merge_config(config, project_data, str(project_config), sources)

        config._sources = sources
        return config

    def get_source(self, key: str) -> str:
        """Get the source file for a config key."""
        return self._sources.get(key, "default")

    def pnp_config(self) -> PickPlaceConfig:
        """Build generator options from the [pnp] section."""
        if not self.pnp.designator_separator:
            raise ConfigError(
                "Invalid pnp.designator_separator: must not be empty "
                f"(from {self.get_source('pnp.designator_separator')})"
            )
        return PickPlaceConfig(
            include_fiducials=self.pnp.include_fiducials,
            designator_separator=self.pnp.designator_separator,
        )


class ConfigError(ConfigurationError):
    """Configuration file errors."""

    pass


def _find_project_config(start_dir: Path) -> Path | None:
    """
    Find project config by walking up the directory tree.

    Stops at .git directory or filesystem root.

    Args:
        start_dir: Directory to start searching from

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        # Stop at .git directory (project root)
        if (current / ".git").exists():
            break

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def _load_toml_file(path: Path) -> dict[str, Any] | None:
    """
    Load a TOML file safely.

    Args:
        path: Path to TOML file

    Returns:
        Parsed TOML data or None if no TOML parser is available

    Raises:
        ConfigError: If TOML is invalid or unreadable
    """
    if tomllib is None:
        warnings.warn(
            "tomli package not installed. Config file support requires 'pip install tomli' for Python < 3.11.",
            stacklevel=2,
        )
        return None

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e


def _merge_config(
    config: Config, data: dict[str, Any], source: str, sources: dict[str, str]
) -> None:
    """
    Merge loaded config data into Config object.

    Args:
        config: Config object to update
        data: Raw config data from TOML
        source: Source file path (for tracking)
        sources: Dict to update with source info
    """
    for key in data:
        if key not in KNOWN_KEYS:
            warnings.warn(f"Unknown config key '{key}' in {source}", stacklevel=3)

    for section_name, known in KNOWN_KEYS.items():
        if section_name not in data:
            continue
        section_data = data[section_name]
        _warn_unknown_keys(section_data, known, section_name, source)

        section = getattr(config, section_name)
        for key in sorted(known):
            if key in section_data:
                setattr(section, key, section_data[key])
                sources[f"{section_name}.{key}"] = source


def _warn_unknown_keys(data: dict[str, Any], known: set[str], section: str, source: str) -> None:
    """Warn about unknown keys in a config section."""
    for key in data:
        if key not in known:
            warnings.warn(f"Unknown config key '{section}.{key}' in {source}", stacklevel=4)


def generate_template() -> str:
    """
    Generate a template config file with all options documented.

    Returns:
        Template TOML string
    """
    return """# pickplace-tools configuration file
# Place as .pickplace-tools.toml in project root or ~/.config/pickplace-tools/config.toml for user defaults

[defaults]
# Log every generated device (DEBUG level)
# verbose = false

# Only log errors
# quiet = false

[pnp]
# Export fiducial pads as separate pick-and-place items
# include_fiducials = true

# Separator between designator and index for devices with several fiducials
# designator_separator = ":"
"""


def get_config_paths() -> dict[str, Path | None]:
    """
    Get paths to config files that would be loaded.

    Returns:
        Dict with 'user' and 'project' keys
    """
    project_config = _find_project_config(Path.cwd())

    return {
        "user": USER_CONFIG_PATH if USER_CONFIG_PATH.exists() else None,
        "project": project_config,
    }
