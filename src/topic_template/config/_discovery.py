"""Configuration source discovery.

Finds the user and project configuration files and packages every source
(including environment variables and CLI overrides) as a ConfigSource.
"""

import os
from pathlib import Path
from typing import Any

from topic_template.config._loader import parse_env_vars, read_toml_file
from topic_template.config._models import ConfigSource, ConfigSourceName

PROJECT_CONFIG_FILENAME = "topic-template.toml"
USER_CONFIG_DIRNAME = "topic-template"


def get_user_config_path() -> Path:
    """Return the user configuration file path.

    Uses $XDG_CONFIG_HOME when set, otherwise ~/.config.
    """
    config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / USER_CONFIG_DIRNAME / "config.toml"


def find_project_config(start: Path | None = None) -> Path | None:
    """Search upward from a directory for a project configuration file.

    Args:
        start: Directory to start from. Defaults to the current directory.

    Returns:
        Path to the nearest topic-template.toml, or None if none exists.
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / PROJECT_CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def _file_source(name: ConfigSourceName, path: Path | None) -> ConfigSource:
    if path is None or not path.is_file():
        return ConfigSource(name=name, path=path, exists=False, values={})
    return ConfigSource(name=name, path=path, exists=True, values=read_toml_file(path))


def discover_sources(
    *,
    start: Path | None = None,
    include_env: bool = True,
    cli_overrides: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
) -> list[ConfigSource]:
    """Discover all configuration sources.

    Args:
        start: Directory to start the project config search from.
        include_env: Include environment variables as a source.
        cli_overrides: Values supplied on the command line.

    Returns:
        Sources ordered from highest to lowest precedence.

    Raises:
        ConfigLoadError: If a config file exists but cannot be parsed.
    """
    sources: list[ConfigSource] = []

    if cli_overrides:
        sources.append(
            ConfigSource(
                name=ConfigSourceName.CLI, path=None, exists=True, values=cli_overrides
            )
        )

    if include_env:
        env_values = parse_env_vars()
        sources.append(
            ConfigSource(
                name=ConfigSourceName.ENV,
                path=None,
                exists=bool(env_values),
                values=env_values,
            )
        )

    sources.append(_file_source(ConfigSourceName.PROJECT, find_project_config(start)))
    sources.append(_file_source(ConfigSourceName.USER, get_user_config_path()))
    return sources
