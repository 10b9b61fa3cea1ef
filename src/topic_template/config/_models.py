# pyright: reportExplicitAny=false, reportAny=false
"""Configuration models.

This module defines the Pydantic models for each configuration section and
the Config container that ties them together.
"""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path  # noqa: TC003 - Used at runtime in dataclass field
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from topic_template.config._defaults import DEFAULT_CONFIG
from topic_template.config._loader import deep_merge, read_toml_file
from topic_template.template import DEFAULT_CATEGORY, DocumentFormat, TopicIdentity


class LogLevel(StrEnum):
    """Log level threshold values.

    Values are ordered from most verbose (debug) to least verbose (error).
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class ConfigSourceName(StrEnum):
    """Configuration source names in precedence order.

    Values are ordered from highest precedence (CLI) to lowest (DEFAULT).
    """

    CLI = "cli"
    ENV = "env"
    PROJECT = "project"
    USER = "user"
    DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class ConfigSource:
    """Represents a configuration source.

    Attributes:
        name: The source type identifier.
        path: Path to the config file, or None for non-file sources.
        exists: Whether the source exists (file exists, or values are present).
        values: Configuration values from this source.
    """

    name: ConfigSourceName
    path: Path | None
    exists: bool
    values: dict[str, Any]  # pyright: ignore[reportExplicitAny]


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file (empty logs to stderr).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.WARNING
    format: LogFormat = LogFormat.TEXT
    file: str = ""


class ConverterConfig(BaseModel):
    """Converter configuration section.

    Attributes:
        default_category: Category used when none is given on the command line.
        topic_identity: Policy used to match rows to existing topics.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    default_category: str = Field(default=DEFAULT_CATEGORY, min_length=1)
    topic_identity: TopicIdentity = TopicIdentity.TITLE


class OutputConfig(BaseModel):
    """Output configuration section.

    Attributes:
        format: Serialization format for written templates.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    format: DocumentFormat = DocumentFormat.JSON


class Config(BaseModel):
    """Configuration container with typed access.

    Use the factory methods rather than the constructor so defaults are
    merged and values validated.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    converter: ConverterConfig = ConverterConfig()
    output: OutputConfig = OutputConfig()
    _sources: tuple[ConfigSource, ...] = PrivateAttr(default=())

    @property
    def sources(self) -> list[ConfigSource]:
        """Return the sources that contributed to this configuration."""
        return list(self._sources)

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        *,
        sources: tuple[ConfigSource, ...] = (),
        source: str | None = None,
    ) -> Self:
        """Create configuration from a dictionary.

        Args:
            data: Dictionary of configuration values.
            sources: Sources that contributed to the values.
            source: Label used in validation errors.

        Returns:
            Configuration object from the dictionary.

        Raises:
            ConfigValidationError: If validation fails.
        """
        # Deferred import to avoid circular dependency
        from topic_template.config._validation import (  # noqa: PLC0415
            raise_if_validation_errors,
            validate_config,
        )

        merged = deep_merge(DEFAULT_CONFIG, data)
        raise_if_validation_errors(validate_config(merged), source=source)
        config = cls.model_validate(merged)
        config._sources = sources
        return config

    @classmethod
    def from_file(
        cls,
        path: Path,
        *,
        cli_overrides: dict[str, Any] | None = None,
    ) -> Self:
        """Load configuration from a specific file.

        Discovery is skipped; only CLI overrides are layered on top.

        Args:
            path: Path to the TOML config file.
            cli_overrides: Dict of CLI argument overrides.

        Returns:
            Configuration object from the specified file and overrides.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigLoadError: If the file cannot be parsed.
            ConfigValidationError: If validation fails.
        """
        data = read_toml_file(path)
        sources = [
            ConfigSource(
                name=ConfigSourceName.PROJECT, path=path, exists=True, values=data
            )
        ]
        if cli_overrides:
            data = deep_merge(data, cli_overrides)
            sources.insert(
                0,
                ConfigSource(
                    name=ConfigSourceName.CLI,
                    path=None,
                    exists=True,
                    values=cli_overrides,
                ),
            )
        return cls.from_dict(data, sources=tuple(sources), source=str(path))

    @classmethod
    def load(
        cls,
        *,
        start: Path | None = None,
        include_env: bool = True,
        cli_overrides: dict[str, Any] | None = None,
    ) -> Self:
        """Load merged configuration from all sources.

        Sources are merged in precedence order
        (defaults -> user -> project -> env -> cli).

        Args:
            start: Directory to start the project config search from.
                Defaults to the current working directory.
            include_env: Include environment variables as a source.
            cli_overrides: Dict of CLI argument overrides.

        Returns:
            Merged configuration object.

        Raises:
            ConfigLoadError: If config files cannot be parsed.
            ConfigValidationError: If merged config fails validation.
        """
        from topic_template.config._discovery import discover_sources  # noqa: PLC0415

        sources = discover_sources(
            start=start, include_env=include_env, cli_overrides=cli_overrides
        )

        merged: dict[str, Any] = {}
        loaded: list[ConfigSource] = []
        # Sources are discovered highest-to-lowest, so reverse for merging
        for config_source in reversed(sources):
            if not config_source.exists:
                continue
            merged = deep_merge(merged, config_source.values)
            loaded.append(config_source)

        return cls.from_dict(merged, sources=tuple(reversed(loaded)))
