"""topic-template configuration.

This module provides the public API for configuration management, including
loading, validation, and typed access to configuration values.

Example:
    >>> from topic_template.config import Config
    >>> config = Config.from_dict({})
    >>> config.converter.default_category
    'general'
"""

from topic_template.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
)

from ._defaults import DEFAULT_CONFIG
from ._discovery import (
    PROJECT_CONFIG_FILENAME,
    discover_sources,
    find_project_config,
    get_user_config_path,
)
from ._load import safe_load_config
from ._loader import (
    copy_value,
    deep_merge,
    parse_env_vars,
    parse_string_value,
    read_toml_file,
    set_nested_key,
)
from ._models import (
    Config,
    ConfigSource,
    ConfigSourceName,
    ConverterConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
    OutputConfig,
)
from ._validation import ValidationIssue, raise_if_validation_errors, validate_config

__all__ = [
    "DEFAULT_CONFIG",
    "PROJECT_CONFIG_FILENAME",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "ConfigSource",
    "ConfigSourceName",
    "ConfigValidationError",
    "ConverterConfig",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "OutputConfig",
    "ValidationIssue",
    "copy_value",
    "deep_merge",
    "discover_sources",
    "find_project_config",
    "get_user_config_path",
    "parse_env_vars",
    "parse_string_value",
    "raise_if_validation_errors",
    "read_toml_file",
    "safe_load_config",
    "set_nested_key",
]
