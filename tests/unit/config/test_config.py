from pathlib import Path

import pytest
from pyfakefs.fake_filesystem import FakeFilesystem

from topic_template.config import (
    Config,
    ConfigSourceName,
    LogFormat,
    LogLevel,
    safe_load_config,
)
from topic_template.exceptions import ConfigLoadError, ConfigValidationError
from topic_template.template import DocumentFormat, TopicIdentity


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("TOPIC_TEMPLATE_STRICT_CONFIG", "TOPIC_TEMPLATE_LOGGING__LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", "/xdg")


class TestConfigFromDict:
    def test_defaults(self) -> None:
        config = Config.from_dict({})

        assert config.logging.level == LogLevel.WARNING
        assert config.logging.format == LogFormat.TEXT
        assert config.logging.file == ""
        assert config.converter.default_category == "general"
        assert config.converter.topic_identity == TopicIdentity.TITLE
        assert config.output.format == DocumentFormat.JSON

    def test_values_override_defaults(self) -> None:
        config = Config.from_dict(
            {"converter": {"topic_identity": "section"}, "output": {"format": "yaml"}}
        )

        assert config.converter.topic_identity == TopicIdentity.SECTION
        assert config.output.format == DocumentFormat.YAML
        assert config.converter.default_category == "general"

    def test_unknown_keys_are_ignored(self) -> None:
        config = Config.from_dict({"unknown": {"x": 1}, "logging": {"extra": True}})

        assert config.logging.level == LogLevel.WARNING

    def test_invalid_value_raises(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            _ = Config.from_dict({"logging": {"level": "loud"}}, source="test.toml")

        assert exc_info.value.key == "logging.level"
        assert exc_info.value.value == "loud"
        assert exc_info.value.source == "test.toml"

    def test_empty_category_raises(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            _ = Config.from_dict({"converter": {"default_category": ""}})

        assert exc_info.value.expected == "at least 1 character(s)"

    def test_config_is_frozen(self) -> None:
        config = Config.from_dict({})

        with pytest.raises(ValueError, match="frozen"):
            config.logging = config.logging  # pyright: ignore[reportAttributeAccessIssue]


class TestConfigLoad:
    def test_merges_sources_by_precedence(
        self, fs: FakeFilesystem, clean_env: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        _ = fs.create_file(
            "/xdg/topic-template/config.toml",
            contents='[converter]\ndefault_category = "user"\n'
            '[output]\nformat = "yaml"\n',
        )
        _ = fs.create_file(
            "/work/topic-template.toml",
            contents='[converter]\ndefault_category = "project"\n',
        )
        fs.create_dir("/work/nested")
        monkeypatch.setenv("TOPIC_TEMPLATE_LOGGING__LEVEL", "info")

        config = Config.load(
            start=Path("/work/nested"),
            cli_overrides={"logging": {"format": "json"}},
        )

        assert config.converter.default_category == "project"
        assert config.output.format == DocumentFormat.YAML
        assert config.logging.level == LogLevel.INFO
        assert config.logging.format == LogFormat.JSON
        assert [s.name for s in config.sources] == [
            ConfigSourceName.CLI,
            ConfigSourceName.ENV,
            ConfigSourceName.PROJECT,
            ConfigSourceName.USER,
        ]

    def test_missing_files_use_defaults(
        self, fs: FakeFilesystem, clean_env: None
    ) -> None:
        fs.create_dir("/empty")

        config = Config.load(start=Path("/empty"), include_env=False)

        assert config.converter.default_category == "general"
        assert config.sources == []

    def test_invalid_toml_raises(self, fs: FakeFilesystem, clean_env: None) -> None:
        _ = fs.create_file("/work/topic-template.toml", contents="[converter\n")

        with pytest.raises(ConfigLoadError):
            _ = Config.load(start=Path("/work"), include_env=False)


class TestConfigFromFile:
    def test_loads_single_file(self, fs: FakeFilesystem) -> None:
        _ = fs.create_file("/c/custom.toml", contents='[logging]\nlevel = "debug"\n')

        config = Config.from_file(Path("/c/custom.toml"))

        assert config.logging.level == LogLevel.DEBUG
        assert config.sources[0].path == Path("/c/custom.toml")


class TestSafeLoadConfig:
    def test_returns_config_without_error(
        self, fs: FakeFilesystem, clean_env: None
    ) -> None:
        fs.create_dir("/work")

        config, error = safe_load_config(start=Path("/work"))

        assert error is None
        assert config.converter.default_category == "general"

    def test_invalid_config_warns_and_returns_defaults(
        self,
        fs: FakeFilesystem,
        clean_env: None,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _ = fs.create_file(
            "/work/topic-template.toml", contents='[output]\nformat = "xml"\n'
        )

        config, error = safe_load_config(start=Path("/work"))

        assert error is not None
        assert config.output.format == DocumentFormat.JSON
        assert "Warning: Failed to load config" in capsys.readouterr().err

    def test_strict_mode_exits(
        self,
        fs: FakeFilesystem,
        clean_env: None,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        _ = fs.create_file("/work/topic-template.toml", contents="[output\n")
        monkeypatch.setenv("TOPIC_TEMPLATE_STRICT_CONFIG", "1")

        with pytest.raises(SystemExit) as exc_info:
            _ = safe_load_config(start=Path("/work"))

        assert exc_info.value.code == 1

    def test_explicit_config_keeps_cli_overrides(
        self, fs: FakeFilesystem, clean_env: None
    ) -> None:
        _ = fs.create_file(
            "/c/custom.toml",
            contents='[logging]\nlevel = "error"\n\n[output]\nformat = "yaml"\n',
        )

        config, error = safe_load_config(
            config_path=Path("/c/custom.toml"),
            cli_overrides={"logging": {"level": "info"}},
        )

        assert error is None
        assert config.logging.level == LogLevel.INFO
        assert config.output.format == DocumentFormat.YAML
        assert [s.name for s in config.sources] == [
            ConfigSourceName.CLI,
            ConfigSourceName.PROJECT,
        ]

    def test_missing_explicit_config_exits(
        self, fs: FakeFilesystem, clean_env: None
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _ = safe_load_config(config_path=Path("/nope.toml"))

        assert exc_info.value.code == 1
