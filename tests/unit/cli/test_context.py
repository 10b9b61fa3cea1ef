from unittest.mock import MagicMock

from topic_template.cli import CLIContext
from topic_template.config import Config


class TestCLIContext:
    def test_get_current_returns_default_when_unset(self) -> None:
        CLIContext.reset()

        ctx = CLIContext.get_current()

        assert ctx.verbose is False
        assert ctx.quiet is False
        assert ctx.config.converter.default_category == "general"

    def test_set_current_and_reset(self) -> None:
        ctx = CLIContext(config=Config.from_dict({}), verbose=True)

        CLIContext.set_current(ctx)
        try:
            assert CLIContext.get_current() is ctx
        finally:
            CLIContext.reset()

        assert CLIContext.get_current() is not ctx

    def test_get_logger_binds_command(self) -> None:
        logger = MagicMock()
        ctx = CLIContext(config=Config.from_dict({}), logger=logger)

        _ = ctx.get_logger("convert")

        logger.bind.assert_called_once_with(command="convert")

    def test_get_logger_without_logger_creates_one(self) -> None:
        ctx = CLIContext(config=Config.from_dict({}))

        logger = ctx.get_logger("validate")

        assert logger is not None
