# pyright: reportUnusedCallResult=false
"""CLI context for global state management.

The CLIContext is set once per invocation by the meta app and made available
to all commands via contextvars.
"""

import contextvars
from dataclasses import dataclass, field
from typing import Self

from structlog.typing import FilteringBoundLogger

from topic_template.config import Config
from topic_template.utils import create_cli_logger

_current_cli_context: contextvars.ContextVar["CLIContext | None"] = (
    contextvars.ContextVar("cli_context", default=None)
)


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global CLI context with configuration and options.

    Attributes:
        config: Loaded configuration object.
        verbose: Enable verbose output with additional details.
        quiet: Suppress non-essential output.
        config_error: Error message if config loading failed.
        logger: Structured logger for CLI commands.
    """

    config: Config = field(repr=False)
    verbose: bool = False
    quiet: bool = False
    config_error: str | None = None
    logger: FilteringBoundLogger | None = field(default=None, repr=False)

    def get_logger(self, command: str) -> FilteringBoundLogger:
        """Return the context logger bound to a command name."""
        if self.logger is not None:
            return self.logger.bind(command=command)
        return create_cli_logger(
            level=self.config.logging.level.value,
            log_format=self.config.logging.format.value,  # type: ignore[arg-type]
            log_file=self.config.logging.file,
            command=command,
        )

    @classmethod
    def get_current(cls) -> Self:
        """Get current active CLIContext, or create a default if not set."""
        ctx = _current_cli_context.get()
        if ctx is not None:
            return ctx  # type: ignore[return-value]
        return cls(config=Config.from_dict({}))

    @classmethod
    def set_current(cls, ctx: "CLIContext") -> None:
        _current_cli_context.set(ctx)

    @classmethod
    def reset(cls) -> None:
        """Reset to default context. Used by tests between runs."""
        _current_cli_context.set(None)
