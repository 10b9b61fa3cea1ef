from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from rich.console import Console

from topic_template.cli import CLIContext, create_app


@pytest.fixture(autouse=True)
def reset_cli_context(isolated_config: Path) -> Iterator[None]:
    CLIContext.reset()
    yield
    CLIContext.reset()


@pytest.fixture
def topic_cli_with_exit_code(console: Console) -> Callable[..., int]:
    """Create CLI app for testing that returns the exit code.

    Arguments go through the meta app so global options and configuration
    loading are exercised.
    """

    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> int:
        """Run CLI app and return exit code (0 if no SystemExit)."""

        try:
            app.meta(list(args))
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 1
        else:
            return 0

    return _run


@pytest.fixture
def write_csv(isolated_config: Path) -> Callable[[str, str], Path]:
    """Return a function that writes CSV text into the working directory."""

    def _write(text: str, name: str = "input.csv") -> Path:
        path = isolated_config / name
        _ = path.write_text(text, encoding="utf-8")
        return path

    return _write
