"""Command-line interface for topic-template."""

from ._app import create_app, main, register_commands
from ._context import CLIContext
from ._exit_codes import ExitCode

__all__ = ["CLIContext", "ExitCode", "create_app", "main", "register_commands"]
