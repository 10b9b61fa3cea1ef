"""Shared utilities for topic-template."""

from ._logging import LogFormatType, create_cli_logger, create_logger

__all__ = ["LogFormatType", "create_cli_logger", "create_logger"]
