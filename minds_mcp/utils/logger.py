"""
Logger
Structured logging for the Minds MCP server.
"""

import json
import logging
import sys
from typing import Any, Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _level_from_name(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


class Logger:
    """Logger wrapper that renders metadata as a JSON suffix."""

    def __init__(self, name: str = "minds-mcp", level: str = "INFO"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(_level_from_name(level))

        # Only add handler if none exist
        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(handler)

    @staticmethod
    def _render(message: str, meta: Optional[dict[str, Any]]) -> str:
        if not meta:
            return message
        return f"{message} {json.dumps(meta, default=str, sort_keys=True)}"

    def debug(self, message: str, meta: Optional[dict[str, Any]] = None):
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(self._render(message, meta))

    def info(self, message: str, meta: Optional[dict[str, Any]] = None):
        self.logger.info(self._render(message, meta))

    def warning(self, message: str, meta: Optional[dict[str, Any]] = None):
        self.logger.warning(self._render(message, meta))

    def error(self, message: str, meta: Optional[dict[str, Any]] = None):
        self.logger.error(self._render(message, meta))

    def set_level(self, level: str) -> None:
        self.logger.setLevel(_level_from_name(level))

    def isEnabledFor(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)
