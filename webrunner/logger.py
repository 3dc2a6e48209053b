"""Logger handed to the test runner through the resolved config."""

import logging
from dataclasses import dataclass, field
from typing import Any

LOGGER_NAME = "webrunner"


@dataclass
class RunnerLogger:
    """Logger used by the runner while tests execute.

    Wraps the ``webrunner`` standard library logger. Its level is DEBUG
    when the runner was started in debug mode and INFO otherwise.
    """
    debug_logging: bool = False
    _logger: logging.Logger = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self._logger = logging.getLogger(LOGGER_NAME)
        self._logger.setLevel(logging.DEBUG if self.debug_logging else logging.INFO)

    def debug(self, message: str, *args: Any) -> None:
        self._logger.debug(message, *args)

    def info(self, message: str, *args: Any) -> None:
        self._logger.info(message, *args)

    def warn(self, message: str, *args: Any) -> None:
        self._logger.warning(message, *args)

    def error(self, message: str, *args: Any) -> None:
        self._logger.error(message, *args)
