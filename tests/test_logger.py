"""Unit tests for the runner logger."""

import logging

from webrunner.logger import LOGGER_NAME, RunnerLogger


class TestRunnerLogger:
    """Test RunnerLogger dataclass."""

    def test_debug_mode_logs_debug_messages(self, caplog):
        logger = RunnerLogger(debug_logging=True)

        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            logger.debug("resolved %s", "config")

        assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
            (logging.DEBUG, "resolved config")
        ]

    def test_level_follows_debug_flag(self):
        RunnerLogger(debug_logging=True)
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

        RunnerLogger(debug_logging=False)
        assert logging.getLogger(LOGGER_NAME).level == logging.INFO

    def test_debug_dropped_without_debug_mode(self, caplog):
        logger = RunnerLogger(debug_logging=False)

        logger.debug("hidden")
        logger.warn("shown")

        assert [r.getMessage() for r in caplog.records if r.name == LOGGER_NAME] == ["shown"]

    def test_equality_by_debug_flag(self):
        assert RunnerLogger(True) == RunnerLogger(True)
        assert RunnerLogger(True) != RunnerLogger(False)
