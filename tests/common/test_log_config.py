"""Tests for src/common/log_config.py"""

import logging
import sys

from src.common.log_config import setup_logging


class TestSetupLogging:
    def teardown_method(self):
        """Reset logger between tests."""
        logger = logging.getLogger("src")
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.WARNING)

    def test_default_level_is_info(self):
        setup_logging()
        assert logging.getLogger("src").level == logging.INFO

    def test_verbose_sets_debug(self):
        setup_logging(verbose=True)
        assert logging.getLogger("src").level == logging.DEBUG

    def test_quiet_sets_warning(self):
        setup_logging(quiet=True)
        assert logging.getLogger("src").level == logging.WARNING

    def test_handler_outputs_to_stderr(self):
        setup_logging()
        logger = logging.getLogger("src")
        assert len(logger.handlers) == 1
        assert logger.handlers[0].stream is sys.stderr

    def test_repeated_setup_does_not_duplicate(self):
        setup_logging()
        setup_logging(verbose=True)
        assert len(logging.getLogger("src").handlers) == 1

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        setup_logging(log_file=str(log_file))
        logger = logging.getLogger("src.brands.test")
        logger.info("assigned %d brands", 3)
        for handler in logging.getLogger("src").handlers:
            handler.flush()
        assert "assigned 3 brands" in log_file.read_text(encoding="utf-8")
