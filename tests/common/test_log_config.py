"""Tests for zoomfeed/common/log_config.py"""

import logging
import sys

from zoomfeed.common.log_config import setup_logging


class TestSetupLogging:
    def teardown_method(self):
        """Reset logger between tests."""
        logger = logging.getLogger("zoomfeed")
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.WARNING)

    def test_default_level_is_info(self):
        setup_logging()
        logger = logging.getLogger("zoomfeed")
        assert logger.level == logging.INFO

    def test_verbose_sets_debug(self):
        setup_logging(verbose=True)
        logger = logging.getLogger("zoomfeed")
        assert logger.level == logging.DEBUG

    def test_quiet_sets_warning(self):
        setup_logging(quiet=True)
        logger = logging.getLogger("zoomfeed")
        assert logger.level == logging.WARNING

    def test_handler_outputs_to_stderr(self):
        setup_logging()
        logger = logging.getLogger("zoomfeed")
        assert len(logger.handlers) == 1
        handler = logger.handlers[0]
        assert handler.stream is sys.stderr

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger("zoomfeed").handlers) == 1

    def test_log_file_is_created_and_appended(self, tmp_path):
        log_file = tmp_path / "log" / "zoom" / "zoom-feed.log"
        setup_logging(log_file=log_file)
        logger = logging.getLogger("zoomfeed.test")
        logger.info("first run")
        setup_logging(log_file=log_file)
        logger.info("second run")

        content = log_file.read_text(encoding="utf-8")
        assert "first run" in content
        assert "second run" in content
        assert len(logging.getLogger("zoomfeed").handlers) == 2
