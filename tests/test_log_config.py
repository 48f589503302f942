"""Tests for logging setup."""
import logging
from contextlib import contextmanager
from logging.handlers import RotatingFileHandler

import pytest

from bookshelf.log_config import LOG_FILE, PACKAGE_LOGGER, setup_logging


@contextmanager
def isolated_logging():
    """Run with no handlers on the root or package logger, restoring them afterwards.

    pytest attaches its capture handlers to the root logger for the test
    call, so this has to wrap the test body rather than live in a fixture.
    """
    root = logging.getLogger()
    package = logging.getLogger(PACKAGE_LOGGER)
    saved = {logger: (logger.handlers[:], logger.level) for logger in (root, package)}
    root.handlers = []
    package.handlers = []
    try:
        yield root, package
    finally:
        for logger, (handlers, level) in saved.items():
            for handler in logger.handlers:
                handler.close()
            logger.handlers = handlers
            logger.setLevel(level)


def _file_handlers(logger):
    return [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]


class TestSetupLogging:
    def test_console_and_package_file(self, tmp_path):
        with isolated_logging() as (root, package):
            log_file = setup_logging(level="DEBUG", log_dir=str(tmp_path))
            assert log_file == str(tmp_path / LOG_FILE)
            assert root.level == logging.DEBUG
            assert package.level == logging.DEBUG
            assert len(root.handlers) == 1
            assert len(_file_handlers(package)) == 1
        assert (tmp_path / LOG_FILE).exists()

    def test_demo_errors_reach_file(self, tmp_path):
        with isolated_logging() as (_, package):
            setup_logging(log_dir=str(tmp_path))
            logging.getLogger("bookshelf.demo").error("Demo failed: boom")
            logging.getLogger("bookshelf.database").info("books table ready")
            for handler in package.handlers:
                handler.flush()
        contents = (tmp_path / LOG_FILE).read_text()
        assert "[ERROR] bookshelf.demo: Demo failed: boom" in contents
        assert "[INFO] bookshelf.database: books table ready" in contents

    def test_no_log_dir_skips_files(self):
        with isolated_logging() as (root, package):
            assert setup_logging(log_dir=None) is None
            assert len(root.handlers) == 1
            assert _file_handlers(package) == []

    def test_second_call_adds_nothing(self, tmp_path):
        with isolated_logging() as (root, package):
            setup_logging(log_dir=str(tmp_path))
            setup_logging(log_dir=str(tmp_path))
            assert len(root.handlers) == 1
            assert len(_file_handlers(package)) == 1

    def test_existing_root_handler_kept(self, tmp_path):
        with isolated_logging() as (root, package):
            existing = logging.NullHandler()
            root.addHandler(existing)
            setup_logging(level=logging.WARNING, log_dir=str(tmp_path))
            assert root.handlers == [existing]
            assert package.level == logging.WARNING
            assert len(_file_handlers(package)) == 1

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logging(level="LOUD", log_dir=None)
