"""Tests for CLI logging setup."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from rich.logging import RichHandler

from shellgate.utils.logs import configure_logging


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    def test_default_level(self, restore_root_logger: logging.Logger) -> None:
        configure_logging()
        assert restore_root_logger.level == logging.INFO
        assert any(isinstance(h, RichHandler) for h in restore_root_logger.handlers)

    def test_verbose(self, restore_root_logger: logging.Logger) -> None:
        configure_logging(verbose=True)
        assert restore_root_logger.level == logging.DEBUG

    def test_logs_to_stderr(self, restore_root_logger: logging.Logger) -> None:
        configure_logging()
        handler = next(h for h in restore_root_logger.handlers if isinstance(h, RichHandler))
        assert handler.console.stderr is True
