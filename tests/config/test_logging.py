"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from cvdctl.config.logging import PACKAGE_LOGGER, configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger(PACKAGE_LOGGER)
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_quiet_by_default(self) -> None:
        configure_logging()
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.WARNING

    def test_single_handler(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_json_structlog_event(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("cvdctl.services.palette").info("palette.scored", grade="B")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "palette.scored"
        assert parsed["grade"] == "B"
        assert parsed["level"] == "info"
        assert parsed["logger"] == "cvdctl.services.palette"
        assert "timestamp" in parsed

    def test_json_stdlib_domain_record(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("cvdctl.domain.improvement").debug("searched %d steps", 10)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "searched 10 steps"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "cvdctl.domain.improvement"

    def test_non_verbose_hides_info(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True)
        structlog.get_logger("cvdctl.services.palette").info("hidden")
        assert capfd.readouterr().err == ""
