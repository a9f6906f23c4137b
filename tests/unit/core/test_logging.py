"""Tests for logging setup."""

import logging

import structlog

from keyprobe.core.logging import configure_logging, get_logger


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_root_level(self) -> None:
        root = logging.getLogger()
        previous = root.level
        try:
            configure_logging("warning")
            assert root.level == logging.WARNING
        finally:
            root.setLevel(previous)
            structlog.reset_defaults()

    def test_json_renderer_selected(self) -> None:
        try:
            configure_logging("info", render_json=True)
            processors = structlog.get_config()["processors"]
            assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        finally:
            structlog.reset_defaults()

    def test_get_logger_binds(self) -> None:
        log = get_logger("keyprobe.test").bind(source="file")
        assert log is not None
