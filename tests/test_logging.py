"""Test logging configuration."""

import json
import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest
import structlog

from pathroute.common.logging import PACKAGE_LOGGER, get_logger, setup_logging

SRC_DIR = Path(__file__).resolve().parent.parent / "src"


class TestLogging:
    """Test logging functionality."""

    def test_setup_logging_default(self) -> None:
        """Test default logging setup."""
        setup_logging()
        logger = get_logger("pathroute.test")
        assert logger is not None
        assert hasattr(logger, "info")
        assert hasattr(logger, "warning")

    def test_setup_logging_with_level(self) -> None:
        """Test logging setup with custom level."""
        setup_logging(level="DEBUG")
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG

    def test_setup_logging_leaves_root_logger_alone(self) -> None:
        """Test that only the package logger is configured."""
        root_logger = logging.getLogger()
        root_handlers = list(root_logger.handlers)
        root_level = root_logger.level

        setup_logging(level="DEBUG")

        assert root_logger.handlers == root_handlers
        assert root_logger.level == root_level
        assert logging.getLogger(PACKAGE_LOGGER).propagate is False

    def test_setup_logging_replaces_handlers(self) -> None:
        """Test that repeated setup does not stack handlers."""
        setup_logging()
        setup_logging()
        assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == 1

    def test_setup_logging_json_format(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test logging setup with JSON format."""
        setup_logging(json_format=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

        logger = get_logger("pathroute.test")
        logger.info("test message", pattern="/users/:id")

        entry = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert entry["event"] == "test message"
        assert entry["pattern"] == "/users/:id"
        assert entry["level"] == "info"
        assert entry["logger"] == "pathroute.test"

    def test_setup_logging_with_file(self, tmp_path: Path) -> None:
        """Test logging setup with file output."""
        log_file = tmp_path / "routes.log"
        setup_logging(log_file=str(log_file))

        python_logger = logging.getLogger("pathroute.file_test")
        python_logger.info("route table loaded")

        for handler in logging.getLogger(PACKAGE_LOGGER).handlers:
            handler.flush()

        assert log_file.exists()
        assert "route table loaded" in log_file.read_text()

    def test_setup_logging_closes_replaced_file_handler(
        self, tmp_path: Path
    ) -> None:
        """Test that repeated setup closes the previous log file."""
        setup_logging(log_file=str(tmp_path / "first.log"))
        first_handler = next(
            handler
            for handler in logging.getLogger(PACKAGE_LOGGER).handlers
            if isinstance(handler, logging.FileHandler)
        )
        assert first_handler.stream is not None

        setup_logging(log_file=str(tmp_path / "second.log"))

        assert first_handler.stream is None
        assert first_handler not in logging.getLogger(PACKAGE_LOGGER).handlers


class TestUnconfiguredLogging:
    """Test the package stays quiet until logging is configured."""

    def test_package_logger_has_null_handler(self) -> None:
        """Test the package logger carries a NullHandler by default."""
        handlers = logging.getLogger(PACKAGE_LOGGER).handlers
        assert any(isinstance(handler, logging.NullHandler) for handler in handlers)

    def test_get_logger_wraps_stdlib_logger(self) -> None:
        """Test events are routed through the stdlib logger of the same name."""
        logger = get_logger("pathroute.routing.router")
        bound = logger.bind()
        assert isinstance(bound, structlog.stdlib.BoundLogger)
        assert bound._logger is logging.getLogger("pathroute.routing.router")

    def test_router_is_silent_without_setup(self) -> None:
        """Test adding routes in a fresh interpreter prints nothing."""
        code = (
            "from pathroute import Router\n"
            "router = Router()\n"
            "router.add('/a', 1)\n"
            "router.add('/a', 2)\n"
        )
        env = dict(os.environ)
        env["PYTHONPATH"] = os.pathsep.join(
            filter(None, [str(SRC_DIR), env.get("PYTHONPATH")])
        )

        result = subprocess.run(
            [sys.executable, "-c", code],
            capture_output=True,
            text=True,
            env=env,
            check=True,
        )

        assert result.stdout == ""
        assert result.stderr == ""
