#!/usr/bin/env python3
"""Test environment configuration and logging setup."""

import logging
import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from mcp_stock_price.config import get_host, get_log_file, get_log_level, get_port
from mcp_stock_price.logging_config import AsyncLoggingManager


def test_defaults() -> None:
    with patch.dict(os.environ, {}, clear=True):
        assert get_log_level() == logging.INFO
        assert get_log_file() is None
        assert get_host() == "127.0.0.1"
        assert get_port() == 5001


def test_overrides() -> None:
    env = {
        "STOCK_MCP_LOG_LEVEL": "debug",
        "STOCK_MCP_LOG_FILE": "/tmp/stock-mcp/server.log",
        "HOST": "0.0.0.0",
        "PORT": "8080",
    }
    with patch.dict(os.environ, env, clear=True):
        assert get_log_level() == logging.DEBUG
        assert get_log_file() == Path("/tmp/stock-mcp/server.log")
        assert get_host() == "0.0.0.0"
        assert get_port() == 8080


def test_invalid_values() -> None:
    with patch.dict(os.environ, {"PORT": "http"}, clear=True), pytest.raises(ValueError, match="PORT"):
        get_port()
    with patch.dict(os.environ, {"STOCK_MCP_LOG_LEVEL": "LOUD"}, clear=True), pytest.raises(
        ValueError, match="STOCK_MCP_LOG_LEVEL"
    ):
        get_log_level()


def test_async_logging_writes_file(tmp_path: Path) -> None:
    """Test queued records reach the log file by shutdown"""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    log_file = tmp_path / "logs" / "server.log"

    manager = AsyncLoggingManager()
    try:
        manager.setup(log_file, logging.DEBUG)
        assert logging.getLogger("urllib3").level == logging.INFO
        logging.getLogger("stock_price.test").info("hello from test")
    finally:
        manager.shutdown()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

    assert "hello from test" in log_file.read_text()
    assert "[INFO] stock_price.test:" in log_file.read_text()
