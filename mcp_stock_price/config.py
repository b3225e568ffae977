"""
Runtime configuration from environment variables.

- STOCK_MCP_LOG_LEVEL: logging level name (default: INFO)
- STOCK_MCP_LOG_FILE: optional log file path (default: stderr only)
- HOST: HTTP server bind address (default: 127.0.0.1)
- PORT: HTTP server port (default: 5001)
"""

import logging
import os
from pathlib import Path

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5001


def get_log_level() -> int:
    """Get logging level from environment or use default"""
    name = os.environ.get("STOCK_MCP_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        msg = f"Invalid STOCK_MCP_LOG_LEVEL value: {name}"
        raise ValueError(msg)
    return level


def get_log_file() -> Path | None:
    """Get optional log file path from environment"""
    path = os.environ.get("STOCK_MCP_LOG_FILE", "").strip()
    return Path(path).expanduser() if path else None


def get_host() -> str:
    """Get HTTP bind address from environment or use default"""
    return os.environ.get("HOST", DEFAULT_HOST)


def get_port() -> int:
    """Get server port from environment or use default"""
    port_str = os.environ.get("PORT", str(DEFAULT_PORT))
    try:
        return int(port_str)
    except ValueError:
        msg = f"Invalid PORT value: {port_str}"
        raise ValueError(msg) from None
