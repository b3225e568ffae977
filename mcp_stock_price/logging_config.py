"""Async logging configuration using QueueHandler

Offloads logging to a background thread so log I/O never delays a response.
stdout belongs to the JSON-RPC stream, so console output always goes to stderr.
All modules should use get_logger() instead of logging.getLogger() directly.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from queue import Queue

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"

# Chatty at DEBUG, held at INFO
THIRD_PARTY_LOGGERS = ("urllib3", "requests", "uvicorn.access")


class AsyncLoggingManager:
    """Manages async logging state without using global variables"""

    def __init__(self) -> None:
        self.log_queue: Queue[logging.LogRecord] = Queue(-1)
        self.queue_handler: logging.handlers.QueueHandler | None = None
        self.listener: logging.handlers.QueueListener | None = None

    def setup(self, log_file: Path | None = None, level: int = logging.INFO) -> None:
        """Set up async logging with QueueHandler and QueueListener

        This should be called once at application startup.

        Args:
            log_file: Optional path to log file. If None, only logs to stderr.
            level: Logging level (default: INFO)
        """
        if self.listener is not None:
            self.shutdown()

        handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

        if log_file is not None:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_file))

        for handler in handlers:
            handler.setFormatter(logging.Formatter(LOG_FORMAT))

        # QueueListener drains records on a background thread
        self.listener = logging.handlers.QueueListener(
            self.log_queue, *handlers, respect_handler_level=True
        )
        self.listener.start()

        self.queue_handler = logging.handlers.QueueHandler(self.log_queue)

        root = logging.getLogger()
        root.setLevel(level)
        root.handlers.clear()
        root.addHandler(self.queue_handler)

        if level < logging.INFO:
            for name in THIRD_PARTY_LOGGERS:
                logging.getLogger(name).setLevel(logging.INFO)

    def shutdown(self) -> None:
        """Shut down async logging (call on application exit)

        QueueListener.stop() processes every queued record before returning.
        """
        if self.listener is not None:
            self.listener.stop()
            for handler in self.listener.handlers:
                handler.close()
            self.listener = None

        if self.queue_handler is not None:
            logging.getLogger().removeHandler(self.queue_handler)
            self.queue_handler = None


# Singleton instance
_manager = AsyncLoggingManager()


def setup_async_logging(log_file: Path | None = None, level: int = logging.INFO) -> None:
    """Set up async logging - convenience wrapper around manager.setup()"""
    _manager.setup(log_file, level)


def shutdown_async_logging() -> None:
    """Shut down async logging - convenience wrapper around manager.shutdown()"""
    _manager.shutdown()


def get_logger(name: str) -> logging.Logger:
    """Get a logger configured for async logging

    Use this instead of logging.getLogger() to ensure async behavior.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
