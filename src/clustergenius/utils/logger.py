"""Logging infrastructure with input-file context."""
import logging
import os
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional, TextIO


class SourceContextFilter(logging.Filter):
    """Add source file context to log records."""

    def __init__(self):
        super().__init__()
        self.source: Optional[str] = None

    def filter(self, record):
        """Add source to record."""
        record.source = self.source or "session"
        return True


class ClusterGeniusLogger:
    """Centralized logging manager."""

    def __init__(
        self,
        log_level: str = "INFO",
        max_file_size_mb: int = 10,
        backup_count: int = 30,
        console_stream: Optional[TextIO] = None
    ):
        home = os.getenv("CLUSTERGENIUS_HOME") or str(Path.home() / ".clustergenius")
        self.log_dir = Path(home) / "logs"
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.log_file = self.log_dir / "clustergenius.log"
        self.source_filter = SourceContextFilter()

        self.logger = logging.getLogger("clustergenius")
        self.logger.setLevel(getattr(logging, log_level.upper()))
        self.logger.propagate = False

        # Remove existing handlers
        self.logger.handlers.clear()

        file_handler = RotatingFileHandler(
            self.log_file,
            maxBytes=max_file_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)

        console_handler = logging.StreamHandler(console_stream or sys.stdout)
        console_handler.setLevel(logging.INFO)

        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [source:%(source)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

        file_handler.setFormatter(formatter)
        console_handler.setFormatter(formatter)

        file_handler.addFilter(self.source_filter)
        console_handler.addFilter(self.source_filter)

        self.logger.addHandler(file_handler)
        self.logger.addHandler(console_handler)

    def set_source_context(self, source: Optional[str]):
        """Set current input file for logging."""
        self.source_filter.source = source

    def get_logger(self) -> logging.Logger:
        """Get the configured logger."""
        return self.logger


# Global logger instance
_logger_instance: Optional[ClusterGeniusLogger] = None


def get_logger(log_level: str = "INFO") -> logging.Logger:
    """Get or create global logger instance."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = ClusterGeniusLogger(log_level)
    return _logger_instance.get_logger()


def configure_logging(
    log_level: str,
    max_file_size_mb: int,
    backup_count: int,
    console_stream: Optional[TextIO] = None
) -> logging.Logger:
    """Rebuild the global logger from application settings."""
    global _logger_instance
    _logger_instance = ClusterGeniusLogger(log_level, max_file_size_mb, backup_count, console_stream)
    return _logger_instance.get_logger()


def set_source_context(source: Optional[str]):
    """Set input file context for logging."""
    global _logger_instance
    if _logger_instance:
        _logger_instance.set_source_context(source)
