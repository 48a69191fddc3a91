"""
Logging service for application-wide logging.
"""

import logging
import logging.handlers
import os
from typing import Optional

import structlog

from ..config.environment import EnvironmentManager

ROOT_LOGGER_NAME = "propdash"


class LoggingService:
    """Centralized logging service."""

    def __init__(self, log_level: Optional[str] = None, log_file: Optional[str] = None):
        self.env_manager = EnvironmentManager()
        self.log_level = (log_level or self.env_manager.get_log_level()).upper()
        self.log_file = log_file
        self._setup_logging()

    def _setup_logging(self) -> None:
        """Setup logging configuration."""
        self.logger = logging.getLogger(ROOT_LOGGER_NAME)
        self.logger.setLevel(getattr(logging, self.log_level, logging.INFO))

        # Clear existing handlers
        self.logger.handlers.clear()

        detailed_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
        )
        simple_formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")

        # File handler with rotation
        if self.log_file:
            log_dir = os.path.dirname(self.log_file)
            if log_dir and not os.path.exists(log_dir):
                os.makedirs(log_dir)

            file_handler = logging.handlers.RotatingFileHandler(
                self.log_file,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(detailed_formatter)
            self.logger.addHandler(file_handler)

        # Console handler
        if self.env_manager.is_development():
            console_handler = logging.StreamHandler()
            console_handler.setLevel(getattr(logging, self.log_level, logging.INFO))
            console_handler.setFormatter(simple_formatter)
            self.logger.addHandler(console_handler)


_structlog_configured = False


def configure_logging(log_level: Optional[str] = None, log_file: Optional[str] = None) -> LoggingService:
    """Configure the ``propdash`` logger tree once at startup."""
    return LoggingService(log_level, log_file)


def _configure_structlog() -> None:
    """Route structlog events through the stdlib ``propdash`` logger tree."""
    global _structlog_configured
    if _structlog_configured:
        return

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    _structlog_configured = True


def get_structured_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance"""
    _configure_structlog()
    return structlog.get_logger(name or ROOT_LOGGER_NAME)
