"""
Logging system configuration.

Sets up stdlib logging with:
- A colored console handler when attached to a terminal
- An optional rotating file handler
- Quieter third-party loggers
- A structured helper for outbound API calls
"""

import logging
import logging.config
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Dict, Optional

from order_tracker.core.config import Settings, get_settings


class ColoredFormatter(logging.Formatter):
    """
    Formatter that colors the level name on console output.
    """

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record):
        """
        Format the record, coloring the level name on a TTY.

        Args:
            record: LogRecord to format

        Returns:
            str: Formatted message
        """
        formatted = super().format(record)

        if hasattr(sys.stderr, "isatty") and sys.stderr.isatty():
            color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
            reset = self.COLORS["RESET"]
            formatted = formatted.replace(record.levelname, f"{color}{record.levelname}{reset}")

        return formatted


def setup_logging(level: Optional[str] = None, settings: Optional[Settings] = None) -> None:
    """
    Configure application logging.

    Args:
        level: Override for the configured LOG_LEVEL
        settings: Settings to use (defaults to the cached instance)
    """
    settings = settings or get_settings()
    level = (level or settings.LOG_LEVEL).upper()

    if settings.LOG_FILE_PATH:
        Path(settings.LOG_FILE_PATH).parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(get_logging_configuration(settings, level))
    configure_specific_loggers(level)

    logger = logging.getLogger(__name__)
    logger.debug(f"Logging configured - level: {level}, file: {settings.LOG_FILE_PATH}")


def get_logging_configuration(settings: Settings, level: str) -> Dict[str, Any]:
    """
    Build the dictConfig payload.

    Args:
        settings: Application settings
        level: Effective root level

    Returns:
        Dict: Logging configuration
    """
    config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": settings.LOG_FORMAT,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": ("%(asctime)s - %(name)s - %(levelname)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s"),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "colored": {
                "()": ColoredFormatter,
                "format": settings.LOG_FORMAT,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            # Program output goes to stdout, diagnostics to stderr
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "colored",
                "stream": "ext://sys.stderr",
            }
        },
        "root": {"level": level, "handlers": ["console"]},
    }

    if settings.LOG_FILE_PATH:
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": level,
            "formatter": "detailed",
            "filename": settings.LOG_FILE_PATH,
            "maxBytes": settings.LOG_MAX_SIZE_MB * 1024 * 1024,
            "backupCount": settings.LOG_BACKUP_COUNT,
            "encoding": "utf-8",
        }
        config["root"]["handlers"].append("file")

    return config


def configure_specific_loggers(level: str) -> None:
    """
    Tune per-module loggers.

    Args:
        level: Effective root level
    """
    logging.getLogger("order_tracker.api").setLevel(logging.DEBUG if level == "DEBUG" else logging.INFO)

    for logger_name in ["aiohttp.client", "aiohttp.internal", "asyncio"]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def log_api_call(method: str, url: str, status_code: int, duration: float, **kwargs):
    """
    Log one outbound API call.

    Args:
        method: HTTP method
        url: Requested URL
        status_code: Response status (0 when no response was received)
        duration: Duration in seconds
        **kwargs: Extra structured fields
    """
    logger = logging.getLogger("order_tracker.api.call")

    extra_data = {
        "method": method,
        "url": url,
        "status_code": status_code,
        "duration_ms": round(duration * 1000, 2),
        "api_timestamp": datetime.now(UTC).isoformat(),
        **kwargs,
    }

    if 200 <= status_code < 300:
        level = logging.DEBUG
    elif status_code == 0 or 400 <= status_code < 500:
        level = logging.WARNING
    else:
        level = logging.ERROR

    logger.log(
        level,
        f"API call: {method} {url} -> {status_code} ({duration * 1000:.1f}ms)",
        extra=extra_data,
    )
