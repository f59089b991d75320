"""
Logging configuration for fogbound-content.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..settings import AppSettings

CONSOLE_FORMAT = "%(asctime)s : %(levelname)-8s : %(name)s : %(message)s"
CONSOLE_DATEFMT = "%H:%M:%S"

LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5


class ColoredFormatter(logging.Formatter):
    """Console formatter that colours the level name."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]

        formatted = super().format(record)

        # Colour only the first occurrence, which is the level column
        if record.levelname in formatted:
            formatted = formatted.replace(
                record.levelname, f"{color}{record.levelname}{reset}", 1
            )

        return formatted


class CSVFormatter(logging.Formatter):
    """Semicolon-separated, CSV-safe formatter for file logging."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = self.formatTime(record, self.datefmt)
        level = record.levelname.ljust(8)
        duration = f"{int(record.relativeCreated)} ms"
        module = record.name
        line_no = str(record.lineno)
        message = record.getMessage()

        # Standard CSV quote escaping
        message = message.replace('"', '""')

        return f'"{timestamp}";{level};"{duration}";"{module}";"{line_no}";"{message}"'


def setup_logging(settings: "AppSettings") -> None:
    """
    Setup application logging with console and file handlers.

    Args:
        settings: AppSettings instance for all logging configuration
    """
    console_enabled = settings.console_logging
    console_level = settings.console_log_level
    use_colors = settings.console_use_colors
    file_enabled = settings.file_logging
    log_file = settings.log_file_path

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    package_logger = logging.getLogger("fogbound_content")
    package_logger.setLevel(logging.DEBUG)

    root_logger.handlers.clear()

    if console_enabled:
        if use_colors:
            console_formatter: logging.Formatter = ColoredFormatter(
                fmt=CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT
            )
        else:
            console_formatter = logging.Formatter(fmt=CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper(), logging.WARNING))
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    log_path = None
    if file_enabled:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(CSVFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
            root_logger.addHandler(file_handler)
        except OSError as e:
            # Continue with console logging only
            log_path = None
            root_logger.warning(f"Could not setup file logging: {e}")

    logger = logging.getLogger(__name__)
    logger.info("Logging initialized")
    if console_enabled:
        logger.debug(f"Console logging: {console_level} (colors: {use_colors})")
    if log_path:
        logger.debug(f"File logging: DEBUG at {log_path.absolute()}")
