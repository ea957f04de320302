"""Logging configuration for the catalogue tools."""

import logging
import logging.handlers
import sys
from pathlib import Path
from datetime import datetime

# Log levels for different components
LOGGING_CONFIG = {
    "tscat": logging.INFO,
    "tscat.core": logging.INFO,
    "tscat.features": logging.INFO,
    "tscat.infra": logging.WARNING,

    # Reduce noise from libraries
    "dotenv": logging.WARNING,
}


class ColoredFormatter(logging.Formatter):
    """Console formatter that tints the level name of terminal output."""

    COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelno)
        if color is None:
            return super().format(record)
        # the record is shared with the file handler, which must stay uncoloured
        plain = record.levelname
        record.levelname = f"{color}{plain}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = plain


def setup_logging(log_file: bool = False, debug: bool = False, log_dir: str = "logs") -> None:
    """Configure logging for the command-line tools.

    Console output goes to stderr so command results on stdout stay clean.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # Remove existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)

    console_format = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"
    console_formatter: logging.Formatter
    if sys.stderr.isatty():
        console_formatter = ColoredFormatter(console_format, datefmt="%H:%M:%S")
    else:
        console_formatter = logging.Formatter(console_format, datefmt="%H:%M:%S")
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        log_filename = path / f"tscat_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_filename,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)

        file_format = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d) - %(message)s"
        file_handler.setFormatter(logging.Formatter(file_format, datefmt="%Y-%m-%d %H:%M:%S"))
        root_logger.addHandler(file_handler)

    for logger_name, level in LOGGING_CONFIG.items():
        logging.getLogger(logger_name).setLevel(logging.DEBUG if debug else level)

    logging.getLogger(__name__).debug(
        "Logging configured (console=%s, file=%s)",
        "DEBUG" if debug else "WARNING",
        "ENABLED" if log_file else "DISABLED",
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with proper configuration."""
    return logging.getLogger(name)
