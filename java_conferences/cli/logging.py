"""
Logging utilities for java_conferences CLI.

Provides logging setup and header printing functions.
"""

import logging
import sys
import time
from pathlib import Path

# Third-party loggers that clutter console output
NOISY_LOGGERS = [
    "urllib3",  # HTTP library
    "markdown_it",  # Markdown parser
]


class FlushingFileHandler(logging.FileHandler):
    """File handler that flushes after each record so logs reach disk immediately."""

    def emit(self, record):
        super().emit(record)
        self.flush()


def setup_logging(
    script_name: str,
    log_to_file: bool = False,
    verbose: bool = False,
    log_dir: Path = Path("logs"),
) -> logging.Logger:
    """
    Set up logging for a script.

    Console output goes to stderr so stdout stays clean for JSON results.

    Args:
        script_name: Name of the script (for log file naming)
        log_to_file: If True, also log DEBUG and above to a timestamped file
        verbose: If True, console shows DEBUG instead of INFO
        log_dir: Directory for log files

    Returns:
        Configured logger instance
    """
    package_logger = logging.getLogger("java_conferences")
    package_logger.setLevel(logging.DEBUG)  # Handlers decide what to show
    for handler in list(package_logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            package_logger.removeHandler(handler)
            handler.close()

    logger = logging.getLogger(script_name)
    logger.setLevel(logging.DEBUG)
    logger.handlers = []  # Clear any existing handlers
    logger.propagate = False

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    handlers: list[logging.Handler] = [console_handler]

    log_file = None
    if log_to_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        log_file = log_dir / f"{script_name}_{timestamp}.log"
        file_handler = FlushingFileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        handlers.append(file_handler)

    for handler in handlers:
        logger.addHandler(handler)
        package_logger.addHandler(handler)

    for noisy_logger in NOISY_LOGGERS:
        logging.getLogger(noisy_logger).setLevel(logging.ERROR)

    if log_file is not None:
        logger.info(f"Log file: {log_file}")
    return logger


def print_header(title: str, logger: logging.Logger | None = None):
    """
    Print a standard section header.

    Args:
        title: Title for the section
        logger: Optional logger instance (if None, uses this module's logger)
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    logger.info("=" * 70)
    logger.info(title)
    logger.info("=" * 70)
