"""
Logging setup for the tokiparse command-line tools.

Library modules only create module-level loggers and log at DEBUG level;
handlers are installed here, once, by the CLI or REPL.
"""

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DEBUG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
)


def setup_logging(
    log_file: str | None = None, level: int = logging.WARNING, debug: bool = False
) -> None:
    """
    Configure the root logger for a tokiparse session.

    Args:
        log_file: Optional path to append log records to.
        level: Logging level (default: WARNING, so normal output stays clean).
        debug: If True, switches to DEBUG with file/line context in each record.
    """
    # Clear existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    if debug:
        level = logging.DEBUG
    formatter = logging.Formatter(DEBUG_FORMAT if debug else DEFAULT_FORMAT)

    # stderr keeps renderings on stdout machine-readable
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(level)
    if debug:
        logging.getLogger(__name__).debug("debug logging enabled")


__all__ = ["setup_logging"]
