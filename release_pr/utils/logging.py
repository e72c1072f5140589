"""Logging utilities."""

import logging
import sys
from typing import Optional, Sequence


LOGGER_NAME = "release_pr"
LOG_FORMAT = "[%(asctime)s] %(levelname)s - %(message)s"

# HTTP client loggers that flood INFO output with one line per API call
NOISY_LOGGERS = ("github", "urllib3")


def setup_logging(
    debug: bool = False,
    format_str: Optional[str] = None,
    noisy: Sequence[str] = NOISY_LOGGERS
) -> logging.Logger:
    """
    Setup logging for the release PR generator.

    Log records go to stderr; stdout is reserved for the plan and the report.
    Outside debug mode the HTTP client libraries only report warnings.

    Args:
        debug: Log at DEBUG level, including HTTP client traffic
        format_str: Custom format string
        noisy: Third-party loggers held at WARNING unless debugging

    Returns:
        Configured logger
    """
    level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=format_str or LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)]
    )

    for name in noisy:
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
