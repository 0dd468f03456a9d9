"""Logging configuration for quicktodo.

Logs go to stderr or a file, never stdout, so they do not interleave with
task listings.
"""

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# HTTP and OAuth libraries, traced only at -vvv
LIBRARY_LOGGERS = ("httpx", "httpcore", "google_auth_oauthlib", "google.auth")


def _level_for(verbose: int) -> int:
    return logging.DEBUG if verbose >= 2 else logging.INFO


def _attach(name: str, level: int, handlers: list[logging.Handler]) -> None:
    """Replace the handlers of a named logger."""
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)
    for handler in handlers:
        logger.addHandler(handler)


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> None:
    """Configure the ``quicktodo`` logger from the -v count and --log-file.

    Args:
        verbose: 0=off, 1=INFO, 2=DEBUG, 3+=DEBUG including HTTP/OAuth libraries
        log_file: Optional path to also write logs to

    Calling it again replaces the handlers from the previous call.
    """
    if verbose == 0 and log_file is None:
        return

    level = _level_for(verbose)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = []
    if verbose > 0:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    _attach("quicktodo", level, handlers)
    if verbose >= 3:
        for name in LIBRARY_LOGGERS:
            _attach(name, logging.DEBUG, handlers)

    logging.getLogger("quicktodo").info(
        "quicktodo starting | level=%s | log_file=%s", logging.getLevelName(level), log_file
    )
