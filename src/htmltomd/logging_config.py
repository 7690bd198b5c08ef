"""Logging setup for htmltomd conversions."""

import logging
import sys
from typing import Optional

# Conversion decisions (missing root or title, skipped page breaks, panel
# types, code languages, dropped characters) are logged at DEBUG.
VERBOSE_LEVEL = logging.DEBUG
DEFAULT_LEVEL = logging.INFO
QUIET_LEVEL = logging.ERROR

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def log_level(verbose: bool = False, quiet: bool = False) -> int:
    """
    Map the verbose and quiet flags to a logging level.

    Raises:
        ValueError: If both flags are set
    """
    if verbose and quiet:
        raise ValueError("verbose and quiet cannot be used together")
    if verbose:
        return VERBOSE_LEVEL
    if quiet:
        return QUIET_LEVEL
    return DEFAULT_LEVEL


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[str] = None,
    force: bool = False,
) -> logging.Logger:
    """
    Set up logging for htmltomd.

    Messages go to stderr, so markdown written to stdout stays clean.

    Args:
        verbose: Report every conversion decision
        quiet: Report errors only
        log_file: Optional file path that also receives the messages
        force: If True, replace handlers set up by an earlier call

    Returns:
        The "htmltomd" logger
    """
    level = log_level(verbose=verbose, quiet=quiet)
    logger = logging.getLogger("htmltomd")
    logger.setLevel(level)

    if force or not logger.handlers:
        logger.handlers.clear()

        handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
        if log_file:
            handlers.append(logging.FileHandler(log_file))

        formatter = logging.Formatter(LOG_FORMAT)
        for handler in handlers:
            handler.setFormatter(formatter)
            logger.addHandler(handler)
    else:
        logger.debug("Logging already set up, keeping existing handlers")

    logger.propagate = False

    return logger
