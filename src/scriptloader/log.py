"""Logging helper module."""

from logging import (
    DEBUG,
    INFO,
    Formatter,
    Logger,
    StreamHandler,
    basicConfig,
    getLogger,
)


def init_logging(*, verbose: bool = False) -> None:
    """Initialize logging for the command line tool.

    Should be called once when the tool starts. Library code never calls it.
    """
    # Console handler for user-facing logs
    console_handler = StreamHandler()
    console_handler.setFormatter(Formatter("%(levelname)s: %(message)s"))

    basicConfig(level=INFO, handlers=[console_handler])

    root_logger = getLogger()
    if verbose:
        # Set root logger level to DEBUG to capture everything
        root_logger.setLevel(DEBUG)
        root_logger.info("Debug logging enabled.")


def get_logger(name: str) -> Logger:
    """Proxy for logging.getLogger."""
    return getLogger(name)
