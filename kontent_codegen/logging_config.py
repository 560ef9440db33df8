"""Logging setup for kontent-codegen.

Modules obtain their logger through :func:`get_logger`; the CLI calls
:func:`setup_logging` once to attach a rich handler to the package logger.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "kontent_codegen"


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr rich handler to the package logger.

    Args:
        verbose: Log at DEBUG level instead of WARNING.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Calling twice (tests, repeated CLI runs) must not duplicate output
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=verbose,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
