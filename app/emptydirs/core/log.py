"""Logging setup for the emptydirs CLI.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached here, once per CLI invocation, to the ``emptydirs`` logger.
"""

import logging

from rich.logging import RichHandler

from emptydirs.utils.formatting import err_console

LOGGER_NAME = "emptydirs"


def resolve_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map CLI verbosity flags to a logging level.

    ``quiet`` wins over ``verbose`` when both are set.
    """
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configure the application logger.

    Existing handlers are closed and replaced, so repeated calls (for
    example across CLI invocations in tests) do not stack output.

    Args:
        verbose: Log everything down to DEBUG.
        quiet: Only log errors.

    Returns:
        The configured ``emptydirs`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    level = resolve_level(verbose, quiet)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    handler = RichHandler(
        console=err_console,
        show_path=verbose,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
