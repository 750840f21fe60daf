"""Logging configuration for ``--verbose`` runs.

Core modules only create module loggers; handlers are attached here, by
the CLI, and always on stderr so the stdout status report stays clean.
"""

from __future__ import annotations

import logging
import sys

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _rich_handler() -> logging.Handler | None:
    """Return a ``RichHandler`` on stderr, or ``None`` without Rich."""
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        return None

    from firmpack.cli.console import get_rich_console

    return RichHandler(
        console=get_rich_console(),
        show_time=False,
        show_path=False,
        markup=False,
    )


def configure_logging(verbose: bool) -> None:
    """Attach a stderr handler to the ``firmpack`` logger.

    Without *verbose* only warnings surface.  Calling this twice
    replaces the previously installed handler.
    """
    handler = _rich_handler()
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    package_logger = logging.getLogger("firmpack")
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False
