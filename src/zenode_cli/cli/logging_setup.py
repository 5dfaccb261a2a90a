"""Logging configuration for the CLI process.

Library modules only create loggers via ``logging.getLogger(__name__)``;
handlers are installed here, once, by the entry point.  User-facing
output never goes through logging.
"""

from __future__ import annotations

import logging

_PACKAGE_LOGGER = "zenode_cli"


def configure_logging(debug: bool = False) -> None:
    """Route ``zenode_cli`` log records to stderr.

    *debug* lowers the level from ``WARNING`` to ``DEBUG``.  Records are
    rendered by ``rich.logging.RichHandler`` when Rich is installed, else
    by a plain ``StreamHandler``.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.propagate = False
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    handler: logging.Handler
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=debug,
            rich_tracebacks=debug,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
