"""Structlog configuration for the ``views`` command.

Library modules only call ``structlog.get_logger(__name__)``; the CLI calls
:func:`configure_logging` once before doing any work.

Example
-------
>>> from site_views.logging_setup import configure_logging
>>> configure_logging(verbose=True)  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ

import structlog


def configure_logging(
    *, verbose: bool = False, stream: typ.TextIO | None = None
) -> None:
    """Route structlog events through stdlib logging onto stderr.

    Parameters
    ----------
    verbose : bool, optional
        Emit debug events (one per projected entity) when ``True``; otherwise
        only warnings and errors such as ``broken_reference`` are shown.
    stream : TextIO, optional
        Destination of rendered events; defaults to ``sys.stderr``.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        format="%(message)s", stream=stream or sys.stderr, level=level, force=True
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


__all__ = ["configure_logging"]
