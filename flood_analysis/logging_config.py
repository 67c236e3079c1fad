"""structlog setup for the flood frequency scripts and notebooks.

Library modules only call :func:`get_logger`; nothing is configured on import, so an
application embedding ``flood_analysis`` keeps control of its own logging.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

import structlog

# Plotting dependencies that flood DEBUG output with font and image lookups.
_NOISY_LOGGERS = ("matplotlib", "PIL")

_SHARED_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.format_exc_info,
]


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    stream: Optional[IO[str]] = None,
) -> None:
    """Route structlog events through the standard library root logger.

    Args:
        level: Root level name (DEBUG, INFO, WARNING, ...).
        json_output: One JSON object per event instead of aligned console text.
        stream: Where records go; stdout by default so they interleave with the
            quickstart's printed summary.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stdout,
        level=numeric_level,
    )
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger().setLevel(numeric_level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[*_SHARED_PROCESSORS, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str, **context) -> structlog.stdlib.BoundLogger:
    """structlog logger for ``name``, optionally bound to context such as ``site_no``."""
    logger = structlog.get_logger(name)
    return logger.bind(**context) if context else logger
