"""structlog setup for the command line tools.

Library users configure structlog themselves (or hand BigBlueButton a
logger of their own); this is only called from __main__.  Output goes to
stderr so that it doesn't mix with what the commands print.
"""

import logging
import os
import sys

import structlog


def configure_logging(level=None, fmt=None):
    r"""
    BBB_LOG_LEVEL picks the level (default WARNING) and BBB_LOG_FORMAT
    picks the renderer: "json" for one JSON object per line, anything
    else for structlog's console output.
    """
    if level is None:
        level = os.environ.get('BBB_LOG_LEVEL', 'WARNING')
    if fmt is None:
        fmt = os.environ.get('BBB_LOG_FORMAT', 'console')

    processors = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if fmt == 'json':
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper(), logging.WARNING)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
