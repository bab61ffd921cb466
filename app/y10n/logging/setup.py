"""Structlog setup for y10n.

Every module gets its logger from `get_module_logger()`, which tags events
with the module that emitted them. Output is rendered for a terminal during
development and as one JSON object per line in production. While pytest is
running, nothing is emitted.

Usage:
    from y10n.logging import get_module_logger

    logger = get_module_logger()
    logger.info("documents_loaded", languages=["de", "en"])
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from y10n.configuration import settings

# Root level that no record reaches.
SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Return True while running under pytest."""
    return "pytest" in sys.modules


def _build_processors(prod_mode: bool) -> List[Processor]:
    """Processor chain for normal runs, ending in the console or JSON renderer."""
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def _configure_silent() -> None:
    # Loggers stay usable so bind() and event calls work in tests.
    logging.root.setLevel(SILENT_LEVEL)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog on top of the standard logging module.

    Args:
        log_level: Level name such as "DEBUG" or "WARNING". Defaults to
            settings.LOG_LEVEL; unknown names fall back to INFO.
        is_production: Render JSON instead of console output. Defaults to
            settings.is_production.

    Returns:
        The root structlog logger.
    """
    if _is_test_environment():
        _configure_silent()
        return structlog.stdlib.get_logger()

    if is_production is None:
        is_production = settings.is_production

    structlog.configure(
        processors=_build_processors(is_production),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Return a logger bound to the calling module.

    The logger carries `component` (the last dotted part of the module name)
    and `module_path` (the full module name).

    Example:
        # in y10n/l10n/store.py
        logger = get_module_logger()
        # context: {"component": "store", "module_path": "y10n.l10n.store"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    module_name = module.__name__
    return logger.bind(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )
