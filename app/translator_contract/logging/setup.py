"""Structlog configuration for the translator_contract library.

Events are emitted through the stdlib logger named ``translator_contract``
(and its per-module children), so an application embedding the library
controls verbosity and destination with ordinary ``logging`` configuration.
The root logger is never touched.

Usage:
    from translator_contract.logging import configure_logging, get_module_logger

    # Standalone use: attach a handler and pick a renderer
    configure_logging(log_level="DEBUG")

    # Inside the library
    logger = get_module_logger()
    logger.debug("translation_missing", domain="shop", message="Save")

Dependencies:
    - translator_contract.configuration.Settings
"""

import inspect
import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from translator_contract.configuration import Settings
from translator_contract.configuration import settings as default_settings

LIBRARY_LOGGER_NAME = "translator_contract"

# Above CRITICAL, so nothing is emitted
SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _resolve_level(log_level: str) -> int:
    level = logging.getLevelName(log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def _build_processors(prod_mode: bool) -> List[Any]:
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def _ensure_handler(library_logger: logging.Logger) -> None:
    if not library_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        library_logger.addHandler(handler)


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> BoundLogger:
    """Configure structlog and the library's stdlib logger.

    Under pytest the library logger is silenced. Otherwise it gets a stream
    handler (added once) and events render as console lines in development
    or JSON in production.

    Args:
        log_level: Level name (DEBUG, INFO, ...). Defaults to settings.LOG_LEVEL.
        is_production: JSON output when True. Defaults to settings.is_production.
        settings: Settings to read defaults from (default: module singleton).

    Returns:
        Logger bound to the library logger name.
    """
    settings = settings or default_settings
    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)

    if _is_test_environment():
        library_logger.setLevel(SILENT_LEVEL)
        processors: List[Any] = [
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
    else:
        prod_mode = is_production if is_production is not None else settings.is_production
        library_logger.setLevel(_resolve_level(log_level or settings.LOG_LEVEL))
        _ensure_handler(library_logger)
        processors = _build_processors(prod_mode)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return structlog.stdlib.get_logger(LIBRARY_LOGGER_NAME)


# Module-level logger (auto-configured on import)
logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Returns:
        Logger bound with ``component`` (last dotted part of the module name)
        and ``module_path``.

    Example:
        # In translator_contract/i18n/registry.py
        logger = get_module_logger()
        # context: {"component": "registry", "module_path": "translator_contract.i18n.registry"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module_name = caller.f_globals.get("__name__") if caller is not None else None
    if not module_name:
        return logger.bind(component="unknown")
    return logger.bind(component=module_name.rpartition(".")[2], module_path=module_name)
