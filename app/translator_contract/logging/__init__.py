"""Structured logging infrastructure.

Public API:
    - configure_logging(): Initialize logging
    - get_module_logger(): Get a logger for the calling module
    - bind_lookup_context(): Context manager binding domain/locale to logs
    - clear_lookup_context(): Clear all bound context

Example:
    from translator_contract.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("module_initialized")
"""

from translator_contract.logging.context import (
    bind_lookup_context,
    clear_lookup_context,
)
from translator_contract.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_lookup_context",
    "clear_lookup_context",
]
