"""Lookup context binding for structured logging.

Usage:
    from translator_contract.logging import bind_lookup_context

    with bind_lookup_context(domain="shop", locale="fr-FR"):
        # All logs within this block include domain and locale
        translator.translate("Save")
"""

from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_lookup_context(
    domain: Optional[str] = None,
    locale: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind lookup metadata to all logs emitted within the block.

    Args:
        domain: Translation domain being queried.
        locale: Target locale of the translator.
        **extra_context: Additional key-value pairs to include in logs.
    """
    context: dict[str, Any] = {}

    if domain is not None:
        context["domain"] = domain

    if locale is not None:
        context["locale"] = locale

    context.update(extra_context)

    # restores any outer values for the same keys on exit
    with structlog.contextvars.bound_contextvars(**context):
        yield


def clear_lookup_context() -> None:
    """Clear all bound lookup context."""
    structlog.contextvars.clear_contextvars()
