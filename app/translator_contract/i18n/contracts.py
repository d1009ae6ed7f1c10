"""The Translator capability.

Any object with ``translate`` and ``translate_plural`` satisfying the rules
below is a Translator; providers do not share a base class.

Rules every provider follows:
- ``None`` means "no translation registered". An empty string is a present
  translation and is returned as ``""``.
- The original message is never returned as a fallback. Substituting the
  source text is the caller's job (see ``facade.GettextFacade``).
- A miss never raises. Only invalid arguments raise ``InvalidArgumentError``.
- Lookups do not mutate the translator and may run concurrently.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from translator_contract.i18n.exceptions import InvalidArgumentError


@runtime_checkable
class Translator(Protocol):
    """Read-only lookup of translations for one domain."""

    def translate(self, message: str, context: Optional[str] = None) -> Optional[str]:
        """Return the translation registered for ``(message, context)``.

        Args:
            message: Source-language text used as the lookup key.
            context: Optional disambiguation; ``None`` is its own key.

        Returns:
            The registered translation, or None if there is none.

        Raises:
            InvalidArgumentError: If message is missing or not a str.
        """
        ...

    def translate_plural(
        self, count: int, message: str, context: Optional[str] = None
    ) -> Optional[str]:
        """Return the plural form of ``(message, context)`` selected by ``count``.

        Only the singular message is accepted; the plural source text is not
        part of the lookup key.

        Args:
            count: Integer magnitude selecting the plural category.
            message: Singular source-language text used as the lookup key.
            context: Optional disambiguation; ``None`` is its own key.

        Returns:
            The selected plural form, or None if no plural set is registered.

        Raises:
            InvalidArgumentError: If message is missing or count is not an int.
        """
        ...


def _type_name(value: Any) -> str:
    return type(value).__name__


def validate_message(message: Any) -> str:
    """Return ``message`` if it is a str, else raise InvalidArgumentError."""
    if not isinstance(message, str):
        raise InvalidArgumentError(f"message must be a str, got {_type_name(message)}")
    return message


def validate_context(context: Any) -> Optional[str]:
    """Return ``context`` if it is None or a str, else raise InvalidArgumentError."""
    if context is not None and not isinstance(context, str):
        raise InvalidArgumentError(
            f"context must be a str or None, got {_type_name(context)}"
        )
    return context


def validate_count(count: Any) -> int:
    """Return ``count`` if it is an int, else raise InvalidArgumentError.

    ``bool`` is rejected even though it subclasses ``int``; fractional counts
    must be normalized by the caller.
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidArgumentError(f"count must be an int, got {_type_name(count)}")
    return count
