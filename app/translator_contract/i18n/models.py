"""Translation models for the i18n system.

Defines lookup keys, plural sets and immutable catalog snapshots.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from translator_contract.i18n.contracts import validate_context, validate_message
from translator_contract.i18n.exceptions import InvalidArgumentError
from translator_contract.i18n.plurals import PluralRule


@dataclass(frozen=True)
class MessageKey:
    """Lookup identity of a translation.

    The same message with and without a context, or with two different
    contexts, are unrelated keys. For plural sets the message is the
    singular source text; the plural source text is never part of the key.

    Attributes:
        message: Source-language text.
        context: Optional disambiguation string.
    """

    message: str
    context: Optional[str] = None

    def __post_init__(self) -> None:
        validate_message(self.message)
        validate_context(self.context)

    def __str__(self) -> str:
        if self.context is None:
            return self.message
        # gettext's msgctxt separator
        return f"{self.context}\x04{self.message}"


@dataclass(frozen=True)
class PluralForms:
    """Ordered translated forms of one plural set, one per plural index."""

    forms: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.forms:
            raise InvalidArgumentError("a plural set needs at least one form")
        for form in self.forms:
            if not isinstance(form, str):
                raise InvalidArgumentError(
                    f"plural forms must be str, got {type(form).__name__}"
                )

    def select(self, index: int) -> str:
        """Return the form at ``index``, clamped to the stored forms."""
        return self.forms[max(0, min(index, len(self.forms) - 1))]

    def __len__(self) -> int:
        return len(self.forms)


@dataclass(frozen=True, eq=False)
class TranslationCatalog:
    """Immutable snapshot of the translations of one domain in one locale.

    Attributes:
        domain: Domain the catalog belongs to.
        locale: Target locale of the translations.
        messages: Singular translations by key.
        plurals: Plural sets by key.
        plural_rule: Rule selecting a form from a count.
        loaded_at: Timestamp (ISO 8601) when the catalog was built.
    """

    domain: str
    locale: str
    messages: Mapping[MessageKey, str] = field(default_factory=dict)
    plurals: Mapping[MessageKey, PluralForms] = field(default_factory=dict)
    plural_rule: PluralRule = field(default_factory=PluralRule.default)
    loaded_at: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))
        object.__setattr__(self, "plurals", MappingProxyType(dict(self.plurals)))

    def get_message(self, key: MessageKey) -> Optional[str]:
        """Return the singular translation for ``key``, or None."""
        return self.messages.get(key)

    def get_plural(self, key: MessageKey) -> Optional[PluralForms]:
        """Return the plural set for ``key``, or None."""
        return self.plurals.get(key)

    def has_message(self, key: MessageKey) -> bool:
        return key in self.messages

    def has_plural(self, key: MessageKey) -> bool:
        return key in self.plurals

    def merge(self, other: "TranslationCatalog") -> "TranslationCatalog":
        """Return a new catalog with ``other``'s entries layered on top.

        Entries of ``other`` win. Domain, locale and plural rule are kept
        from this catalog.
        """
        return TranslationCatalog(
            domain=self.domain,
            locale=self.locale,
            messages={**self.messages, **other.messages},
            plurals={**self.plurals, **other.plurals},
            plural_rule=self.plural_rule,
            loaded_at=other.loaded_at or self.loaded_at,
        )

    def __len__(self) -> int:
        return len(self.messages) + len(self.plurals)


class CatalogBuilder:
    """Collects entries and produces a TranslationCatalog.

    Example:
        builder = CatalogBuilder("shop", "fr-FR")
        builder.add_message("Save", "Enregistrer")
        builder.add_plural("Save item", ["Enregistrer l'article", "Enregistrer les articles"])
        catalog = builder.build()
    """

    def __init__(
        self,
        domain: str,
        locale: str,
        plural_rule: Optional[PluralRule] = None,
    ):
        self.domain = domain
        self.locale = locale
        self.plural_rule = plural_rule or PluralRule.for_locale(locale)
        self._messages: Dict[MessageKey, str] = {}
        self._plurals: Dict[MessageKey, PluralForms] = {}

    def add_message(
        self, message: str, translation: str, context: Optional[str] = None
    ) -> "CatalogBuilder":
        if not isinstance(translation, str):
            raise InvalidArgumentError(
                f"translation must be a str, got {type(translation).__name__}"
            )
        self._messages[MessageKey(message, context)] = translation
        return self

    def add_plural(
        self, message: str, forms: Iterable[str], context: Optional[str] = None
    ) -> "CatalogBuilder":
        self._plurals[MessageKey(message, context)] = PluralForms(tuple(forms))
        return self

    def build(self, loaded_at: Optional[str] = None) -> TranslationCatalog:
        return TranslationCatalog(
            domain=self.domain,
            locale=self.locale,
            messages=self._messages,
            plurals=self._plurals,
            plural_rule=self.plural_rule,
            loaded_at=loaded_at,
        )
