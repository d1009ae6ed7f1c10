"""Translator providers, one per backing store.

- InMemoryTranslator: plain dicts supplied by the caller
- CatalogTranslator: TranslationCatalog snapshots from a CatalogLoader
- GettextTranslator: compiled gettext ``.mo`` files

All three satisfy ``contracts.Translator`` without a shared base class.
"""

import gettext
from pathlib import Path
from typing import List, Mapping, Optional, Sequence, Tuple, Union

from translator_contract.i18n.contracts import (
    validate_context,
    validate_count,
    validate_message,
)
from translator_contract.i18n.exceptions import CatalogNotFoundError
from translator_contract.i18n.loader import CatalogLoader
from translator_contract.i18n.models import (
    CatalogBuilder,
    MessageKey,
    TranslationCatalog,
)
from translator_contract.i18n.plurals import PluralRule
from translator_contract.logging import bind_lookup_context, get_module_logger

logger = get_module_logger()

# A message alone, or a (message, context) pair
EntryKey = Union[str, Tuple[str, Optional[str]]]


def _lookup_message(
    catalog: TranslationCatalog, message: str, context: Optional[str]
) -> Optional[str]:
    key = MessageKey(validate_message(message), validate_context(context))
    translation = catalog.get_message(key)
    if translation is None:
        logger.debug(
            "translation_missing",
            domain=catalog.domain,
            locale=catalog.locale,
            message=message,
            context=context,
        )
    return translation


def _lookup_plural(
    catalog: TranslationCatalog, count: int, message: str, context: Optional[str]
) -> Optional[str]:
    validate_count(count)
    key = MessageKey(validate_message(message), validate_context(context))
    forms = catalog.get_plural(key)
    if forms is None:
        logger.debug(
            "plural_translation_missing",
            domain=catalog.domain,
            locale=catalog.locale,
            message=message,
            context=context,
        )
        return None
    return forms.select(catalog.plural_rule.index(count))


def _split_entry_key(key: EntryKey) -> Tuple[str, Optional[str]]:
    if isinstance(key, tuple):
        message, context = key
        return message, context
    return key, None


class InMemoryTranslator:
    """Translator over dictionaries supplied at construction.

    Keys are either the message alone or a ``(message, context)`` tuple.

    Example:
        translator = InMemoryTranslator(
            "shop",
            messages={("Save", "new-comment"): "Create comment"},
            plurals={"Save item": ["Save item", "Save items"]},
        )
        translator.translate("Save", "new-comment")  # "Create comment"
        translator.translate("Save")                 # None
    """

    def __init__(
        self,
        domain: str,
        messages: Optional[Mapping[EntryKey, str]] = None,
        plurals: Optional[Mapping[EntryKey, Sequence[str]]] = None,
        locale: str = "en-US",
        plural_rule: Optional[PluralRule] = None,
    ):
        builder = CatalogBuilder(domain, locale, plural_rule=plural_rule)
        for key, translation in (messages or {}).items():
            message, context = _split_entry_key(key)
            builder.add_message(message, translation, context=context)
        for key, forms in (plurals or {}).items():
            message, context = _split_entry_key(key)
            builder.add_plural(message, forms, context=context)
        self._catalog = builder.build()

    @property
    def domain(self) -> str:
        return self._catalog.domain

    @property
    def locale(self) -> str:
        return self._catalog.locale

    @property
    def catalog(self) -> TranslationCatalog:
        return self._catalog

    def translate(self, message: str, context: Optional[str] = None) -> Optional[str]:
        return _lookup_message(self._catalog, message, context)

    def translate_plural(
        self, count: int, message: str, context: Optional[str] = None
    ) -> Optional[str]:
        return _lookup_plural(self._catalog, count, message, context)


class CatalogTranslator:
    """Translator over a TranslationCatalog loaded from a CatalogLoader.

    The catalog is loaded at construction. ``reload()`` loads a fresh
    snapshot and swaps it in with a single reference assignment, so a
    concurrent lookup sees either the old catalog or the new one.

    Attributes:
        loader: CatalogLoader used to (re)load the catalog.
    """

    def __init__(self, loader: CatalogLoader, domain: str, locale: str):
        """Initialize and load the catalog.

        Args:
            loader: CatalogLoader to read from.
            domain: Domain to serve.
            locale: Requested locale.

        Raises:
            CatalogNotFoundError: If the loader has no catalog for domain and locale.
        """
        self.loader = loader
        self._requested_locale = locale
        self._catalog = loader.load(domain, locale)
        logger.info(
            "initialized_catalog_translator",
            domain=domain,
            locale=self._catalog.locale,
        )

    @property
    def domain(self) -> str:
        return self._catalog.domain

    @property
    def locale(self) -> str:
        return self._catalog.locale

    @property
    def catalog(self) -> TranslationCatalog:
        return self._catalog

    def translate(self, message: str, context: Optional[str] = None) -> Optional[str]:
        return _lookup_message(self._catalog, message, context)

    def translate_plural(
        self, count: int, message: str, context: Optional[str] = None
    ) -> Optional[str]:
        return _lookup_plural(self._catalog, count, message, context)

    def reload(self) -> None:
        """Load a new snapshot from the loader and swap it in."""
        self.loader.clear_cache()
        with bind_lookup_context(
            domain=self._catalog.domain, locale=self._requested_locale
        ):
            catalog = self.loader.load(self._catalog.domain, self._requested_locale)
        self._catalog = catalog
        logger.info(
            "reloaded_catalog",
            domain=catalog.domain,
            locale=catalog.locale,
            entry_count=len(catalog),
        )


def _gettext_languages(locale: str) -> list:
    # gettext directories use POSIX tags: fr_FR
    return [locale.replace("-", "_")]


def _catalog_chain(
    translations: gettext.NullTranslations,
) -> List[gettext.NullTranslations]:
    # Links without a parsed catalog (plain NullTranslations) hold no entries
    chain = []
    node: Optional[gettext.NullTranslations] = translations
    while node is not None:
        if isinstance(getattr(node, "_catalog", None), dict):
            chain.append(node)
        node = node._fallback
    return chain


class GettextTranslator:
    """Translator over a compiled gettext catalog.

    Entries are read straight from the parsed catalogs of the translations
    object and its fallbacks, so a miss is reported as None and a plural
    set never answers a singular lookup. Plural forms are chosen by the
    ``Plural-Forms`` header of the ``.mo`` file holding the set. The empty
    msgid is reserved for the catalog header and is never reported as a
    translation.

    Example:
        translator = GettextTranslator.from_directory("shop", Path("locales"), "fr-FR")
        # reads locales/fr_FR/LC_MESSAGES/shop.mo
    """

    def __init__(
        self,
        domain: str,
        translations: gettext.NullTranslations,
        locale: str = "en-US",
    ):
        """Wrap an already-parsed gettext catalog.

        Args:
            domain: Domain the catalog serves.
            translations: Parsed catalog, usually ``gettext.GNUTranslations``.
            locale: Locale of the catalog.
        """
        self.domain = domain
        self.locale = locale
        self._translations = translations

    @classmethod
    def from_directory(
        cls, domain: str, localedir: Path, locale: str
    ) -> "GettextTranslator":
        """Load ``<localedir>/<locale>/LC_MESSAGES/<domain>.mo``.

        Raises:
            CatalogNotFoundError: If no ``.mo`` file matches.
        """
        try:
            translations = gettext.translation(
                domain,
                localedir=str(localedir),
                languages=_gettext_languages(locale),
            )
        except FileNotFoundError as e:
            raise CatalogNotFoundError(
                f"No gettext catalog for domain {domain} and locale {locale} in {localedir}"
            ) from e
        logger.info("loaded_gettext_catalog", domain=domain, locale=locale)
        return cls(domain, translations, locale=locale)

    def translate(self, message: str, context: Optional[str] = None) -> Optional[str]:
        validate_message(message)
        validate_context(context)
        if message != "":
            key = self._catalog_key(message, context)
            for node in _catalog_chain(self._translations):
                if key in node._catalog:
                    return node._catalog[key]
        self._log_missing(message, context)
        return None

    def translate_plural(
        self, count: int, message: str, context: Optional[str] = None
    ) -> Optional[str]:
        n = abs(validate_count(count))
        validate_message(message)
        validate_context(context)
        key = self._catalog_key(message, context)
        for node in _catalog_chain(self._translations):
            entries = node._catalog
            if (key, 0) not in entries:
                continue
            last = 0
            while (key, last + 1) in entries:
                last += 1
            index = min(max(int(node.plural(n)), 0), last)
            return entries[(key, index)]
        self._log_missing(message, context)
        return None

    @staticmethod
    def _catalog_key(message: str, context: Optional[str]) -> str:
        if context is None:
            return message
        return gettext.GNUTranslations.CONTEXT % (context, message)

    def _log_missing(self, message: str, context: Optional[str]) -> None:
        logger.debug(
            "translation_missing",
            domain=self.domain,
            locale=self.locale,
            message=message,
            context=context,
        )
