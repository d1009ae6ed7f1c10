"""Catalog loading interface and implementations.

Loading sits outside the Translator contract: loaders produce immutable
TranslationCatalog snapshots that providers read from.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Tuple

import structlog
import yaml

from translator_contract.i18n.exceptions import (
    CatalogFormatError,
    CatalogNotFoundError,
    InvalidArgumentError,
)
from translator_contract.i18n.models import CatalogBuilder, TranslationCatalog
from translator_contract.i18n.plurals import PluralRule
from translator_contract.i18n.resolvers import LanguageNegotiator, normalize_locale

logger = structlog.get_logger()


class CatalogLoader(ABC):
    """Abstract base for catalog loaders."""

    @abstractmethod
    def load(self, domain: str, locale: str) -> TranslationCatalog:
        """Load the catalog of a domain for a locale.

        Args:
            domain: Domain name.
            locale: Requested locale tag.

        Returns:
            TranslationCatalog snapshot.

        Raises:
            CatalogNotFoundError: If no catalog exists for the domain and locale.
            CatalogFormatError: If the catalog is malformed.
        """
        pass

    @abstractmethod
    def available_locales(self, domain: str) -> List[str]:
        """List the locales a domain has catalogs for."""
        pass

    def clear_cache(self) -> None:
        """Drop cached catalogs so the next load reads the source again."""
        pass


class YAMLCatalogLoader(CatalogLoader):
    """Loader for YAML catalog files named ``<domain>.<locale>.yml``.

    File format:

        plural_forms: "nplurals=2; plural=(n != 1);"   # optional
        messages:
          - msgid: Save
            msgctxt: new-comment                       # optional
            msgstr: Create comment
          - msgid: Save item
            msgstr_plural: [Save item, Save items]

    Attributes:
        translations_dir: Directory containing the YAML files.
        use_cache: Whether parsed catalogs are kept in memory.
        cache: Cached catalogs by (domain, locale).
    """

    def __init__(self, translations_dir: Path, use_cache: bool = True):
        """Initialize YAML catalog loader.

        Args:
            translations_dir: Directory with YAML catalog files.
            use_cache: Whether to cache loaded catalogs in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[Tuple[str, str], TranslationCatalog] = {}

        if not self.translations_dir.is_dir():
            raise ValueError(f"Translations directory not found: {self.translations_dir}")

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def available_locales(self, domain: str) -> List[str]:
        locales = []
        for yaml_file in sorted(self.translations_dir.glob(f"{domain}.*.yml")):
            file_domain, _, locale = yaml_file.stem.rpartition(".")
            if file_domain == domain and locale:
                locales.append(normalize_locale(locale))
        return locales

    def load(self, domain: str, locale: str) -> TranslationCatalog:
        """Load the catalog closest to ``locale`` for ``domain``.

        An exact locale file wins; otherwise a file of the same language
        is used (``fr-CA`` falls back to ``fr`` or ``fr-FR``).
        """
        if not domain:
            raise InvalidArgumentError("domain must be a non-empty str")

        available = self.available_locales(domain)
        matched = LanguageNegotiator.find_best_match([normalize_locale(locale)], available)
        if matched is None:
            raise CatalogNotFoundError(
                f"No catalog found for domain {domain} and locale {locale} in {self.translations_dir}"
            )

        cache_key = (domain, matched)
        if self.use_cache and cache_key in self.cache:
            logger.debug("loaded_from_cache", domain=domain, locale=matched)
            return self.cache[cache_key]

        path = self._path_for(domain, matched)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise CatalogFormatError(f"Failed to parse {path}: {e}") from e

        catalog = self._build_catalog(domain, matched, data or {}, path)

        logger.info(
            "catalog_loaded",
            domain=domain,
            requested_locale=locale,
            locale=matched,
            entry_count=len(catalog),
        )

        if self.use_cache:
            self.cache[cache_key] = catalog

        return catalog

    def clear_cache(self) -> None:
        """Clear all cached catalogs."""
        self.cache.clear()
        logger.info("cleared_catalog_cache")

    def _path_for(self, domain: str, locale: str) -> Path:
        # available_locales normalized the tag; find the file it came from
        for yaml_file in self.translations_dir.glob(f"{domain}.*.yml"):
            file_domain, _, file_locale = yaml_file.stem.rpartition(".")
            if file_domain == domain and normalize_locale(file_locale) == locale:
                return yaml_file
        raise CatalogNotFoundError(f"Catalog file vanished for {domain}.{locale}")

    def _build_catalog(
        self,
        domain: str,
        locale: str,
        data: Any,
        source_file: Path,
    ) -> TranslationCatalog:
        if not isinstance(data, dict):
            raise CatalogFormatError(f"{source_file}: top level must be a mapping")

        header = data.get("plural_forms")
        plural_rule = (
            PluralRule.from_header(header) if header else PluralRule.for_locale(locale)
        )
        builder = CatalogBuilder(domain, locale, plural_rule=plural_rule)

        entries = data.get("messages") or []
        if not isinstance(entries, list):
            raise CatalogFormatError(f"{source_file}: 'messages' must be a list")

        for position, entry in enumerate(entries):
            self._add_entry(builder, entry, source_file, position)

        return builder.build(loaded_at=datetime.now(timezone.utc).isoformat())

    @staticmethod
    def _add_entry(
        builder: CatalogBuilder,
        entry: Any,
        source_file: Path,
        position: int,
    ) -> None:
        where = f"{source_file} entry {position}"
        if not isinstance(entry, dict):
            raise CatalogFormatError(f"{where}: entry must be a mapping")

        msgid = entry.get("msgid")
        msgctxt = entry.get("msgctxt")
        if not isinstance(msgid, str):
            raise CatalogFormatError(f"{where}: msgid must be a string")
        if msgctxt is not None and not isinstance(msgctxt, str):
            raise CatalogFormatError(f"{where}: msgctxt must be a string")

        if "msgstr_plural" in entry:
            forms = entry["msgstr_plural"]
            if not isinstance(forms, list) or not forms:
                raise CatalogFormatError(f"{where}: msgstr_plural must be a non-empty list")
            if not all(isinstance(form, str) for form in forms):
                raise CatalogFormatError(f"{where}: msgstr_plural items must be strings")
            builder.add_plural(msgid, forms, context=msgctxt)
        elif "msgstr" in entry:
            msgstr = entry["msgstr"]
            if not isinstance(msgstr, str):
                raise CatalogFormatError(f"{where}: msgstr must be a string")
            builder.add_message(msgid, msgstr, context=msgctxt)
        else:
            raise CatalogFormatError(f"{where}: needs msgstr or msgstr_plural")
