"""Factory functions for creating i18n components from settings."""

from functools import partial
from pathlib import Path
from typing import Optional

from translator_contract.configuration import Settings
from translator_contract.configuration import settings as default_settings
from translator_contract.configuration.i18n import SUPPORTED_BACKENDS
from translator_contract.i18n.contracts import Translator
from translator_contract.i18n.exceptions import (
    CatalogNotFoundError,
    I18nConfigurationError,
)
from translator_contract.i18n.loader import CatalogLoader, YAMLCatalogLoader
from translator_contract.i18n.providers import (
    CatalogTranslator,
    GettextTranslator,
    InMemoryTranslator,
)
from translator_contract.i18n.registry import TranslatorRegistry
from translator_contract.logging import bind_lookup_context, get_module_logger

logger = get_module_logger()


def _create_yaml_loader(translations_dir: Path, use_cache: bool) -> YAMLCatalogLoader:
    try:
        return YAMLCatalogLoader(translations_dir, use_cache=use_cache)
    except ValueError as e:
        raise I18nConfigurationError(str(e)) from e


def create_translator(
    domain: str,
    locale: Optional[str] = None,
    backend: Optional[str] = None,
    translations_dir: Optional[Path] = None,
    loader: Optional[CatalogLoader] = None,
    missing_ok: bool = False,
    settings: Optional[Settings] = None,
) -> Translator:
    """Create a Translator for one domain.

    Arguments left as None come from ``settings.i18n``.

    Args:
        domain: Domain to serve.
        locale: Target locale.
        backend: 'yaml', 'gettext' or 'memory'.
        translations_dir: Directory with catalog files.
        loader: Pre-built CatalogLoader to share between yaml translators.
        missing_ok: Return an empty translator instead of raising when the
            domain has no catalog.
        settings: Settings to read defaults from (default: module singleton).

    Returns:
        Translator for the domain.

    Raises:
        I18nConfigurationError: If the backend is unknown or the translations
            directory is missing.
        CatalogNotFoundError: If the domain has no catalog and missing_ok is False.

    Usage:
        translator = create_translator("shop", locale="fr-FR")
        translator.translate("Save")
    """
    i18n = (settings or default_settings).i18n
    locale = locale or i18n.locale
    backend = (backend or i18n.backend).lower()
    translations_dir = Path(translations_dir or i18n.translations_dir)

    if backend not in SUPPORTED_BACKENDS:
        raise I18nConfigurationError(f"Unknown translation backend: {backend}")

    if backend == "yaml" and loader is None:
        loader = _create_yaml_loader(translations_dir, i18n.use_cache)

    translator: Translator
    try:
        with bind_lookup_context(domain=domain, locale=locale, backend=backend):
            if backend == "yaml":
                translator = CatalogTranslator(loader, domain, locale)
            elif backend == "gettext":
                translator = GettextTranslator.from_directory(
                    domain, translations_dir, locale
                )
            else:
                translator = InMemoryTranslator(domain, locale=locale)
    except CatalogNotFoundError:
        if not missing_ok:
            raise
        logger.warning(
            "catalog_not_found_using_empty_translator",
            domain=domain,
            locale=locale,
            backend=backend,
        )
        translator = InMemoryTranslator(domain, locale=locale)

    logger.info("translator_created", domain=domain, locale=locale, backend=backend)
    return translator


def create_registry(
    settings: Optional[Settings] = None,
    locale: Optional[str] = None,
    missing_ok: bool = True,
) -> TranslatorRegistry:
    """Create a TranslatorRegistry whose translators follow the settings.

    Domains without a catalog get an empty translator by default, so the
    facade falls back to source text, like gettext's ``fallback=True``.

    Usage:
        registry = create_registry()
        facade = GettextFacade(registry)
        facade.dgettext("shop", "Save")
    """
    settings = settings or default_settings
    i18n = settings.i18n
    loader: Optional[CatalogLoader] = None
    if i18n.backend == "yaml":
        loader = _create_yaml_loader(i18n.translations_dir, i18n.use_cache)

    factory = partial(
        create_translator,
        locale=locale or i18n.locale,
        loader=loader,
        missing_ok=missing_ok,
        settings=settings,
    )
    logger.info(
        "translator_registry_created",
        backend=i18n.backend,
        default_domain=i18n.default_domain,
    )
    return TranslatorRegistry(factory, default_domain=i18n.default_domain)
