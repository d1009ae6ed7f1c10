"""i18n system - the Translator contract and its supporting pieces.

Main components:
- contracts: Translator protocol and argument validation
- models: MessageKey, PluralForms, TranslationCatalog, CatalogBuilder
- plurals: PluralRule (gettext Plural-Forms expressions)
- providers: InMemoryTranslator, CatalogTranslator, GettextTranslator
- loader: CatalogLoader and YAMLCatalogLoader
- registry: TranslatorRegistry mapping domains to translators
- facade: GettextFacade with source-text fallback
- factory: create_translator and create_registry from settings
"""

from translator_contract.i18n.contracts import Translator
from translator_contract.i18n.exceptions import (
    CatalogFormatError,
    CatalogNotFoundError,
    I18nConfigurationError,
    I18nError,
    InvalidArgumentError,
    PluralRuleError,
)
from translator_contract.i18n.facade import GettextFacade
from translator_contract.i18n.factory import create_registry, create_translator
from translator_contract.i18n.loader import CatalogLoader, YAMLCatalogLoader
from translator_contract.i18n.models import (
    CatalogBuilder,
    MessageKey,
    PluralForms,
    TranslationCatalog,
)
from translator_contract.i18n.plurals import PluralRule
from translator_contract.i18n.providers import (
    CatalogTranslator,
    GettextTranslator,
    InMemoryTranslator,
)
from translator_contract.i18n.registry import TranslatorRegistry
from translator_contract.i18n.resolvers import LanguageNegotiator, normalize_locale

__all__ = [
    "Translator",
    "I18nError",
    "InvalidArgumentError",
    "CatalogNotFoundError",
    "CatalogFormatError",
    "PluralRuleError",
    "I18nConfigurationError",
    "MessageKey",
    "PluralForms",
    "TranslationCatalog",
    "CatalogBuilder",
    "PluralRule",
    "CatalogLoader",
    "YAMLCatalogLoader",
    "InMemoryTranslator",
    "CatalogTranslator",
    "GettextTranslator",
    "TranslatorRegistry",
    "GettextFacade",
    "LanguageNegotiator",
    "normalize_locale",
    "create_translator",
    "create_registry",
]
