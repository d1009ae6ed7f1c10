"""gettext-style facade over a TranslatorRegistry.

The facade is the only place where a missing translation turns into the
source text. Translators themselves report misses as ``None``.

Example:
    facade = GettextFacade(registry)
    facade.gettext("Save")                                # default domain
    facade.dngettext("shop", "Save item", "Save items", 3)
    facade.textdomain("shop")                             # change default
"""

from typing import Optional

from translator_contract.i18n.contracts import validate_count, validate_message
from translator_contract.i18n.registry import TranslatorRegistry


def _plural_fallback(singular: str, plural: str, count: int) -> str:
    return singular if count == 1 else plural


class GettextFacade:
    """Domain-dispatching gettext API with source-text fallback."""

    def __init__(self, registry: TranslatorRegistry):
        self.registry = registry

    def textdomain(self, domain: Optional[str] = None) -> str:
        """Set the default domain if given, and return the current one."""
        if domain is not None:
            self.registry.default_domain = domain
        return self.registry.default_domain

    # explicit domain

    def dgettext(self, domain: Optional[str], message: str) -> str:
        return self.dpgettext(domain, None, message)

    def dpgettext(
        self, domain: Optional[str], context: Optional[str], message: str
    ) -> str:
        translation = self.registry.get(domain).translate(message, context)
        return message if translation is None else translation

    def dngettext(
        self, domain: Optional[str], singular: str, plural: str, count: int
    ) -> str:
        return self.dnpgettext(domain, None, singular, plural, count)

    def dnpgettext(
        self,
        domain: Optional[str],
        context: Optional[str],
        singular: str,
        plural: str,
        count: int,
    ) -> str:
        validate_message(plural)
        validate_count(count)
        translation = self.registry.get(domain).translate_plural(count, singular, context)
        if translation is None:
            return _plural_fallback(singular, plural, count)
        return translation

    # default domain

    def gettext(self, message: str) -> str:
        return self.dgettext(None, message)

    def pgettext(self, context: Optional[str], message: str) -> str:
        return self.dpgettext(None, context, message)

    def ngettext(self, singular: str, plural: str, count: int) -> str:
        return self.dngettext(None, singular, plural, count)

    def npgettext(
        self, context: Optional[str], singular: str, plural: str, count: int
    ) -> str:
        return self.dnpgettext(None, context, singular, plural, count)
