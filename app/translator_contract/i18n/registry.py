"""Caller-owned registry mapping domain names to Translator instances.

Replaces process-wide gettext state (domain table plus current default
domain) with an object the caller creates and passes around.
"""

import threading
from typing import Callable, Dict, List, Optional

from translator_contract.i18n.contracts import Translator
from translator_contract.i18n.exceptions import InvalidArgumentError
from translator_contract.logging import bind_lookup_context, get_module_logger

logger = get_module_logger()

TranslatorFactory = Callable[[str], Translator]


def _validate_domain(domain: object) -> str:
    if not isinstance(domain, str) or not domain:
        raise InvalidArgumentError(f"domain must be a non-empty str, got {domain!r}")
    return domain


class TranslatorRegistry:
    """Thread-safe registry of one Translator per domain.

    Translators are created lazily by ``factory`` the first time a domain is
    requested. Concurrent first use of a domain creates a single instance.

    Attributes:
        factory: Callable building a Translator for a domain name.
    """

    def __init__(self, factory: TranslatorFactory, default_domain: str = "messages"):
        self.factory = factory
        self._default_domain = _validate_domain(default_domain)
        self._translators: Dict[str, Translator] = {}
        self._lock = threading.Lock()

    @property
    def default_domain(self) -> str:
        """Domain used when callers do not name one."""
        return self._default_domain

    @default_domain.setter
    def default_domain(self, domain: str) -> None:
        self._default_domain = _validate_domain(domain)
        logger.info("default_domain_changed", domain=domain)

    def get(self, domain: Optional[str] = None) -> Translator:
        """Return the translator for ``domain``, creating it on first use.

        Args:
            domain: Domain name; the default domain when None.

        Returns:
            The domain's Translator.

        Raises:
            InvalidArgumentError: If domain is an empty string.
        """
        name = self._default_domain if domain is None else _validate_domain(domain)

        translator = self._translators.get(name)
        if translator is not None:
            return translator

        with self._lock:
            translator = self._translators.get(name)
            if translator is None:
                with bind_lookup_context(domain=name):
                    translator = self.factory(name)
                self._translators[name] = translator
                logger.info("translator_created", domain=name)
            return translator

    def register(self, domain: str, translator: Translator) -> None:
        """Register a translator for a domain, replacing any existing one."""
        _validate_domain(domain)
        with self._lock:
            self._translators[domain] = translator
        logger.info("translator_registered", domain=domain)

    def unregister(self, domain: str) -> None:
        """Remove a domain's translator.

        Raises:
            KeyError: If no translator is registered for the domain.
        """
        with self._lock:
            if domain not in self._translators:
                raise KeyError(f"No translator registered for domain '{domain}'")
            del self._translators[domain]
        logger.info("translator_unregistered", domain=domain)

    def has_domain(self, domain: str) -> bool:
        """Check if a translator has been created or registered for a domain."""
        with self._lock:
            return domain in self._translators

    def domains(self) -> List[str]:
        """List domains with a translator, in creation order."""
        with self._lock:
            return list(self._translators)

    def clear(self) -> None:
        """Drop all translators; they are recreated on next use."""
        with self._lock:
            self._translators.clear()
        logger.debug("translator_registry_cleared")
