"""Tests for translator_contract.i18n.registry module."""

import threading
import time

import pytest
import structlog

from translator_contract.i18n import (
    InMemoryTranslator,
    InvalidArgumentError,
    TranslatorRegistry,
)


@pytest.fixture
def created():
    """Domains passed to the factory, in call order."""
    return []


@pytest.fixture
def registry(created):
    """Registry whose factory records the domains it builds."""

    def factory(domain):
        created.append(domain)
        return InMemoryTranslator(domain, messages={"Save": f"Save ({domain})"})

    return TranslatorRegistry(factory, default_domain="messages")


class TestTranslatorRegistry:
    """Tests for TranslatorRegistry."""

    def test_lazy_creation(self, registry, created):
        """Nothing is created until a domain is requested."""
        assert created == []
        translator = registry.get("shop")
        assert created == ["shop"]
        assert translator.translate("Save") == "Save (shop)"

    def test_creation_binds_domain_to_log_context(self):
        """The factory runs with the domain bound to the log context."""
        seen = []

        def factory(domain):
            seen.append(structlog.contextvars.get_contextvars().get("domain"))
            return InMemoryTranslator(domain)

        TranslatorRegistry(factory).get("shop")
        assert seen == ["shop"]
        assert "domain" not in structlog.contextvars.get_contextvars()

    def test_instances_are_reused(self, registry, created):
        """A domain's translator is created once."""
        assert registry.get("shop") is registry.get("shop")
        assert created == ["shop"]

    def test_get_without_domain_uses_default(self, registry):
        """get() with no domain returns the default domain's translator."""
        assert registry.get().domain == "messages"
        assert registry.get() is registry.get("messages")

    def test_default_domain_setter(self, registry):
        """Changing the default domain redirects get()."""
        registry.default_domain = "shop"
        assert registry.default_domain == "shop"
        assert registry.get().domain == "shop"

    @pytest.mark.parametrize("domain", ["", None, 3])
    def test_invalid_default_domain(self, registry, domain):
        """The default domain must be a non-empty str."""
        with pytest.raises(InvalidArgumentError):
            registry.default_domain = domain

    def test_invalid_domain_on_get(self, registry):
        """An empty domain name is rejected."""
        with pytest.raises(InvalidArgumentError):
            registry.get("")

    def test_invalid_default_domain_on_init(self):
        """The constructor validates the default domain."""
        with pytest.raises(InvalidArgumentError):
            TranslatorRegistry(lambda domain: None, default_domain="")

    def test_register_replaces(self, registry, created):
        """register() installs a translator without calling the factory."""
        custom = InMemoryTranslator("shop", messages={"Save": "custom"})
        registry.register("shop", custom)
        assert registry.get("shop") is custom
        assert created == []

    def test_unregister(self, registry):
        """unregister() drops a domain; it is recreated on next use."""
        first = registry.get("shop")
        registry.unregister("shop")
        assert not registry.has_domain("shop")
        assert registry.get("shop") is not first

    def test_unregister_unknown_raises(self, registry):
        """unregister() raises KeyError for unknown domains."""
        with pytest.raises(KeyError):
            registry.unregister("unknown")

    def test_domains_and_has_domain(self, registry):
        """domains() lists created domains in order."""
        registry.get("shop")
        registry.get("admin")
        assert registry.domains() == ["shop", "admin"]
        assert registry.has_domain("admin")
        assert not registry.has_domain("billing")

    def test_clear(self, registry):
        """clear() removes every translator."""
        registry.get("shop")
        registry.clear()
        assert registry.domains() == []

    def test_registries_are_independent(self):
        """Two registries share no state."""
        first = TranslatorRegistry(InMemoryTranslator, default_domain="a")
        second = TranslatorRegistry(InMemoryTranslator, default_domain="b")
        first.get("shop")
        assert not second.has_domain("shop")
        assert second.default_domain == "b"

    def test_concurrent_first_use_creates_one_instance(self):
        """Racing threads get the same translator."""
        calls = []

        def slow_factory(domain):
            calls.append(domain)
            time.sleep(0.01)
            return InMemoryTranslator(domain)

        registry = TranslatorRegistry(slow_factory)
        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(registry.get("shop"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert calls == ["shop"]
        assert len({id(result) for result in results}) == 1
