"""Test data factories for deterministic test data generation."""

from tests.factories.translations import (
    build_mo,
    make_in_memory_translator,
    make_translation_catalog,
    write_mo_catalog,
    write_yaml_catalog,
)

__all__ = [
    "build_mo",
    "make_in_memory_translator",
    "make_translation_catalog",
    "write_mo_catalog",
    "write_yaml_catalog",
]
