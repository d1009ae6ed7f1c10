"""Configuration module - public API.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation backend settings class
"""

from translator_contract.configuration.i18n import I18nSettings
from translator_contract.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
