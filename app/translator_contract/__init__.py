"""translator-contract - a two-method interface for consuming message translations.

Packages:
- i18n: the Translator contract, its providers, catalog loading,
  the domain registry and the gettext-style facade
- configuration: pydantic settings
- logging: structlog setup
"""

__version__ = "0.1.0"
