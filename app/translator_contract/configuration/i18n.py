"""Translation backend settings."""

from pathlib import Path

from pydantic import Field, field_validator

from translator_contract.configuration.base import ComponentSettings

SUPPORTED_BACKENDS = ("yaml", "gettext", "memory")

# app/locales next to the package
DEFAULT_TRANSLATIONS_DIR = Path(__file__).resolve().parents[2] / "locales"


class I18nSettings(ComponentSettings):
    """Configuration for translator construction.

    Environment Variables:
        I18N_TRANSLATIONS_DIR: Directory holding catalog files (default: app/locales)
        I18N_BACKEND: Catalog backend - 'yaml', 'gettext' or 'memory' (default: yaml)
        I18N_LOCALE: Target locale of the translators (default: en-US)
        I18N_DEFAULT_DOMAIN: Domain used when callers name none (default: messages)
        I18N_USE_CACHE: Cache parsed catalogs in the loader (default: True)

    Example:
        ```python
        from translator_contract.configuration import settings

        if settings.i18n.backend == "gettext":
            ...
        ```
    """

    translations_dir: Path = Field(
        default=DEFAULT_TRANSLATIONS_DIR,
        alias="I18N_TRANSLATIONS_DIR",
        description="Directory holding catalog files",
    )
    backend: str = Field(
        default="yaml",
        alias="I18N_BACKEND",
        description="Catalog backend: 'yaml', 'gettext' or 'memory'",
    )
    locale: str = Field(
        default="en-US",
        alias="I18N_LOCALE",
        description="Target locale of created translators",
    )
    default_domain: str = Field(
        default="messages",
        alias="I18N_DEFAULT_DOMAIN",
        description="Domain used when callers do not name one",
    )
    use_cache: bool = Field(
        default=True,
        alias="I18N_USE_CACHE",
        description="Cache parsed catalogs in the loader",
    )

    @field_validator("backend")
    @classmethod
    def _check_backend(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in SUPPORTED_BACKENDS:
            raise ValueError(
                f"I18N_BACKEND must be one of {', '.join(SUPPORTED_BACKENDS)}: {value}"
            )
        return value
