"""Exceptions for the i18n system.

A missing translation is not an error: lookups return ``None``. Only invalid
input to a lookup, and failures while building catalogs, raise.
"""


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            translator.translate(message)
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class InvalidArgumentError(I18nError, ValueError):
    """Raised when a lookup receives a missing or ill-typed argument.

    Example:
        >>> translator.translate(None)
        Traceback (most recent call last):
        ...
        InvalidArgumentError: message must be a str, got NoneType
    """

    pass


class CatalogNotFoundError(I18nError, FileNotFoundError):
    """Raised when no catalog file exists for a domain and locale."""

    pass


class CatalogFormatError(I18nError, ValueError):
    """Raised when a catalog file cannot be parsed or has malformed entries."""

    pass


class PluralRuleError(CatalogFormatError):
    """Raised when a Plural-Forms header or expression is invalid."""

    pass


class I18nConfigurationError(I18nError):
    """Raised when translators cannot be built from the configured settings."""

    pass
