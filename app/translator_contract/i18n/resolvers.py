"""Locale negotiation for picking the catalog closest to a requested locale."""

from typing import List, Optional

import structlog

logger = structlog.get_logger().bind(component="i18n.resolver")


def _normalize_subtag(subtag: str) -> str:
    # script: Hant, region: CA or 419, anything else (variants): lowercase
    if len(subtag) == 4 and subtag.isalpha():
        return subtag.title()
    if (len(subtag) == 2 and subtag.isalpha()) or (len(subtag) == 3 and subtag.isdigit()):
        return subtag.upper()
    return subtag.lower()


def normalize_locale(tag: str) -> str:
    """Normalize a locale tag to BCP 47 casing.

    ``fr_ca``, ``FR-ca`` and ``fr-CA`` all become ``fr-CA``; ``zh_hant_tw``
    becomes ``zh-Hant-TW``; a bare language becomes lowercase.
    """
    parts = [part for part in tag.strip().replace("_", "-").split("-") if part]
    if not parts:
        return ""
    return "-".join([parts[0].lower(), *(_normalize_subtag(part) for part in parts[1:])])


class LanguageNegotiator:
    """Matches requested language tags against available ones.

    Implements RFC 4647 style lookup for the common case where the exact
    regional tag is missing (e.g. "pt-BR" requested, only "pt" available).
    """

    @staticmethod
    def matches_language(
        requested: str,
        available: str,
        strict: bool = False,
    ) -> bool:
        """Check if available language matches requested language.

        Args:
            requested: Requested language tag (e.g., "en-US").
            available: Available language tag (e.g., "en").
            strict: If True, requires exact match. If False, allows language-only match.

        Returns:
            True if languages match.
        """
        if normalize_locale(requested) == normalize_locale(available):
            return True

        if strict:
            return False

        requested_lang = normalize_locale(requested).split("-")[0]
        available_lang = normalize_locale(available).split("-")[0]
        return requested_lang == available_lang

    @staticmethod
    def find_best_match(
        requested: List[str],
        available: List[str],
        default: Optional[str] = None,
    ) -> Optional[str]:
        """Find best matching language from available options.

        Args:
            requested: Requested language tags in preference order.
            available: Available language tags.
            default: Default if no match found.

        Returns:
            Best matching tag from available, or default if no match.
        """
        for req_lang in requested:
            for avail_lang in available:
                if LanguageNegotiator.matches_language(req_lang, avail_lang, strict=True):
                    return avail_lang

            # Prefer the bare language ("fr") over a sibling region ("fr-FR")
            for avail_lang in sorted(available, key=lambda tag: "-" in tag):
                if LanguageNegotiator.matches_language(req_lang, avail_lang, strict=False):
                    logger.debug(
                        "negotiated_language_fallback",
                        requested=req_lang,
                        matched=avail_lang,
                    )
                    return avail_lang

        return default
