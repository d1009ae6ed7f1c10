"""Plural category rules.

A rule maps an integer count to a plural index. Rules are written in the
gettext ``Plural-Forms`` C syntax and compiled with ``gettext.c2py``.
"""

import gettext
import re
from dataclasses import dataclass, field
from typing import Callable, Dict

from translator_contract.i18n.contracts import validate_count
from translator_contract.i18n.exceptions import PluralRuleError

DEFAULT_PLURAL_FORMS = "nplurals=2; plural=(n != 1);"

_HEADER_PATTERN = re.compile(
    r"^\s*nplurals\s*=\s*(?P<nplurals>\d+)\s*;\s*plural\s*=\s*(?P<expression>[^;]+);?\s*$"
)

# Language -> Plural-Forms header. Region-specific tags ("pt-BR") are checked
# before the bare language.
_BUILTIN_PLURAL_FORMS: Dict[str, str] = {
    # one form
    "ja": "nplurals=1; plural=0;",
    "ko": "nplurals=1; plural=0;",
    "zh": "nplurals=1; plural=0;",
    "vi": "nplurals=1; plural=0;",
    "th": "nplurals=1; plural=0;",
    "id": "nplurals=1; plural=0;",
    "ms": "nplurals=1; plural=0;",
    # singular includes zero
    "fr": "nplurals=2; plural=(n > 1);",
    "oc": "nplurals=2; plural=(n > 1);",
    "pt-BR": "nplurals=2; plural=(n > 1);",
    # slavic
    "ru": (
        "nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : "
        "n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2);"
    ),
    "uk": (
        "nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : "
        "n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2);"
    ),
    "be": (
        "nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : "
        "n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2);"
    ),
    "sr": (
        "nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : "
        "n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2);"
    ),
    "hr": (
        "nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : "
        "n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2);"
    ),
    "pl": (
        "nplurals=3; plural=(n==1 ? 0 : "
        "n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2);"
    ),
    "cs": "nplurals=3; plural=(n==1 ? 0 : (n>=2 && n<=4) ? 1 : 2);",
    "sk": "nplurals=3; plural=(n==1 ? 0 : (n>=2 && n<=4) ? 1 : 2);",
    "sl": (
        "nplurals=4; plural=(n%100==1 ? 0 : n%100==2 ? 1 : "
        "n%100==3 || n%100==4 ? 2 : 3);"
    ),
    # baltic
    "lt": (
        "nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : "
        "n%10>=2 && (n%100<10 || n%100>=20) ? 1 : 2);"
    ),
    "lv": "nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : n != 0 ? 1 : 2);",
    "ro": (
        "nplurals=3; plural=(n==1 ? 0 : "
        "(n==0 || (n%100 > 0 && n%100 < 20)) ? 1 : 2);"
    ),
    "ga": (
        "nplurals=5; plural=(n==1 ? 0 : n==2 ? 1 : "
        "(n>2 && n<7) ? 2 : (n>6 && n<11) ? 3 : 4);"
    ),
    "ar": (
        "nplurals=6; plural=(n==0 ? 0 : n==1 ? 1 : n==2 ? 2 : "
        "n%100>=3 && n%100<=10 ? 3 : n%100>=11 ? 4 : 5);"
    ),
}


@dataclass(frozen=True)
class PluralRule:
    """Maps integer counts to plural indexes.

    Attributes:
        nplurals: Number of plural forms the language distinguishes.
        expression: C-syntax expression of ``n`` yielding the index.
    """

    nplurals: int
    expression: str
    _func: Callable[[int], int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.nplurals < 1:
            raise PluralRuleError(f"nplurals must be at least 1: {self.nplurals}")
        try:
            func = gettext.c2py(self.expression)
        except (ValueError, SyntaxError) as e:
            raise PluralRuleError(
                f"Invalid plural expression {self.expression!r}: {e}"
            ) from e
        object.__setattr__(self, "_func", func)

    @classmethod
    def from_header(cls, header: str) -> "PluralRule":
        """Parse a gettext ``Plural-Forms`` header value.

        Args:
            header: e.g. ``"nplurals=2; plural=(n != 1);"``.

        Returns:
            Compiled PluralRule.

        Raises:
            PluralRuleError: If the header is malformed.
        """
        match = _HEADER_PATTERN.match(header or "")
        if not match:
            raise PluralRuleError(f"Malformed Plural-Forms header: {header!r}")
        return cls(
            nplurals=int(match.group("nplurals")),
            expression=match.group("expression").strip(),
        )

    @classmethod
    def for_locale(cls, locale: str) -> "PluralRule":
        """Return the built-in rule for a locale tag.

        Accepts BCP 47 (``pt-BR``) and POSIX (``pt_BR``) forms. Languages
        without a built-in rule use the two-form ``n != 1`` rule.
        """
        tag = (locale or "").replace("_", "-")
        parts = tag.split("-")
        language = parts[0].lower()
        if len(parts) > 1:
            regional = f"{language}-{parts[1].upper()}"
            if regional in _BUILTIN_PLURAL_FORMS:
                return cls.from_header(_BUILTIN_PLURAL_FORMS[regional])
        return cls.from_header(_BUILTIN_PLURAL_FORMS.get(language, DEFAULT_PLURAL_FORMS))

    @classmethod
    def default(cls) -> "PluralRule":
        """Return the two-form ``n != 1`` rule."""
        return cls.from_header(DEFAULT_PLURAL_FORMS)

    def index(self, count: int) -> int:
        """Return the plural index for ``count``.

        Negative counts are evaluated on their absolute value. The result is
        clamped to ``0..nplurals - 1``.

        Raises:
            InvalidArgumentError: If count is not an int.
        """
        n = abs(validate_count(count))
        return max(0, min(int(self._func(n)), self.nplurals - 1))
