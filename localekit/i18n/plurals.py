"""Plural form selection per language.

Rules follow the gettext/CLDR plural families. Each rule maps an integer
count to a zero-based variant index using integer arithmetic only, so every
count (including zero and negative numbers) yields an index.
"""

from typing import Callable, Dict, Tuple

PluralRule = Callable[[int], int]


def _rem(n: int, m: int) -> int:
    """Truncated remainder: the result takes the sign of n (-21 -> -1)."""
    return -((-n) % m) if n < 0 else n % m


def _one_form(n: int) -> int:
    return 0


def _default(n: int) -> int:
    return 0 if n == 1 else 1


def _greater_than_one(n: int) -> int:
    return 1 if n > 1 else 0


def _icelandic(n: int) -> int:
    return 1 if _rem(n, 10) != 1 or _rem(n, 100) == 11 else 0


def _javanese(n: int) -> int:
    return 1 if n != 0 else 0


def _macedonian(n: int) -> int:
    return 0 if n == 1 or _rem(n, 10) == 1 else 1


def _latvian(n: int) -> int:
    if _rem(n, 10) == 1 and _rem(n, 100) != 11:
        return 0
    return 1 if n != 0 else 2


def _lithuanian(n: int) -> int:
    if _rem(n, 10) == 1 and _rem(n, 100) != 11:
        return 0
    if _rem(n, 10) >= 2 and (_rem(n, 100) < 10 or _rem(n, 100) >= 20):
        return 1
    return 2


def _east_slavic(n: int) -> int:
    if _rem(n, 10) == 1 and _rem(n, 100) != 11:
        return 0
    if 2 <= _rem(n, 10) <= 4 and (_rem(n, 100) < 10 or _rem(n, 100) >= 20):
        return 1
    return 2


def _mandinka(n: int) -> int:
    if n == 0:
        return 0
    return 1 if n == 1 else 2


def _romanian(n: int) -> int:
    if n == 1:
        return 0
    if n == 0 or 0 < _rem(n, 100) < 20:
        return 1
    return 2


def _polish(n: int) -> int:
    if n == 1:
        return 0
    if 2 <= _rem(n, 10) <= 4 and (_rem(n, 100) < 10 or _rem(n, 100) >= 20):
        return 1
    return 2


def _czech(n: int) -> int:
    if n == 1:
        return 0
    return 1 if 2 <= n <= 4 else 2


def _slovenian(n: int) -> int:
    if _rem(n, 100) == 1:
        return 0
    if _rem(n, 100) == 2:
        return 1
    return 2 if _rem(n, 100) in (3, 4) else 3


def _maltese(n: int) -> int:
    if n == 1:
        return 0
    if n == 0 or 1 < _rem(n, 100) < 11:
        return 1
    return 2 if 10 < _rem(n, 100) < 20 else 3


def _scottish_gaelic(n: int) -> int:
    if n in (1, 11):
        return 0
    if n in (2, 12):
        return 1
    return 2 if 2 < n < 20 else 3


def _welsh(n: int) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    return 2 if n not in (8, 11) else 3


def _cornish(n: int) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    return 2 if n == 3 else 3


def _irish(n: int) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    if 2 < n < 7:
        return 2
    return 3 if 6 < n < 11 else 4


def _arabic(n: int) -> int:
    if n == 0:
        return 0
    if n == 1:
        return 1
    if n == 2:
        return 2
    if 3 <= _rem(n, 100) <= 10:
        return 3
    return 4 if _rem(n, 100) >= 11 else 5


# rule, number of forms
_FAMILIES: Tuple[Tuple[Tuple[str, ...], PluralRule, int], ...] = (
    (
        (
            "ay", "bo", "cgg", "dz", "fa", "id", "ja", "jbo", "ka", "kk", "km",
            "ko", "ky", "lo", "ms", "my", "sah", "su", "th", "tt", "ug", "vi",
            "wo", "zh",
        ),
        _one_form,
        1,
    ),
    (("is",), _icelandic, 2),
    (("jv",), _javanese, 2),
    (("mk",), _macedonian, 2),
    (
        (
            "ach", "ak", "am", "arn", "br", "fil", "fr", "gun", "ln", "mfe",
            "mg", "mi", "oc", "pt_BR", "tg", "ti", "tr", "uz", "wa",
        ),
        _greater_than_one,
        2,
    ),
    (("lv",), _latvian, 3),
    (("lt",), _lithuanian, 3),
    (("be", "bs", "hr", "ru", "sr", "uk"), _east_slavic, 3),
    (("mnk",), _mandinka, 3),
    (("ro",), _romanian, 3),
    (("pl", "csb"), _polish, 3),
    (("cs", "sk"), _czech, 3),
    (("sl",), _slovenian, 4),
    (("mt",), _maltese, 4),
    (("gd",), _scottish_gaelic, 4),
    (("cy",), _welsh, 4),
    (("kw",), _cornish, 4),
    (("ga",), _irish, 5),
    (("ar",), _arabic, 6),
)

PLURAL_RULES: Dict[str, Tuple[PluralRule, int]] = {}
for _codes, _rule, _forms in _FAMILIES:
    for _code in _codes:
        # first family wins ("zh" is listed as one-form)
        PLURAL_RULES.setdefault(_code, (_rule, _forms))


def plural_index(language_code: str, count: int) -> int:
    """Return the plural variant index for count in the given language.

    Matching is exact: "de-CH" does not resolve to the "de" rule. Unknown
    codes use the two-form rule (0 for a count of 1, 1 otherwise).

    Args:
        language_code: Locale code (e.g. "ru", "ar", "pt_BR").
        count: Integer count.

    Returns:
        Zero-based variant index.
    """
    rule, _ = PLURAL_RULES.get(language_code, (_default, 2))
    return rule(count)


def plural_form_count(language_code: str) -> int:
    """Return how many variants the language's rule distinguishes."""
    _, forms = PLURAL_RULES.get(language_code, (_default, 2))
    return forms
