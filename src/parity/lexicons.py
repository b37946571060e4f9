"""Built-in number-word lexicons.

Each lexicon maps a lowercase number word to its integer value. The mappings are read-only and
should remain small and deterministic.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

ENGLISH: Mapping[str, int] = MappingProxyType(
    {
        "one": 1,
        "two": 2,
        "three": 3,
        "four": 4,
        "five": 5,
        "six": 6,
        "seven": 7,
        "eight": 8,
        "nine": 9,
        "ten": 10,
    }
)

SPANISH: Mapping[str, int] = MappingProxyType(
    {
        "uno": 1,
        "dos": 2,
        "tres": 3,
        "cuatro": 4,
        "cinco": 5,
        "seis": 6,
        "siete": 7,
        "ocho": 8,
        "nueve": 9,
        "diez": 10,
    }
)

LEXICONS: Mapping[str, Mapping[str, int]] = MappingProxyType(
    {
        "en": ENGLISH,
        "es": SPANISH,
    }
)


class UnknownLanguageError(ValueError):
    """Raised when no built-in lexicon exists for a language code."""


def _normalize_language(language: str) -> str:
    return (language or "").strip().lower()


def supported_languages() -> tuple[str, ...]:
    """Return the sorted language codes that have a built-in lexicon."""

    return tuple(sorted(LEXICONS))


def get_lexicon(language: str) -> Mapping[str, int]:
    """Return the built-in lexicon for a language code (e.g. `en`, `ES`).

    Raises:
        UnknownLanguageError: If the language has no built-in lexicon.
    """

    code = _normalize_language(language)
    try:
        return LEXICONS[code]
    except KeyError:
        raise UnknownLanguageError(
            f"unsupported language {language!r}; expected one of {', '.join(supported_languages())}"
        ) from None
