from __future__ import annotations

from wordperms.core.model import Capitalization


def capitalize_first(word: str) -> str:
    """Uppercase the first code point only; the remainder is left untouched.

    Unlike str.capitalize() this never lowercases the tail ("mcDonald" -> "McDonald").
    """
    if not word:
        return ""
    return word[0].upper() + word[1:]


def expand_variants(word: str, policy: Capitalization) -> list[str]:
    """Return the capitalization variants of one word, in policy order.

    all -> [word, WORD, Word]. Coinciding variants are kept; the result set
    collapses them later.
    """
    if policy is Capitalization.none:
        return [word]
    if policy is Capitalization.first:
        return [capitalize_first(word)]
    if policy is Capitalization.upper:
        return [word.upper()]
    return [word, word.upper(), capitalize_first(word)]


def variant_count(policy: Capitalization) -> int:
    return 3 if policy is Capitalization.all else 1
