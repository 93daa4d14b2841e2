"""Heuristic syllable estimation for words missing from the dictionary."""

from __future__ import annotations

import re


__all__ = ["estimate_syllable_count", "HIATUS_DIGRAPHS", "SYLLABLE_VOWELS"]


SYLLABLE_VOWELS = frozenset("aeiouy")

# Adjacent vowels that are usually pronounced as two syllables (li-on, flu-id).
HIATUS_DIGRAPHS = ("ia", "io", "eo", "ua", "ui", "iu", "ya", "yo", "ye")

_NON_LETTER_PATTERN = re.compile(r"[^a-z]")
_HIATUS_PATTERN = re.compile("|".join(HIATUS_DIGRAPHS))


def estimate_syllable_count(word: str) -> int:
    """Estimate the number of syllables in ``word`` using vowel-run heuristics.

    Each run of vowels counts as one syllable. A trailing silent ``e`` is
    dropped unless the word ends in ``-le`` (``table``), and every hiatus
    digraph found by a non-overlapping scan adds a syllable back. Words with
    at least one letter never score below one; inputs without letters score
    zero.
    """

    cleaned = _NON_LETTER_PATTERN.sub("", (word or "").lower())
    if not cleaned:
        return 0

    count = 0
    previous_was_vowel = False
    for char in cleaned:
        is_vowel = char in SYLLABLE_VOWELS
        if is_vowel and not previous_was_vowel:
            count += 1
        previous_was_vowel = is_vowel

    if cleaned.endswith("e") and not cleaned.endswith("le") and count > 1:
        count -= 1

    count += len(_HIATUS_PATTERN.findall(cleaned))

    return max(1, count)
