"""Derivation of perfect-rhyme keys from phoneme sequences."""

from __future__ import annotations

from typing import Optional, Sequence

from .pronunciations import stress_digit, strip_stress

RHYME_KEY_SEPARATOR = "-"


def _last_index_with_stress(phones: Sequence[str], accepted: frozenset[int]) -> Optional[int]:
    for index in range(len(phones) - 1, -1, -1):
        if stress_digit(phones[index]) in accepted:
            return index
    return None


def extract_rhyme_key(phones: Sequence[str]) -> Optional[str]:
    """Return the final stressed vowel plus trailing phonemes as a rhyme key.

    The span starts at the last vowel carrying primary or secondary stress,
    or at the last vowel of any stress when the pronunciation has no stressed
    vowel. Stress digits are dropped and the bare phonemes joined with ``-``,
    so ``T AY1 M`` yields ``AY-M``. Returns ``None`` when no phoneme is a
    vowel.
    """

    start = _last_index_with_stress(phones, frozenset({1, 2}))
    if start is None:
        start = _last_index_with_stress(phones, frozenset({0, 1, 2}))
    if start is None:
        return None

    return RHYME_KEY_SEPARATOR.join(strip_stress(phone) for phone in phones[start:])


__all__ = ["extract_rhyme_key", "RHYME_KEY_SEPARATOR"]
