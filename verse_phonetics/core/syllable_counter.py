"""Syllable counting backed by a pronouncing dictionary."""

from __future__ import annotations

import math
from typing import List, Optional

from verse_phonetics.utils.observability import create_counter
from verse_phonetics.utils.syllables import estimate_syllable_count

from .cmudict_loader import PronunciationDictionary
from .pronunciations import PronunciationVariant, select_pronunciation

_SYLLABLE_LOOKUPS = create_counter(
    "verse_phonetics_syllable_lookups_total",
    "Syllable counts served, by dictionary or heuristic path.",
    label_names=("path",),
)


def canonical_pronunciation(
    dictionary: PronunciationDictionary, word: str
) -> Optional[PronunciationVariant]:
    variants = dictionary.find(word)
    if not variants:
        return None
    return select_pronunciation(variants)


def count_syllables(dictionary: PronunciationDictionary, word: str) -> int:
    """Return the syllable count of ``word``.

    Known words report the stress-digit count of their canonical
    pronunciation. Unknown words, and dictionary entries without any vowel,
    fall back to :func:`estimate_syllable_count`.
    """

    variant = canonical_pronunciation(dictionary, word)
    if variant is not None and variant.syllable_count > 0:
        _SYLLABLE_LOOKUPS.labels(path="dictionary").inc()
        return variant.syllable_count

    _SYLLABLE_LOOKUPS.labels(path="heuristic").inc()
    return estimate_syllable_count(word)


def count_line_syllables(dictionary: PronunciationDictionary, line: str) -> int:
    """Sum the syllable counts of the whitespace-separated tokens of ``line``."""

    return sum(count_syllables(dictionary, token) for token in line.split())


def syllable_counts_for_text(dictionary: PronunciationDictionary, text: str) -> List[int]:
    return [count_line_syllables(dictionary, line) for line in text.split("\n")]


def split_syllables(dictionary: PronunciationDictionary, word: str) -> List[str]:
    """Split the spelling of ``word`` into one chunk per dictionary syllable.

    Chunks are cut proportionally to the word's length, so boundaries are an
    approximation of the real syllabification. A leading capital is kept on
    the first chunk. Unknown words yield an empty list.
    """

    variant = canonical_pronunciation(dictionary, word)
    if variant is None or variant.syllable_count == 0:
        return []

    lowered = word.lower()
    count = variant.syllable_count
    chars_per_syllable = len(lowered) / count

    chunks: List[str] = []
    for index in range(count):
        start = math.floor(index * chars_per_syllable)
        end = len(lowered) if index == count - 1 else math.floor((index + 1) * chars_per_syllable)
        chunks.append(lowered[start:end])

    if chunks and word[:1].isupper():
        chunks[0] = chunks[0][:1].upper() + chunks[0][1:]
    return chunks


__all__ = [
    "canonical_pronunciation",
    "count_line_syllables",
    "count_syllables",
    "split_syllables",
    "syllable_counts_for_text",
]
