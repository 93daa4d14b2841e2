"""Pronunciation variants and canonical variant selection."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

_STRESS_DIGIT_PATTERN = re.compile(r"[012]$")


def stress_digit(phone: str) -> Optional[int]:
    """Return the stress digit carried by ``phone`` or ``None`` for consonants."""

    match = _STRESS_DIGIT_PATTERN.search(phone)
    if match is None:
        return None
    return int(match.group(0))


def strip_stress(phone: str) -> str:
    return _STRESS_DIGIT_PATTERN.sub("", phone)


@dataclass(frozen=True)
class PronunciationVariant:
    """One recorded pronunciation: phoneme symbols plus their stress digits."""

    phones: Tuple[str, ...]
    stresses: Tuple[int, ...]

    @classmethod
    def from_phones(cls, phones: Iterable[str]) -> "PronunciationVariant":
        phone_tuple = tuple(phones)
        stresses = tuple(
            digit for digit in (stress_digit(phone) for phone in phone_tuple) if digit is not None
        )
        return cls(phones=phone_tuple, stresses=stresses)

    @property
    def syllable_count(self) -> int:
        return len(self.stresses)


def select_pronunciation(variants: Sequence[PronunciationVariant]) -> PronunciationVariant:
    """Return the variant with the most stress digits.

    Variants with more recorded vowels are treated as the most fully specified
    reading (``poem`` as two syllables rather than one). Ties go to the
    variant that appears first in source order.
    """

    if not variants:
        raise ValueError("select_pronunciation() requires at least one variant")

    best = variants[0]
    for variant in variants[1:]:
        if len(variant.stresses) > len(best.stresses):
            best = variant
    return best


def stress_pattern_to_string(stresses: Iterable[int]) -> str:
    """Render stresses as ``'`` (primary), ``,`` (secondary) and ``u`` (unstressed)."""

    symbols = []
    for stress in stresses:
        if stress == 1:
            symbols.append("'")
        elif stress == 2:
            symbols.append(",")
        else:
            symbols.append("u")
    return "".join(symbols)


__all__ = [
    "PronunciationVariant",
    "select_pronunciation",
    "stress_digit",
    "strip_stress",
    "stress_pattern_to_string",
]
