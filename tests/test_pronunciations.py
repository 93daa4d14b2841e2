import pytest

from verse_phonetics.core import (
    PronunciationVariant,
    select_pronunciation,
    stress_pattern_to_string,
)


def _variant(phones: str) -> PronunciationVariant:
    return PronunciationVariant.from_phones(phones.split())


def test_select_prefers_most_stress_digits():
    short = _variant("P OW1 M")
    long = _variant("P OW1 AH0 M")

    assert select_pronunciation([short, long]) is long


def test_select_tie_goes_to_first_variant():
    first = _variant("R EH1 D")
    second = _variant("R IY1 D")
    third = _variant("R AY1 D")

    assert select_pronunciation([first, second, third]) is first
    assert select_pronunciation([second, first, third]) is second


def test_select_tie_after_longer_variant_keeps_first_maximum():
    one = _variant("F AY1 R")
    two_a = _variant("F AY1 ER0")
    two_b = _variant("F AY1 AH0 R")

    assert select_pronunciation([one, two_a, two_b]) is two_a


def test_select_requires_a_variant():
    with pytest.raises(ValueError):
        select_pronunciation([])


def test_variant_is_immutable():
    variant = _variant("K AE1 T")

    with pytest.raises(AttributeError):
        variant.phones = ("D", "AO1", "G")


def test_stress_pattern_to_string():
    assert stress_pattern_to_string((0, 1, 0, 2)) == "u'u,"
    assert stress_pattern_to_string(()) == ""
