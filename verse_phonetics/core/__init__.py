"""Core phonetic analysis: dictionary parsing, rhyme keys and syllable counts."""

from .cmudict_loader import (
    DictionaryUnavailableError,
    PronunciationDictionary,
    load_cmu_dictionary,
    parse_cmu_dict,
)
from .engine import EngineHandle, PhoneticEngine, build_engine, engine_from_dictionary
from .pronunciations import (
    PronunciationVariant,
    select_pronunciation,
    stress_pattern_to_string,
)
from .rhyme_index import RhymeIndex, build_rhyme_index
from .rhyme_keys import extract_rhyme_key
from .syllable_counter import (
    count_line_syllables,
    count_syllables,
    split_syllables,
    syllable_counts_for_text,
)

__all__ = [
    "DictionaryUnavailableError",
    "PronunciationDictionary",
    "load_cmu_dictionary",
    "parse_cmu_dict",
    "EngineHandle",
    "PhoneticEngine",
    "build_engine",
    "engine_from_dictionary",
    "PronunciationVariant",
    "select_pronunciation",
    "stress_pattern_to_string",
    "RhymeIndex",
    "build_rhyme_index",
    "extract_rhyme_key",
    "count_line_syllables",
    "count_syllables",
    "split_syllables",
    "syllable_counts_for_text",
]
