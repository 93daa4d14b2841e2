"""Engine facade bundling a pronouncing dictionary with its rhyme index."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Callable, List, Optional, Set, Tuple

from verse_phonetics.utils.observability import (
    add_span_attributes,
    get_logger,
    start_span,
)

from .cmudict_loader import (
    DictionaryUnavailableError,
    PronunciationDictionary,
    load_cmu_dictionary,
    normalize_query,
    parse_cmu_dict,
)
from .rhyme_index import RhymeIndex, build_rhyme_index
from .rhyme_keys import extract_rhyme_key
from .syllable_counter import (
    canonical_pronunciation,
    count_line_syllables,
    count_syllables,
    split_syllables,
    syllable_counts_for_text,
)


class PhoneticEngine:
    """Read-only query surface over a dictionary and its rhyme index.

    Instances are built once by :func:`build_engine` and never mutated, so a
    single engine can be shared by any number of readers.
    """

    __slots__ = ("dictionary", "index")

    def __init__(self, dictionary: PronunciationDictionary, index: RhymeIndex) -> None:
        object.__setattr__(self, "dictionary", dictionary)
        object.__setattr__(self, "index", index)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(words={len(self.dictionary)}, keys={len(self.index)})"

    def rhyme_key(self, word: str) -> Optional[str]:
        """Return the rhyme key of ``word``'s canonical pronunciation."""

        variant = canonical_pronunciation(self.dictionary, word)
        if variant is None:
            return None
        return extract_rhyme_key(variant.phones)

    def rhyme_keys_for(self, word: str) -> List[str]:
        """Return the distinct rhyme keys of every pronunciation of ``word``.

        Only the canonical key is indexed; the others let callers spot
        homographs such as ``read`` that rhyme differently per reading.
        """

        keys: List[str] = []
        for variant in self.dictionary.find(word):
            key = extract_rhyme_key(variant.phones)
            if key is not None and key not in keys:
                keys.append(key)
        return keys

    def lookup_rhymes(self, word: str, *, limit: Optional[int] = None) -> List[str]:
        """Return dictionary words that perfectly rhyme with ``word``.

        Unknown and keyless words yield an empty list.
        """

        normalized = normalize_query(word)
        key = self.index.key_for(normalized)
        if key is None:
            key = self.rhyme_key(normalized)
        if key is None:
            return []

        excluded: Set[str] = {normalized, normalized.replace("'", "")}
        rhymes = [
            candidate for candidate in self.index.words_for_key(key) if candidate not in excluded
        ]
        if limit is not None and limit >= 0:
            return rhymes[:limit]
        return rhymes

    def syllable_count(self, word: str) -> int:
        return count_syllables(self.dictionary, word)

    def line_syllable_count(self, line: str) -> int:
        return count_line_syllables(self.dictionary, line)

    def text_syllable_counts(self, text: str) -> List[int]:
        return syllable_counts_for_text(self.dictionary, text)

    def split_syllables(self, word: str) -> List[str]:
        return split_syllables(self.dictionary, word)

    def stress_pattern(self, word: str) -> Tuple[int, ...]:
        variant = canonical_pronunciation(self.dictionary, word)
        return variant.stresses if variant is not None else ()

    def all_stress_patterns(self, word: str) -> List[Tuple[int, ...]]:
        return [variant.stresses for variant in self.dictionary.find(word)]

    def is_known(self, word: str) -> bool:
        return bool(self.dictionary.find(word))


def engine_from_dictionary(dictionary: PronunciationDictionary) -> PhoneticEngine:
    if not dictionary:
        raise DictionaryUnavailableError("Cannot build an engine from an empty dictionary")
    return PhoneticEngine(dictionary, build_rhyme_index(dictionary))


def build_engine(
    source: Optional[Path | str] = None,
    *,
    text: Optional[str] = None,
) -> PhoneticEngine:
    """Load a pronouncing dictionary and build its rhyme index.

    Args:
        source: Path to a CMU-format dictionary file. When omitted the
            ``VERSE_PHONETICS_DICT_PATH`` environment variable or the bundled
            CMU dictionary is used.
        text: Raw dictionary text, used instead of reading ``source``.

    Raises:
        DictionaryUnavailableError: The dictionary could not be read or
            produced no entries.
    """

    logger = get_logger(__name__).bind(component="phonetic_engine")
    with start_span("verse_phonetics.build_engine") as span:
        if text is None:
            # load_cmu_dictionary logs its own failures.
            dictionary = load_cmu_dictionary(source)
        else:
            dictionary = parse_cmu_dict(text)
            if not dictionary:
                logger.error("Dictionary text contains no entries")
        engine = engine_from_dictionary(dictionary)

        add_span_attributes(
            span,
            {
                "dictionary.words": len(engine.dictionary),
                "index.keys": len(engine.index),
                "index.keyless_words": engine.index.keyless_words,
            },
        )
        logger.info(
            "Phonetic engine ready",
            context={"words": len(engine.dictionary), "rhyme_keys": len(engine.index)},
        )
        return engine


class EngineHandle:
    """Shared reference to the current engine that supports hot reloads.

    A reload builds a complete replacement engine before swapping the
    reference. Readers holding the previous engine keep a consistent view.
    """

    def __init__(
        self,
        engine: PhoneticEngine,
        *,
        builder: Callable[..., PhoneticEngine] = build_engine,
    ) -> None:
        self._engine = engine
        self._builder = builder
        self._lock = threading.Lock()

    @property
    def engine(self) -> PhoneticEngine:
        return self._engine

    def reload(self, *args, **kwargs) -> PhoneticEngine:
        """Build a new engine with ``builder(*args, **kwargs)`` and swap it in.

        A failed build raises and leaves the current engine in place.
        """

        replacement = self._builder(*args, **kwargs)
        with self._lock:
            self._engine = replacement
        return replacement

    def lookup_rhymes(self, word: str, *, limit: Optional[int] = None) -> List[str]:
        return self._engine.lookup_rhymes(word, limit=limit)

    def syllable_count(self, word: str) -> int:
        return self._engine.syllable_count(word)


__all__ = [
    "EngineHandle",
    "PhoneticEngine",
    "build_engine",
    "engine_from_dictionary",
]
