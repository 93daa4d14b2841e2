"""Index grouping dictionary words by perfect-rhyme key."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, List, Optional, Tuple

from verse_phonetics.utils.observability import (
    create_counter,
    create_histogram,
    get_logger,
)

from .pronunciations import select_pronunciation
from .rhyme_keys import extract_rhyme_key

_BUILD_SECONDS = create_histogram(
    "verse_phonetics_index_build_seconds",
    "Time spent building rhyme indexes.",
)
_KEYLESS_WORDS = create_counter(
    "verse_phonetics_keyless_words_total",
    "Dictionary words left out of rhyme indexes because they have no vowel.",
)

_logger = get_logger(__name__).bind(component="rhyme_index")


class RhymeIndex(Mapping):
    """Immutable mapping from rhyme key to the words sharing it.

    Each word sits under the key of its canonical pronunciation only. Word
    lists keep dictionary order.
    """

    def __init__(
        self,
        groups: Dict[str, Tuple[str, ...]],
        word_keys: Dict[str, str],
        *,
        keyless_words: int = 0,
    ) -> None:
        self._groups = MappingProxyType(dict(groups))
        self._word_keys = MappingProxyType(dict(word_keys))
        self.keyless_words = keyless_words

    def __getitem__(self, key: str) -> Tuple[str, ...]:
        return self._groups[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<{len(self)} keys, {len(self._word_keys)} words>)"

    def key_for(self, word: str) -> Optional[str]:
        return self._word_keys.get(word)

    def words_for_key(self, key: str) -> Tuple[str, ...]:
        return self._groups.get(key, ())

    def rhymes_for(self, word: str) -> List[str]:
        """Return indexed words sharing ``word``'s key, excluding ``word`` itself."""

        key = self._word_keys.get(word)
        if key is None:
            return []
        return [candidate for candidate in self._groups[key] if candidate != word]


def build_rhyme_index(dictionary: Mapping) -> RhymeIndex:
    """Group every word of ``dictionary`` under its canonical rhyme key.

    ``dictionary`` maps base words to their pronunciation variants. Words whose
    canonical pronunciation contains no vowel are skipped.
    """

    groups: Dict[str, List[str]] = {}
    word_keys: Dict[str, str] = {}
    keyless = 0

    with _BUILD_SECONDS.time():
        for word, variants in dictionary.items():
            canonical = select_pronunciation(variants)
            key = extract_rhyme_key(canonical.phones)
            if key is None:
                keyless += 1
                _logger.debug("Word has no rhyme key", context={"word": word})
                continue
            groups.setdefault(key, []).append(word)
            word_keys[word] = key

    if keyless:
        _KEYLESS_WORDS.inc(keyless)

    index = RhymeIndex(
        {key: tuple(words) for key, words in groups.items()},
        word_keys,
        keyless_words=keyless,
    )
    _logger.info(
        "Built rhyme index",
        context={"keys": len(index), "words": len(word_keys), "keyless_words": keyless},
    )
    return index


__all__ = ["RhymeIndex", "build_rhyme_index"]
