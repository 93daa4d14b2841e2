"""Parsing and loading of CMU-format pronouncing dictionaries."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, List, Optional, Tuple

import cmudict

from verse_phonetics.utils.observability import (
    create_counter,
    get_logger,
    start_span,
)

from .pronunciations import PronunciationVariant

DICT_PATH_ENV = "VERSE_PHONETICS_DICT_PATH"
COMMENT_MARKER = ";;;"

_WORD_VARIANT_PATTERN = re.compile(r"\(\d+\)$")
_QUERY_STRIP_PATTERN = re.compile(r"[^a-z'-]")
_NEGATING_PREFIX = "un"
_NEGATING_PREFIX_PHONES = ("AH0", "N")

_ENTRIES_PARSED = create_counter(
    "verse_phonetics_dictionary_entries_total",
    "Base words parsed from pronouncing dictionaries.",
)

_logger = get_logger(__name__).bind(component="cmudict_loader")

Variants = Tuple[PronunciationVariant, ...]


class DictionaryUnavailableError(RuntimeError):
    """Raised when a pronouncing dictionary cannot be read or yields no entries."""


def _strip_variant(word: str) -> str:
    return _WORD_VARIANT_PATTERN.sub("", word).lower()


def normalize_query(word: str) -> str:
    """Lowercase ``word`` and drop everything but letters, apostrophes and hyphens."""

    return _QUERY_STRIP_PATTERN.sub("", (word or "").strip().lower())


class PronunciationDictionary(Mapping):
    """Read-only mapping from base word to its pronunciation variants.

    Iteration follows the order in which base words first appeared in the
    source text, and each word's variants keep their source order.
    """

    def __init__(self, entries: Dict[str, Variants]) -> None:
        self._entries = MappingProxyType(dict(entries))

    def __getitem__(self, word: str) -> Variants:
        return self._entries[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<{len(self)} words>)"

    @property
    def variant_count(self) -> int:
        return sum(len(variants) for variants in self._entries.values())

    def find(self, word: str) -> Variants:
        """Return pronunciations for a free-form query word.

        Tries the normalised word, then the word without apostrophes
        (``ow'st``), then composes ``un-`` words from their stem. Returns an
        empty tuple when nothing matches.
        """

        normalized = normalize_query(word)
        if not normalized:
            return ()

        found = self._entries.get(normalized)
        if found:
            return found

        without_apostrophe = normalized.replace("'", "")
        found = self._entries.get(without_apostrophe)
        if found:
            return found

        if normalized.startswith(_NEGATING_PREFIX):
            stem = self._entries.get(normalized[len(_NEGATING_PREFIX):])
            if stem:
                return (
                    PronunciationVariant.from_phones(_NEGATING_PREFIX_PHONES + stem[0].phones),
                )

        return ()


def parse_cmu_dict(text: str) -> PronunciationDictionary:
    """Parse CMU dictionary ``text`` into a :class:`PronunciationDictionary`.

    Blank lines, ``;;;`` comment lines and lines with fewer than two tokens
    are skipped. Inline ``#`` comments are ignored. Alternate pronunciations
    such as ``READ(2)`` accumulate under their lowercase base word.
    """

    pronunciations: Dict[str, List[PronunciationVariant]] = {}
    skipped = 0

    for line in text.splitlines():
        parts = line.split()
        if not parts or parts[0].startswith(COMMENT_MARKER):
            continue

        # Only phoneme positions can open an inline comment; "#SHARP-SIGN" is a headword.
        for position, token in enumerate(parts[1:], start=1):
            if token.startswith("#"):
                parts = parts[:position]
                break

        if len(parts) < 2:
            skipped += 1
            continue

        raw_word, *phones = parts
        word = _strip_variant(raw_word)
        if not word:
            skipped += 1
            continue

        pronunciations.setdefault(word, []).append(PronunciationVariant.from_phones(phones))

    dictionary = PronunciationDictionary(
        {word: tuple(variants) for word, variants in pronunciations.items()}
    )
    _logger.debug(
        "Parsed pronouncing dictionary",
        context={
            "words": len(dictionary),
            "variants": dictionary.variant_count,
            "skipped_lines": skipped,
        },
    )
    return dictionary


def _read_source(path: Optional[Path | str]) -> Tuple[str, str]:
    if path is None:
        path = os.environ.get(DICT_PATH_ENV) or None

    if path is None:
        raw = cmudict.dict_string()
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        return raw, "cmudict"

    dict_path = Path(path)
    return dict_path.read_text(encoding="utf-8"), str(dict_path)


def load_cmu_dictionary(path: Optional[Path | str] = None) -> PronunciationDictionary:
    """Load and parse a pronouncing dictionary.

    Args:
        path: Dictionary file to read. When omitted the file named by
            ``VERSE_PHONETICS_DICT_PATH`` is used, falling back to the CMU
            dictionary shipped with the ``cmudict`` distribution.

    Raises:
        DictionaryUnavailableError: The source could not be read or decoded,
            or it contained no usable entries.
    """

    with start_span("verse_phonetics.load_dictionary") as span:
        try:
            text, source = _read_source(path)
        except (OSError, UnicodeDecodeError) as exc:
            _logger.error(
                "Pronouncing dictionary unavailable",
                context={"path": str(path), "error": str(exc)},
            )
            raise DictionaryUnavailableError(
                f"Cannot read pronouncing dictionary {path!s}: {exc}"
            ) from exc

        dictionary = parse_cmu_dict(text)
        if not dictionary:
            _logger.error("Pronouncing dictionary is empty", context={"source": source})
            raise DictionaryUnavailableError(
                f"Pronouncing dictionary {source} contains no entries"
            )

        _ENTRIES_PARSED.inc(len(dictionary))
        if span is not None:
            span.set_attribute("dictionary.words", len(dictionary))
        _logger.info(
            "Loaded pronouncing dictionary",
            context={"source": source, "words": len(dictionary)},
        )
        return dictionary


__all__ = [
    "COMMENT_MARKER",
    "DICT_PATH_ENV",
    "DictionaryUnavailableError",
    "PronunciationDictionary",
    "load_cmu_dictionary",
    "normalize_query",
    "parse_cmu_dict",
]
