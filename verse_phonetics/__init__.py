"""Dictionary-backed rhyme lookup and syllable counting."""

from .core import (
    DictionaryUnavailableError,
    EngineHandle,
    PhoneticEngine,
    build_engine,
)
from .utils.syllables import estimate_syllable_count

__version__ = "0.1.0"

__all__ = [
    "DictionaryUnavailableError",
    "EngineHandle",
    "PhoneticEngine",
    "build_engine",
    "estimate_syllable_count",
    "__version__",
]
