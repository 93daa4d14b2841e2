import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from verse_phonetics.core import build_engine, parse_cmu_dict


SAMPLE_DICT = """\
;;; Sample pronouncing dictionary used across the test-suite.
;;; Lines below mirror the CMU format.

TIME  T AY1 M
DIME  D AY1 M
RHYME  R AY1 M
READ  R EH1 D
READ(2)  R IY1 D
BED  B EH1 D
BEAD  B IY1 D
HMM  HH M
POEM  P OW1 M
POEM(2)  P OW1 AH0 M
PROEM  P R OW1 AH0 M
BANANA  B AH0 N AE1 N AH0
THE  DH AH0
A  AH0
KIND  K AY1 N D
MIND  M AY1 N D
OW'ST  AW1 S T
BROKEN
"""


@pytest.fixture
def sample_text():
    return SAMPLE_DICT


@pytest.fixture
def sample_dictionary():
    return parse_cmu_dict(SAMPLE_DICT)


@pytest.fixture
def sample_engine():
    return build_engine(text=SAMPLE_DICT)


@pytest.fixture(scope="session")
def cmu_engine():
    """Engine built from the CMU dictionary bundled with ``cmudict``."""

    return build_engine()
