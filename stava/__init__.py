"""
stava

Frequency-based spelling correction.

Main Components:
    - normalizer: Text lowercasing and [a-z]+ tokenization
    - frequency: Word -> occurrence count model built from text
    - edits: Split/delete/transpose/replace/insert candidate generation
    - corrector: Known-word check, distance-1 and distance-2 search
    - cli: Command line interface

Quick Start:
    from stava import Corrector

    corrector = Corrector()
    corrector.learn(open("words.txt").read())

    word, corrected = corrector.correct("speling")
"""

__version__ = "0.1.0"

from .normalizer import normalize, extract_words
from .frequency import WordFrequency
from .edits import LETTERS, splits, edits1, edits2
from .corrector import Corrector, CorrectionResult

__all__ = [
    "normalize",
    "extract_words",
    "WordFrequency",
    "LETTERS",
    "splits",
    "edits1",
    "edits2",
    "Corrector",
    "CorrectionResult",
]
