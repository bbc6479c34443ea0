"""
Frequency-based spelling corrector.

Given a query word, the corrector returns the most frequent learned word that
is reachable with the fewest primitive edits (at most two), or the query
itself when nothing is found.

Architecture:
    1. Known word?            -> return it, not corrected
    2. edits1(word) & model   -> most frequent match, corrected
    3. edits2(word) & model   -> most frequent match, corrected
    4. Nothing found          -> return the query, not corrected

The query is used as given. Callers that want case-insensitive lookups
lowercase the word before calling correct().

Usage:
    corrector = Corrector()
    corrector.learn("spelling inconvenient bicycle corrected arranged poetry word")

    corrector.correct("bycyle")
    # CorrectionResult(word='bicycle', corrected=True, ...)

    word, corrected = corrector.correct("word")
    # ('word', False)
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Optional, Set, Union

from .edits import edits1, edits2
from .frequency import WordFrequency

logger = logging.getLogger(__name__)


@dataclass
class CorrectionResult:
    """Result of a correction."""
    word: str
    corrected: bool
    # Debug info, not part of equality
    distance: int = field(default=0, compare=False)  # Edit stage that matched (1 or 2)
    candidates_found: int = field(default=0, compare=False)
    latency_ms: float = field(default=0.0, compare=False)

    def __iter__(self) -> Iterator[Union[str, bool]]:
        # Unpacks as (word, corrected)
        yield self.word
        yield self.corrected

    def __eq__(self, other) -> bool:
        # Compares as the (word, corrected) pair
        if isinstance(other, CorrectionResult):
            return (self.word, self.corrected) == (other.word, other.corrected)
        if isinstance(other, tuple):
            return (self.word, self.corrected) == other
        return NotImplemented


class Corrector:
    """Spelling corrector backed by a word frequency model."""

    def __init__(self, model: Optional[WordFrequency] = None):
        """
        Initialize corrector.

        Args:
            model: Frequency model to correct against (default: new empty model)
        """
        self.model = model if model is not None else WordFrequency()

    @classmethod
    def from_texts(cls, texts: Iterable[str]) -> "Corrector":
        """Build a corrector that has learned every text in order."""
        corrector = cls()
        for text in texts:
            corrector.learn(text)
        return corrector

    def learn(self, text: str) -> None:
        """Learn the words of text; see WordFrequency.learn()."""
        self.model.learn(text)

    def known(self, words: Iterable[str]) -> Set[str]:
        """The subset of words that appear in the model."""
        return set(w for w in words if w in self.model)

    def best_candidate(self, candidates: Set[str]) -> Optional[str]:
        """
        Pick the most frequent of the given known words.

        Candidates are ranked through a count -> word table in which a later
        word overwrites an earlier one with the same count. Ties are therefore
        decided by feed order only. The feed is reverse lexicographic, so among
        equally frequent words the alphabetically first one wins; this keeps
        results stable between runs, where raw set order is not.

        Args:
            candidates: Words already known to the model

        Returns:
            The winning word, or None if candidates is empty
        """
        ranking: Dict[int, str] = {}
        for candidate in sorted(candidates, reverse=True):
            ranking[self.model.count(candidate)] = candidate

        if not ranking:
            return None
        return ranking[max(ranking)]

    def correct(self, word: str) -> CorrectionResult:
        """
        Correct a single word.

        Steps:
        1. Return word unchanged if it is known
        2. Search every string one edit away
        3. Search every string two edits away (expanding all distance-1
           strings, not only those in the model)
        4. Give up and return word unchanged

        Args:
            word: Query word, used as a literal key

        Returns:
            CorrectionResult, unpackable as (word, corrected)
        """
        start = time.time()

        if word in self.model:
            return CorrectionResult(word, False, latency_ms=(time.time() - start) * 1000)

        matches = self.known(edits1(word))
        distance = 1

        if not matches:
            matches = self.known(edits2(word))
            distance = 2

        elapsed = (time.time() - start) * 1000
        best = self.best_candidate(matches)
        if best is None:
            logger.debug("No correction for %r within two edits (%.1fms)", word, elapsed)
            return CorrectionResult(word, False, latency_ms=elapsed)

        logger.debug(
            "Corrected %r -> %r at distance %d (%d candidates, %.1fms)",
            word, best, distance, len(matches), elapsed,
        )
        return CorrectionResult(
            best,
            True,
            distance=distance,
            candidates_found=len(matches),
            latency_ms=elapsed,
        )
