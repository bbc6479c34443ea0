"""
Word frequency model.

Maps every word seen in learned text to the number of times it was seen. The
model only grows: learning adds occurrences, nothing removes them.

Usage:
    model = WordFrequency()
    model.learn("the quick brown fox jumps over the lazy dog")
    model.count("the")   # 2

Building from several sources in parallel:
    Give each worker its own WordFrequency, then fold them together on one
    thread with merge(). Never call learn() on a shared model from several
    threads.
"""

import logging
from collections import Counter
from typing import Iterator, List, Mapping, Optional, Tuple, Union

from .normalizer import extract_words

logger = logging.getLogger(__name__)


class WordFrequency:
    """Accumulates word occurrence counts from text."""

    def __init__(self):
        self.counts: Counter = Counter()

    def learn(self, text: str) -> None:
        """
        Count the words of text into the model.

        Counts are cumulative across calls. Empty text, or text without any
        letters, leaves the model unchanged.

        Args:
            text: Arbitrary text, any case
        """
        words = extract_words(text)
        if not words:
            return
        self.counts.update(words)
        logger.debug("Learned %d words (%d unique in model)", len(words), len(self.counts))

    def merge(self, other: Union["WordFrequency", Mapping[str, int]]) -> None:
        """
        Fold another model's counts into this one.

        Counts of words present in both are summed. When a plain mapping is
        given, entries with a count below 1 are skipped.

        Args:
            other: WordFrequency or word -> count mapping
        """
        if isinstance(other, WordFrequency):
            self.counts.update(other.counts)
            return
        self.counts.update({word: n for word, n in other.items() if n >= 1})

    def count(self, word: str) -> int:
        """Occurrences of word, 0 if it was never learned."""
        return self.counts.get(word, 0)

    def most_common(self, n: Optional[int] = None) -> List[Tuple[str, int]]:
        return self.counts.most_common(n)

    @property
    def total(self) -> int:
        """Total number of learned word occurrences."""
        return sum(self.counts.values())

    def __contains__(self, word: str) -> bool:
        return word in self.counts

    def __len__(self) -> int:
        return len(self.counts)

    def __iter__(self) -> Iterator[str]:
        return iter(self.counts)

    def __eq__(self, other) -> bool:
        if not isinstance(other, WordFrequency):
            return NotImplemented
        return self.counts == other.counts

    def __repr__(self) -> str:
        return f"WordFrequency({len(self.counts)} words, {self.total} occurrences)"
