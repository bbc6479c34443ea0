"""
Edit primitives for candidate generation.

Every candidate correction is reached from the query word by one or two
primitive edits. Each edit is derived from a split of the word into a left
and a right part:

    "cat" -> ("", "cat"), ("c", "at"), ("ca", "t"), ("cat", "")

    deletes     drop the first letter of right          "at", "ct", "ca"
    transposes  swap the first two letters of right     "act", "cta"
    replaces    swap the first letter of right for a-z  "aat", ..., "caz"
    inserts     put a letter a-z in front of right      "acat", ..., "catz"

The family functions return lists in generation order; edits1() collapses
them into a set since different families can produce the same string
(replacing a letter with itself gives back the word). Nothing here looks at
the dictionary.

Usage:
    edits1("speling")         # every string one edit away
    edits2("peotryy")         # every string two edits away
"""

from typing import List, Set, Tuple

LETTERS = 'abcdefghijklmnopqrstuvwxyz'

Split = Tuple[str, str]


def splits(word: str) -> List[Split]:
    """
    Split word at every position, including both ends.

    Examples:
        >>> splits("ab")
        [('', 'ab'), ('a', 'b'), ('ab', '')]
    """
    return [(word[:i], word[i:]) for i in range(len(word) + 1)]


def deletes(word_splits: List[Split]) -> List[str]:
    """One string per non-empty right part, with its first letter dropped."""
    return [left + right[1:] for left, right in word_splits if right]


def transposes(word_splits: List[Split]) -> List[str]:
    """One string per right part of two or more letters, first two swapped."""
    return [left + right[1] + right[0] + right[2:]
            for left, right in word_splits if len(right) > 1]


def replaces(word_splits: List[Split]) -> List[str]:
    """
    Replace the first letter of every non-empty right part with each letter.

    The no-op replacement (a letter with itself) is included.
    """
    return [left + letter + right[1:]
            for left, right in word_splits if right
            for letter in LETTERS]


def inserts(word_splits: List[Split]) -> List[str]:
    """Insert each letter at every split point, including both ends."""
    return [left + letter + right
            for left, right in word_splits
            for letter in LETTERS]


def edits1(word: str) -> Set[str]:
    """
    All strings one edit away from word.

    For a word of length L the families contribute L deletes, L - 1
    transposes, 26 * L replaces and 26 * (L + 1) inserts before
    deduplication.

    Args:
        word: Source word

    Returns:
        Set of unique candidate strings
    """
    word_splits = splits(word)
    return set(deletes(word_splits) + transposes(word_splits)
               + replaces(word_splits) + inserts(word_splits))


def edits2(word: str) -> Set[str]:
    """
    All strings two edits away from word.

    Every distance-1 string is expanded again, so the result reaches
    neighbours whose intermediate step is not a dictionary word.
    This is the expensive path: roughly (54 * L)^2 strings before
    deduplication.
    """
    result: Set[str] = set()
    for e1 in edits1(word):
        result.update(edits1(e1))
    return result
