"""
Text tokenization for the stava frequency model.

Raw text (a book, a word list, a README) is reduced to the lowercase words the
frequency model counts. Anything that is not one of the 26 Latin letters acts
as a separator, so digits, punctuation and whitespace never end up in the
dictionary.

Functions:
    normalize(text: str) -> str: Lowercase text
    extract_words(text: str) -> List[str]: Lowercase [a-z]+ tokens, in order
"""

import re
from typing import List

WORD_PATTERN = re.compile(r'[a-z]+')


def normalize(text: str) -> str:
    """
    Normalize text for counting.

    Only lowercasing is applied; separators are handled by the tokenizer.

    Examples:
        >>> normalize("SPELLING Corrector")
        'spelling corrector'
    """
    if not text:
        return ""
    return text.lower()


def extract_words(text: str) -> List[str]:
    """
    Extract words from text.

    Every maximal run of the letters a-z in the lowercased text is one word.
    Repeated words are kept, since the caller counts them.

    Args:
        text: Arbitrary text

    Returns:
        List of words in the order they appear

    Examples:
        >>> extract_words("Spelling, spelling22 & more!")
        ['spelling', 'spelling', 'more']

        >>> extract_words("1984")
        []
    """
    return WORD_PATTERN.findall(normalize(text))
