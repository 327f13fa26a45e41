"""
Tokenizer for TF-IDF text processing.

Single forward scan over the input, no backtracking:
1. Skip whitespace
2. Digit → maximal run of decimal digits, kept verbatim ("2024")
3. Letter → maximal run of letters and digits, lower-cased and optionally
   stemmed ("Indexing42" → "indexing42", "Searching" → "search")
4. Anything else → a one-character symbol term ("#", ".", "-")

Documents and queries must go through the same tokenizer settings, otherwise
query terms never match indexed terms.
"""

from typing import Iterator, List, Optional

from .. import config
from .stemmer import stem


class Tokenizer:
    """
    Lazy, restartable term sequence over a piece of text.

    Each ``iter()`` starts a fresh scan from the beginning of the text, so the
    same Tokenizer can be consumed several times with identical results.
    """

    def __init__(self, text: str, stemming: Optional[bool] = None):
        """
        Args:
            text: Raw text to scan
            stemming: Apply Snowball stemming to alphabetic terms
                Default: ``config.STEMMING``
        """
        self.text = text
        self.stemming = config.STEMMING if stemming is None else stemming

    def __iter__(self) -> Iterator[str]:
        text = self.text
        length = len(text)
        pos = 0

        while True:
            while pos < length and text[pos].isspace():
                pos += 1

            if pos >= length:
                return

            start = pos
            char = text[pos]

            if char.isdecimal():
                while pos < length and text[pos].isdecimal():
                    pos += 1
                yield text[start:pos]
            elif char.isalpha():
                while pos < length and text[pos].isalnum():
                    pos += 1
                yield self._normalize(text[start:pos])
            else:
                pos += 1
                yield char

    def _normalize(self, word: str) -> str:
        word = word.lower()
        if self.stemming:
            word = stem(word)
        return word


def tokenize(text: str, stemming: Optional[bool] = None) -> List[str]:
    """
    Tokenize text into a list of terms.

    Args:
        text: Input text
        stemming: Override the configured stemming setting

    Returns:
        Terms in text order, duplicates included

    Examples:
        >>> tokenize("Searching 42 documents!", stemming=False)
        ['searching', '42', 'documents', '!']

        >>> tokenize("Searching 42 documents!", stemming=True)
        ['search', '42', 'document', '!']

        >>> tokenize("   ")
        []
    """
    if not text:
        return []

    return list(Tokenizer(text, stemming=stemming))
