"""
Snowball stemmer used by the stemming variant of the tokenizer (via NLTK).

Only alphabetic terms are stemmed; numbers and symbols pass through the
tokenizer untouched.

Examples:
- "indexing" → "index"
- "documents" → "document"
- "frequencies" → "frequenc"
"""

from nltk.stem.snowball import SnowballStemmer

# One shared instance, the stemmer keeps no per-call state
_stemmer = SnowballStemmer('english')


def stem(term: str) -> str:
    """
    Reduce a lower-cased term to its Snowball stem.

    Examples:
        >>> stem("searching")
        'search'
        >>> stem("documents")
        'document'
    """
    return _stemmer.stem(term)
