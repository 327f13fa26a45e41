"""
TF-IDF (term frequency × inverse document frequency) indexing and ranking.

Components:
- tokenizer: Text tokenization for term extraction
- stemmer: Snowball stemming for the stemming variant of the tokenizer
- index_builder: Per-document term frequency counting
- model: Corpus model (document index + document-frequency table)
- scorer: TF-IDF scoring and ranking

Index time builds the DF table once, so a query only touches the documents'
own term counts plus one table lookup per query term.
"""

from .tokenizer import Tokenizer, tokenize
from .stemmer import stem
from .model import CorpusModel, Doc
from .index_builder import index_text
from .scorer import TfIdfScorer, compute_idf, compute_tf, search

__all__ = [
    "Tokenizer",
    "tokenize",
    "stem",
    "CorpusModel",
    "Doc",
    "index_text",
    "TfIdfScorer",
    "compute_idf",
    "compute_tf",
    "search",
]
