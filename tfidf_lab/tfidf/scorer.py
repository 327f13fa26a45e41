"""
TF-IDF scorer and ranker.

Formula:
    score(D) = Σ TF(t, D) × IDF(t)    over the query terms t

Where:
    TF(t, D) = count of t in D / total terms in D    (0 for an empty document)
    IDF(t)   = log10((1 + N) / (1 + DF(t)))
    N        = number of documents in the corpus
    DF(t)    = number of documents containing t (0 if never seen)

The smoothed IDF stays finite and non-negative for every DF(t) in [0, N],
and is exactly 0 for a term that occurs in every document.

Ranking returns every document once, best first. Equal scores are ordered
by document identifier so results are reproducible; a NaN score ranks last.
"""

import math
from typing import List, Tuple

from .model import CorpusModel, Doc
from .tokenizer import Tokenizer


def compute_tf(term: str, doc: Doc) -> float:
    if doc.dtc == 0:
        return 0.0
    return doc.dtf.get(term, 0) / doc.dtc


def compute_idf(term: str, model: CorpusModel) -> float:
    n = model.document_count
    df = model.document_frequency(term)
    return math.log10((1 + n) / (1 + df))


class TfIdfScorer:
    """
    Scores documents of one corpus model against tokenized queries.

    IDF values are memoized per scorer, the model is never mutated.
    """

    def __init__(self, model: CorpusModel):
        self.model = model
        self._idf_cache = {}

    def idf(self, term: str) -> float:
        if term not in self._idf_cache:
            self._idf_cache[term] = compute_idf(term, self.model)
        return self._idf_cache[term]

    def score(self, query_terms: List[str], doc: Doc) -> float:
        """
        Compute the TF-IDF score of one document.

        A query term repeated in the phrase contributes once per occurrence.

        Example:
            >>> model = CorpusModel()
            >>> model.add_document("a", Doc(dtf={"cat": 3, "dog": 1}, dtc=4))
            >>> model.add_document("b", Doc(dtf={"dog": 5}, dtc=5))
            >>> round(TfIdfScorer(model).score(["cat"], model.doc_index["a"]), 3)
            0.132
        """
        score = 0.0
        for term in query_terms:
            score += compute_tf(term, doc) * self.idf(term)
        return score

    def rank(self, query_terms: List[str]) -> List[Tuple[str, float]]:
        results = [
            (doc_id, self.score(query_terms, doc))
            for doc_id, doc in self.model.doc_index.items()
        ]
        results.sort(key=_rank_key)
        return results


def _rank_key(item: Tuple[str, float]):
    doc_id, score = item
    if math.isnan(score):
        return (math.inf, doc_id)
    return (-score, doc_id)


def search(query: str, model: CorpusModel) -> List[Tuple[str, float]]:
    """
    Rank all documents of ``model`` against a free-text query.

    Args:
        query: Query phrase, tokenized exactly like indexed documents
        model: Loaded corpus model

    Returns:
        ``(document_id, score)`` for every document, score descending.
        Callers cut the list to their own top-k.

    Example:
        >>> search("cat", model)[:1]
        [('docs/a.html', 0.1320...)]
    """
    query_terms = list(Tokenizer(query))
    return TfIdfScorer(model).rank(query_terms)
