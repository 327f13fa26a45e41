"""
Corpus model: per-document term statistics plus the corpus-wide DF table.

Structure (also the persisted JSON layout):
{
    "doc_index": {
        "docs/a.html": {"dtf": {"cat": 3, "dog": 1}, "dtc": 4},
        "docs/b.html": {"dtf": {"dog": 5}, "dtc": 5}
    },
    "tcf_table": {"cat": 1, "dog": 2}
}

The DF table (``tcf_table``) only caches what can be derived from
``doc_index``, so the ranker does not rescan every document per query term.
"""

import logging
from collections import Counter
from typing import Dict, List, Tuple

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class Doc(BaseModel):
    """Term statistics of one document"""

    dtf: Dict[str, int] = Field(default_factory=dict, description="Term → occurrences in this document")
    dtc: int = Field(default=0, ge=0, description="Total number of terms (sum of dtf values)")


class CorpusModel(BaseModel):
    """Document index and document-frequency table of a whole corpus"""

    doc_index: Dict[str, Doc] = Field(default_factory=dict, description="Document identifier → Doc")
    tcf_table: Dict[str, int] = Field(default_factory=dict, description="Term → number of documents containing it")

    @property
    def document_count(self) -> int:
        return len(self.doc_index)

    def add_document(self, doc_id: str, doc: Doc) -> None:
        """
        Insert a document and update the DF table.

        Each distinct term of the new document bumps its DF entry by exactly
        one, regardless of how often it occurs. Re-adding an existing
        identifier replaces the old Doc and withdraws its DF contribution.
        """
        previous = self.doc_index.get(doc_id)
        if previous is not None:
            logger.debug(f"Replacing existing document {doc_id}")
            for term in previous.dtf:
                remaining = self.tcf_table.get(term, 0) - 1
                if remaining > 0:
                    self.tcf_table[term] = remaining
                else:
                    self.tcf_table.pop(term, None)

        for term in doc.dtf:
            self.tcf_table[term] = self.tcf_table.get(term, 0) + 1

        self.doc_index[doc_id] = doc

    def document_frequency(self, term: str) -> int:
        return self.tcf_table.get(term, 0)

    def rebuild_df_table(self) -> Dict[str, int]:
        """Recompute the DF table from the document index (ignores the cache)."""
        table: Counter = Counter()
        for doc in self.doc_index.values():
            table.update(doc.dtf.keys())
        return dict(table)

    def search(self, query: str) -> List[Tuple[str, float]]:
        """Rank every document against ``query``, best first."""
        from .scorer import search

        return search(query, self)
