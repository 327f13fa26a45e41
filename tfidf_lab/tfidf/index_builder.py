"""
Document indexer - turns the text of one document into its term statistics.
"""

import logging
from collections import defaultdict
from typing import Optional

from .model import Doc
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


def index_text(text: str, stemming: Optional[bool] = None) -> Doc:
    """
    Build the Doc (term frequencies + total term count) of one document.

    Every term emitted by the tokenizer is counted, duplicates included, so
    ``dtc`` always equals ``sum(dtf.values())``.

    Args:
        text: Plain text of the document
        stemming: Override the configured stemming setting

    Returns:
        Doc with ``dtf`` and ``dtc``

    Example:
        >>> doc = index_text("cat cat dog", stemming=False)
        >>> doc.dtf
        {'cat': 2, 'dog': 1}
        >>> doc.dtc
        3
    """
    term_frequencies = defaultdict(int)
    term_count = 0

    for term in Tokenizer(text, stemming=stemming):
        term_frequencies[term] += 1
        term_count += 1

    logger.debug(f"Indexed text: {len(term_frequencies)} unique terms, {term_count} total")

    return Doc(dtf=dict(term_frequencies), dtc=term_count)
