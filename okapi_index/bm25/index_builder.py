"""
Term frequency aggregation for a single document.
"""

from collections import defaultdict
from typing import Dict, Iterable

from .doc_stats import DocId, DocumentStats


def build_term_frequencies(terms: Iterable[str]) -> Dict[str, int]:
    """
    Count occurrences of each term.

    Example:
        >>> build_term_frequencies(["I", "like", "like", "cats"])
        {'I': 1, 'like': 2, 'cats': 1}
    """
    term_frequencies = defaultdict(int)
    for term in terms:
        term_frequencies[term] += 1

    # Plain dict, so missing terms don't get inserted on lookup
    return dict(term_frequencies)


def build_document_stats(doc_id: DocId, terms: Iterable[str]) -> DocumentStats:
    """
    Build DocumentStats from a document's normalized terms.

    doc_length counts every term occurrence, so an empty document has
    length 0 and no term frequencies.
    """
    term_freq = build_term_frequencies(terms)
    return DocumentStats(
        doc_id=doc_id,
        doc_length=sum(term_freq.values()),
        term_freq=term_freq,
    )
