"""
Posting store: term → set of document ids containing that term.

Posting membership is a set - a document appears once per term no matter
how many times the term occurs in it. The posting set size is therefore
the document frequency df(t) used by IDF.
"""

from typing import Dict, Iterable, Iterator, Set

from .doc_stats import DocId


class PostingStore:
    """Inverted index of term → doc ids (document-frequency semantics)"""

    def __init__(self):
        self._postings: Dict[str, Set[DocId]] = {}

    def add_document(self, doc_id: DocId, terms: Iterable[str]) -> None:
        """Add doc_id to the posting set of every term (idempotent per term)."""
        for term in terms:
            self._postings.setdefault(term, set()).add(doc_id)

    def remove_document(self, doc_id: DocId, terms: Iterable[str]) -> None:
        """
        Remove doc_id from the posting set of every term.

        Posting sets that become empty are pruned, so terms() only
        lists terms that still occur in the corpus.
        """
        for term in terms:
            posting = self._postings.get(term)
            if posting is None:
                continue
            posting.discard(doc_id)
            if not posting:
                del self._postings[term]

    def document_frequency(self, term: str) -> int:
        """Number of documents containing term (0 if unseen)."""
        posting = self._postings.get(term)
        return len(posting) if posting else 0

    def candidate_documents(self, terms: Iterable[str]) -> Set[DocId]:
        """Union of the posting sets of all terms."""
        candidates: Set[DocId] = set()
        for term in terms:
            posting = self._postings.get(term)
            if posting:
                candidates.update(posting)
        return candidates

    def postings(self, term: str) -> Set[DocId]:
        """Copy of the posting set for term (empty if unseen)."""
        return set(self._postings.get(term, ()))

    def terms(self) -> Iterator[str]:
        return iter(self._postings)

    def __len__(self) -> int:
        return len(self._postings)

    def __contains__(self, term: object) -> bool:
        return term in self._postings
