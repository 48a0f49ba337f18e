"""
In-memory BM25 index: ingestion (insert / upsert / delete) and top-k search.

Ingestion:
    text → normalizer → term frequencies → DocumentStatsStore + PostingStore

Query:
    text → normalizer → candidates (union of posting sets)
         → BM25Scorer per candidate → select_top_k → sorted hits

Every mutation goes through index_document() or delete(), which update the
stats store (including the length total) and the posting store together.

Concurrency: not thread-safe. Callers must use single-writer /
multiple-reader discipline - no mutation may overlap another mutation or
any search. search() never mutates, so searches may run concurrently.
"""

from typing import Iterator, List, Optional, Sequence

from ..config import BM25Settings
from ..errors import DuplicateDocumentError
from .doc_stats import DocId, DocumentStats, DocumentStatsStore
from .index_builder import build_document_stats
from .normalizer import Normalizer, TextNormalizer
from .postings import PostingStore
from .scorer import BM25Scorer
from .top_k import SearchHit, select_top_k


class BM25Index:
    """
    Okapi BM25 full-text index.

    Example:
        >>> index = BM25Index()
        >>> index.index_document("Hello world", 0)
        DocumentStats(doc_id=0, doc_length=2, term_freq={'Hello': 1, 'world': 1})
        >>> index.index_document("I like like cats", 1)
        DocumentStats(doc_id=1, doc_length=4, term_freq={'I': 1, 'like': 2, 'cats': 1})
        >>> index.index_document("I like dogs", 2)
        DocumentStats(doc_id=2, doc_length=3, term_freq={'I': 1, 'like': 1, 'dogs': 1})
        >>> [hit.doc_id for hit in index.search("like", 3)]
        [1, 2]
    """

    def __init__(
        self,
        k: Optional[float] = None,
        b: Optional[float] = None,
        normalizer: Optional[Normalizer] = None,
        settings: Optional[BM25Settings] = None,
    ):
        """
        Args:
            k: Term frequency saturation (>= 0, default 1.5)
            b: Length normalization strength (0..1, default 0.75)
            normalizer: text → terms (default: whitespace split, no stemming)
            settings: Pre-validated settings; k / b override its values

        Raises:
            InvalidConfigError: If k or b is out of range
        """
        if settings is None:
            settings = BM25Settings.build(k=k, b=b)
        elif k is not None or b is not None:
            settings = BM25Settings.build(
                k=settings.k if k is None else k,
                b=settings.b if b is None else b,
            )

        self.settings = settings
        self.normalizer = normalizer if normalizer is not None else TextNormalizer()
        self._scorer = BM25Scorer(k=settings.k, b=settings.b)
        self._postings = PostingStore()
        self._doc_stats = DocumentStatsStore()

    @classmethod
    def from_settings(cls, settings: BM25Settings, normalizer: Optional[Normalizer] = None) -> "BM25Index":
        return cls(normalizer=normalizer, settings=settings)

    @property
    def k(self) -> float:
        return self.settings.k

    @property
    def b(self) -> float:
        return self.settings.b

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def index_document(self, text: str, doc_id: DocId) -> DocumentStats:
        """
        Insert a new document.

        Empty text is accepted: the document gets length 0, no terms,
        and still counts towards N and the average length.

        Returns:
            Copy of the stored document statistics

        Raises:
            DuplicateDocumentError: If doc_id is already indexed
        """
        if doc_id in self._doc_stats:
            raise DuplicateDocumentError(doc_id)

        return self._insert(doc_id, self.normalizer(text))

    def upsert(self, text: str, doc_id: DocId) -> DocumentStats:
        """
        Insert or replace a document.

        Equivalent to delete(doc_id) followed by index_document(text, doc_id).
        Normalization runs before the old document is removed, so a failing
        normalizer leaves the index untouched.
        """
        terms = self.normalizer(text)
        self.delete(doc_id)
        return self._insert(doc_id, terms)

    def _insert(self, doc_id: DocId, terms: Sequence[str]) -> DocumentStats:
        stats = build_document_stats(doc_id, terms)

        # Stats (with the length total) and postings change together
        self._doc_stats.insert(stats)
        self._postings.add_document(doc_id, stats.term_freq.keys())

        return stats.copy()

    def delete(self, doc_id: DocId) -> bool:
        """
        Remove a document.

        Returns:
            True if the document was indexed and has been removed,
            False if it was not indexed (no-op)
        """
        stats = self._doc_stats.remove(doc_id)
        if stats is None:
            return False

        self._postings.remove_document(doc_id, stats.term_freq.keys())
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def search(self, query: str, top_k: int = 10) -> List[SearchHit]:
        """
        Rank indexed documents against a query.

        Args:
            query: Raw query text (normalized like documents)
            top_k: Maximum number of hits

        Returns:
            Up to top_k SearchHit(score, doc_id), descending score,
            ties by ascending doc_id. Only documents sharing at least one
            term with the query are returned.

        Raises:
            ValueError: If top_k is negative
        """
        if top_k < 0:
            raise ValueError(f"top_k must be >= 0, got {top_k}")
        if top_k == 0 or not self._doc_stats:
            return []

        query_terms = set(self.normalizer(query))
        candidates = self._postings.candidate_documents(query_terms)
        if not candidates:
            return []

        doc_freqs = {term: self._postings.document_frequency(term) for term in query_terms}
        num_docs = len(self._doc_stats)
        avg_doc_length = self._doc_stats.average_length()

        scored = (
            (
                self._scorer.score(query_terms, self._doc_stats.get(doc_id), doc_freqs, num_docs, avg_doc_length),
                doc_id,
            )
            for doc_id in candidates
        )
        return select_top_k(scored, top_k)

    def score(self, query: str, doc_id: DocId) -> float:
        """BM25 score of a single document (0.0 if it is not indexed)."""
        stats = self._doc_stats.get(doc_id)
        if stats is None:
            return 0.0

        query_terms = set(self.normalizer(query))
        doc_freqs = {term: self._postings.document_frequency(term) for term in query_terms}
        return self._scorer.score(
            query_terms, stats, doc_freqs, len(self._doc_stats), self._doc_stats.average_length()
        )

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def num_docs(self) -> int:
        return len(self._doc_stats)

    @property
    def total_doc_lengths(self) -> int:
        return self._doc_stats.total_doc_lengths

    @property
    def average_document_length(self) -> float:
        return self._doc_stats.average_length()

    def document_frequency(self, term: str) -> int:
        """Number of indexed documents containing term (term is NOT normalized)."""
        return self._postings.document_frequency(term)

    def postings(self, term: str) -> set:
        """Doc ids containing term (a copy)."""
        return self._postings.postings(term)

    def get_document(self, doc_id: DocId) -> Optional[DocumentStats]:
        """Copy of the stats for doc_id, or None."""
        stats = self._doc_stats.get(doc_id)
        return stats.copy() if stats is not None else None

    def doc_ids(self) -> Iterator[DocId]:
        return self._doc_stats.doc_ids()

    def terms(self) -> Iterator[str]:
        return self._postings.terms()

    def analyze(self, text: str) -> Sequence[str]:
        """Terms the index would derive from text."""
        return self.normalizer(text)

    def __len__(self) -> int:
        return len(self._doc_stats)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._doc_stats

    def __repr__(self) -> str:
        return f"{type(self).__name__}(k={self.k}, b={self.b}, docs={len(self)}, terms={len(self._postings)})"
