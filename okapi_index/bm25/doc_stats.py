"""
Per-document statistics and the corpus length aggregate.

DocumentStatsStore is a plain keyed store; it does not know about the
posting store. BM25Index is its only writer and updates both stores
together so they stay consistent.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Union

DocId = Union[int, str]


@dataclass
class DocumentStats:
    """Statistics of one indexed document"""
    doc_id: DocId
    doc_length: int                                            # Term count, repeats included
    term_freq: Dict[str, int] = field(default_factory=dict)    # term → occurrences

    def copy(self) -> "DocumentStats":
        return DocumentStats(self.doc_id, self.doc_length, dict(self.term_freq))


class DocumentStatsStore:
    """doc_id → DocumentStats, plus the running sum of document lengths"""

    def __init__(self):
        self._stats: Dict[DocId, DocumentStats] = {}
        self._total_doc_lengths = 0

    @property
    def total_doc_lengths(self) -> int:
        return self._total_doc_lengths

    def get(self, doc_id: DocId) -> Optional[DocumentStats]:
        return self._stats.get(doc_id)

    def insert(self, stats: DocumentStats) -> None:
        """
        Store stats for a new document and add its length to the total.

        Raises:
            KeyError: If stats.doc_id is already stored
        """
        if stats.doc_id in self._stats:
            raise KeyError(stats.doc_id)
        self._stats[stats.doc_id] = stats
        self._total_doc_lengths += stats.doc_length

    def remove(self, doc_id: DocId) -> Optional[DocumentStats]:
        """Remove and return the stats for doc_id (None if absent)."""
        stats = self._stats.pop(doc_id, None)
        if stats is not None:
            self._total_doc_lengths -= stats.doc_length
        return stats

    def average_length(self) -> float:
        """Average document length, 0.0 for an empty store."""
        if not self._stats:
            return 0.0
        return self._total_doc_lengths / len(self._stats)

    def doc_ids(self) -> Iterator[DocId]:
        return iter(self._stats)

    def __len__(self) -> int:
        return len(self._stats)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._stats
