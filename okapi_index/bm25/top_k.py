"""
Bounded top-k selection over scored candidates.

A min-heap of at most top_k entries keeps the best hits seen so far; its
root is the weakest retained hit. Ordering is total and deterministic:

    better(a, b) = a.score > b.score, or equal scores and a.doc_id < b.doc_id

so the result does not depend on the order candidates are scanned in.
Indexes mixing int and str doc_ids order ints first, then strs.

Complexity: O(C × log(top_k)) for C candidates.
"""

import heapq
from typing import Iterable, List, NamedTuple, Tuple

from .doc_stats import DocId


class SearchHit(NamedTuple):
    """One ranked result: (score, doc_id)"""
    score: float
    doc_id: DocId


def _id_key(doc_id: DocId) -> Tuple[str, DocId]:
    """Sort key for doc_ids; ints order before strs when an index mixes both"""
    return (type(doc_id).__name__, doc_id)


class _HeapEntry:
    """Heap wrapper where "smaller" means "worse" hit"""

    __slots__ = ("hit",)

    def __init__(self, hit: SearchHit):
        self.hit = hit

    def __lt__(self, other: "_HeapEntry") -> bool:
        if self.hit.score != other.hit.score:
            return self.hit.score < other.hit.score
        # Equal scores: the larger doc_id is the worse hit
        return _id_key(self.hit.doc_id) > _id_key(other.hit.doc_id)


def select_top_k(scored: Iterable[Tuple[float, DocId]], top_k: int) -> List[SearchHit]:
    """
    Keep the top_k highest-scoring (score, doc_id) pairs.

    Pairs with score <= 0 are skipped.

    Args:
        scored: (score, doc_id) pairs, doc_ids unique
        top_k: Maximum number of results

    Returns:
        Hits sorted by descending score, ties by ascending doc_id

    Raises:
        ValueError: If top_k is negative

    Example:
        >>> select_top_k([(0.5, 3), (0.9, 1), (0.5, 2)], top_k=2)
        [SearchHit(score=0.9, doc_id=1), SearchHit(score=0.5, doc_id=2)]
    """
    if top_k < 0:
        raise ValueError(f"top_k must be >= 0, got {top_k}")
    if top_k == 0:
        return []

    heap: List[_HeapEntry] = []

    for score, doc_id in scored:
        if not score > 0:
            continue

        entry = _HeapEntry(SearchHit(score, doc_id))
        if len(heap) < top_k:
            heapq.heappush(heap, entry)
        elif heap[0] < entry:
            heapq.heapreplace(heap, entry)

    # Best first: reverse of the heap's "worse than" ordering
    return [entry.hit for entry in sorted(heap, reverse=True)]
