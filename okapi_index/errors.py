"""
Error types raised by the ranking engine.

Only two conditions are errors:
1. Inserting a document id that is already indexed (insert-only path)
2. Building an index with invalid BM25 parameters

Deleting a missing document is NOT an error - delete() returns False.
"""

from typing import Any, Hashable, List, Optional, Tuple


class OkapiIndexError(Exception):
    """Base class for all ranking engine errors"""


class DuplicateDocumentError(OkapiIndexError, KeyError):
    """index_document() called with a doc_id that is already indexed"""

    def __init__(self, doc_id: Hashable):
        self.doc_id = doc_id
        super().__init__(f"Document already indexed: {doc_id!r} (use upsert() to replace it)")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class InvalidConfigError(OkapiIndexError, ValueError):
    """BM25 parameters out of range (k < 0 or b outside [0, 1])"""

    def __init__(self, message: str, errors: Optional[List[Tuple[str, Any]]] = None):
        self.errors = errors or []
        super().__init__(message)


# Short names used throughout the docs
DuplicateDocument = DuplicateDocumentError
InvalidConfig = InvalidConfigError
