"""
okapi-index - in-memory full-text ranking with Okapi BM25.

Usage:
    from okapi_index import BM25Index

    index = BM25Index(k=1.5, b=0.75)
    index.index_document("I like like cats", 1)
    index.search("like", top_k=3)  # [SearchHit(score=..., doc_id=1)]
"""

from .config import BM25Settings, load_settings
from .errors import (
    DuplicateDocument,
    DuplicateDocumentError,
    InvalidConfig,
    InvalidConfigError,
    OkapiIndexError,
)
from .bm25 import (
    BM25Index,
    DocumentStats,
    SearchHit,
    TextNormalizer,
    english_normalizer,
)

__version__ = "0.1.0"

__all__ = [
    "BM25Index",
    "BM25Settings",
    "DocumentStats",
    "DuplicateDocument",
    "DuplicateDocumentError",
    "InvalidConfig",
    "InvalidConfigError",
    "OkapiIndexError",
    "SearchHit",
    "TextNormalizer",
    "english_normalizer",
    "load_settings",
]
