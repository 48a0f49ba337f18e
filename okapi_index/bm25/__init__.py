"""
Okapi BM25 ranking engine.

Components:
- tokenizer: Text tokenization (whitespace split, English word analyzer)
- stemmer: Term normalization (identity, Snowball stemming)
- normalizer: Pluggable text → terms pipeline
- postings: Inverted index (term → doc ids)
- doc_stats: Per-document statistics and corpus length total
- index_builder: Term frequency aggregation
- scorer: BM25 scoring with variance-reduced IDF
- top_k: Bounded, deterministic top-k selection
- index: BM25Index tying everything together
"""

from .doc_stats import DocumentStats, DocumentStatsStore
from .index import BM25Index
from .index_builder import build_document_stats, build_term_frequencies
from .normalizer import Normalizer, TextNormalizer, english_normalizer
from .postings import PostingStore
from .scorer import BM25Scorer
from .stemmer import identity, snowball_stem, stem
from .tokenizer import tokenize, tokenize_words
from .top_k import SearchHit, select_top_k

__all__ = [
    "BM25Index",
    "BM25Scorer",
    "DocumentStats",
    "DocumentStatsStore",
    "Normalizer",
    "PostingStore",
    "SearchHit",
    "TextNormalizer",
    "build_document_stats",
    "build_term_frequencies",
    "english_normalizer",
    "identity",
    "select_top_k",
    "snowball_stem",
    "stem",
    "tokenize",
    "tokenize_words",
]
