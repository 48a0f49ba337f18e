"""
Tokenizers for BM25 text processing.

Two tokenizers are provided:

tokenize() - default, reference behavior:
1. Split on Unicode whitespace
2. Keep case and punctuation untouched

tokenize_words() - analyzer for English prose:
1. Lowercase conversion
2. Extract alphanumeric words (including hyphens)
3. Filter stopwords (common English words)
4. Filter pure numbers

Neither applies stemming; that is the normalize step (see stemmer.py).
"""

import re
from typing import List

# English stopwords (based on Elasticsearch/Lucene standard list)
# These are common words that don't help with ranking
STOPWORDS = frozenset([
    'a', 'an', 'and', 'are', 'as', 'at', 'be', 'but', 'by',
    'for', 'if', 'in', 'into', 'is', 'it',
    'no', 'not', 'of', 'on', 'or', 'such',
    'that', 'the', 'their', 'then', 'there', 'these',
    'they', 'this', 'to', 'was', 'will', 'with'
])

_WORD_PATTERN = re.compile(r'\b[a-z0-9]+(?:-[a-z0-9]+)*\b')
_NUMBER_PATTERN = re.compile(r'^[0-9-]+$')


def tokenize(text: str) -> List[str]:
    """
    Split text on whitespace boundaries.

    Examples:
        >>> tokenize("I like like cats")
        ['I', 'like', 'like', 'cats']

        >>> tokenize("Hello,   world!")
        ['Hello,', 'world!']

        >>> tokenize("   ")
        []
    """
    if not text:
        return []
    return text.split()


def tokenize_words(text: str) -> List[str]:
    """
    Tokenize English text with stopword removal.

    Args:
        text: Input text to tokenize

    Returns:
        List of lowercase tokens without stopwords

    Examples:
        >>> tokenize_words("Kubernetes-based deployment strategies!")
        ['kubernetes-based', 'deployment', 'strategies']

        >>> tokenize_words("PostgreSQL 15.3 with pgvector")
        ['postgresql', 'pgvector']
    """
    if not text:
        return []

    tokens = _WORD_PATTERN.findall(text.lower())

    # Keep alphanumeric like "bm25", drop "15" and "2024-01"
    return [
        t for t in tokens
        if t not in STOPWORDS and not _NUMBER_PATTERN.match(t)
    ]
