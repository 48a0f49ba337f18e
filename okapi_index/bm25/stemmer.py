"""
Term normalizers (the "normalize" step after tokenization).

- identity: reference behavior, terms pass through unchanged
- snowball_stem: Snowball stemmer for English (via NLTK), the improved
  Porter2 algorithm used by Elasticsearch, Solr and Lucene

Examples:
- "architectures" → "architectur"
- "strategies" → "strategi"
- "running" → "run"
"""

from typing import List, Sequence

from nltk.stem.snowball import SnowballStemmer

# Initialize stemmer once (thread-safe, reusable)
_stemmer = SnowballStemmer('english')


def identity(tokens: Sequence[str]) -> List[str]:
    """Return the tokens unchanged (as a new list)."""
    return list(tokens)


def stem(word: str) -> str:
    """
    Stem a single word using Snowball algorithm.

    Examples:
        >>> stem("architectures")
        'architectur'
        >>> stem("searching")
        'search'
    """
    return _stemmer.stem(word)


def snowball_stem(tokens: Sequence[str]) -> List[str]:
    """Stem every token, preserving order and repeats."""
    return [stem(t) for t in tokens]
