"""
Pluggable text normalization: raw text → ordered sequence of terms.

The index only depends on the Normalizer protocol. Any callable taking a
string and returning a sequence of terms can be injected; it must be pure
(same input, same output) because documents and queries go through the
same normalizer and are compared term by term.
"""

from typing import Callable, List, Protocol, Sequence

from .stemmer import identity, snowball_stem
from .tokenizer import tokenize, tokenize_words


class Normalizer(Protocol):
    def __call__(self, text: str) -> Sequence[str]: ...


class TextNormalizer:
    """
    Tokenizer followed by a term normalizer.

    Default pipeline is whitespace split + identity, which keeps case and
    punctuation ("Hello," and "hello" are different terms).

    Example:
        >>> normalizer = TextNormalizer()
        >>> normalizer("I like like cats")
        ['I', 'like', 'like', 'cats']
    """

    def __init__(
        self,
        tokenizer: Callable[[str], Sequence[str]] = tokenize,
        normalize: Callable[[Sequence[str]], Sequence[str]] = identity,
    ):
        self.tokenizer = tokenizer
        self.normalize = normalize

    def __call__(self, text: str) -> List[str]:
        return list(self.normalize(self.tokenizer(text)))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(tokenizer={getattr(self.tokenizer, '__name__', self.tokenizer)}, "
            f"normalize={getattr(self.normalize, '__name__', self.normalize)})"
        )


def english_normalizer() -> TextNormalizer:
    """Lowercased words, stopwords removed, Snowball-stemmed."""
    return TextNormalizer(tokenizer=tokenize_words, normalize=snowball_stem)
