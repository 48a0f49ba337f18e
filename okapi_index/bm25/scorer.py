"""
Okapi BM25 scorer.

BM25 (Best Match 25) is a probabilistic ranking function used for information retrieval.

Formula:
    norm(d)        = k × (1 - b + b × dl/avgdl)
    score(t, d)    = tf / (tf + norm(d)) × idf(t)
    idf(t)         = ln((N - df + 0.5) / (df + 0.5) + 1)
    score(Q, d)    = Σ score(t, d) over DISTINCT terms t in Q

Where:
    tf = term frequency in document
    df = number of documents containing the term
    N = number of indexed documents
    k = term frequency saturation parameter (default: 1.5)
    b = length normalization parameter (default: 0.75)
    dl = document length (number of terms)
    avgdl = average document length across the corpus

The +1 inside the log keeps idf positive even for terms present in more
than half of the corpus. Terms with tf == 0 or df == 0 contribute nothing.
"""

import math
from typing import Iterable, Mapping

from .doc_stats import DocumentStats


class BM25Scorer:
    """
    BM25 scoring against corpus statistics supplied by the caller.

    Stateless apart from k and b; the index passes in N, avgdl and the
    document frequencies of the query terms.
    """

    def __init__(self, k: float = 1.5, b: float = 0.75):
        """
        Args:
            k: Term frequency saturation parameter
                Higher = more weight to repeated terms
                0 = term presence only

            b: Length normalization parameter
                Higher = more penalty for long documents
                Range: 0.0 - 1.0
        """
        self.k = k
        self.b = b

    def length_norm(self, doc_length: int, avg_doc_length: float) -> float:
        return self.k * (1 - self.b + self.b * doc_length / avg_doc_length)

    @staticmethod
    def idf(doc_freq: int, num_docs: int) -> float:
        """
        Variance-reduced IDF, always >= 0.

        Example:
            >>> round(BM25Scorer.idf(doc_freq=2, num_docs=3), 4)
            0.47
        """
        return math.log((num_docs - doc_freq + 0.5) / (doc_freq + 0.5) + 1)

    def score(
        self,
        query_terms: Iterable[str],
        doc: DocumentStats,
        doc_freqs: Mapping[str, int],
        num_docs: int,
        avg_doc_length: float,
    ) -> float:
        """
        Compute the BM25 score of one document.

        Args:
            query_terms: Normalized query terms (duplicates are ignored)
            doc: Statistics of the candidate document
            doc_freqs: Document frequency per query term (missing = 0)
            num_docs: Number of documents in the corpus
            avg_doc_length: Average document length (> 0 when doc has terms)

        Returns:
            BM25 score (higher = more relevant), 0.0 if no term matches

        Example:
            >>> scorer = BM25Scorer()
            >>> doc = DocumentStats(doc_id=1, doc_length=4, term_freq={"I": 1, "like": 2, "cats": 1})
            >>> round(scorer.score(["like"], doc, {"like": 2}, num_docs=3, avg_doc_length=3.0), 4)
            0.2426
        """
        if not doc.term_freq:
            return 0.0

        norm = None
        score = 0.0

        for term in set(query_terms):
            tf = doc.term_freq.get(term, 0)
            df = doc_freqs.get(term, 0)
            if tf == 0 or df == 0:
                continue

            # Computed lazily: avgdl is only meaningful once a term matched
            if norm is None:
                norm = self.length_norm(doc.doc_length, avg_doc_length)

            score += tf / (tf + norm) * self.idf(df, num_docs)

        return score
