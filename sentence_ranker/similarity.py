"""
TF-IDF cosine similarity between two spans of text.

Term weights are the span-local term frequency multiplied by the
corpus-global IDF of the owning corpus model.
"""

import math
from typing import List

from .corpus import CorpusModel


class SimilarityEngine:
    """Computes cosine similarity over TF-IDF vectors for a corpus model."""

    def __init__(self, corpus: CorpusModel, config):
        """Initialize with the corpus model supplying IDF values."""
        self.corpus = corpus
        self.config = config

    def term_frequency(self, term: str, tokens: List[str]) -> float:
        """
        Relative frequency of a term within a token list.

        Args:
            term: Term to count.
            tokens: Token list of one span.

        Returns:
            count / len(tokens), or 0.0 for an empty list.
        """
        if not tokens:
            return 0.0
        return tokens.count(term) / len(tokens)

    def build_vocabulary(self, tokens_a: List[str], tokens_b: List[str]) -> List[str]:
        """Ordered union of two token lists: A's terms first, then B's new ones."""
        return list(dict.fromkeys(tokens_a + tokens_b))

    def weight_vector(self, vocabulary: List[str], tokens: List[str]) -> List[float]:
        """TF-IDF weight of every vocabulary term for one span."""
        return [self.term_frequency(term, tokens) * self.corpus.get_idf(term) for term in vocabulary]

    def cosine(self, vec_a: List[float], vec_b: List[float]) -> float:
        """
        Cosine of two equal-length vectors.

        Returns:
            Cosine similarity, or 0.0 if either vector has zero magnitude.
        """
        mag_a = math.sqrt(sum(w * w for w in vec_a))
        mag_b = math.sqrt(sum(w * w for w in vec_b))
        if mag_a == 0.0 or mag_b == 0.0:
            return 0.0
        dot = sum(a * b for a, b in zip(vec_a, vec_b))
        return dot / (mag_a * mag_b)

    def similarity(self, span_a: str, span_b: str) -> float:
        """
        Score two spans of text by TF-IDF cosine similarity.

        Args:
            span_a: First span (usually the query).
            span_b: Second span (usually a sentence).

        Returns:
            Similarity in [0, 1]; 0.0 if either span has no tokens.
        """
        tokens_a = self.corpus.tokenizer.tokenize_stemmed(span_a, self.corpus.stemmer)
        tokens_b = self.corpus.tokenizer.tokenize_stemmed(span_b, self.corpus.stemmer)
        if not tokens_a or not tokens_b:
            return 0.0

        vocabulary = self.build_vocabulary(tokens_a, tokens_b)
        vec_a = self.weight_vector(vocabulary, tokens_a)
        vec_b = self.weight_vector(vocabulary, tokens_b)
        return self.cosine(vec_a, vec_b)
