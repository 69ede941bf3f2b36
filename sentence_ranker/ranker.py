"""
Sentence ranking module.

This module scores every sentence of a corpus model against a query and
returns the relevant ones sorted by score.
"""

import logging
from typing import List, Tuple

from .corpus import CorpusModel
from .similarity import SimilarityEngine

logger = logging.getLogger(__name__)


class Ranker:
    """Ranks the sentences of a corpus model by TF-IDF cosine similarity."""

    def __init__(self, corpus: CorpusModel, config, similarity: SimilarityEngine = None):
        """Initialize with the corpus model and configuration."""
        self.corpus = corpus
        self.config = config
        self.similarity = similarity or SimilarityEngine(corpus, config)

    def rank(self, query: str, top_n: int = 0) -> List[Tuple[str, float]]:
        """
        Rank sentences by similarity to a query.

        Sentences with a score of zero are dropped. The sort is stable, so
        sentences with equal scores keep their document order.

        Args:
            query: Free-text query.
            top_n: Number of results to keep; 0 or less keeps all of them.

        Returns:
            List of (sentence, score) tuples sorted by score descending.
        """
        if not query or not isinstance(query, str):
            return []

        ranked = []
        for sentence in self.corpus.sentences:
            score = self.similarity.similarity(query, sentence)
            if score > 0:
                ranked.append((sentence, score))

        ranked.sort(key=lambda x: x[1], reverse=True)
        logger.debug("Query %r matched %d of %d sentences", query, len(ranked), len(self.corpus.sentences))

        if top_n and top_n > 0:
            return ranked[:top_n]
        return ranked
