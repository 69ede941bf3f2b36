"""
Corpus model and IDF table.

This module owns the parsed token streams, the sentence segmentation of a
source text, and the memoized IDF table used for similarity scoring.
"""

import logging
import math
import threading
from collections import Counter
from typing import Dict, List

from .tokenizer import Tokenizer
from .stemmer import Stemmer

logger = logging.getLogger(__name__)


class CorpusModel:
    """
    In-memory model of one source text.

    Every sentence is a document for document-frequency counting. IDF values
    are precomputed for the stemmed vocabulary of those documents and filled
    in lazily for any other term.
    """

    def __init__(self, text: str, config, tokenizer: Tokenizer = None, stemmer: Stemmer = None):
        """
        Build the model from raw text.

        Args:
            text: Full source text.
            config: Configuration object.
            tokenizer: Tokenizer to use. If None, a default one is created.
            stemmer: Stemmer to use. If None, a default one is created.
        """
        self.config = config
        self.tokenizer = tokenizer or Tokenizer(config)
        self.stemmer = stemmer or Stemmer(config)

        self.raw_text = text
        self.tokens: List[str] = self.tokenizer.tokenize(text)
        self.stemmed_tokens: List[str] = [self.stemmer.stem(tok.lower()) for tok in self.tokens]
        self.sentences: List[str] = self.tokenizer.segment_sentences(text)
        self.documents: List[List[str]] = [
            self.tokenizer.tokenize_stemmed(sentence, self.stemmer) for sentence in self.sentences
        ]

        # term -> number of documents containing it
        self.doc_freq: Counter = Counter()
        for doc in self.documents:
            self.doc_freq.update(set(doc))

        self._idf_lock = threading.Lock()
        self.idf_cache: Dict[str, float] = self.precompute_idf()

        logger.debug(
            "Built corpus model: %d tokens, %d sentences, %d distinct terms",
            len(self.tokens), len(self.sentences), len(self.idf_cache),
        )

    @property
    def num_documents(self) -> int:
        """Number of per-sentence documents."""
        return len(self.documents)

    @property
    def vocabulary(self) -> List[str]:
        """Distinct stemmed terms of the documents, in first-seen order."""
        return list(dict.fromkeys(term for doc in self.documents for term in doc))

    def document_frequency(self, term: str) -> int:
        """Count the documents that contain the stemmed term."""
        return self.doc_freq.get(term, 0)

    def calculate_idf(self, term: str) -> float:
        """
        Compute the IDF of a stemmed term against the current documents.

        IDF formula: idf = log((N + 1) / (df + 1)) + 1  (smooth, positive)

        Args:
            term: Stemmed term.

        Returns:
            IDF score, or 0.0 when the corpus has no documents.
        """
        N = self.num_documents
        if N == 0:
            return 0.0
        df = self.document_frequency(term)
        return math.log((N + 1) / (df + 1)) + 1.0

    def precompute_idf(self) -> Dict[str, float]:
        """
        Compute IDF for every distinct stemmed term in the documents.

        Returns:
            Dictionary mapping term to IDF score.
        """
        idf = {term: self.calculate_idf(term) for term in self.vocabulary}
        logger.debug("Precomputed IDF for %d terms over %d documents", len(idf), self.num_documents)
        return idf

    def get_idf(self, term: str) -> float:
        """
        Get the IDF of a stemmed term, computing and caching it if absent.

        Cached entries are never overwritten, so repeated lookups of the same
        term always return the same value.

        Args:
            term: Stemmed term.

        Returns:
            IDF score.
        """
        idf = self.idf_cache.get(term)
        if idf is not None:
            return idf

        with self._idf_lock:
            idf = self.idf_cache.get(term)
            if idf is None:
                idf = self.calculate_idf(term)
                self.idf_cache[term] = idf
                logger.debug("Cached IDF for unseen term %r: %.4f", term, idf)
        return idf

    def get_tf(self, token: str) -> float:
        """
        Get the term frequency of a token over the whole source text.

        The token is lower-cased and stemmed before counting.

        Args:
            token: Token to look up.

        Returns:
            Relative frequency in [0, 1]; 0.0 for invalid or empty input.
        """
        if not token or not isinstance(token, str) or not self.stemmed_tokens:
            return 0.0
        term = self.stemmer.stem(token.lower())
        return self.stemmed_tokens.count(term) / len(self.stemmed_tokens)

    def summarize(self) -> None:
        """Print a summary of the corpus model."""
        print("\n=== Corpus Summary ===")
        print(f"Sentences (documents): {self.num_documents}")
        print(f"Tokens: {len(self.tokens)}")
        print(f"Distinct stemmed terms: {len(self.doc_freq)}")

        if not self.doc_freq:
            return

        idf_values = [self.idf_cache[term] for term in self.doc_freq]
        print(f"IDF range: {min(idf_values):.3f} - {max(idf_values):.3f}")
        print(f"Average IDF: {sum(idf_values) / len(idf_values):.3f}")

        doc_lengths = sorted(len(doc) for doc in self.documents)
        print(f"Sentence length range: {doc_lengths[0]} - {doc_lengths[-1]} tokens")
        print(f"Median sentence length: {doc_lengths[len(doc_lengths) // 2]} tokens")

        most_common = Counter(self.stemmed_tokens).most_common(5)
        preview = ", ".join(f"{term}:{cnt}" for term, cnt in most_common)
        print(f"Top 5 terms: {preview}")
