"""
Word and sentence tokenization module.

This module splits raw text into word tokens and into the sentence-level
spans that serve as documents for IDF computation.
"""

import re
from typing import List

# Python's \w is "letter, digit or underscore", so [\W_] is everything that
# is neither a Unicode letter nor a Unicode digit.
WORD_SEPARATOR = re.compile(r"[\W_]+")
SENTENCE_SEPARATOR = re.compile(r"[.!?,\"“”:;\n]+")


class Tokenizer:
    """Handles word tokenization and sentence segmentation."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def tokenize(self, text: str) -> List[str]:
        """
        Split text into raw word tokens.

        Args:
            text: Text to tokenize.

        Returns:
            List of tokens in source order; empty for non-string or empty input.
        """
        if not text or not isinstance(text, str):
            return []
        return [tok for tok in WORD_SEPARATOR.split(text.strip()) if tok]

    def tokenize_stemmed(self, text: str, stemmer) -> List[str]:
        """
        Tokenize text and reduce every token to its lower-cased stem.

        Args:
            text: Text to tokenize.
            stemmer: Stemmer used to normalize each token.

        Returns:
            List of stemmed tokens.
        """
        return [stemmer.stem(tok.lower()) for tok in self.tokenize(text)]

    def segment_sentences(self, text: str) -> List[str]:
        """
        Split text into sentence spans on terminating punctuation and newlines.

        Args:
            text: Text to segment.

        Returns:
            List of trimmed, non-empty spans in source order.
        """
        if not text or not isinstance(text, str):
            return []
        spans = (seg.strip() for seg in SENTENCE_SEPARATOR.split(text))
        return [span for span in spans if span]
