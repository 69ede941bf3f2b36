"""
Main SentenceRankingEngine class that orchestrates the ranking pipeline.

This module contains the SentenceRankingEngine class that coordinates the
corpus model, ranking, query auto-correction and result formatting for one
source text.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .tokenizer import Tokenizer
from .stemmer import Stemmer
from .corpus import CorpusModel
from .similarity import SimilarityEngine
from .ranker import Ranker
from .autocorrect import AutoCorrect
from .utils import ResultFormatter
import config

logger = logging.getLogger(__name__)


class SentenceRankingEngine:
    """
    Ranks the sentences of one document against free-text queries.

    The engine is built once from the full text; the corpus model and its IDF
    table live for as long as the engine does.
    """

    def __init__(self, text: str, config_dict: Optional[Dict] = None):
        """
        Initialize the SentenceRankingEngine.

        Args:
            text: Full source text to rank sentences from.
            config_dict: Optional configuration dictionary to override defaults.

        Raises:
            TypeError: If text is not a string.
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be a str, not {type(text).__name__}")

        self.config = self._load_config(config_dict)

        # Initialize components
        self.tokenizer = Tokenizer(self.config)
        self.stemmer = Stemmer(self.config)
        self.corpus = CorpusModel(text, self.config, tokenizer=self.tokenizer, stemmer=self.stemmer)
        self.similarity = SimilarityEngine(self.corpus, self.config)
        self.ranker = Ranker(self.corpus, self.config, similarity=self.similarity)
        self.auto_correct = AutoCorrect(self.config, self.corpus.tokens, self.stemmer)
        self.result_formatter = ResultFormatter(self.config, self.stemmer)

        logger.info(
            "Loaded document: %d sentences, %d tokens",
            len(self.corpus.sentences), len(self.corpus.tokens),
        )

    @classmethod
    def from_file(cls, path, encoding: Optional[str] = None,
                  config_dict: Optional[Dict] = None) -> "SentenceRankingEngine":
        """
        Build an engine from a text file.

        Args:
            path: Path to the document.
            encoding: File encoding. If None, uses config default.
            config_dict: Optional configuration overrides.

        Returns:
            A SentenceRankingEngine for the file's contents.
        """
        if encoding is None:
            encoding = (config_dict or {}).get("FILE_ENCODING", config.FILE_ENCODING)
        text = Path(path).read_text(encoding=encoding, errors="ignore")
        logger.info("Read %d characters from %s", len(text), path)
        return cls(text, config_dict=config_dict)

    def _load_config(self, config_dict: Optional[Dict]) -> Any:
        """Load configuration from config module, overridden by a provided dictionary."""
        if config_dict:
            class Config:
                def __init__(self, overrides):
                    for key in dir(config):
                        if key.isupper():
                            setattr(self, key, getattr(config, key))
                    for key, value in overrides.items():
                        setattr(self, key, value)
            return Config(config_dict)
        return config

    def correct_query(self, query: str) -> str:
        """
        Apply auto-correction to a query when it is enabled.

        Args:
            query: Raw query string.

        Returns:
            The query with misspelled words replaced, or the query unchanged.
        """
        if not self.config.AUTO_CORRECT_ENABLED or not query or not isinstance(query, str):
            return query
        words = self.tokenizer.tokenize(query)
        corrected_words, changes, _oov = self.auto_correct.autocorrect_query_words(words)
        if not changes:
            return query
        return " ".join(corrected_words)

    def rank_sentences(self, query: str, top_n: Optional[int] = None) -> List[Tuple[str, float]]:
        """
        Rank the document's sentences against a query.

        Args:
            query: Free-text query.
            top_n: Number of results to return. If None, uses config default
                (0 returns every matching sentence).

        Returns:
            List of (sentence, score) tuples sorted by relevance.
        """
        if top_n is None:
            top_n = self.config.DEFAULT_TOP_N
        return self.ranker.rank(self.correct_query(query), top_n=top_n)

    def normalize(self, token: str) -> str:
        """Lower-cased stem of a token, or an empty string for invalid input."""
        if not token or not isinstance(token, str):
            return ""
        return self.stemmer.stem(token.lower())

    def get_tf(self, token: str) -> float:
        """Term frequency of a token's stem over the whole document."""
        return self.corpus.get_tf(token)

    def get_idf(self, token: str) -> float:
        """IDF of a token's stem over the document's sentences."""
        term = self.normalize(token)
        if not term:
            return 0.0
        return self.corpus.get_idf(term)

    def get_token_stats(self, token: str) -> Dict[str, Any]:
        """
        Get diagnostics for a single token.

        Args:
            token: Token to analyze.

        Returns:
            Dictionary with the stemmed token and its TF and IDF.
        """
        return {
            "token": self.normalize(token),
            "tf": self.get_tf(token),
            "idf": self.get_idf(token),
        }

    def explain_query(self, query: str) -> List[Dict[str, Any]]:
        """Token statistics for each distinct word of a query, in query order."""
        words = dict.fromkeys(w.lower() for w in self.tokenizer.tokenize(query))
        return [self.get_token_stats(w) for w in words]

    def query_stems(self, query: str) -> List[str]:
        """Stemmed tokens of a query, used for highlighting."""
        return self.tokenizer.tokenize_stemmed(query, self.stemmer)

    def interactive_search(self, top_n: Optional[int] = None) -> None:
        """
        Start an interactive ranking session.

        Type 'exit' or 'quit' to end the session.
        """
        print("\n=== Interactive Sentence Ranking ===")
        print("Type 'exit' or 'quit' to quit.")

        while True:
            try:
                query = input(self.config.PROMPT).strip()
            except (EOFError, KeyboardInterrupt):
                print("\nExiting.")
                break

            if not query:
                continue
            if query.lower() in self.config.EXIT_COMMANDS:
                print("Goodbye!")
                break

            self.search_and_print(query, top_n=top_n)

    def search_and_print(self, query: str, top_n: Optional[int] = None) -> List[Tuple[str, float]]:
        """Rank sentences for a query and print them in the configured format."""
        query = self.correct_query(query)
        if self.config.SHOW_TOKEN_STATS:
            self.result_formatter.print_token_stats(self.explain_query(query))

        if top_n is None:
            top_n = self.config.DEFAULT_TOP_N
        results = self.ranker.rank(query, top_n=top_n)
        self.result_formatter.print_results(results, self.query_stems(query))
        return results

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the loaded document.

        Returns:
            Dictionary containing various statistics.
        """
        sentences = self.corpus.sentences
        return {
            "num_sentences": len(sentences),
            "num_tokens": len(self.corpus.tokens),
            "num_terms": len(self.corpus.doc_freq),
            "num_words": len(self.auto_correct.word_freq),
            "avg_sentence_length": sum(len(s) for s in sentences) / len(sentences) if sentences else 0,
        }
