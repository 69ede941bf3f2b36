"""
Result formatting utilities.

This module contains helper functions for highlighting query terms in
sentences and rendering ranked results and token statistics.
"""

import re
from typing import Dict, List, Tuple

WORD_RUN = re.compile(r"[^\W_]+")


class ResultFormatter:
    """Handles result formatting and display."""

    def __init__(self, config, stemmer):
        """Initialize with configuration and the stemmer used for matching."""
        self.config = config
        self.stemmer = stemmer

    def highlight_words(self, text: str, query_stems: List[str]) -> str:
        """
        Wrap every word whose stem is a query stem with the highlight markers.

        Args:
            text: Text to highlight.
            query_stems: Stemmed query terms.

        Returns:
            Highlighted text.
        """
        stems = {s for s in query_stems if s}
        if not stems:
            return text

        def repl(match):
            word = match.group(0)
            if self.stemmer.stem(word) in stems:
                return f"{self.config.HIGHLIGHT_START}{word}{self.config.HIGHLIGHT_END}"
            return word

        return WORD_RUN.sub(repl, text)

    def make_snippet(self, text: str, query_stems: List[str], max_chars: int = None) -> str:
        """
        Produce a snippet with highlighted query words and trimmed to max_chars.

        Args:
            text: Text to create snippet from.
            query_stems: Stemmed query terms to highlight.
            max_chars: Maximum characters in snippet.

        Returns:
            Highlighted snippet string.
        """
        if max_chars is None:
            max_chars = self.config.SNIPPET_CHARS

        # Highlight first, then trim so brackets are visible
        highlighted = self.highlight_words(text, query_stems)
        if len(highlighted) <= max_chars:
            return highlighted.replace("\n", " ")

        marker = highlighted.find(self.config.HIGHLIGHT_START)
        if marker == -1:
            return highlighted[:max_chars].replace("\n", " ")

        # Center window around the first marker
        start = max(0, marker - max_chars // 3)
        end = min(len(highlighted), start + max_chars)
        snippet = highlighted[start:end]

        if start > 0:
            snippet = "…" + snippet
        if end < len(highlighted):
            snippet = snippet + "…"

        return snippet.replace("\n", " ")

    def print_results_table(self, ranked: List[Tuple[str, float]], query_stems: List[str],
                            max_chars: int = None) -> None:
        """
        Render ranked sentences as a clean ASCII table.

        Args:
            ranked: List of (sentence, score) tuples.
            query_stems: Stemmed query terms, highlighted in the sentences.
            max_chars: Maximum characters per sentence cell.
        """
        if max_chars is None:
            max_chars = self.config.SNIPPET_CHARS

        if not ranked:
            print("No matching sentences found.")
            return

        rows = []
        for rank, (sentence, score) in enumerate(ranked, start=1):
            snippet = self.make_snippet(sentence, query_stems, max_chars=max_chars)
            rows.append([str(rank), f"{score:.4f}", snippet])

        headers = ["#", "Score", "Sentence"]
        max_widths = [4, 8, max_chars]
        col_widths = []
        for j, h in enumerate(headers):
            width = max([len(h)] + [len(row[j]) for row in rows])
            col_widths.append(min(width, max_widths[j]))

        def clip_pad(s, w):
            if len(s) > w:
                return s[: max(0, w - 1)] + "…" if w >= 2 else s[:w]
            return s.ljust(w)

        print("\n=== Top Sentences ===")
        print(" | ".join(clip_pad(h, col_widths[i]) for i, h in enumerate(headers)))
        print("-+-".join("-" * w for w in col_widths))
        for row in rows:
            print(" | ".join(clip_pad(row[i], col_widths[i]) for i in range(len(headers))))
        print()

    def print_results_simple(self, ranked: List[Tuple[str, float]], query_stems: List[str],
                             max_chars: int = None) -> None:
        """Print a simple list view of ranked sentences."""
        if max_chars is None:
            max_chars = self.config.SNIPPET_CHARS

        if not ranked:
            print("No matching sentences found.")
            return

        print("\n=== Top Sentences ===")
        for rank, (sentence, score) in enumerate(ranked, start=1):
            snippet = self.make_snippet(sentence, query_stems, max_chars=max_chars)
            print(f"#{rank}  score={score:.4f}")
            print(f"     {snippet}")
        print()

    def print_results(self, ranked: List[Tuple[str, float]], query_stems: List[str]) -> None:
        """Render results in the configured RESULT_FORMAT."""
        if self.config.RESULT_FORMAT == "list":
            self.print_results_simple(ranked, query_stems)
        else:
            self.print_results_table(ranked, query_stems)

    def print_token_stats(self, stats: List[Dict[str, float]]) -> None:
        """
        Print TF and IDF for each query token.

        Args:
            stats: List of {"token", "tf", "idf"} dictionaries.
        """
        if not stats:
            return
        print("\n=== Query Tokens ===")
        for entry in stats:
            print(f"{entry['token']:<20} tf={entry['tf']:.4f}  idf={entry['idf']:.4f}")
