"""
Auto-correction module for query processing.

Query words are compared to the document by stem. Only words whose stem
never occurs in the document are replaced, with the nearest document word by
Levenshtein distance (ties go to the more frequent word).
"""

import logging
from typing import Dict, List, Optional, Tuple
from collections import defaultdict, Counter
from rapidfuzz.distance import Levenshtein

logger = logging.getLogger(__name__)


class AutoCorrect:
    """Corrects query words that have no stem in common with the document."""

    def __init__(self, config, words: List[str], stemmer):
        """
        Initialize with configuration, the document's words and the stemmer.

        Args:
            config: Configuration object.
            words: Raw word tokens of the document.
            stemmer: Stemmer shared with the corpus model.
        """
        self.config = config
        self.stemmer = stemmer
        self.word_freq: Counter = Counter(w.lower() for w in words)
        self.known_stems = {stemmer.stem(w) for w in self.word_freq}

        # word length -> words of that length
        self.words_by_len: Dict[int, List[str]] = defaultdict(list)
        for w in self.word_freq:
            self.words_by_len[len(w)].append(w)

    def is_known(self, word: str) -> bool:
        """True if the word's stem occurs in the document."""
        return self.stemmer.stem(word) in self.known_stems

    def suggest_correction(self, word: str, max_dist: int = None) -> Tuple[Optional[str], Optional[int]]:
        """
        Find the closest document word within max_dist edits.

        Args:
            word: Lower-cased word to correct.
            max_dist: Maximum edit distance. If None, uses config default.

        Returns:
            Tuple of (best_word, distance) or (None, None) if nothing is close enough.
        """
        if max_dist is None:
            max_dist = self.config.MAX_EDIT_DISTANCE

        scored = []
        for length in range(len(word) - max_dist, len(word) + max_dist + 1):
            for cand in self.words_by_len.get(length, ()):
                dist = Levenshtein.distance(word, cand, score_cutoff=max_dist)
                if dist <= max_dist:
                    scored.append((dist, -self.word_freq[cand], cand))

        if not scored:
            return None, None
        dist, _neg_freq, best = min(scored, key=lambda x: (x[0], x[1]))
        return best, dist

    def autocorrect_query_words(self, words: List[str], max_dist: int = None) -> Tuple[List[str], List[Tuple[str, str]], List[str]]:
        """
        Auto-correct a list of query words.

        Words shorter than MIN_WORD_LENGTH and words whose stem the document
        already contains are kept as they are.

        Args:
            words: Query words.
            max_dist: Maximum edit distance to consider.

        Returns:
            Tuple of (corrected_words, changes, oov_no_suggest).
        """
        corrected = []
        changes = []
        oov_no_suggest = []

        for w in words:
            lw = w.lower()
            if len(lw) < self.config.MIN_WORD_LENGTH or self.is_known(lw):
                corrected.append(w)
                continue

            suggestion, _dist = self.suggest_correction(lw, max_dist=max_dist)
            if suggestion is None:
                corrected.append(w)
                oov_no_suggest.append(w)
            else:
                corrected.append(suggestion)
                changes.append((w, suggestion))

        if changes:
            logger.info("Query corrections: %s", changes)
        return corrected, changes, oov_no_suggest
