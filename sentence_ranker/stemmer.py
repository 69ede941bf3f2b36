"""
Suffix-stripping stemmer.

Reduces a word to an approximate root with a fixed, ordered table of suffix
rules. The first matching rule wins.
"""

from typing import List, Optional, Tuple

# (suffix, minimum total length, replacement). A rule applies when the word
# ends with the suffix and is strictly longer than the minimum length.
SUFFIX_RULES: List[Tuple[str, int, Optional[str]]] = [
    ("ies", 4, "y"),
    ("es", 4, None),
    ("s", 3, None),
    ("ing", 5, None),
    ("ed", 4, None),
    ("er", 4, None),
    ("est", 5, None),
    ("ly", 4, None),
    ("tion", 6, None),
    ("ness", 6, None),
    ("ment", 6, None),
]

MIN_STEM_LENGTH = 3


class Stemmer:
    """Stems words using an ordered suffix rule table."""

    def __init__(self, config, rules: List[Tuple[str, int, Optional[str]]] = None):
        """Initialize with configuration and an optional custom rule table."""
        self.config = config
        self.rules = list(rules) if rules is not None else list(SUFFIX_RULES)

    def stem(self, word: str) -> str:
        """
        Stem a single word.

        Args:
            word: Word to stem.

        Returns:
            Lower-cased stem; the lower-cased word itself when no rule applies.
        """
        if not isinstance(word, str):
            return ""

        lower_word = word.lower()
        if len(lower_word) < MIN_STEM_LENGTH:
            return lower_word

        for suffix, min_length, replacement in self.rules:
            if lower_word.endswith(suffix) and len(lower_word) > min_length:
                root = lower_word[:-len(suffix)]
                return root + replacement if replacement else root

        return lower_word
