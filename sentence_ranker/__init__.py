"""
Sentence Ranker

Ranks the sentences of a document by TF-IDF cosine similarity to a
free-text query, with suffix-rule stemming and optional query auto-correction.

Main components:
- SentenceRankingEngine: Main engine class
- Tokenizer: Word tokenization and sentence segmentation
- Stemmer: Ordered suffix-rule stemming
- CorpusModel: Token streams, sentence documents and the IDF table
- SimilarityEngine: TF-IDF cosine similarity between two spans
- Ranker: Sentence ranking against a query
- AutoCorrect: Query auto-correction using Levenshtein distance
- ResultFormatter: Highlighting and result rendering
"""

from .ranking_engine import SentenceRankingEngine
from .tokenizer import Tokenizer
from .stemmer import Stemmer
from .corpus import CorpusModel
from .similarity import SimilarityEngine
from .ranker import Ranker
from .autocorrect import AutoCorrect
from .utils import ResultFormatter

__version__ = "1.0.0"

__all__ = [
    "SentenceRankingEngine",
    "Tokenizer",
    "Stemmer",
    "CorpusModel",
    "SimilarityEngine",
    "Ranker",
    "AutoCorrect",
    "ResultFormatter"
]
