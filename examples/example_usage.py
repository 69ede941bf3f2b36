#!/usr/bin/env python3
"""
Example usage of the Sentence Ranker.

This script demonstrates how to use the ranking engine programmatically.
"""

import sys
from pathlib import Path

# Add parent directory to path to import sentence_ranker
sys.path.append(str(Path(__file__).parent.parent))

from sentence_ranker import SentenceRankingEngine

TEXT = """The cat sat on the mat. The dog chased the cats!
Flies buzzed around the kitchen; the dog ignored them.
Running faster than ever, the cat escaped."""


def basic_ranking_example():
    """Rank sentences for a few queries."""
    print("=== Basic Ranking Example ===")
    engine = SentenceRankingEngine(TEXT)

    for query in ["cat", "dogs chasing", "fly"]:
        print(f"\nQuery: '{query}'")
        results = engine.rank_sentences(query, top_n=3)
        if not results:
            print("  No results found.")
        for i, (sentence, score) in enumerate(results, 1):
            print(f"  {i}. {score:.4f}  {sentence}")


def token_stats_example():
    """Inspect TF and IDF of individual tokens."""
    print("\n=== Token Statistics Example ===")
    engine = SentenceRankingEngine(TEXT)
    for token in ["Cats", "the", "running", "elephant"]:
        print(f"  {token}: {engine.get_token_stats(token)}")


def autocorrect_example():
    """Rank with query auto-correction enabled."""
    print("\n=== Auto-correction Example ===")
    engine = SentenceRankingEngine(TEXT, config_dict={"AUTO_CORRECT_ENABLED": True})
    engine.search_and_print("kitchn")


if __name__ == "__main__":
    basic_ranking_example()
    token_stats_example()
    autocorrect_example()
