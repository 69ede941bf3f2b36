#!/usr/bin/env python3
"""
Main entry point for the Sentence Ranker.

This script provides a command-line interface for ranking the sentences of
a text file against queries.
"""

import argparse
import logging
import sys

from sentence_ranker import SentenceRankingEngine
import config


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="Rank the sentences of a document by TF-IDF similarity to a query",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                    # Rank input.txt interactively
  python main.py --file notes.txt                   # Use a different document
  python main.py --query "machine learning"         # Single query mode
  python main.py --query "lerning" --autocorrect    # Correct query typos first
        """
    )

    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="Text file to rank sentences from (default: input.txt)"
    )

    parser.add_argument(
        "--query",
        type=str,
        default=None,
        help="Single query to process (non-interactive mode)"
    )

    parser.add_argument(
        "--top-n",
        type=int,
        default=None,
        help="Number of sentences to show (default: all matching)"
    )

    parser.add_argument(
        "--autocorrect",
        action="store_true",
        help="Correct misspelled query words against the document vocabulary"
    )

    parser.add_argument(
        "--explain",
        action="store_true",
        help="Print TF and IDF for every query token"
    )

    parser.add_argument(
        "--format",
        choices=("table", "list"),
        default=None,
        help="Result format (default: table)"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Show document statistics after loading"
    )

    return parser


def main(argv=None):
    """Main entry point for the sentence ranker."""
    args = build_parser().parse_args(argv)

    level = str(config.LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        print(f"Error configuring logging: unknown LOG_LEVEL {config.LOG_LEVEL!r}")
        sys.exit(1)
    logging.basicConfig(level=level, format=config.LOG_FORMAT)

    overrides = {}
    if args.autocorrect:
        overrides["AUTO_CORRECT_ENABLED"] = True
    if args.explain:
        overrides["SHOW_TOKEN_STATS"] = True
    if args.format:
        overrides["RESULT_FORMAT"] = args.format

    path = args.file or config.INPUT_FILE

    try:
        engine = SentenceRankingEngine.from_file(path, config_dict=overrides or None)
    except Exception as e:
        print(f"Error loading document: {e}")
        sys.exit(1)

    if args.stats:
        print("\n=== Document Statistics ===")
        for key, value in engine.get_stats().items():
            print(f"{key}: {value}")
        engine.corpus.summarize()

    if args.query is not None:
        try:
            engine.search_and_print(args.query, top_n=args.top_n)
        except Exception as e:
            print(f"Error processing query: {e}")
            sys.exit(1)
    else:
        try:
            engine.interactive_search(top_n=args.top_n)
        except Exception as e:
            print(f"Error in interactive mode: {e}")
            sys.exit(1)


if __name__ == "__main__":
    main()
