"""
Configuration settings for the Sentence Ranker.

This module contains all configurable parameters for the ranking engine.
Modify these values to customize the behavior of the system.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent
INPUT_FILE = PROJECT_ROOT / "input.txt"  # Default document to rank
FILE_ENCODING = "utf-8"  # Encoding used when reading the document

# Ranking settings
DEFAULT_TOP_N = 0  # Number of results to return (0 = all matching sentences)

# Auto-correction settings
AUTO_CORRECT_ENABLED = False  # Correct misspelled query words against the document
MAX_EDIT_DISTANCE = 2  # Maximum edit distance for auto-correction
MIN_WORD_LENGTH = 3  # Shorter query words are never corrected

# Highlighting settings
HIGHLIGHT_START = "[["  # Start marker for highlighting
HIGHLIGHT_END = "]]"  # End marker for highlighting
SNIPPET_CHARS = 200  # Maximum characters in result snippets

# Result formatting
RESULT_FORMAT = "table"  # Result format: "table" or "list"
SHOW_TOKEN_STATS = False  # Print TF/IDF for every query token

# Interactive session
PROMPT = "=> "
EXIT_COMMANDS = ("exit", "quit")

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
