"""Shared pytest fixtures."""

import pytest

import config
from sentence_ranker import CorpusModel, SentenceRankingEngine

SAMPLE_TEXT = "The cat sat. The dog ran fast. The cats sleep."


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT


@pytest.fixture
def corpus():
    return CorpusModel(SAMPLE_TEXT, config)


@pytest.fixture
def engine():
    return SentenceRankingEngine(SAMPLE_TEXT)
