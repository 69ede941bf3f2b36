import math
import threading
import time

import pytest

import config
from sentence_ranker import CorpusModel


def test_documents_are_stemmed_sentences(corpus):
    assert corpus.sentences == ["The cat sat", "The dog ran fast", "The cats sleep"]
    assert corpus.documents == [["the", "cat", "sat"], ["the", "dog", "ran", "fast"], ["the", "cat", "sleep"]]
    assert corpus.num_documents == 3


def test_idf_precomputed_for_document_vocabulary(corpus):
    assert set(corpus.idf_cache) == {"the", "cat", "sat", "dog", "ran", "fast", "sleep"}
    assert corpus.get_idf("the") == pytest.approx(1.0)
    assert corpus.get_idf("cat") == pytest.approx(math.log(4 / 3) + 1)
    assert corpus.get_idf("dog") == pytest.approx(math.log(4 / 2) + 1)


def test_idf_bounds_and_monotonicity(corpus):
    upper = math.log(corpus.num_documents + 1) + 1
    values = [corpus.get_idf(t) for t in ("the", "cat", "dog", "unseen")]
    assert all(0 < v <= upper for v in values)
    assert values == sorted(values)
    assert values[-1] == pytest.approx(upper)


def test_lazy_idf_fill_is_idempotent(corpus):
    documents = [list(doc) for doc in corpus.documents]
    before = dict(corpus.idf_cache)

    first = corpus.get_idf("zebra")
    second = corpus.get_idf("zebra")

    assert first == second
    assert corpus.documents == documents
    assert corpus.idf_cache == {**before, "zebra": first}


def test_get_tf_over_whole_text(corpus):
    # 10 stemmed tokens, "cat" appears twice
    assert corpus.get_tf("cat") == pytest.approx(0.2)
    assert corpus.get_tf("Cats") == pytest.approx(0.2)
    assert corpus.get_tf("the") == pytest.approx(0.3)
    assert corpus.get_tf("zebra") == 0.0


def test_get_tf_invalid_token(corpus):
    assert corpus.get_tf("") == 0.0
    assert corpus.get_tf(None) == 0.0


def test_empty_corpus():
    corpus = CorpusModel("", config)
    assert corpus.num_documents == 0
    assert corpus.idf_cache == {}
    assert corpus.get_idf("cat") == 0.0
    assert corpus.get_tf("cat") == 0.0


def test_document_frequency(corpus):
    assert corpus.document_frequency("the") == 3
    assert corpus.document_frequency("cat") == 2
    assert corpus.document_frequency("zebra") == 0


def test_summarize(corpus, capsys):
    corpus.summarize()
    out = capsys.readouterr().out
    assert "Corpus Summary" in out
    assert "Sentences (documents): 3" in out
    assert "the:3" in out


def test_concurrent_lazy_idf_fill_computes_once(corpus, monkeypatch):
    calls = []
    original = corpus.calculate_idf

    def slow_calculate_idf(term):
        calls.append(term)
        time.sleep(0.05)
        return original(term)

    monkeypatch.setattr(corpus, "calculate_idf", slow_calculate_idf)

    barrier = threading.Barrier(8)
    results = []

    def lookup():
        barrier.wait()
        results.append(corpus.get_idf("zebra"))

    threads = [threading.Thread(target=lookup) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert calls == ["zebra"]
    assert len(set(results)) == 1
    assert results[0] == pytest.approx(math.log(4) + 1)
