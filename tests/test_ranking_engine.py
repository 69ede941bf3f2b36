import math

import pytest

import config
from sentence_ranker import SentenceRankingEngine


def test_rank_sentences(engine):
    results = engine.rank_sentences("cat")
    assert [sentence for sentence, _ in results] == ["The cat sat", "The cats sleep"]


def test_rank_sentences_empty_query(engine):
    assert engine.rank_sentences("") == []


def test_end_to_end_example():
    engine = SentenceRankingEngine("The cat sat. The dog ran fast.")
    results = engine.rank_sentences("cat")
    assert len(results) == 1
    assert results[0][0] == "The cat sat"
    assert results[0][1] > 0


def test_non_string_text_is_rejected():
    with pytest.raises(TypeError):
        SentenceRankingEngine(None)
    with pytest.raises(TypeError):
        SentenceRankingEngine(["The cat sat"])


def test_get_token_stats_stems_everywhere(engine):
    stats = engine.get_token_stats("Cats")
    assert stats["token"] == "cat"
    assert stats["tf"] == pytest.approx(0.2)
    assert stats["idf"] == pytest.approx(math.log(4 / 3) + 1)


def test_get_idf_and_tf_normalize_tokens(engine):
    assert engine.get_idf("sleeping") == engine.corpus.get_idf("sleep")
    assert engine.get_tf("CAT") == engine.get_tf("cats")


def test_invalid_tokens_give_zero(engine):
    assert engine.get_token_stats("") == {"token": "", "tf": 0.0, "idf": 0.0}
    assert engine.get_idf(None) == 0.0
    assert engine.get_tf(None) == 0.0


def test_config_overrides_fall_back_to_defaults(sample_text):
    engine = SentenceRankingEngine(sample_text, config_dict={"DEFAULT_TOP_N": 1})
    assert len(engine.rank_sentences("the")) == 1
    assert len(engine.rank_sentences("the", top_n=0)) == 3
    assert engine.config.SNIPPET_CHARS == config.SNIPPET_CHARS


def test_autocorrect_is_opt_in():
    text = "The kitchen is clean. The dog sleeps."
    plain = SentenceRankingEngine(text)
    corrected = SentenceRankingEngine(text, config_dict={"AUTO_CORRECT_ENABLED": True})

    assert plain.rank_sentences("kitchn") == []
    results = corrected.rank_sentences("kitchn")
    assert [sentence for sentence, _ in results] == ["The kitchen is clean"]


def test_from_file(tmp_path, sample_text):
    path = tmp_path / "doc.txt"
    path.write_text(sample_text, encoding="utf-8")
    engine = SentenceRankingEngine.from_file(path)
    assert engine.corpus.sentences == ["The cat sat", "The dog ran fast", "The cats sleep"]


def test_from_file_missing(tmp_path):
    with pytest.raises(OSError):
        SentenceRankingEngine.from_file(tmp_path / "missing.txt")


def test_explain_query(engine):
    stats = engine.explain_query("Cats cats dog")
    assert [entry["token"] for entry in stats] == ["cat", "dog"]


def test_get_stats(engine):
    stats = engine.get_stats()
    assert stats["num_sentences"] == 3
    assert stats["num_tokens"] == 10
    assert stats["num_terms"] == 7
    assert stats["num_words"] == 8


def test_search_and_print(engine, capsys):
    results = engine.search_and_print("dog")
    out = capsys.readouterr().out
    assert results[0][0] == "The dog ran fast"
    assert "The [[dog]] ran fast" in out


def test_interactive_search(engine, monkeypatch, capsys):
    answers = iter(["", "cat", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))
    engine.interactive_search()
    out = capsys.readouterr().out
    assert "The [[cat]] sat" in out
    assert "Goodbye!" in out


def test_interactive_search_eof(engine, monkeypatch, capsys):
    def raise_eof(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)
    engine.interactive_search()
    assert "Exiting." in capsys.readouterr().out
