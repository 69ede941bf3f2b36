import config
from sentence_ranker import AutoCorrect, SentenceRankingEngine, Stemmer


def make_autocorrect(words):
    return AutoCorrect(config, words, Stemmer(config))


def test_corrects_misspelled_word():
    ac = make_autocorrect(["The", "kitchen", "Kitchen", "dog"])
    assert ac.autocorrect_query_words(["kitchn"]) == (["kitchen"], [("kitchn", "kitchen")], [])


def test_known_and_short_words_are_kept():
    ac = make_autocorrect(["the", "dog"])
    corrected, changes, oov = ac.autocorrect_query_words(["Dog", "zz"])
    assert corrected == ["Dog", "zz"]
    assert changes == []
    assert oov == []


def test_word_with_known_stem_is_kept():
    ac = make_autocorrect(["He", "walks", "daily", "She", "talked", "loudly"])
    assert ac.is_known("walked")
    assert ac.autocorrect_query_words(["walked"]) == (["walked"], [], [])


def test_known_stem_keeps_ranking_on_matching_sentence():
    text = "He walks daily. She talked loudly."
    plain = SentenceRankingEngine(text)
    corrected = SentenceRankingEngine(text, config_dict={"AUTO_CORRECT_ENABLED": True})

    expected = plain.rank_sentences("walked")
    assert [sentence for sentence, _ in expected] == ["He walks daily"]
    assert corrected.rank_sentences("walked") == expected


def test_word_without_suggestion():
    ac = make_autocorrect(["the", "dog"])
    corrected, changes, oov = ac.autocorrect_query_words(["qqqqqqqq"])
    assert corrected == ["qqqqqqqq"]
    assert changes == []
    assert oov == ["qqqqqqqq"]


def test_frequency_breaks_distance_ties():
    ac = make_autocorrect(["card", "cart", "cart"])
    assert ac.suggest_correction("carx") == ("cart", 1)


def test_max_distance_is_respected():
    ac = make_autocorrect(["elephant"])
    assert ac.suggest_correction("elephnt", max_dist=0) == (None, None)
    assert ac.suggest_correction("elephnt", max_dist=1) == ("elephant", 1)
