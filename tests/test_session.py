import pytest

from packages.dictionary import WordListDictionary, DictionaryUnavailableError
from packages.engine import Verdict
from packages.game import GameSession, GameSettings, StartWordsError, load_start_words


@pytest.fixture
def dictionary():
    return WordListDictionary(words=["gum", "mug", "um", "silent", "tin", "ten", "lint", "listen"])


def test_mug_scenario(dictionary):
    s = GameSession(["mug"], dictionary, seed=1)
    assert s.root_word == "Mug"

    r = s.submit("gum")
    assert r.verdict is Verdict.ACCEPTED
    assert s.used_words == ["gum"]
    assert s.score == 1

    r = s.submit("gum")
    assert r.verdict is Verdict.ALREADY_USED
    assert s.score == 0
    assert s.used_words == ["gum"]


def test_score_never_below_zero(dictionary):
    s = GameSession(["mug"], dictionary)
    s.submit("zzz")
    s.submit("zzz")
    assert s.score == 0


def test_free_retries_keep_score(dictionary):
    s = GameSession(["mug"], dictionary)
    s.submit("gum")
    assert s.submit("um").verdict is Verdict.TOO_SHORT
    assert s.submit("MUG").verdict is Verdict.IS_ROOT_WORD
    assert s.score == 1
    assert s.submit("gmu").verdict is Verdict.NOT_REAL_WORD
    assert s.score == 0


def test_used_words_most_recent_first(dictionary):
    s = GameSession(["listen"], dictionary)
    for w in ["tin", "Ten ", "lint"]:
        s.submit(w)
    assert s.used_words == ["lint", "ten", "tin"]
    assert s.score == 3
    assert [w for w, _ in s.history] == ["tin", "ten", "lint"]


def test_empty_submission_changes_nothing(dictionary):
    s = GameSession(["mug"], dictionary)
    assert s.submit("  ") is None
    assert s.history == [] and s.score == 0


def test_restart_resets_state(dictionary):
    s = GameSession(["mug", "listen"], dictionary, seed=3)
    s.start("listen")
    s.submit("tin")
    root = s.restart()
    assert root in {"Mug", "Listen"}
    assert s.used_words == [] and s.score == 0 and s.history == []


def test_seeded_root_pick_is_reproducible(dictionary):
    words = ["mug", "listen", "silent", "tinsel"]
    a = GameSession(words, dictionary, seed=42)
    b = GameSession(words, dictionary, seed=42)
    assert a.root_word == b.root_word


def test_fallback_root_when_no_start_words(dictionary):
    s = GameSession([], dictionary)
    assert s.root_word == "Mug"


def test_custom_settings(dictionary):
    settings = GameSettings(min_word_length=4, score_reward=2)
    s = GameSession(["listen"], dictionary, settings=settings)
    assert s.submit("tin").verdict is Verdict.TOO_SHORT
    assert s.submit("lint").accepted
    assert s.score == 2


def test_invalid_settings():
    with pytest.raises(ValueError):
        GameSettings(min_word_length=0)
    with pytest.raises(ValueError):
        GameSettings(score_penalty=-1)


def test_snapshot(dictionary):
    s = GameSession(["mug"], dictionary)
    s.submit("gum")
    assert s.snapshot() == {"root_word": "Mug", "used_words": ["gum"], "score": 1, "submissions": 1}


def test_load_start_words(tmp_path):
    p = tmp_path / "start.txt"
    p.write_text("Absolute\n\nballoons\n", encoding="utf-8")
    assert load_start_words(p) == ["absolute", "balloons"]


def test_load_start_words_fatal(tmp_path):
    with pytest.raises(StartWordsError):
        load_start_words(tmp_path / "missing.txt")
    empty = tmp_path / "empty.txt"
    empty.write_text("\n\n", encoding="utf-8")
    with pytest.raises(StartWordsError):
        load_start_words(empty)


class DownDictionary:
    def is_real_word(self, word, language="en"):
        raise DictionaryUnavailableError("service down")


def test_dictionary_outage_costs_nothing(dictionary):
    s = GameSession(["mug"], dictionary)
    s.submit("gum")
    s.dictionary = DownDictionary()

    with pytest.raises(DictionaryUnavailableError):
        s.submit("um")

    assert s.score == 1
    assert s.used_words == ["gum"]
    assert s.history == [("gum", Verdict.ACCEPTED)]
