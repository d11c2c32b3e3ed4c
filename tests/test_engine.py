import pytest
from packages.engine import validate_word, Verdict, is_derivable, letter_count, normalize
from packages.dictionary import WordListDictionary

WORDS = ["silent", "enlist", "tinsel", "tin", "lint", "ten", "it", "i",
         "listen", "aliens", "gum", "mug", "book", "oo"]


@pytest.fixture
def dictionary():
    return WordListDictionary(words=WORDS)


class StrictDictionary:
    """Fails the test if the validator consults it."""

    def is_real_word(self, word, language="en"):
        raise AssertionError(f"dictionary should not be asked about {word!r}")


# --- derivability (letter multiset) ---
@pytest.mark.parametrize("word,root,expected", [
    ("silent", "listen", True),
    ("aliens", "listen", False),
    ("oo", "book", True),
    ("ooo", "book", False),
    ("gum", "Mug", True),
    ("", "book", True),
    ("tt", "listen", False),
    ("KOOB", "book", True),
])
def test_is_derivable(word, root, expected):
    assert is_derivable(word, root) is expected


def test_normalize_and_letter_count():
    assert normalize("  Silent\n") == "silent"
    assert letter_count(" Gum ") == 3


# --- validator verdicts ---
@pytest.mark.parametrize("candidate,root,used,expected", [
    ("silent", "listen", [], Verdict.ACCEPTED),
    ("  SILENT ", "listen", [], Verdict.ACCEPTED),
    ("silent", "listen", ["Silent"], Verdict.ALREADY_USED),
    ("aliens", "listen", [], Verdict.NOT_DERIVABLE),
    ("ooo", "book", [], Verdict.NOT_DERIVABLE),
    ("nets", "listen", [], Verdict.NOT_REAL_WORD),
    ("it", "listen", [], Verdict.TOO_SHORT),
    ("i", "listen", [], Verdict.TOO_SHORT),
    ("Listen", "LISTEN", [], Verdict.IS_ROOT_WORD),
    ("gum", "Mug", [], Verdict.ACCEPTED),
])
def test_validate_word_verdicts(dictionary, candidate, root, used, expected):
    r = validate_word(candidate, root, used, dictionary)
    assert r.verdict is expected
    assert r.accepted is (expected is Verdict.ACCEPTED)


def test_empty_candidate_is_ignored(dictionary):
    assert validate_word("", "listen", [], dictionary) is None
    assert validate_word("   \n", "listen", [], dictionary) is None


def test_checks_short_circuit_before_dictionary():
    # already-used and not-derivable are decided without a dictionary lookup
    assert validate_word("tin", "listen", ["tin"], StrictDictionary()).verdict is Verdict.ALREADY_USED
    assert validate_word("xyz", "listen", [], StrictDictionary()).verdict is Verdict.NOT_DERIVABLE


def test_already_used_wins_over_not_derivable(dictionary):
    r = validate_word("aliens", "listen", ["aliens"], dictionary)
    assert r.verdict is Verdict.ALREADY_USED


def test_failure_messages(dictionary):
    r = validate_word("it", "listen", [], dictionary)
    assert r.title == "Word is only 2 letters long"
    r = validate_word("i", "listen", [], dictionary)
    assert r.title == "Word is only 1 letter long"
    r = validate_word("listen", "listen", [], dictionary)
    assert r.title == "Can't use the root word"
    assert r.message.endswith("Listen")
    r = validate_word("silent", "listen", ["silent"], dictionary)
    assert (r.title, r.message) == ("Word used already", "Be more original...")
    r = validate_word("nets", "listen", [], dictionary)
    assert (r.title, r.message) == ("Word not recognized", "That isn't a real word?!")


def test_accepted_has_no_message(dictionary):
    r = validate_word("tin", "listen", [], dictionary)
    assert r.word == "tin"
    assert r.title == "" and r.message == ""


def test_min_length_is_configurable(dictionary):
    r = validate_word("tin", "listen", [], dictionary, min_length=4)
    assert r.verdict is Verdict.TOO_SHORT
    assert "longer than 3 letters" in r.message


def test_validation_is_idempotent(dictionary):
    used = ["tin"]
    first = validate_word("tin", "listen", used, dictionary)
    second = validate_word("tin", "listen", used, dictionary)
    assert first == second
    assert used == ["tin"]


@pytest.mark.parametrize("verdict,penalized", [
    (Verdict.ALREADY_USED, True),
    (Verdict.NOT_DERIVABLE, True),
    (Verdict.NOT_REAL_WORD, True),
    (Verdict.TOO_SHORT, False),
    (Verdict.IS_ROOT_WORD, False),
    (Verdict.ACCEPTED, False),
])
def test_penalized_verdicts(verdict, penalized):
    assert verdict.penalized is penalized
