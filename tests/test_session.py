import pytest
from wordle_entropy.config import BUNDLED_WORDLIST
from wordle_entropy.datasets import load_wordlist
from wordle_entropy.engine import EmptyHistory, HistoryEntry, InvalidFeedback, InvalidWordLength
from wordle_entropy.session import Assistant, History

SCENARIO = ["crane", "slate", "trace", "brake"]


def test_history_is_most_recent_first():
    h = History()
    h.apply("crane", "-----")
    h.apply("slate", "--G-G")
    assert [e.guess for e in h] == ["slate", "crane"]
    assert [e.guess for e in h.chronological()] == ["crane", "slate"]
    assert h[0].guess == "slate" and len(h) == 2 and h


def test_history_undo_and_reset():
    h = History()
    assert not h
    with pytest.raises(EmptyHistory):
        h.undo()

    h.push(("crane", "-----"))
    h.push(HistoryEntry.of("slate", "--G-G"))
    assert h.undo().guess == "slate"
    assert [e.guess for e in h] == ["crane"]
    h.reset()
    assert len(h) == 0 and h.entries == ()


def test_history_rejects_malformed_rounds():
    h = History()
    with pytest.raises(InvalidWordLength):
        h.apply("cranes", "-----")
    with pytest.raises(InvalidFeedback):
        h.apply("crane", "--")
    assert len(h) == 0


def test_history_copy_and_equality():
    h = History()
    h.apply("crane", "-----")
    h.apply("slate", "--G-G")
    assert History(h) == h
    assert History(h.entries).entries == h.entries
    assert "slate:--G-G" in repr(h)


def test_assistant_dedupes_and_validates_dictionary():
    a = Assistant(["crane", "CRANE", "slate"])
    assert a.dictionary == ("crane", "slate")
    with pytest.raises(InvalidWordLength):
        Assistant(["crane", "cranes"])


def test_assistant_apply_undo_reset_recomputes():
    a = Assistant(SCENARIO)
    assert a.candidates() == SCENARIO

    a.apply("slate", "--G-G")
    assert a.candidates() == ["crane", "brake"]
    assert a.most_likely() == "brake"

    a.apply("brake", "-----")
    assert a.candidates() == []
    assert a.suggestions() == []
    assert a.most_likely() is None

    a.undo()
    assert a.candidates() == ["crane", "brake"]
    a.reset()
    assert a.candidates() == SCENARIO


def test_assistant_snapshot():
    a = Assistant(SCENARIO)
    snap = a.snapshot(k=2)
    assert snap.wordlist_size == 4
    assert snap.candidates == SCENARIO
    assert [s.guess for s in snap.suggestions] == ["crane", "trace"]
    assert snap.most_likely == "brake"
    assert snap.history == ()


def test_push_validates_hand_built_entries():
    h = History()
    with pytest.raises(InvalidFeedback):
        h.push(HistoryEntry("crane", "zzzzz"))
    with pytest.raises(InvalidWordLength):
        h.push(HistoryEntry("cranes", "-----"))
    assert len(h) == 0

    e = h.push(HistoryEntry("CRANE", "-y--g"))
    assert e.guess == "crane" and e.key == "-Y--G"


def test_assistant_suggestions_workers_per_call():
    words = load_wordlist(BUNDLED_WORDLIST)[:40]
    a = Assistant(words)
    assert a.suggestions(5, workers=2) == a.suggestions(5)
