import itertools

import pytest
from wordle_entropy.engine import (
    EmptyHistory,
    HistoryEntry,
    InvalidAlphabet,
    InvalidFeedback,
    InvalidWordLength,
    LetterResult,
    classify,
    feedback_key,
    filter_candidates,
    is_solved,
    parse_feedback,
    score,
    validate_guess,
)

C, P, A = LetterResult.CORRECT, LetterResult.PRESENT, LetterResult.ABSENT

SCENARIO = ["crane", "slate", "trace", "brake"]


# --- golden feedback (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle", "level", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("lemon", "level", "GG---"),
    ("cools", "scoop", "YYG-Y"),
    ("scoop", "scoop", "GGGGG"),
    ("crane", "crane", "GGGGG"),
    ("raise", "crane", "YY--G"),
    ("stare", "crane", "--GYG"),
    ("speed", "abide", "--Y-Y"),
    ("eerie", "there", "Y-Y-G"),
])
def test_score_golden(guess, answer, expected):
    assert score(guess, answer) == expected


def test_classify_sheep_vs_speed():
    # s, both e's are green; h is absent; p sits at the answer's unconsumed 'p'
    assert classify("sheep", "speed") == (C, A, C, C, P)


def test_classify_repeated_guess_letter_marks_only_one_present():
    # 'speed' has two e's, 'abide' has one: first e present, second absent
    fb = classify("speed", "abide")
    assert fb == (A, A, P, A, P)
    assert fb.count(P) == 2


def test_classify_green_claims_letter_before_present():
    # answer 'level' has two e's; 'belle' greens one and yellows the other
    assert classify("belle", "level") == (A, C, P, P, P)


def test_classify_normalizes_case_and_whitespace():
    assert classify(" CRANE ", "Crane") == (C,) * 5


@pytest.mark.parametrize("guess,answer,exc", [
    ("cranes", "crane", InvalidWordLength),
    ("cran", "crane", InvalidWordLength),
    ("crane", "", InvalidWordLength),
    ("cr4ne", "crane", InvalidAlphabet),
    ("crane", "cr ne", InvalidAlphabet),
    ("crané", "crane", InvalidAlphabet),
    (None, "crane", InvalidAlphabet),
])
def test_classify_rejects_malformed_words(guess, answer, exc):
    with pytest.raises(exc):
        classify(guess, answer)


def test_invalid_word_errors_are_value_errors():
    with pytest.raises(ValueError) as info:
        score("toolong", "crane")
    assert info.value.word == "toolong"


def test_feedback_key_and_parse():
    fb = (C, P, A, A, C)
    assert feedback_key(fb) == "GY--G"
    assert parse_feedback("GY--G") == fb
    assert parse_feedback("gyb.g") == fb
    assert parse_feedback(["CORRECT", "present", "ABSENT", "x", C]) == fb
    assert parse_feedback(fb) == fb


@pytest.mark.parametrize("value", ["GY-G", "GY--GG", "GYZ-G", ["CORRECT"] * 4, [1, 2, 3, 4, 5]])
def test_parse_feedback_rejects_malformed(value):
    with pytest.raises(InvalidFeedback):
        parse_feedback(value)


def test_letter_result_display_order():
    assert list(LetterResult) == [C, P, A]


def test_is_solved():
    assert is_solved((C,) * 5)
    assert is_solved("GGGGG")
    assert not is_solved((C, C, C, C, P))


def test_feedback_key_rejects_unknown_glyphs():
    assert feedback_key("gy-bg") == "GY--G"
    with pytest.raises(InvalidFeedback):
        feedback_key("GGZGG")
    with pytest.raises(InvalidFeedback):
        is_solved("GGZGG")


def test_history_entry_of_validates():
    e = HistoryEntry.of("CRANE", "-y--g")
    assert e.guess == "crane" and e.key == "-Y--G"
    with pytest.raises(InvalidWordLength):
        HistoryEntry.of("cran", "-----")
    with pytest.raises(InvalidFeedback):
        HistoryEntry.of("crane", "----")


def test_empty_history_is_an_index_error():
    assert issubclass(EmptyHistory, IndexError)


# --- filtering ---
def test_filter_candidates_history():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
    history = [("raise", "YY--G")]
    cand = filter_candidates(words, history)
    assert "crane" in cand and "stare" not in cand and "scoop" not in cand


def test_filter_empty_dictionary_and_empty_history():
    assert filter_candidates([], [("crane", "-----")]) == []
    assert filter_candidates(SCENARIO, []) == SCENARIO


def test_filter_all_absent_crane_eliminates_whole_scenario():
    history = [HistoryEntry.of("crane", [A, A, A, A, A])]
    assert filter_candidates(SCENARIO, history) == []
    assert filter_candidates(SCENARIO + ["build", "moist"], history) == ["build", "moist"]


def test_filter_accepts_feedback_tuples_and_keys_alike():
    by_key = filter_candidates(SCENARIO, [("trace", "-GG-G")])
    by_tuple = filter_candidates(SCENARIO, [HistoryEntry("trace", (A, C, C, A, C))])
    assert by_key == by_tuple == ["brake"]


def test_filter_is_idempotent():
    history = [("slate", "--G-G")]
    assert filter_candidates(SCENARIO, history) == filter_candidates(SCENARIO, history)


def test_filter_is_monotonic_and_order_independent():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop", "brake", "slate"]
    h1 = ("raise", score("raise", "trace"))
    h2 = ("scoop", score("scoop", "trace"))
    one = filter_candidates(words, [h1])
    two = filter_candidates(words, [h1, h2])
    assert set(two) <= set(one) <= set(words)
    assert filter_candidates(words, [h2, h1]) == two
    assert "trace" in two


def test_word_is_consistent_with_its_own_feedback():
    words = SCENARIO + ["sheep", "speed", "level", "belle"]
    for g, w in itertools.product(words, repeat=2):
        assert w in filter_candidates(words, [(g, classify(g, w))])


def test_filter_preserves_dictionary_order():
    words = ["trace", "brake", "crane"]
    assert filter_candidates(words, [("slate", "--G-G")]) == ["brake", "crane"]


def test_filter_rejects_malformed_dictionary_word():
    with pytest.raises(InvalidWordLength):
        filter_candidates(["crane", "cranes"], [])
    with pytest.raises(InvalidAlphabet):
        filter_candidates(["crane"], [("cr-ne", "-----")])


def test_validate_guess():
    allowed = ["crane", "raise", "stare"]
    assert validate_guess("CRANE", allowed) is True
    assert validate_guess("cranes", allowed) is False
    assert validate_guess("???", allowed) is False
    assert validate_guess("trace", allowed) is False
