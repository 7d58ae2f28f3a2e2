import pytest

from tweet_sentiment.core.scorer import LexiconScorer, round_half_away_from_zero


def test_repeated_words_are_summed() -> None:
    assert LexiconScorer().score("I am good good", {"good": 1.0}) == 2.0


def test_empty_record_and_lexicon_score_zero() -> None:
    assert LexiconScorer().score("", {}) == 0.0


def test_unknown_words_contribute_nothing() -> None:
    assert LexiconScorer().score("nothing matches here", {"good": 1.0}) == 0.0


def test_tokens_are_case_folded_before_lookup() -> None:
    assert LexiconScorer().score("GOOD Good good", {"good": 1.5}) == 4.5


def test_runs_of_whitespace_split_tokens() -> None:
    lexicon = {"great": 3.0, "bad": -2.0}
    assert LexiconScorer().score("  great\t\tbad \n great  ", lexicon) == 4.0


def test_punctuation_is_part_of_the_token() -> None:
    assert LexiconScorer().score("good!", {"good": 1.0}) == 0.0


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (1.25, 1.3),
        (-1.25, -1.3),
        (0.05, 0.1),
        (1.24, 1.2),
        (0.1 + 0.2, 0.3),
        (2.0, 2.0),
    ],
)
def test_rounding_is_half_away_from_zero(raw: float, expected: float) -> None:
    assert round_half_away_from_zero(raw) == expected


def test_score_rounds_the_sum_half_away_from_zero() -> None:
    lexicon = {"up": 1.0, "bit": 0.25}
    assert LexiconScorer().score("up bit", lexicon) == 1.3
    assert LexiconScorer().score("down", {"down": -1.25}) == -1.3


def test_small_negative_sum_rounds_to_positive_zero() -> None:
    score = LexiconScorer().score("meh", {"meh": -0.04})
    assert score == 0.0
    assert f"{score:.1f}" == "0.0"


@pytest.mark.parametrize("raw", [1e27, -3.5e40, 1.7976931348623157e308])
def test_rounding_keeps_very_large_values(raw: float) -> None:
    assert round_half_away_from_zero(raw) == raw


def test_large_lexicon_weight_scores_without_error() -> None:
    assert LexiconScorer().score("big", {"big": 1e27}) == 1e27
    assert LexiconScorer().score("big big", {"big": 1e300}) == 2e300
