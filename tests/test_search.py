from matchr.search import (
    ceiling_score,
    match_positions,
    position_weight,
    raw_score,
    score,
)

SAMPLE_STRINGS = [
    "a",
    "ab",
    "git",
    "got it",
    "feature",
    "xbps-install",
    "eeeeeeeeeeeeeeeeeeeeeeeee",
    "Hello, World",
    "ünïcødé",
    " ",
]


def test_exact_match_scores_100() -> None:
    for value in SAMPLE_STRINGS:
        assert score(value, value) == 100


def test_empty_query_scores_zero() -> None:
    for candidate in ["", *SAMPLE_STRINGS]:
        assert score("", candidate) == 0


def test_non_subsequence_scores_zero() -> None:
    assert score("zzz", "abc") == 0
    assert score("ba", "ab") == 0
    assert score("abc", "ab") == 0
    assert score("a", "") == 0


def test_not_a_subsequence_even_with_every_character_present() -> None:
    # "feature" contains a single "f"
    assert score("fefe", "feature") == 0


def test_scores_stay_within_bounds() -> None:
    for query in SAMPLE_STRINGS:
        for candidate in SAMPLE_STRINGS:
            assert 0 <= score(query, candidate) <= 100


def test_scoring_is_case_sensitive() -> None:
    assert score("A", "a") == 0
    assert score("a", "A") == 0
    assert score("Git", "Github") > 0


def test_early_adjacent_match_scores_high() -> None:
    result = score("feat", "feature")

    assert result == 57
    assert 50 < result < 100


def test_gapped_match_scores_below_exact_match() -> None:
    result = score("git", "got it")

    assert result == 38
    assert 0 < result < score("git", "git")


def test_prefix_match_is_not_exact() -> None:
    assert score("git", "github") < 100


def test_late_single_character_match_stays_positive() -> None:
    assert score("z", "a" * 20 + "z") == 1


def test_earlier_positions_do_not_score_lower() -> None:
    assert score("a", "abc") > score("a", "bac")
    assert score("a", "bac") >= score("a", "bca")
    assert score("ab", "abxx") > score("ab", "xabx") > score("ab", "xxab")


def test_adjacent_matches_beat_gapped_matches() -> None:
    assert raw_score("ab", "abz") == 20
    assert raw_score("ab", "azb") == 18
    assert score("ab", "abz") > score("ab", "azb")


def test_position_weight_floors_at_one() -> None:
    assert position_weight(0) == 10
    assert position_weight(9) == 1
    assert position_weight(10) == 1
    assert position_weight(250) == 1


def test_raw_score_uses_greedy_first_occurrence() -> None:
    assert raw_score("git", "got it") == 23
    assert match_positions("git", "got it") == (0, 4, 5)
    assert match_positions("ab", "aab") == (0, 2)


def test_raw_score_returns_none_when_not_a_subsequence() -> None:
    assert raw_score("x", "abc") is None
    assert match_positions("x", "abc") is None


def test_empty_query_has_zero_raw_score_and_no_positions() -> None:
    assert raw_score("", "abc") == 0
    assert match_positions("", "abc") == ()


def test_ceiling_score_grows_with_length() -> None:
    assert ceiling_score("") == 0
    assert ceiling_score("a") == 10
    assert ceiling_score("ab") == 20
    assert ceiling_score("got it") == 60
    assert ceiling_score("xbps-query") == 100
    assert ceiling_score("xbps-remove") == 111


def test_proper_subsequences_never_reach_the_ceiling() -> None:
    for candidate in SAMPLE_STRINGS:
        for end in range(1, len(candidate)):
            query = candidate[:end]
            raw = raw_score(query, candidate)
            assert raw is not None
            assert raw < ceiling_score(candidate)
            assert 1 <= score(query, candidate) <= 99
