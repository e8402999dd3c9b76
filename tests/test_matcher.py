import pytest

from launcher_plugins.matcher import FuzzyMatcher, is_subsequence, score


@pytest.mark.parametrize(
    "candidate, query",
    [
        ("Spotify", "Spx"),
        ("Firefox", "Spot"),
        ("Play", "Vol"),
        ("Volume up", "Volume upp"),
        # right characters, wrong order
        ("Pause", "esuap"),
    ],
)
def test_missing_characters_never_match(candidate, query):
    assert score(candidate, query) is None


@pytest.mark.parametrize(
    "candidate, query",
    [
        ("Spotify", "Spot"),
        ("Spotify", "sfy"),
        ("Volume down", "vdn"),
        ("Lock Screen", "Lo"),
    ],
)
def test_subsequences_match(candidate, query):
    assert score(candidate, query) is not None


def test_empty_query_matches_everything_equally():
    assert score("Spotify", "") == 0
    assert score("", "") == 0


def test_case_sensitivity():
    assert score("Spotify", "SPOT") is not None
    assert score("Spotify", "SPOT", case_sensitive=True) is None
    assert score("Spotify", "Spot", case_sensitive=True) is not None


def test_tighter_matches_score_higher():
    exact = score("Play", "play")
    prefix = score("Player", "play")
    substring = score("Replay", "play")
    scattered = score("Plain way", "play")

    assert exact > prefix > substring > scattered


def test_equal_prefix_matches_tie():
    assert score("Volume up", "Vol") == score("Volume down", "Vol")


def test_is_subsequence():
    assert is_subsequence("vdn", "volume down")
    assert not is_subsequence("nv", "volume down")
    assert is_subsequence("", "anything")


def test_rank_orders_by_descending_score():
    matcher = FuzzyMatcher()

    ranked = matcher.rank(["avbocl", "Volume", "Play"], "vol", key=str)

    assert [item for item, _score in ranked] == ["Volume", "avbocl"]
    assert ranked[0][1] > ranked[1][1]


def test_rank_keeps_enumeration_order_on_ties():
    matcher = FuzzyMatcher()
    items = ["Volume up", "Volume down", "Play", "Pause"]

    first = matcher.filter(items, "Vol", key=str)
    second = matcher.filter(items, "Vol", key=str)

    assert first == ["Volume up", "Volume down"]
    assert first == second


def test_rank_with_empty_query_keeps_everything_in_order():
    matcher = FuzzyMatcher()

    assert matcher.filter(["b", "a", "c"], "", key=str) == ["b", "a", "c"]
