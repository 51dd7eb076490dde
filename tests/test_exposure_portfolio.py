import pytest

from draftlens.analysis import (
    PortfolioRecommender,
    exposure,
    filter_pairs,
    group_exposure,
    group_players,
    player_exposure,
    recommend_pairs,
    total_drafts,
)

from tests.factories import example_rows, pick


def _portfolio_rows() -> list[dict]:
    # A: D1 D2 D3 (60%), B: D4 D5 (40%), C: D1 D4 (40%), D: D5 (20%)
    return [
        pick("D1", 1, "A", "", "KC", "RB"),
        pick("D2", 1, "A", "", "KC", "RB"),
        pick("D3", 1, "A", "", "KC", "RB"),
        pick("D4", 2, "B", "", "SF", "WR"),
        pick("D5", 2, "B", "", "SF", "WR"),
        pick("D1", 3, "C", "", "DAL", "TE"),
        pick("D4", 3, "C", "", "DAL", "TE"),
        pick("D5", 4, "D", "", "MIA", "WR"),
    ]


def test_exposure_basic_and_no_data():
    assert exposure(["D1", "D2"], 4) == pytest.approx(50.0)
    assert exposure(["D1", "D1"], 4) == pytest.approx(25.0)
    assert exposure(["D1"], 0) is None


def test_total_drafts_counts_distinct_ids():
    assert total_drafts(example_rows()) == 2
    assert total_drafts([]) == 0


def test_player_exposure_example():
    rows = example_rows()
    players = group_players(rows)

    assert player_exposure(players[0], total_drafts(rows)) == pytest.approx(100.0)
    assert player_exposure(players[1], total_drafts(rows)) == pytest.approx(50.0)


def test_exposure_uses_distinct_drafts_not_rows():
    rows = example_rows() + [pick("D1", 40, "A", "X", "KC", "RB")]
    players = group_players(rows)

    assert players[0].count == 3
    assert player_exposure(players[0], total_drafts(rows)) == pytest.approx(100.0)


def test_exposure_never_drops_when_player_joins_a_new_draft():
    rows = _portfolio_rows()
    before = player_exposure(group_players(rows)[0], total_drafts(rows))

    extended = rows + [pick("D6", 1, "A", "", "KC", "RB")]
    after = player_exposure(group_players(extended)[0], total_drafts(extended))
    assert after >= before


def test_group_exposure_counts_shared_drafts():
    rows = _portfolio_rows()
    players = {player.name: player for player in group_players(rows)}
    total = total_drafts(rows)

    assert group_exposure([players["A"], players["C"]], total) == pytest.approx(20.0)
    assert group_exposure([players["A"], players["B"]], total) == pytest.approx(0.0)
    assert group_exposure([players["A"]], total) == pytest.approx(60.0)


def test_example_pair_rejected_for_shared_draft():
    rows = example_rows()
    pairs = recommend_pairs(group_players(rows), total_drafts(rows), threshold=49.0)

    assert pairs == []


def test_pairs_are_disjoint_and_ranked():
    rows = _portfolio_rows()
    players = group_players(rows)
    pairs = recommend_pairs(players, total_drafts(rows), threshold=10.0)

    names = [(pair.first.name, pair.second.name) for pair in pairs]
    assert names == [("A", "B"), ("A", "D"), ("C", "D")]
    assert [pair.combined_exposure for pair in pairs] == pytest.approx([100.0, 80.0, 60.0])
    for pair in pairs:
        assert pair.first.draft_set.isdisjoint(pair.second.draft_set)


def test_threshold_is_strictly_greater():
    rows = _portfolio_rows()
    pairs = recommend_pairs(group_players(rows), total_drafts(rows), threshold=40.0)

    assert pairs == []


def test_threshold_at_or_above_max_is_empty():
    rows = _portfolio_rows()
    players = group_players(rows)

    assert recommend_pairs(players, total_drafts(rows), threshold=60.0) == []
    assert recommend_pairs(players, total_drafts(rows), threshold=100.0) == []


def test_raising_threshold_gives_subset():
    rows = _portfolio_rows()
    recommender = PortfolioRecommender(group_players(rows), total_drafts(rows))

    previous = None
    for threshold in (0.0, 10.0, 20.0, 30.0, 50.0, 70.0):
        current = {pair.identity for pair in recommender.pairs(threshold)}
        if previous is not None:
            assert current <= previous
        previous = current


def test_tie_break_uses_first_then_second_exposure():
    # P 20%, Q 10%, R 10%, S 20%, T 30%, U 10% over ten drafts, none shared.
    rows = [
        pick("D1", 1, "P", "", "KC", "RB"),
        pick("D2", 1, "P", "", "KC", "RB"),
        pick("D3", 1, "Q", "", "SF", "WR"),
        pick("D4", 1, "R", "", "DAL", "TE"),
        pick("D5", 1, "S", "", "MIA", "WR"),
        pick("D6", 1, "S", "", "MIA", "WR"),
        pick("D7", 1, "T", "", "NYJ", "WR"),
        pick("D8", 1, "T", "", "NYJ", "WR"),
        pick("D9", 1, "T", "", "NYJ", "WR"),
        pick("D10", 1, "U", "", "BUF", "QB"),
    ]
    pairs = recommend_pairs(group_players(rows), total_drafts(rows), threshold=0.0)

    top = [(pair.first.name, pair.second.name) for pair in pairs[:6]]
    assert top == [("P", "T"), ("S", "T"), ("T", "U"), ("P", "S"), ("Q", "T"), ("R", "T")]
    assert len(pairs) == 15


def test_recommender_exposes_memoized_exposure():
    rows = _portfolio_rows()
    players = group_players(rows)
    recommender = PortfolioRecommender(players, total_drafts(rows))

    assert recommender.exposure_of(players[0]) == pytest.approx(60.0)


def test_filter_pairs_by_name():
    rows = _portfolio_rows()
    pairs = recommend_pairs(group_players(rows), total_drafts(rows), threshold=10.0)

    assert [(p.first.name, p.second.name) for p in filter_pairs(pairs, "d")] == [("A", "D"), ("C", "D")]
    assert filter_pairs(pairs, None) == pairs
