from datetime import datetime

import pytest

from draftlens.analysis import (
    draft_slot_by_tournament,
    group_players,
    player_pick_timeline,
    position_share_by_round,
    summary_stats,
    team_position_counts,
    unique_players_by_team,
)
from draftlens.config import MAX_ROUNDS, ROUND_SIZE

from tests.factories import example_rows, pick


def test_unique_players_by_team_counts_distinct_names():
    rows = [
        pick("D1", 1, "A", "X", "KC", "RB"),
        pick("D2", 3, "A", "X", "KC", "RB"),
        pick("D1", 2, "B", "Y", "KC", "WR"),
        pick("D1", 4, "C", "Z", "SF", "TE"),
        pick("D1", 5, "D", "W", "ATL", "WR"),
        pick("D1", 6, "No", "Team", "", "WR"),
    ]

    counts = unique_players_by_team(rows)
    assert [(item.team, item.unique_players) for item in counts] == [("KC", 2), ("ATL", 1), ("SF", 1)]


def test_team_position_counts_orders_positions_and_teams():
    rows = [
        pick("D1", 1, "A", "", "SF", "WR"),
        pick("D1", 2, "B", "", "KC", "K"),
        pick("D1", 3, "C", "", "KC", "QB"),
        pick("D1", 4, "D", "", "KC", "QB"),
        pick("D1", 5, "E", "", "ATL", "TE"),
        pick("D1", 6, "F", "", "", "RB"),
    ]

    chart = team_position_counts(rows)
    assert chart.series == ("QB", "WR", "TE", "K")
    assert chart.rows == [
        {"team": "ATL", "QB": 0, "WR": 0, "TE": 1, "K": 0},
        {"team": "KC", "QB": 2, "WR": 0, "TE": 0, "K": 1},
        {"team": "SF", "QB": 0, "WR": 1, "TE": 0, "K": 0},
    ]


def test_draft_slot_histogram_by_tournament():
    rows = [
        pick("D1", 13, "A", "", "KC", "RB", title="Best Ball Mania"),
        pick("D1", 1, "B", "", "KC", "WR", title="Best Ball Mania"),
        pick("D2", 5, "C", "", "SF", "WR", title=""),
        pick("D2", 20, "D", "", "SF", "TE", title=""),
        pick("D3", 14, "E", "", "ATL", "QB", title="Puppy"),
        pick("D4", "3.7", "F", "", "MIA", "RB", title="Best Ball Mania"),
        pick("D5", 5, "G", "", "DAL", "WR", title="Best Ball Mania"),
    ]

    chart = draft_slot_by_tournament(rows)
    assert chart.series == ("Best Ball Mania", "Unknown", "Puppy")
    assert [row["slot"] for row in chart.rows] == [str(slot) for slot in range(1, 13)]
    by_slot = {row["slot"]: row for row in chart.rows}
    assert by_slot["1"] == {"slot": "1", "Best Ball Mania": 1, "Unknown": 0, "Puppy": 0}
    assert by_slot["3"]["Best Ball Mania"] == 1
    assert by_slot["5"] == {"slot": "5", "Best Ball Mania": 1, "Unknown": 1, "Puppy": 0}
    # D3 never picked inside the first round, so it is left out.
    assert sum(row[title] for row in chart.rows for title in chart.series) == 4


def test_draft_slot_histogram_empty_table():
    chart = draft_slot_by_tournament([])

    assert chart.series == ()
    assert len(chart.rows) == 12
    assert chart.rows[0] == {"slot": "1"}


def test_position_share_by_round():
    rows = [
        pick("D1", 1, "A", "", "KC", "QB"),
        pick("D1", 2, "B", "", "KC", "RB"),
        pick("D1", 3, "C", "", "KC", "RB"),
        pick("D1", 25, "D", "", "KC", "WR"),
        pick("D1", "abc", "E", "", "KC", "TE"),
    ]

    chart = position_share_by_round(rows)
    assert chart.positions == ("QB", "RB", "WR", "TE")
    assert chart.max_round == 3

    first, second, third = chart.rounds
    assert first.total == 3
    assert first.shares == {"QB": 33.33, "RB": 66.67, "WR": 0.0, "TE": 0.0}
    assert second.total == 0
    assert set(second.shares.values()) == {0.0}
    assert third.shares["WR"] == pytest.approx(100.0)


def test_position_share_by_round_without_picks():
    chart = position_share_by_round([pick("D1", "", "A", "", "KC", "QB")])

    assert chart.max_round == 0
    assert chart.rounds == []


def test_player_pick_timeline_sorted_and_filtered():
    rows = [
        pick("D1", 30, "A", "X", "KC", "RB", picked_at="2025-06-03T00:00:00Z"),
        pick("D2", "27.5", "A", "X", "KC", "RB", picked_at="2025-06-01T00:00:00Z"),
        pick("D3", 28, "A", "X", "KC", "RB", picked_at=""),
        pick("D4", "n/a", "A", "X", "KC", "RB", picked_at="2025-06-02T00:00:00Z"),
    ]

    points = player_pick_timeline(group_players(rows)[0])
    assert [point.picked_at for point in points] == [datetime(2025, 6, 1), datetime(2025, 6, 3)]
    assert [point.pick for point in points] == [27.5, 30]
    assert isinstance(points[1].pick, int)
    assert points[0].timestamp_ms == 1748736000000


def test_summary_stats():
    rows = [
        pick("D1", 1, "A", "X", "KC", "RB", **{"Draft Total Prizes": "100", "Tournament Total Prizes": "1000"}),
        pick("D1", 2, "B", "Y", "SF", "WR", **{"Draft Total Prizes": "100", "Tournament Total Prizes": "junk"}),
        pick("D2", 1, "C", "Z", "KC", "TE", **{"Draft Total Prizes": "50.5"}),
    ]

    stats = summary_stats(rows)
    assert stats.total_picks == 3
    assert stats.total_drafts == 2
    assert stats.unique_teams == 2
    assert stats.avg_pick_number == pytest.approx(1.33)
    assert stats.most_picked_team == "KC"
    assert stats.total_draft_prizes == pytest.approx(250.5)
    assert stats.total_tournament_prizes == pytest.approx(1000.0)


def test_summary_stats_empty_table():
    stats = summary_stats([])

    assert stats.total_picks == 0
    assert stats.total_drafts == 0
    assert stats.avg_pick_number == 0.0
    assert stats.most_picked_team == "-"


def test_summary_stats_example_rows():
    stats = summary_stats(example_rows())

    assert stats.total_drafts == 2
    assert stats.most_picked_team == "KC"


def test_position_share_by_round_ignores_out_of_range_picks(caplog: pytest.LogCaptureFixture):
    rows = example_rows() + [pick("D3", "24000000", "C", "Z", "DAL", "TE"), pick("D3", "2.4e9", "D", "W", "MIA", "WR")]

    with caplog.at_level("WARNING"):
        chart = position_share_by_round(rows)

    assert chart.max_round == 1
    assert chart.rounds[0].total == 3
    assert chart.rounds[0].shares["TE"] == 0.0
    assert "Ignored 2 picks beyond round" in caplog.text


def test_position_share_by_round_keeps_last_allowed_round():
    rows = [pick("D1", MAX_ROUNDS * ROUND_SIZE, "A", "X", "KC", "RB")]

    chart = position_share_by_round(rows)
    assert chart.max_round == MAX_ROUNDS
    assert chart.rounds[-1].shares == {"RB": 100.0}
