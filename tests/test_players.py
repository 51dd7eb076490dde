import pytest

from draftlens.analysis import find_player, group_players, sort_by_adp
from draftlens.models import PlayerKey

from tests.factories import example_rows, pick


def test_group_players_example():
    players = group_players(example_rows())

    assert [player.key for player in players] == [
        PlayerKey("A X", "KC", "RB"),
        PlayerKey("B Y", "SF", "WR"),
    ]
    a = players[0]
    assert a.pick_numbers == (1, 1)
    assert a.count == 2
    assert a.draft_ids == ("D1", "D2")
    assert a.my_adp == pytest.approx(1.0)


def test_group_players_trims_name_parts_and_ignores_other_fields():
    rows = [
        pick("D1", 5, " Puka ", "Nacua ", "LAR", "WR", title="Best Ball Mania"),
        pick("D2", 7, "Puka", " Nacua", " LAR ", " WR ", title="Puppy"),
    ]

    players = group_players(rows)
    assert len(players) == 1
    assert players[0].key == PlayerKey("Puka Nacua", "LAR", "WR")
    assert players[0].pick_numbers == (5, 7)


def test_same_name_different_position_are_distinct_players():
    rows = [
        pick("D1", 30, "Josh", "Allen", "BUF", "QB"),
        pick("D1", 200, "Josh", "Allen", "JAX", "DL"),
    ]

    assert len(group_players(rows)) == 2


def test_empty_name_still_forms_a_player():
    rows = [pick("D1", 100, "", "", "KC", "DST")]

    players = group_players(rows)
    assert players[0].key == PlayerKey("", "KC", "DST")


def test_unparsable_pick_numbers_count_as_zero():
    rows = [
        pick("D1", "abc", "A", "X", "KC", "RB"),
        pick("D2", "10", "A", "X", "KC", "RB"),
        pick("D3", "", "A", "X", "KC", "RB"),
    ]

    player = group_players(rows)[0]
    assert player.pick_numbers == (0, 10, 0)
    assert player.count == 3
    assert player.my_adp == pytest.approx(10 / 3)


def test_player_stats_histograms_and_fees():
    rows = [
        pick("D1", 3, "A", "X", "KC", "RB", picked_at="2025-06-01T12:00:00Z", title="Best Ball Mania", fee="25"),
        pick("D2", 4, "A", "X", "KC", "RB", picked_at="2025-06-20 09:30:00", title="Best Ball Mania", fee="$5"),
        pick("D3", 5, "A", "X", "KC", "RB", picked_at="2025-07-02T08:00:00", title="", fee="10.5"),
        pick("D4", 6, "A", "X", "KC", "RB", picked_at="not a date", title="Puppy", fee=""),
    ]

    stats = group_players(rows)[0].stats
    assert stats.month_counts == {"June 2025": 2, "July 2025": 1}
    assert stats.tournament_counts == {"Best Ball Mania": 2, "Unknown": 1, "Puppy": 1}
    assert stats.total_tournament_entry_fee == pytest.approx(35.5)


def test_group_players_is_idempotent():
    rows = example_rows() + [pick("D3", 9, "C", "Z", "DAL", "TE", picked_at="2025-05-05T00:00:00")]

    first = group_players(rows)
    second = group_players(rows)
    assert [p.key for p in first] == [p.key for p in second]
    assert [p.pick_numbers for p in first] == [p.pick_numbers for p in second]
    assert [p.stats for p in first] == [p.stats for p in second]
    assert all(a.rows == b.rows for a, b in zip(first, second))


def test_player_rows_are_shared_references():
    rows = example_rows()
    player = group_players(rows)[0]

    assert player.rows[0] is rows[0]


def test_sort_by_adp_and_find_player():
    rows = [
        pick("D1", 40, "Late", "Pick", "NYJ", "WR"),
        pick("D1", 2, "Early", "Pick", "CIN", "WR"),
    ]
    players = sort_by_adp(group_players(rows))

    assert [player.name for player in players] == ["Early Pick", "Late Pick"]
    assert find_player(players, "Late Pick|NYJ|WR") is players[1]
    assert find_player(players, PlayerKey("Nobody", "", "")) is None
