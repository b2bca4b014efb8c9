"""Tests for standings.py — score entry and the league table."""

import pytest

from quickleague.models import GameResult, GameStatus, LeagueSettings
from quickleague.standings import (
    compute_standings, format_standings_report, record_score,
)


def _played(home, away, hs, as_):
    return record_score(GameResult(home, away), hs, as_)


class TestRecordScore:
    def test_completes_game(self):
        g = record_score(GameResult("A", "B"), 2, 1)
        assert g.status is GameStatus.COMPLETED
        assert g.home_score == 2

    def test_negative_score(self):
        with pytest.raises(ValueError, match="negative"):
            record_score(GameResult("A", "B"), -1, 0)

    def test_same_team(self):
        with pytest.raises(ValueError, match="itself"):
            record_score(GameResult("A", "A"), 1, 0)

    def test_tie_not_allowed(self):
        settings = LeagueSettings(ties_allowed=False)
        with pytest.raises(ValueError, match="Ties"):
            record_score(GameResult("A", "B"), 1, 1, settings)

    def test_tie_allowed_by_default(self):
        assert record_score(GameResult("A", "B"), 1, 1).home_score == 1


class TestComputeStandings:
    def test_win_loss_tie_points(self):
        results = [
            _played("A", "B", 3, 1),
            _played("B", "C", 2, 2),
            _played("C", "A", 0, 1),
        ]
        table = {s.team: s for s in compute_standings(["A", "B", "C"], results)}

        assert (table["A"].wins, table["A"].losses, table["A"].ties) == (2, 0, 0)
        assert table["A"].points == 4
        assert table["B"].points == 1
        assert table["C"].points == 1
        assert table["A"].goals_for == 4
        assert table["A"].goals_against == 1
        assert table["B"].games_played == 2

    def test_ordering(self):
        results = [
            _played("A", "B", 1, 0),
            _played("C", "D", 5, 0),
        ]
        order = [s.team for s in compute_standings(["A", "B", "C", "D"], results)]
        # A and C level on points, C ahead on differential
        assert order == ["C", "A", "B", "D"]

    def test_goals_for_breaks_tie(self):
        results = [
            _played("A", "B", 1, 1),
            _played("C", "D", 3, 3),
        ]
        order = [s.team for s in compute_standings(["A", "B", "C", "D"], results)]
        assert order == ["C", "D", "A", "B"]

    def test_ignores_unplayed_games(self):
        results = [
            GameResult("A", "B"),
            GameResult("A", "B", status=GameStatus.POSTPONED),
        ]
        table = compute_standings(["A", "B"], results)
        assert all(s.games_played == 0 for s in table)

    def test_custom_points(self):
        settings = LeagueSettings(points_win=3, points_loss=1, points_tie=2)
        results = [_played("A", "B", 2, 0), _played("A", "B", 1, 1)]
        table = {s.team: s for s in compute_standings(["A", "B"], results, settings)}
        assert table["A"].points == 5
        assert table["B"].points == 3

    def test_unknown_team_ignored(self):
        table = compute_standings(["A"], [_played("A", "Z", 1, 0)])
        assert table[0].wins == 1
        assert len(table) == 1

    def test_no_teams(self):
        assert compute_standings([], []) == []


class TestFormatStandingsReport:
    def test_rows(self):
        table = compute_standings(["Blades", "Icers"], [_played("Blades", "Icers", 4, 2)])
        text = format_standings_report(table)
        assert "STANDINGS" in text
        lines = text.splitlines()
        assert "Blades" in lines[5]
        assert "+2" in lines[5]
        assert "Icers" in lines[6]

    def test_empty(self):
        assert "STANDINGS" in format_standings_report([])
