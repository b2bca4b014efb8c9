"""Tests for constraints.py — schedule validation."""

from dataclasses import replace
from datetime import date, timedelta

from quickleague.constraints import format_validation_report, validate_schedule
from quickleague.models import (
    DayOfWeek, GeneratedGame, GeneratedSchedule, ScheduleFormat, ScheduleRequest,
)
from quickleague.scheduler import assign_colors, generate_schedule

MONDAY = date(2026, 3, 2)


def _request(n_teams=4, **kwargs):
    fields = dict(
        teams=tuple(f"T{i}" for i in range(n_teams)),
        format=ScheduleFormat.SINGLE,
        days=(DayOfWeek.Mon,),
        time_slots=("18:00", "20:00"),
        season_start=MONDAY,
        season_end=MONDAY + timedelta(weeks=10),
        venue_name="Field 1",
    )
    fields.update(kwargs)
    return ScheduleRequest(**fields)


def _schedule(req, games):
    return GeneratedSchedule(teams=assign_colors(req.teams), games=games)


def _game(home, away, d=MONDAY, t="18:00", loc="Field 1"):
    return GeneratedGame(home, away, d, t, loc)


class TestValidateSchedule:
    def test_generated_schedule_is_valid(self):
        req = _request(n_teams=6, format=ScheduleFormat.DOUBLE)
        result = validate_schedule(generate_schedule(req), req)
        assert result["valid"], result["errors"]

    def test_unknown_team_index(self):
        req = _request()
        result = validate_schedule(_schedule(req, [_game(0, 9)]), req)
        assert not result["valid"]
        assert any("unknown team index 9" in e for e in result["errors"])

    def test_team_plays_itself(self):
        req = _request()
        result = validate_schedule(_schedule(req, [_game(1, 1)]), req)
        assert any("plays itself" in e for e in result["errors"])

    def test_outside_season(self):
        req = _request()
        games = [
            _game(0, 1, d=MONDAY - timedelta(weeks=1)),
            _game(2, 3, d=MONDAY + timedelta(weeks=11)),
        ]
        errors = validate_schedule(_schedule(req, games), req)["errors"]
        assert any("before season start" in e for e in errors)
        assert any("after season end" in e for e in errors)

    def test_wrong_day(self):
        req = _request()
        errors = validate_schedule(
            _schedule(req, [_game(0, 1, d=MONDAY + timedelta(days=1))]), req
        )["errors"]
        assert any("Tue is not a game day" in e for e in errors)

    def test_wrong_time(self):
        req = _request()
        errors = validate_schedule(_schedule(req, [_game(0, 1, t="19:00")]),
                                   req)["errors"]
        assert any("19:00 is not a configured time slot" in e for e in errors)

    def test_wrong_location(self):
        req = _request()
        errors = validate_schedule(_schedule(req, [_game(0, 1, loc="Elsewhere")]),
                                   req)["errors"]
        assert any("not the venue" in e for e in errors)

    def test_double_booked_slot(self):
        req = _request()
        games = [_game(0, 1), _game(2, 3)]
        errors = validate_schedule(_schedule(req, games), req)["errors"]
        assert any("slot already used" in e for e in errors)

    def test_out_of_order(self):
        req = _request()
        games = [_game(0, 1, t="20:00"), _game(2, 3, t="18:00")]
        errors = validate_schedule(_schedule(req, games), req)["errors"]
        assert any("out of chronological order" in e for e in errors)

    def test_same_day_double_header_warns(self):
        req = _request()
        games = [_game(0, 1, t="18:00"), _game(0, 2, t="20:00")]
        result = validate_schedule(_schedule(req, games), req)
        assert result["valid"]
        assert any("T0 plays 2 games on 2026-03-02" in w for w in result["warnings"])

    def test_truncation_warns(self):
        req = _request(season_end=MONDAY)
        schedule = generate_schedule(req)
        result = validate_schedule(schedule, req)
        assert result["valid"]
        assert any("4 pairings did not fit" in w for w in result["warnings"])

    def test_empty_schedule(self):
        req = _request()
        result = validate_schedule(_schedule(req, []), req)
        assert result == {"valid": True, "errors": [], "warnings": []}


class TestFormatValidationReport:
    def test_valid(self):
        text = format_validation_report({"valid": True, "errors": [], "warnings": []})
        assert "RESULT: VALID" in text

    def test_errors_and_warnings(self):
        req = _request()
        schedule = _schedule(req, [_game(0, 0), replace(_game(1, 2), time="23:00")])
        text = format_validation_report(validate_schedule(schedule, req))
        assert "RESULT: INVALID" in text
        assert "ERROR:" in text
