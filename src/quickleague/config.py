"""Setup loading and validation for the quickleague scheduling app."""

from datetime import date, datetime, time, timedelta
from pathlib import Path

import yaml

from quickleague.models import (
    DayOfWeek, LeagueInfo, LocationInfo, ScheduleFormat, ScheduleInfo,
    SetupData, TeamsInfo,
)
from quickleague.names import generate_team_names

DEFAULT_TEAM_COUNT = 8
DEFAULT_SEASON_DAYS = 90
MAX_TEAM_COUNT = 200


class SetupError(ValueError):
    """A setup record that cannot be turned into a schedule request."""


def parse_time(s: str) -> time:
    """Parse time strings like '5:30pm', '10am', '17:00'."""
    s = s.strip()
    s_lower = s.lower()

    is_pm = s_lower.endswith("pm")
    is_am = s_lower.endswith("am")

    # Strip am/pm suffix
    s_clean = s_lower
    if is_pm or is_am:
        s_clean = s_clean[:-2].strip()

    if ":" in s_clean:
        parts = s_clean.split(":")
        h = int(parts[0])
        m = int(parts[1])
    else:
        h = int(s_clean)
        m = 0

    if is_pm and h < 12:
        h += 12
    elif is_am and h == 12:
        h = 0

    return time(h, m)


def normalize_time(value) -> str:
    """Return a zero-padded 24-hour 'HH:MM' string.

    Slot ordering compares these strings, so '9:00' must become '09:00'.
    """
    if isinstance(value, time):
        t = value
    elif isinstance(value, int):
        # YAML 1.1 reads an unquoted 18:00 as sexagesimal minutes
        t = time(value // 60, value % 60)
    else:
        t = parse_time(str(value))
    return f"{t.hour:02d}:{t.minute:02d}"


def parse_date(s: str) -> date:
    """Parse date string YYYY-MM-DD."""
    parts = s.strip().split("-")
    return date(int(parts[0]), int(parts[1]), int(parts[2]))


def _to_date(value, field_name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return parse_date(str(value))
    except (ValueError, IndexError) as e:
        raise SetupError(f"{field_name}: cannot parse date {value!r}") from e


def _get(section: dict, *keys, default=None):
    """First present key wins, so camelCase and snake_case both work."""
    for key in keys:
        if section.get(key) is not None:
            return section[key]
    return default


def _section(raw: dict, name: str) -> dict:
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise SetupError(f"{name}: expected a mapping, got {type(value).__name__}")
    return value


def _list(section: dict, field_name: str, *keys, default: list) -> list:
    """A list-valued field; a bare string or number is rejected, not iterated."""
    value = _get(section, *keys, default=default)
    if not isinstance(value, (list, tuple)):
        raise SetupError(
            f"{field_name}: expected a list, got {type(value).__name__}"
        )
    return list(value)


def complete_setup(raw: dict, today: date | None = None) -> SetupData:
    """Fill in a partial setup record with defaults.

    Missing fields get: league 'My League' / sport 'other', as many teams as
    names given (8 if none), Monday 19:00 games, a season from today through
    today + 90 days, single round-robin, venue 'TBD'. Team names missing
    from the requested count come from the sport's default name list.
    """
    if not isinstance(raw, dict):
        raise SetupError("Missing setup data")
    today = today or date.today()

    league_raw = _section(raw, "league")
    league = LeagueInfo(
        name=str(_get(league_raw, "name", default="") or "My League"),
        sport=str(_get(league_raw, "sport", default="") or "other").lower(),
    )

    # Teams
    teams_raw = _section(raw, "teams")
    names = [str(n).strip() for n in _list(teams_raw, "teams.names", "names",
                                           default=[])]
    names = [n for n in names if n]
    try:
        count = int(_get(teams_raw, "count", default=0) or 0)
    except (TypeError, ValueError) as e:
        raise SetupError(f"teams.count: not a number: {teams_raw['count']!r}") from e
    count = count or len(names) or DEFAULT_TEAM_COUNT
    if count < 0 or count > MAX_TEAM_COUNT or len(names) > MAX_TEAM_COUNT:
        raise SetupError(
            f"teams.count: must be between 1 and {MAX_TEAM_COUNT}, got "
            f"{max(count, len(names))}"
        )

    if len(names) < count:
        used = set(names)
        # Each given name can knock out at most one default candidate
        for candidate in generate_team_names(count, league.sport):
            if len(names) >= count:
                break
            if candidate not in used:
                names.append(candidate)
                used.add(candidate)

    # Schedule
    sched_raw = _section(raw, "schedule")
    try:
        days = list(dict.fromkeys(
            d if isinstance(d, DayOfWeek) else DayOfWeek.from_str(str(d))
            for d in _list(sched_raw, "schedule.days", "days",
                           default=["monday"])
        ))
    except KeyError as e:
        raise SetupError(f"schedule.days: unknown day {e}") from e

    try:
        time_slots = list(dict.fromkeys(
            normalize_time(t) for t in
            _list(sched_raw, "schedule.timeSlots", "timeSlots", "time_slots",
                  default=["19:00"])
        ))
    except SetupError:
        raise
    except ValueError as e:
        raise SetupError(f"schedule.timeSlots: {e}") from e

    start = _get(sched_raw, "startDate", "start_date")
    end = _get(sched_raw, "endDate", "end_date")
    start_date = _to_date(start, "schedule.startDate") if start else today
    end_date = (_to_date(end, "schedule.endDate") if end
                else today + timedelta(days=DEFAULT_SEASON_DAYS))

    fmt = _get(sched_raw, "format", default=ScheduleFormat.SINGLE)
    if not isinstance(fmt, ScheduleFormat):
        try:
            fmt = ScheduleFormat.from_str(str(fmt))
        except ValueError as e:
            raise SetupError(f"schedule.format: {e}") from e

    # Location may be a bare venue name
    loc_raw = raw.get("location") or {}
    if isinstance(loc_raw, str):
        loc_raw = {"name": loc_raw}
    elif not isinstance(loc_raw, dict):
        raise SetupError(
            f"location: expected a mapping or a name, got {type(loc_raw).__name__}"
        )
    location = LocationInfo(
        name=str(_get(loc_raw, "name", default="") or "TBD"),
        address=_get(loc_raw, "address"),
    )

    return SetupData(
        league=league,
        teams=TeamsInfo(count=count, names=names),
        schedule=ScheduleInfo(
            days=days,
            time_slots=time_slots,
            start_date=start_date,
            end_date=end_date,
            format=fmt,
        ),
        location=location,
    )


def load_setup(path: str | Path, today: date | None = None) -> SetupData:
    """Load a setup YAML file and fill in defaults."""
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return complete_setup(raw, today=today)


def validate_setup(setup: SetupData) -> list[str]:
    """Return problems that should stop a setup before generation.

    The generator itself tolerates all of these; they are caught here so a
    user gets a message instead of an empty schedule.
    """
    errors = []
    names = setup.teams.names

    if len(names) < 2:
        errors.append(f"Need at least 2 teams, got {len(names)}")

    seen = set()
    for n in names:
        if n in seen:
            errors.append(f"Duplicate team name: {n}")
        seen.add(n)

    if not setup.schedule.days:
        errors.append("No game days selected")
    if not setup.schedule.time_slots:
        errors.append("No time slots selected")

    start, end = setup.schedule.start_date, setup.schedule.end_date
    if start and end and start > end:
        errors.append(f"Season starts ({start}) after it ends ({end})")

    if not setup.location.name.strip():
        errors.append("Venue name is empty")

    return errors
