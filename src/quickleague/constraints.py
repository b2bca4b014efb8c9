"""Constraint validation for generated schedules.

Checks a GeneratedSchedule against the request it was generated from.
"""

from collections import defaultdict

from quickleague.models import DayOfWeek, GeneratedSchedule, ScheduleRequest


def validate_schedule(schedule: GeneratedSchedule,
                      request: ScheduleRequest) -> dict:
    """Validate a schedule against the request's calendar and team list.

    Returns dict with:
    - valid: bool (True if no hard constraint violations)
    - errors: list of hard constraint violations
    - warnings: list of soft constraint issues
    """
    errors = []
    warnings = []

    team_count = len(schedule.teams)
    allowed_days = set(request.days)
    allowed_times = set(request.time_slots)

    def _label(i: int) -> str:
        if 0 <= i < team_count:
            return schedule.teams[i].name
        return f"#{i}"

    games_per_date: dict[int, dict] = defaultdict(lambda: defaultdict(int))
    seen_slots = set()
    prev_key = None

    for n, g in enumerate(schedule.games, 1):
        home, away = g.home_team_index, g.away_team_index
        desc = f"Game {n} ({_label(home)} vs {_label(away)}, {g.date} {g.time})"

        for idx in (home, away):
            if not 0 <= idx < team_count:
                errors.append(f"{desc}: unknown team index {idx}")
        if home == away:
            errors.append(f"{desc}: team plays itself")

        if request.season_start and g.date < request.season_start:
            errors.append(f"{desc}: before season start {request.season_start}")
        if request.season_end and g.date > request.season_end:
            errors.append(f"{desc}: after season end {request.season_end}")

        dow = DayOfWeek(g.date.weekday())
        if dow not in allowed_days:
            errors.append(f"{desc}: {dow.name} is not a game day")
        if g.time not in allowed_times:
            errors.append(f"{desc}: {g.time} is not a configured time slot")
        if g.location != request.venue_name:
            errors.append(f"{desc}: location {g.location!r} is not the venue")

        key = (g.date, g.time)
        if key in seen_slots:
            errors.append(f"{desc}: slot already used by an earlier game")
        seen_slots.add(key)
        if prev_key is not None and key < prev_key:
            errors.append(f"{desc}: out of chronological order")
        prev_key = key

        games_per_date[home][g.date] += 1
        games_per_date[away][g.date] += 1

    for team in sorted(games_per_date):
        for d, count in sorted(games_per_date[team].items()):
            if count > 1:
                warnings.append(f"{_label(team)} plays {count} games on {d}")

    if schedule.unscheduled_pairings:
        warnings.append(
            f"{schedule.unscheduled_pairings} pairings did not fit in the "
            f"season and were not scheduled"
        )

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
    }


def format_validation_report(result: dict) -> str:
    """Format validation results as text."""
    lines = []
    lines.append("=" * 60)
    lines.append("SCHEDULE VALIDATION REPORT")
    lines.append("=" * 60)

    if result["valid"]:
        lines.append("\nRESULT: VALID (no hard constraint violations)")
    else:
        lines.append(f"\nRESULT: INVALID ({len(result['errors'])} violations)")

    if result["errors"]:
        lines.append(f"\n--- ERRORS ({len(result['errors'])}) ---")
        for e in result["errors"]:
            lines.append(f"  ERROR: {e}")

    if result["warnings"]:
        lines.append(f"\n--- WARNINGS ({len(result['warnings'])}) ---")
        for w in result["warnings"]:
            lines.append(f"  WARN: {w}")

    return "\n".join(lines)
