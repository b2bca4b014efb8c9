"""Output formatters for the quickleague scheduling app."""

import csv
import json
from datetime import date
from io import StringIO
from pathlib import Path

from quickleague.config import parse_date
from quickleague.models import (
    DayOfWeek, GameResult, GeneratedGame, GeneratedSchedule, GeneratedTeam,
)
from quickleague.standings import record_score

CSV_HEADER = ["Game", "Date", "Day", "Time", "Home", "Away", "Location"]


def schedule_to_dict(schedule: GeneratedSchedule) -> dict:
    """Structured form of a schedule, as handed to the create step."""
    return {
        "teams": [{"name": t.name, "color": t.color} for t in schedule.teams],
        "games": [
            {
                "homeTeamIndex": g.home_team_index,
                "awayTeamIndex": g.away_team_index,
                "date": g.date.isoformat(),
                "time": g.time,
                "location": g.location,
            }
            for g in schedule.games
        ],
    }


def schedule_from_dict(data: dict) -> GeneratedSchedule:
    """Inverse of schedule_to_dict."""
    teams = [GeneratedTeam(name=t["name"], color=t["color"])
             for t in data.get("teams", [])]
    games = [
        GeneratedGame(
            home_team_index=int(g["homeTeamIndex"]),
            away_team_index=int(g["awayTeamIndex"]),
            date=parse_date(str(g["date"])),
            time=str(g["time"]),
            location=str(g.get("location", "")),
        )
        for g in data.get("games", [])
    ]
    return GeneratedSchedule(teams=teams, games=games)


def format_schedule(schedule: GeneratedSchedule,
                    season_start: date | None = None,
                    title: str = "LEAGUE SCHEDULE") -> str:
    """Format schedule as human-readable text, organized by week."""
    names = [t.name for t in schedule.teams]
    lines = []
    lines.append("=" * 72)
    lines.append(title.upper())
    lines.append("=" * 72)

    if not schedule.games:
        lines.append("\nNo games scheduled.")
        return "\n".join(lines)

    first = season_start or schedule.games[0].date

    # Group by week
    by_week: dict[int, list[GeneratedGame]] = {}
    for g in schedule.games:
        week = (g.date - first).days // 7 + 1
        by_week.setdefault(week, []).append(g)

    for week_num in sorted(by_week):
        lines.append(f"\n--- WEEK {week_num} ---")
        current = None
        for g in by_week[week_num]:
            if g.date != current:
                current = g.date
                day = DayOfWeek(g.date.weekday()).full_name.capitalize()
                lines.append(f"\n  {day} {g.date.isoformat()}")
            lines.append(
                f"    {g.time}  {names[g.home_team_index]:<16} vs "
                f"{names[g.away_team_index]:<16} @ {g.location}"
            )

    if schedule.unscheduled_pairings:
        lines.append(f"\n{'=' * 72}")
        lines.append(f"UNSCHEDULED PAIRINGS: {schedule.unscheduled_pairings}")
        lines.append("=" * 72)

    # Per-team schedule
    lines.append("\n" + "=" * 72)
    lines.append("PER-TEAM SCHEDULES")
    lines.append("=" * 72)

    for idx, name in enumerate(names):
        lines.append(f"\n{name}:")
        team_games = [g for g in schedule.games
                      if idx in (g.home_team_index, g.away_team_index)]
        for i, g in enumerate(team_games, 1):
            is_home = g.home_team_index == idx
            opponent = names[g.away_team_index if is_home else g.home_team_index]
            h_a = "H" if is_home else "A"
            lines.append(
                f"  {i:>2}. {g.date.strftime('%a %Y-%m-%d')} {g.time} "
                f"{h_a} vs {opponent}"
            )

    return "\n".join(lines)


def format_schedule_csv(schedule: GeneratedSchedule) -> str:
    """Format schedule as an editable CSV, one row per game."""
    names = [t.name for t in schedule.teams]
    output = StringIO()
    writer = csv.writer(output)
    writer.writerow(CSV_HEADER)

    for i, g in enumerate(schedule.games, 1):
        writer.writerow([
            i, g.date.isoformat(), g.date.strftime("%a"), g.time,
            names[g.home_team_index], names[g.away_team_index], g.location,
        ])

    return output.getvalue()


def write_schedule(schedule: GeneratedSchedule, output_prefix: str = "output",
                   season_start: date | None = None,
                   title: str = "LEAGUE SCHEDULE") -> list[Path]:
    """Write all output files into {output_prefix}/ directory."""
    out_dir = Path(output_prefix)
    out_dir.mkdir(parents=True, exist_ok=True)

    written = []
    contents = {
        "schedule.txt": format_schedule(schedule, season_start, title),
        "schedule.csv": format_schedule_csv(schedule),
        "schedule.json": json.dumps(schedule_to_dict(schedule), indent=2) + "\n",
    }
    for filename, text in contents.items():
        path = out_dir / filename
        path.write_text(text)
        print(f"Written: {path}")
        written.append(path)
    return written


def parse_results_csv(csv_path: str | Path) -> list[GameResult]:
    """Read a schedule CSV with HomeScore/AwayScore columns added.

    Rows with both scores filled in are completed games; the rest stay
    scheduled. Rows without both team names are skipped.
    """
    results = []
    with open(csv_path, newline="") as f:
        reader = csv.DictReader(f)
        for line_no, row in enumerate(reader, 2):
            home = (row.get("Home") or "").strip()
            away = (row.get("Away") or "").strip()
            if not home or not away:
                continue

            date_str = (row.get("Date") or "").strip()
            game_date = parse_date(date_str) if date_str else None
            result = GameResult(home_team=home, away_team=away, date=game_date)

            home_score = (row.get("HomeScore") or "").strip()
            away_score = (row.get("AwayScore") or "").strip()
            if home_score and away_score:
                try:
                    result = record_score(result, int(home_score), int(away_score))
                except ValueError as e:
                    raise ValueError(f"{csv_path}, line {line_no}: {e}") from e
            results.append(result)

    return results
