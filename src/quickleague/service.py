"""Generate and create entry points for league quick setup.

generate() turns a partial setup record into a schedule. create() stores a
league, its teams and its games through a LeagueStore, one insert after the
other; when a later insert fails the earlier rows are deleted again.
"""

import itertools
import logging
import re
from datetime import date
from typing import Protocol

from quickleague.config import SetupError, complete_setup
from quickleague.models import GeneratedSchedule, LeagueSettings, SetupData
from quickleague.output import schedule_to_dict
from quickleague.scheduler import generate_schedule

logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    """An insert or delete the store could not carry out."""


class LeagueStore(Protocol):
    def insert_league(self, row: dict) -> dict: ...

    def insert_teams(self, rows: list[dict]) -> list[dict]: ...

    def insert_games(self, rows: list[dict]) -> list[dict]: ...

    def delete_teams(self, league_id: int) -> None: ...

    def delete_league(self, league_id: int) -> None: ...


class MemoryStore:
    """LeagueStore kept in dicts; ids come from one counter per table."""

    def __init__(self):
        self.leagues: dict[int, dict] = {}
        self.teams: dict[int, dict] = {}
        self.games: dict[int, dict] = {}
        self._ids = {name: itertools.count(1)
                     for name in ("leagues", "teams", "games")}

    def _insert(self, table: str, row: dict) -> dict:
        stored = dict(row, id=next(self._ids[table]))
        getattr(self, table)[stored["id"]] = stored
        return stored

    def insert_league(self, row: dict) -> dict:
        if any(lg["slug"] == row["slug"] for lg in self.leagues.values()):
            raise StoreError(f"League slug already taken: {row['slug']}")
        return self._insert("leagues", row)

    def insert_teams(self, rows: list[dict]) -> list[dict]:
        return [self._insert("teams", r) for r in rows]

    def insert_games(self, rows: list[dict]) -> list[dict]:
        return [self._insert("games", r) for r in rows]

    def delete_teams(self, league_id: int) -> None:
        self.teams = {k: v for k, v in self.teams.items()
                      if v["league_id"] != league_id}

    def delete_league(self, league_id: int) -> None:
        self.leagues.pop(league_id, None)


def slugify(name: str) -> str:
    slug = name.lower()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip()


def generate(raw_setup: dict | None, today: date | None = None) -> dict:
    """Fill in a partial setup record and generate its schedule.

    Returns {"success": True, "data": schedule_dict, "setup": SetupData} or
    {"success": False, "error": message}.
    """
    try:
        setup = complete_setup(raw_setup, today=today)
        schedule = generate_schedule(setup.to_request())
    except SetupError as e:
        logger.warning("Rejected setup: %s", e)
        return {"success": False, "error": str(e)}
    except Exception:
        logger.exception("Generate error")
        return {"success": False, "error": "Failed to generate schedule"}

    logger.info("Generated %d games for %d teams in %s",
                len(schedule.games), len(schedule.teams), setup.league.name)
    return {
        "success": True,
        "data": schedule_to_dict(schedule),
        "setup": setup,
        "unscheduled": schedule.unscheduled_pairings,
    }


def create(setup: SetupData, schedule: GeneratedSchedule,
           store: LeagueStore, owner_id: str) -> dict:
    """Store a generated league: league row, then teams, then games."""
    if setup is None or schedule is None:
        return {"success": False, "error": "Missing data"}

    # 1. League
    try:
        league = store.insert_league({
            "name": setup.league.name,
            "slug": slugify(setup.league.name),
            "sport": setup.league.sport,
            "settings": LeagueSettings().to_dict(),
            "owner_id": owner_id,
        })
    except StoreError as e:
        logger.error("League creation error: %s", e)
        return {"success": False, "error": "Failed to create league"}

    # 2. Teams
    try:
        teams = store.insert_teams([
            {"league_id": league["id"], "name": t.name, "color": t.color}
            for t in schedule.teams
        ])
    except StoreError as e:
        logger.error("Teams creation error: %s", e)
        store.delete_league(league["id"])
        return {"success": False, "error": "Failed to create teams"}

    # 3. Games
    try:
        game_rows = [
            {
                "league_id": league["id"],
                "home_team_id": teams[g.home_team_index]["id"],
                "away_team_id": teams[g.away_team_index]["id"],
                "scheduled_date": g.date.isoformat(),
                "scheduled_time": g.time,
                "location": g.location,
                "status": "scheduled",
                "metadata": {},
            }
            for g in schedule.games
        ]
        store.insert_games(game_rows)
    except (StoreError, IndexError) as e:
        logger.error("Games creation error: %s", e)
        store.delete_teams(league["id"])
        store.delete_league(league["id"])
        return {"success": False, "error": "Failed to create schedule"}

    logger.info("Created league %s with %d teams and %d games",
                league["slug"], len(teams), len(game_rows))
    return {
        "success": True,
        "data": {
            "league": league,
            "team_count": len(teams),
            "game_count": len(game_rows),
        },
    }
