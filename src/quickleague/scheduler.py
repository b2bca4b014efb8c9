"""Schedule assembly for the quickleague scheduling app.

Three steps, all pure:
1. Pair teams with the circle method (roundrobin.py)
2. Lay out the season's slots in date/time order (slots.py)
3. Bind pairing k to slot k until one of the two runs out

When there are more pairings than slots the surplus pairings are dropped
and only counted in GeneratedSchedule.unscheduled_pairings; the games list
never grows past the number of slots.
"""

import logging

from quickleague.models import (
    GeneratedGame, GeneratedSchedule, GeneratedTeam, ScheduleRequest,
)
from quickleague.roundrobin import generate_pairings
from quickleague.slots import build_slots

logger = logging.getLogger(__name__)

TEAM_COLORS = [
    "#ef4444",  # red
    "#3b82f6",  # blue
    "#22c55e",  # green
    "#f59e0b",  # amber
    "#8b5cf6",  # violet
    "#ec4899",  # pink
    "#06b6d4",  # cyan
    "#f97316",  # orange
    "#84cc16",  # lime
    "#6366f1",  # indigo
    "#14b8a6",  # teal
    "#a855f7",  # purple
]


def assign_colors(names) -> list[GeneratedTeam]:
    """Give each team a palette colour by position, cycling past the end."""
    return [
        GeneratedTeam(name=name, color=TEAM_COLORS[i % len(TEAM_COLORS)])
        for i, name in enumerate(names)
    ]


def generate_schedule(request: ScheduleRequest) -> GeneratedSchedule:
    """Generate a complete schedule for a request.

    Same request in, same schedule out: nothing here reads the clock or
    a random source.
    """
    teams = assign_colors(request.teams)
    pairings = generate_pairings(len(teams), request.format)
    slots = build_slots(request.days, request.time_slots,
                        request.season_start, request.season_end)

    games = [
        GeneratedGame(
            home_team_index=pairing.home,
            away_team_index=pairing.away,
            date=slot.date,
            time=slot.time,
            location=request.venue_name,
        )
        for pairing, slot in zip(pairings, slots)
    ]

    dropped = len(pairings) - len(games)
    if dropped:
        logger.warning(
            "Only %d slots for %d pairings: %d games not scheduled",
            len(slots), len(pairings), dropped,
        )
    logger.debug("Scheduled %d games for %d teams (%d slots available)",
                 len(games), len(teams), len(slots))

    return GeneratedSchedule(teams=teams, games=games,
                             unscheduled_pairings=dropped)
