"""Data models for the quickleague scheduling app."""

from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import Optional, Protocol


class DayOfWeek(Enum):
    Mon = 0
    Tue = 1
    Wed = 2
    Thu = 3
    Fri = 4
    Sat = 5
    Sun = 6

    @classmethod
    def from_str(cls, s: str) -> "DayOfWeek":
        return cls[s.strip()[:3].capitalize()]

    @property
    def full_name(self) -> str:
        return ("monday", "tuesday", "wednesday", "thursday", "friday",
                "saturday", "sunday")[self.value]


class ScheduleFormat(Enum):
    SINGLE = "round-robin"
    DOUBLE = "double-round-robin"

    @classmethod
    def from_str(cls, s: str) -> "ScheduleFormat":
        key = s.strip().lower().replace("_", "-").replace(" ", "-")
        if key in ("round-robin", "single", "single-round-robin"):
            return cls.SINGLE
        if key in ("double-round-robin", "double"):
            return cls.DOUBLE
        raise ValueError(f"Unknown schedule format: {s!r}")


@dataclass(frozen=True)
class ScheduleRequest:
    """Everything the generator needs; team order defines team indices."""
    teams: tuple[str, ...]
    format: ScheduleFormat = ScheduleFormat.SINGLE
    days: tuple[DayOfWeek, ...] = ()
    time_slots: tuple[str, ...] = ()  # "HH:MM", 24-hour
    season_start: Optional[date] = None
    season_end: Optional[date] = None
    venue_name: str = ""


@dataclass(frozen=True)
class Pairing:
    """A home/away matchup between two team indices, not yet on the calendar."""
    home: int
    away: int

    def reversed(self) -> "Pairing":
        return Pairing(self.away, self.home)


@dataclass
class Round:
    """A set of pairings where each team plays at most once."""
    number: int
    pairings: list[Pairing]
    bye_teams: list[int] = field(default_factory=list)


@dataclass(frozen=True, order=True)
class Slot:
    """One bookable (date, time) opportunity."""
    date: date
    time: str


@dataclass(frozen=True)
class GeneratedTeam:
    name: str
    color: str


@dataclass(frozen=True)
class GeneratedGame:
    home_team_index: int
    away_team_index: int
    date: date
    time: str
    location: str


@dataclass
class GeneratedSchedule:
    """The generator's only output."""
    teams: list[GeneratedTeam]
    games: list[GeneratedGame]
    unscheduled_pairings: int = 0  # pairings dropped for lack of slots


# ---------------------------------------------------------------------------
# Setup record (what the input collector hands over)
# ---------------------------------------------------------------------------

@dataclass
class LeagueInfo:
    name: str = "My League"
    sport: str = "other"


@dataclass
class TeamsInfo:
    count: int = 0
    names: list[str] = field(default_factory=list)


@dataclass
class ScheduleInfo:
    days: list[DayOfWeek] = field(default_factory=list)
    time_slots: list[str] = field(default_factory=list)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    format: ScheduleFormat = ScheduleFormat.SINGLE


@dataclass
class LocationInfo:
    name: str = "TBD"
    address: Optional[str] = None


@dataclass
class SetupData:
    """A fully populated league setup record."""
    league: LeagueInfo = field(default_factory=LeagueInfo)
    teams: TeamsInfo = field(default_factory=TeamsInfo)
    schedule: ScheduleInfo = field(default_factory=ScheduleInfo)
    location: LocationInfo = field(default_factory=LocationInfo)

    def to_request(self) -> ScheduleRequest:
        return ScheduleRequest(
            teams=tuple(self.teams.names),
            format=self.schedule.format,
            days=tuple(self.schedule.days),
            time_slots=tuple(self.schedule.time_slots),
            season_start=self.schedule.start_date,
            season_end=self.schedule.end_date,
            venue_name=self.location.name,
        )


# ---------------------------------------------------------------------------
# Results and standings
# ---------------------------------------------------------------------------

class GameStatus(Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    POSTPONED = "postponed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class LeagueSettings:
    points_win: int = 2
    points_loss: int = 0
    points_tie: int = 1
    ties_allowed: bool = True

    def to_dict(self) -> dict:
        return {
            "points_win": self.points_win,
            "points_loss": self.points_loss,
            "points_tie": self.points_tie,
            "ties_allowed": self.ties_allowed,
        }


@dataclass(frozen=True)
class GameResult:
    """A game as it stands after (or before) scores are entered."""
    home_team: str
    away_team: str
    date: Optional[date] = None
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    status: GameStatus = GameStatus.SCHEDULED

    def with_score(self, home_score: int, away_score: int) -> "GameResult":
        return replace(self, home_score=home_score, away_score=away_score,
                       status=GameStatus.COMPLETED)


@dataclass
class Standing:
    team: str
    games_played: int = 0
    wins: int = 0
    losses: int = 0
    ties: int = 0
    points: int = 0
    goals_for: int = 0
    goals_against: int = 0

    @property
    def differential(self) -> int:
        return self.goals_for - self.goals_against


# ---------------------------------------------------------------------------
# Free-text setup parsing (implemented elsewhere)
# ---------------------------------------------------------------------------

@dataclass
class ParseResult:
    """Outcome of turning one free-text answer into setup fields."""
    success: bool
    data: dict = field(default_factory=dict)
    clarification: Optional[str] = None
    error: Optional[str] = None


class SetupParser(Protocol):
    def parse_user_input(self, message: str, step: str,
                         existing: dict) -> ParseResult:
        ...
