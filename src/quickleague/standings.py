"""Score entry and standings for the quickleague scheduling app."""

from quickleague.models import GameResult, GameStatus, LeagueSettings, Standing


def record_score(result: GameResult, home_score: int, away_score: int,
                 settings: LeagueSettings | None = None) -> GameResult:
    """Return a completed copy of a game with its final score.

    Raises ValueError for negative scores, a game with the same team on
    both sides, or a tie in a league that does not allow ties.
    """
    settings = settings or LeagueSettings()
    if result.home_team == result.away_team:
        raise ValueError(f"{result.home_team} cannot play itself")
    if home_score < 0 or away_score < 0:
        raise ValueError(f"Scores cannot be negative: {home_score}-{away_score}")
    if home_score == away_score and not settings.ties_allowed:
        raise ValueError(f"Ties are not allowed: {home_score}-{away_score}")
    return result.with_score(home_score, away_score)


def compute_standings(teams: list[str], results: list[GameResult],
                      settings: LeagueSettings | None = None) -> list[Standing]:
    """Compute the league table from completed games.

    Ordered by points, then goal differential, then goals for. Teams level
    on all three keep their order in `teams`.
    """
    settings = settings or LeagueSettings()
    table = {t: Standing(team=t) for t in teams}

    for game in results:
        if game.status is not GameStatus.COMPLETED:
            continue
        if game.home_score is None or game.away_score is None:
            continue
        sides = (
            (game.home_team, game.home_score, game.away_score),
            (game.away_team, game.away_score, game.home_score),
        )
        for team, scored, conceded in sides:
            row = table.get(team)
            if row is None:
                continue
            row.games_played += 1
            row.goals_for += scored
            row.goals_against += conceded
            if scored > conceded:
                row.wins += 1
            elif scored < conceded:
                row.losses += 1
            else:
                row.ties += 1

    for row in table.values():
        row.points = (row.wins * settings.points_win
                      + row.losses * settings.points_loss
                      + row.ties * settings.points_tie)

    return sorted(
        table.values(),
        key=lambda s: (-s.points, -s.differential, -s.goals_for),
    )


def format_standings_report(standings: list[Standing]) -> str:
    """Format standings as a text table."""
    lines = []
    lines.append("=" * 70)
    lines.append("STANDINGS")
    lines.append("=" * 70)

    width = max([len(s.team) for s in standings] + [4])
    lines.append(f"{'#':>3} {'Team':<{width}} {'GP':>4} {'W':>4} {'L':>4} "
                 f"{'T':>4} {'GF':>4} {'GA':>4} {'Diff':>5} {'Pts':>4}")
    lines.append("-" * (width + 43))
    for pos, s in enumerate(standings, 1):
        lines.append(
            f"{pos:>3} {s.team:<{width}} {s.games_played:>4} {s.wins:>4} "
            f"{s.losses:>4} {s.ties:>4} {s.goals_for:>4} {s.goals_against:>4} "
            f"{s.differential:>+5} {s.points:>4}"
        )

    return "\n".join(lines)
