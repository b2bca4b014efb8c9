"""Round-robin pairing generation for the quickleague scheduling app."""

from quickleague.models import Pairing, Round, ScheduleFormat

BYE = -1


def generate_rounds(team_count: int) -> list[Round]:
    """Generate a single round-robin using the circle method.

    For N teams: N-1 rounds if even, N rounds with one bye each if odd.
    Home/away follows the circle order on even rounds and is swapped on
    odd rounds, so home games stay balanced over the season.

    Returns list of Rounds numbered from 1, in play order.
    """
    if team_count < 2:
        return []

    positions = list(range(team_count))

    # For odd number of teams, add a dummy for byes
    if len(positions) % 2 == 1:
        positions.append(BYE)
    n = len(positions)

    rounds = []
    for r in range(n - 1):
        pairings = []
        bye_teams = []
        for i in range(n // 2):
            t1 = positions[i]
            t2 = positions[n - 1 - i]
            if t1 == BYE:
                bye_teams.append(t2)
            elif t2 == BYE:
                bye_teams.append(t1)
            elif r % 2 == 0:
                pairings.append(Pairing(t1, t2))
            else:
                pairings.append(Pairing(t2, t1))

        rounds.append(Round(number=r + 1, pairings=pairings,
                            bye_teams=bye_teams))

        # Rotate: keep position 0 fixed, move the last team to position 1
        positions = [positions[0]] + [positions[-1]] + positions[1:-1]

    return rounds


def generate_double_rounds(team_count: int) -> list[Round]:
    """Single round-robin followed by the return leg with home/away reversed."""
    first_leg = generate_rounds(team_count)
    offset = len(first_leg)
    return_leg = [
        Round(
            number=rnd.number + offset,
            pairings=[p.reversed() for p in rnd.pairings],
            bye_teams=list(rnd.bye_teams),
        )
        for rnd in first_leg
    ]
    return first_leg + return_leg


def generate_pairings(team_count: int,
                      fmt: ScheduleFormat = ScheduleFormat.SINGLE) -> list[Pairing]:
    """Flatten the rounds for the given format into one chronological list."""
    if fmt is ScheduleFormat.DOUBLE:
        rounds = generate_double_rounds(team_count)
    else:
        rounds = generate_rounds(team_count)
    return [p for rnd in rounds for p in rnd.pairings]


def verify_round_robin(rounds: list[Round], team_count: int,
                       legs: int = 1) -> dict:
    """Verify a round-robin schedule is valid and complete.

    Returns dict with:
    - valid: bool
    - errors: list of error strings
    - matchup_counts: dict of (low, high) index pair -> count
    - games_per_team: dict of team index -> game count
    - home_counts: dict of team index -> home game count
    """
    errors = []
    matchup_counts: dict[tuple[int, int], int] = {}
    games_per_team = {t: 0 for t in range(team_count)}
    home_counts = {t: 0 for t in range(team_count)}

    for rnd in rounds:
        teams_in_round = set()
        for p in rnd.pairings:
            if p.home == p.away:
                errors.append(f"Round {rnd.number}: team {p.home} plays itself")
            for t in (p.home, p.away):
                if t in teams_in_round:
                    errors.append(f"Round {rnd.number}: team {t} appears twice")
                teams_in_round.add(t)

            key = (min(p.home, p.away), max(p.home, p.away))
            matchup_counts[key] = matchup_counts.get(key, 0) + 1
            games_per_team[p.home] = games_per_team.get(p.home, 0) + 1
            games_per_team[p.away] = games_per_team.get(p.away, 0) + 1
            home_counts[p.home] = home_counts.get(p.home, 0) + 1

    # Every pair plays exactly once per leg
    for t1 in range(team_count):
        for t2 in range(t1 + 1, team_count):
            count = matchup_counts.get((t1, t2), 0)
            if count != legs:
                errors.append(
                    f"{t1} vs {t2}: played {count} times (expected {legs})"
                )

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "matchup_counts": matchup_counts,
        "games_per_team": games_per_team,
        "home_counts": home_counts,
    }
