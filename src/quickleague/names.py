"""Default team names per sport."""

SPORT_TEAM_NAMES: dict[str, list[str]] = {
    "hockey": ["Blades", "Icers", "Wolves", "Storm", "Thunder", "Freeze",
               "Avalanche", "Flames", "Jets", "Penguins", "Knights", "Sharks"],
    "soccer": ["United", "City", "Rovers", "Athletic", "Wanderers", "Rangers",
               "Dynamo", "Sporting", "Real", "Inter", "Olympic", "Phoenix"],
    "basketball": ["Ballers", "Hoops", "Dunkers", "Blazers", "Heat", "Thunder",
                   "Kings", "Warriors", "Lakers", "Celtics", "Rockets", "Bulls"],
    "volleyball": ["Spikers", "Aces", "Setters", "Blockers", "Diggers", "Smash",
                   "Rally", "Volley", "Net", "Court", "Attack", "Serve"],
    "football": ["Gridiron", "Blitz", "Chargers", "Titans", "Eagles", "Hawks",
                 "Bears", "Lions", "Giants", "Raiders", "Chiefs", "Colts"],
    "softball": ["Sluggers", "Batters", "Diamonds", "Homers", "Innings",
                 "Pitchers", "Catchers", "Sliders", "Curves", "Strikes",
                 "Bases", "Runs"],
    "badminton": ["Shuttlers", "Smashers", "Rackets", "Aces", "Rally", "Court",
                  "Net", "Birdie", "Drive", "Clear", "Drop", "Flight"],
    "tennis": ["Aces", "Rackets", "Volleys", "Smashers", "Baseline", "Court",
               "Grand Slam", "Match Point", "Deuce", "Advantage", "Love", "Set"],
    "pickleball": ["Picklers", "Dinkers", "Paddlers", "Kitchen", "Rally",
                   "Smash", "Volley", "Drop Shot", "Aces", "Third Shot",
                   "Court", "Net"],
    "baseball": ["Sluggers", "Batters", "Diamonds", "Homers", "Innings",
                 "All Stars", "Aces", "Sliders", "Curves", "Strikes", "Bases",
                 "Grand Slam"],
    "other": ["Team Alpha", "Team Beta", "Team Gamma", "Team Delta",
              "Team Epsilon", "Team Zeta", "Team Eta", "Team Theta",
              "Team Iota", "Team Kappa", "Team Lambda", "Team Mu"],
}


def generate_team_names(count: int, sport: str) -> list[str]:
    """Return `count` default names for a sport.

    Unknown sports fall back to "other". Past the end of the list the names
    repeat with a number suffix ("Blades 2") so every name stays unique.
    """
    names = SPORT_TEAM_NAMES.get(sport.strip().lower(), SPORT_TEAM_NAMES["other"])
    result = []
    for i in range(max(count, 0)):
        base = names[i % len(names)]
        lap = i // len(names)
        result.append(base if lap == 0 else f"{base} {lap + 1}")
    return result
