"""Tests for names.py — default team names."""

from quickleague.names import SPORT_TEAM_NAMES, generate_team_names


class TestGenerateTeamNames:
    def test_first_names_for_sport(self):
        assert generate_team_names(3, "hockey") == ["Blades", "Icers", "Wolves"]

    def test_sport_case_insensitive(self):
        assert generate_team_names(2, "Soccer") == ["United", "City"]

    def test_unknown_sport(self):
        assert generate_team_names(2, "curling") == ["Team Alpha", "Team Beta"]

    def test_full_list(self):
        assert generate_team_names(12, "tennis") == SPORT_TEAM_NAMES["tennis"]

    def test_cycles_with_suffix(self):
        names = generate_team_names(14, "basketball")
        assert names[12] == "Ballers 2"
        assert names[13] == "Hoops 2"
        assert len(set(names)) == 14

    def test_zero_and_negative(self):
        assert generate_team_names(0, "hockey") == []
        assert generate_team_names(-3, "hockey") == []

    def test_every_sport_has_twelve(self):
        for sport, names in SPORT_TEAM_NAMES.items():
            assert len(names) == 12, sport
