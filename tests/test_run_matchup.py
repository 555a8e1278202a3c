"""Tests for src.team_builder.run_matchup (dataset to report, end to end)."""

import pytest

from src.simulation_engine.comparison import ONLY_TEAM_A_BURSTS
from src.simulation_engine.config import SIMULATION_FRAMES
from src.simulation_engine.models import NO_BURST
from src.team_builder.run_matchup import MatchupInputError, main, run_matchup


@pytest.fixture
def ten_character_csv(tmp_path):
    """Ten characters; only 'Ace' contributes (100 at frame 15)."""
    header = "Name,Gun,a,b,c,d,e,ReloadTime,Ammo,RoF,f,BurstValue," + ",".join(
        f"F{i}" for i in range(SIMULATION_FRAMES)
    )
    rows = [header]
    for name in ["Ace"] + [f"C{i}" for i in range(1, 10)]:
        frames = ["0"] * SIMULATION_FRAMES
        if name == "Ace":
            frames[15] = "100"
        gun = "RL" if name == "C9" else "AR"
        rows.append(",".join([name, gun, "", "", "", "", "", "2.0", "6", "60", "", "100"] + frames))
    path = tmp_path / "characters.csv"
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    return path


TEAM_A = "Ace,C1,C2,C3,C4"
TEAM_B = "C5,C6,C7,C8,C1"


class TestRunMatchup:
    def test_report(self, ten_character_csv):
        report = run_matchup(ten_character_csv, TEAM_A, TEAM_B)
        assert report.result_a.burst_frame == 16
        assert report.result_b.kind == NO_BURST
        assert report.verdict == ONLY_TEAM_A_BURSTS

    def test_names_are_case_insensitive(self, ten_character_csv):
        report = run_matchup(ten_character_csv, "ace, c1, c2, c3, c4", TEAM_B)
        assert report.result_a.burst_frame == 16

    def test_charge_bonus(self, ten_character_csv):
        report = run_matchup(ten_character_csv, TEAM_A, "C5,C6,C7,C8,C9", charge_bonus=25.0)
        # C9 (RL, 100 per shot) fires on frame 0 once its curve is rebuilt
        assert report.result_b.burst_frame == 1

    def test_unknown_name(self, ten_character_csv):
        with pytest.raises(MatchupInputError, match="Unknown character"):
            run_matchup(ten_character_csv, "Ace,C1,C2,C3,Nobody", TEAM_B)

    def test_duplicate_name(self, ten_character_csv):
        with pytest.raises(MatchupInputError, match="already on"):
            run_matchup(ten_character_csv, "Ace,Ace,C2,C3,C4", TEAM_B)

    def test_incomplete_team(self, ten_character_csv):
        with pytest.raises(MatchupInputError, match="five members"):
            run_matchup(ten_character_csv, "Ace,C1", TEAM_B)

    def test_too_many_names(self, ten_character_csv):
        with pytest.raises(MatchupInputError, match="full"):
            run_matchup(ten_character_csv, TEAM_A + ",C5", TEAM_B)


class TestMain:
    def test_prints_report(self, ten_character_csv, capsys):
        assert main([str(ten_character_csv), TEAM_A, TEAM_B]) == 0
        out = capsys.readouterr().out
        assert "Team A Result: Burst at frame 16 (0.5s)" in out
        assert "Team B Result: Team probably won't burst" in out
        assert "Comparison: Team A bursts, Team B does not" in out

    def test_missing_arguments(self, capsys):
        assert main([]) == 1
        assert "Usage" in capsys.readouterr().out

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "nope.csv"), TEAM_A, TEAM_B]) == 1

    def test_bad_input(self, ten_character_csv):
        assert main([str(ten_character_csv), "Ace", TEAM_B]) == 1

    def test_bad_charge_bonus(self, ten_character_csv):
        assert main([str(ten_character_csv), TEAM_A, TEAM_B, "lots"]) == 1

    @pytest.mark.parametrize("bonus", ["nan", "inf", "-inf"])
    def test_non_finite_charge_bonus(self, ten_character_csv, bonus):
        assert main([str(ten_character_csv), TEAM_A, TEAM_B, bonus]) == 1
