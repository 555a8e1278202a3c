"""Shared fixtures for the burst simulator test suite."""

import pytest

from src.simulation_engine.config import SIMULATION_FRAMES
from src.team_builder.team_roster import TeamRoster
from tests.factories import make_character


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture
def zero_team():
    """Five distinct characters that never contribute to the gauge."""
    return [make_character(name=f"Member {i}") for i in range(5)]


@pytest.fixture
def roster():
    return TeamRoster(team_name="Team A")


# ------------------------------------------------------------------
# File fixtures
# ------------------------------------------------------------------

def _csv_row(name, gun, reload_time, ammo, rof, burst, frames):
    cells = [name, gun, "x", "x", "x", "x", "x", reload_time, ammo, rof, "x", burst]
    return ",".join(cells + [str(v) for v in frames])


@pytest.fixture
def characters_csv(tmp_path):
    """Small character CSV in the bundled dataset's column layout.

    Row 0 (Scarlet) contributes 100 at frame 30; Broken has malformed
    reload, ammo, rate of fire and burst value cells.
    """
    frame_headers = ",".join(f"F{i}" for i in range(SIMULATION_FRAMES))
    zeros = [0] * SIMULATION_FRAMES
    spike = [0] * SIMULATION_FRAMES
    spike[30] = 100

    lines = [
        "Name,Gun,Element,Class,Burst,Company,Rarity,ReloadTime,Ammo,RoF,Cover,BurstValue,"
        + frame_headers,
        _csv_row("Scarlet", "AR", "1.5", "60", "600", "2.5", spike),
        _csv_row("Alice", "SR", "2.0", "10", "50", "8.0", zeros),
        _csv_row("Rapi", "AR", "1.0", "60", "600", "1.5", zeros),
        _csv_row("Broken", "RL", "abc", "-3", "1.5", "", zeros),
    ]
    path = tmp_path / "characters.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
