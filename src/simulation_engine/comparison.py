"""Compare two teams' simulation results and render them as text."""

from typing import Optional

from src.simulation_engine.models import BurstResult, SimulationResult

TEAM_A_FIRST = "team_a_first"
TEAM_B_FIRST = "team_b_first"
SIMULTANEOUS = "simultaneous"
ONLY_TEAM_A_BURSTS = "only_team_a_bursts"
ONLY_TEAM_B_BURSTS = "only_team_b_bursts"
NEITHER_BURSTS = "neither_bursts"

_VERDICT_TEXT = {
    TEAM_A_FIRST: "Team A bursts first",
    TEAM_B_FIRST: "Team B bursts first",
    SIMULTANEOUS: "Both teams burst at the same time",
    ONLY_TEAM_A_BURSTS: "Team A bursts, Team B does not",
    ONLY_TEAM_B_BURSTS: "Team B bursts, Team A does not",
    NEITHER_BURSTS: "Neither team bursts",
}


def compare_results(
    result_a: SimulationResult,
    result_b: SimulationResult,
    epsilon: Optional[float] = None,
) -> str:
    """Decide which team bursts first.

    A team that bursts always beats one that does not. When both burst,
    times are compared with strict ``<``/``>`` and only exact equality is
    simultaneous. Pass ``epsilon`` to treat times within that tolerance
    as simultaneous instead.
    """
    a_bursts = isinstance(result_a, BurstResult)
    b_bursts = isinstance(result_b, BurstResult)

    if a_bursts and not b_bursts:
        return ONLY_TEAM_A_BURSTS
    if b_bursts and not a_bursts:
        return ONLY_TEAM_B_BURSTS
    if not a_bursts and not b_bursts:
        return NEITHER_BURSTS

    time_a = result_a.burst_time_seconds
    time_b = result_b.burst_time_seconds

    if epsilon is not None and abs(time_a - time_b) <= epsilon:
        return SIMULTANEOUS
    if time_a < time_b:
        return TEAM_A_FIRST
    if time_b < time_a:
        return TEAM_B_FIRST
    return SIMULTANEOUS


def describe_result(result: Optional[SimulationResult]) -> str:
    """Human-readable line for one team's result."""
    if result is None:
        return "Not simulated"
    if isinstance(result, BurstResult):
        return f"Burst at frame {result.burst_frame} ({result.burst_time_seconds}s)"
    return result.message


def describe_comparison(verdict: str) -> str:
    """Human-readable sentence for a verdict from :func:`compare_results`."""
    return _VERDICT_TEXT[verdict]
