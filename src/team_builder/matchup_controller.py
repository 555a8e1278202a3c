"""Matchup controller - holds both teams and runs the burst comparison."""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from src.simulation_engine.burst_simulator import BurstSimulator
from src.simulation_engine.comparison import (
    compare_results,
    describe_comparison,
    describe_result,
)
from src.simulation_engine.curve_adjuster import BurstCurveAdjuster
from src.simulation_engine.models import (
    BurstResult,
    CharacterRecord,
    Failure,
    SimulationResult,
)
from src.team_builder.config import (
    TEAM_A,
    TEAM_B,
    TEAM_LABELS,
    TIMELINE_MAX_WIDTH,
    TIMELINE_PIXELS_PER_SECOND,
)
from src.team_builder.search import filter_by_name
from src.team_builder.team_roster import TeamRoster

logger = logging.getLogger(__name__)


def timeline_width(result: SimulationResult) -> Optional[float]:
    """Width of the timeline bar for a result, None if the team never bursts."""
    if not isinstance(result, BurstResult):
        return None
    return min(result.burst_time_seconds * TIMELINE_PIXELS_PER_SECOND, TIMELINE_MAX_WIDTH)


@dataclass
class MatchupReport:
    """Outcome of simulating both teams."""

    result_a: SimulationResult
    result_b: SimulationResult
    verdict: str

    def lines(self) -> List[str]:
        """Text rendering of both results, the verdict and timeline bars."""
        output = [
            f"{TEAM_A} Result: {describe_result(self.result_a)}",
            f"{TEAM_B} Result: {describe_result(self.result_b)}",
            f"Comparison: {describe_comparison(self.verdict)}",
        ]
        for label, result in ((TEAM_A, self.result_a), (TEAM_B, self.result_b)):
            width = timeline_width(result)
            if width is not None:
                output.append(f"{label} timeline: {width:.1f}px")
        return output


class MatchupController:
    """Main controller for building two teams and comparing them.

    Coordinates character search, the two TeamRosters and the
    BurstSimulator. State is plain fields owned by the controller; every
    engine call is synchronous and pure.
    """

    def __init__(
        self,
        characters: List[CharacterRecord],
        comparison_epsilon: Optional[float] = None,
    ):
        self.characters = characters
        self.search_text = ""
        self.comparison_epsilon = comparison_epsilon
        self.teams: Dict[str, TeamRoster] = {
            label: TeamRoster(team_name=label) for label in TEAM_LABELS
        }
        self.simulator = BurstSimulator()
        self.adjuster = BurstCurveAdjuster()
        self.last_report: Optional[MatchupReport] = None

    # ------------------------------------------------------------------
    # Team building
    # ------------------------------------------------------------------

    def get_team(self, team: str) -> TeamRoster:
        """Get a roster by label ("Team A" / "Team B")."""
        if team not in self.teams:
            raise ValueError(f"Unknown team {team!r}. Must be one of {TEAM_LABELS}")
        return self.teams[team]

    def search(self, query: Optional[str] = None) -> List[CharacterRecord]:
        """Characters whose name contains the search text (case-insensitive).

        A given ``query`` replaces the stored search text first.
        """
        if query is not None:
            self.search_text = query
        return filter_by_name(self.characters, self.search_text)

    def find_character(self, name: str) -> Optional[CharacterRecord]:
        """Exact (case-insensitive) name lookup."""
        wanted = name.strip().lower()
        for character in self.characters:
            if character.name.lower() == wanted:
                return character
        return None

    def select(self, team: str, character: CharacterRecord) -> Optional[Failure]:
        """Add a character to a specific team.

        Returns:
            None if added, otherwise the roster's Failure.
        """
        failure = self.get_team(team).add(character)
        if failure is not None:
            logger.warning("Selection rejected: %s", failure.message)
        return failure

    def quick_add(self, query: Optional[str] = None) -> Optional[str]:
        """Add the first search match to Team A, or Team B if A rejects it.

        Uses ``query`` if given, else the stored search text. The search
        text is cleared once a team takes the character.

        Returns:
            The label of the team that took the character, or None if
            nothing matched or both teams rejected it.
        """
        matches = self.search(query)
        if not matches:
            logger.info("No character matches %r", self.search_text)
            return None

        character = matches[0]
        for label in TEAM_LABELS:
            if self.teams[label].add(character) is None:
                logger.info("Quick-added %s to %s", character.name, label)
                self.search_text = ""
                return label

        logger.warning("%s could not join either team", character.name)
        return None

    def remove(self, team: str, index: int) -> Optional[Failure]:
        """Remove the member at ``index`` from a team."""
        failure = self.get_team(team).remove(index)
        if failure is not None:
            logger.warning("Removal rejected: %s", failure.message)
        return failure

    @property
    def is_ready(self) -> bool:
        """Both teams have a full roster."""
        return all(team.is_complete for team in self.teams.values())

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def run_simulation(self, charge_bonus: Optional[float] = None) -> Optional[MatchupReport]:
        """Simulate both teams and compare them.

        Args:
            charge_bonus: If given, RL/SR members get their curve rebuilt
                with this reload reduction (percent) before simulating.

        Returns:
            MatchupReport, or None if either team is incomplete.
        """
        if not self.is_ready:
            logger.info(
                "Both teams need a full roster to simulate (%s)",
                ", ".join(f"{label}: {len(team)}" for label, team in self.teams.items()),
            )
            return None

        result_a = self._simulate_team(self.teams[TEAM_A], charge_bonus)
        result_b = self._simulate_team(self.teams[TEAM_B], charge_bonus)
        verdict = compare_results(result_a, result_b, epsilon=self.comparison_epsilon)

        self.last_report = MatchupReport(result_a=result_a, result_b=result_b, verdict=verdict)
        logger.info("Matchup: %s", describe_comparison(verdict))
        return self.last_report

    def _simulate_team(
        self, team: TeamRoster, charge_bonus: Optional[float]
    ) -> SimulationResult:
        if charge_bonus is None:
            return self.simulator.simulate(team)

        members = []
        for character in team:
            adjusted = self.adjuster.apply(character, charge_bonus)
            if isinstance(adjusted, Failure):
                return adjusted
            members.append(adjusted)
        return self.simulator.simulate(members)
