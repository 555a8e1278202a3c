"""Burst gauge simulation for a complete team.

Scans the team's combined burst contribution frame by frame and reports
the first frame at which the shared gauge reaches the threshold.
"""

import logging
from typing import List, Sequence

from src.simulation_engine.config import (
    BURST_THRESHOLD,
    FRAMES_PER_SECOND,
    SIMULATION_FRAMES,
    TEAM_SIZE,
)
from src.simulation_engine.models import (
    INVALID_FRAME_DATA,
    INVALID_TEAM_SIZE,
    NO_BURST,
    BurstResult,
    CharacterRecord,
    Failure,
    SimulationResult,
)

logger = logging.getLogger(__name__)


class BurstSimulator:
    """Determine when a five-member team first reaches the burst threshold.

    The simulator is stateless: each call reads only the curves of the
    team it is given and returns a fresh result.
    """

    def __init__(self, threshold: float = BURST_THRESHOLD):
        self.threshold = threshold

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def simulate(self, team: Sequence[CharacterRecord]) -> SimulationResult:
        """Run the burst simulation for one team.

        Args:
            team: Exactly five characters (a TeamRoster also works).

        Returns:
            :class:`BurstResult` for the first frame whose summed
            contribution is at least the threshold, otherwise a
            :class:`Failure` of kind ``NoBurst``, ``InvalidTeamSize`` or
            ``InvalidFrameData``.
        """
        members = list(team)

        failure = self._validate_team(members)
        if failure is not None:
            logger.warning("Simulation aborted: %s", failure.message)
            return failure

        for frame, frame_sum in enumerate(self.frame_totals(members)):
            if frame_sum >= self.threshold:
                result = BurstResult(
                    burst_frame=frame + 1,
                    burst_time_seconds=frame / float(FRAMES_PER_SECOND),
                )
                logger.debug(
                    "Team %s bursts at frame %d (%.3fs)",
                    [c.name for c in members],
                    result.burst_frame,
                    result.burst_time_seconds,
                )
                return result

        logger.debug("Team %s never reaches the threshold", [c.name for c in members])
        return Failure(NO_BURST, "Team probably won't burst")

    def frame_totals(self, team: Sequence[CharacterRecord]) -> List[float]:
        """Summed contribution of every member at each simulated frame.

        Assumes every curve covers the full window; use :meth:`simulate`
        for validated input.
        """
        return [
            sum(member.frame_curve[frame] for member in team)
            for frame in range(SIMULATION_FRAMES)
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _validate_team(self, members: List[CharacterRecord]):
        if len(members) != TEAM_SIZE:
            return Failure(
                INVALID_TEAM_SIZE,
                f"Team must have exactly {TEAM_SIZE} members (got {len(members)})",
            )

        for member in members:
            if len(member.frame_curve) != SIMULATION_FRAMES:
                return Failure(
                    INVALID_FRAME_DATA,
                    f"{member.name} has {len(member.frame_curve)} frames, "
                    f"expected {SIMULATION_FRAMES}",
                )

        return None
