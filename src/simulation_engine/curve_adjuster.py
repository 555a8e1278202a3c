"""Recompute burst curves for reload-dependent weapons under a charge bonus."""

import dataclasses
import logging
import math
from typing import Tuple, Union

from src.simulation_engine.config import (
    FRAMES_PER_SECOND,
    SIMULATION_FRAMES,
    SIMULATION_WINDOW_SECONDS,
)
from src.simulation_engine.models import INVALID_BONUS, CharacterRecord, Failure

logger = logging.getLogger(__name__)


class BurstCurveAdjuster:
    """Models RL/SR weapons whose burst generation is one hit per reload.

    A charge bonus shortens the reload, so more shots land inside the
    simulation window. Every other weapon type keeps its curve.
    """

    def adjust(
        self, character: CharacterRecord, charge_bonus: float
    ) -> Union[Tuple[float, ...], Failure]:
        """Build the character's curve under ``charge_bonus``.

        Args:
            character: Source record; never modified.
            charge_bonus: Reload time reduction in percent (25.0 = 25%).

        Returns:
            A new curve of ``SIMULATION_FRAMES`` entries, or a Failure of
            kind ``InvalidBonus`` when the adjusted reload time is not a
            positive number.
        """
        if not character.is_reload_weapon:
            return tuple(character.frame_curve)

        adjusted_reload = character.reload_time * (1.0 - charge_bonus / 100.0)
        # Also rejects NaN, and reloads so small the shot count overflows
        if not adjusted_reload > 0 or math.isinf(SIMULATION_WINDOW_SECONDS / adjusted_reload):
            logger.warning(
                "Charge bonus %.1f%% gives unusable reload for %s (%.3fs)",
                charge_bonus,
                character.name,
                adjusted_reload,
            )
            return Failure(
                INVALID_BONUS,
                f"Charge bonus {charge_bonus}% leaves {character.name} with "
                f"reload time {adjusted_reload}",
            )

        shot_count = math.ceil(SIMULATION_WINDOW_SECONDS / adjusted_reload)
        curve = [0.0] * SIMULATION_FRAMES

        def frame_of(shot_index: int) -> int:
            fire_time = shot_index * adjusted_reload
            if fire_time >= SIMULATION_WINDOW_SECONDS:
                return SIMULATION_FRAMES
            return math.floor(fire_time * FRAMES_PER_SECOND)

        # frame_of never decreases with shot_index. Every shot on a frame
        # writes the same value, so visiting the first shot of each frame
        # gives the same curve as the later-write-wins loop over all shots,
        # in at most SIMULATION_FRAMES binary searches.
        shot_index = 0
        while shot_index < shot_count:
            frame = frame_of(shot_index)
            if frame >= SIMULATION_FRAMES:
                break
            curve[frame] = character.burst_value

            low, high = shot_index + 1, shot_count
            while low < high:
                mid = (low + high) // 2
                if frame_of(mid) > frame:
                    high = mid
                else:
                    low = mid + 1
            shot_index = low

        logger.debug(
            "Adjusted %s: reload %.3fs -> %.3fs, %d shots",
            character.name,
            character.reload_time,
            adjusted_reload,
            shot_count,
        )
        return tuple(curve)

    def apply(
        self, character: CharacterRecord, charge_bonus: float
    ) -> Union[CharacterRecord, Failure]:
        """Return a copy of ``character`` carrying the adjusted curve."""
        curve = self.adjust(character, charge_bonus)
        if isinstance(curve, Failure):
            return curve
        return dataclasses.replace(character, frame_curve=curve)
