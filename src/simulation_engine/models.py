"""Data models for the simulation engine."""

from dataclasses import dataclass
from typing import Tuple, Union

from src.simulation_engine.config import RELOAD_WEAPON_TAGS

# Failure kinds
ROSTER_FULL = "RosterFull"
DUPLICATE_MEMBER = "DuplicateMember"
INDEX_OUT_OF_RANGE = "IndexOutOfRange"
INVALID_FRAME_DATA = "InvalidFrameData"
INVALID_TEAM_SIZE = "InvalidTeamSize"
NO_BURST = "NoBurst"
INVALID_BONUS = "InvalidBonus"


@dataclass(frozen=True)
class CharacterRecord:
    """Combat stats and per-frame burst contribution for one character."""

    name: str
    weapon_type: str
    reload_time: float
    ammo_capacity: int
    rate_of_fire: int
    burst_value: float
    frame_curve: Tuple[float, ...] = ()

    @property
    def is_reload_weapon(self) -> bool:
        """Whether burst generation depends on reload time (RL/SR)."""
        return any(tag in self.weapon_type for tag in RELOAD_WEAPON_TAGS)


@dataclass(frozen=True)
class BurstResult:
    """Team reached the burst threshold."""

    burst_frame: int  # 1-based
    burst_time_seconds: float


@dataclass(frozen=True)
class Failure:
    """A named failure returned in place of a result."""

    kind: str
    message: str


SimulationResult = Union[BurstResult, Failure]
