"""Team roster - ordered, deduplicated, size-bounded character selection."""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from src.simulation_engine.config import TEAM_SIZE
from src.simulation_engine.models import (
    DUPLICATE_MEMBER,
    INDEX_OUT_OF_RANGE,
    ROSTER_FULL,
    CharacterRecord,
    Failure,
)

logger = logging.getLogger(__name__)


@dataclass
class TeamRoster:
    """Represents a single team's selection of characters.

    Members keep insertion order (display order). The roster only changes
    through :meth:`add` and :meth:`remove`; a rejected call leaves it
    untouched.
    """

    team_name: str = ""
    members: List[CharacterRecord] = field(default_factory=list)

    def __post_init__(self):
        self.members = list(self.members)
        names = self.member_names()
        if len(names) > TEAM_SIZE:
            raise ValueError(f"A team holds at most {TEAM_SIZE} members (got {len(names)})")
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate member names: {names}")

    def add(self, character: CharacterRecord) -> Optional[Failure]:
        """Append a character.

        Returns:
            None on success, otherwise a RosterFull or DuplicateMember
            Failure.
        """
        if len(self.members) >= TEAM_SIZE:
            return Failure(
                ROSTER_FULL,
                f"{self.team_name or 'Roster'} is full ({TEAM_SIZE}/{TEAM_SIZE})",
            )
        if self.has_member(character.name):
            return Failure(
                DUPLICATE_MEMBER,
                f"{character.name} is already on {self.team_name or 'the roster'}",
            )

        self.members.append(character)
        logger.debug("%s: added %s (%d/%d)", self.team_name, character.name,
                     len(self.members), TEAM_SIZE)
        return None

    def remove(self, index: int) -> Optional[Failure]:
        """Remove the member at ``index`` (0-based, no negative indexing)."""
        if not 0 <= index < len(self.members):
            return Failure(
                INDEX_OUT_OF_RANGE,
                f"Index {index} out of range for {len(self.members)} members",
            )

        removed = self.members.pop(index)
        logger.debug("%s: removed %s", self.team_name, removed.name)
        return None

    def has_member(self, name: str) -> bool:
        """Check if a character with this name is already selected."""
        return any(member.name == name for member in self.members)

    def member_names(self) -> List[str]:
        return [member.name for member in self.members]

    @property
    def is_complete(self) -> bool:
        """Whether the roster holds a full team."""
        return len(self.members) == TEAM_SIZE

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[CharacterRecord]:
        return iter(self.members)
