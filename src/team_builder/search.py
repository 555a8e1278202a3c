"""Character name search."""

from typing import Iterable, List

from src.simulation_engine.models import CharacterRecord


def filter_by_name(characters: Iterable[CharacterRecord], query: str) -> List[CharacterRecord]:
    """Case-insensitive substring match on name, keeping dataset order."""
    needle = query.lower()
    return [c for c in characters if needle in c.name.lower()]
