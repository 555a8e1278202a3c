"""Compare two teams from the character dataset.

Usage:
    python -m src.team_builder.run_matchup <csv> <team_a> <team_b> [charge_bonus]

Teams are comma-separated character names, five per team.

Examples:
    python -m src.team_builder.run_matchup data/characters.csv "A,B,C,D,E" "F,G,H,I,J"
    python -m src.team_builder.run_matchup data/characters.csv "A,B,C,D,E" "F,G,H,I,J" 25
"""

import logging
import math
import sys
from pathlib import Path
from typing import List, Optional

from src.data_pipeline.ingestion import CharacterIngester, IngestionError
from src.logging_config import setup_logging
from src.team_builder.config import TEAM_A, TEAM_B
from src.team_builder.matchup_controller import MatchupController, MatchupReport

logger = logging.getLogger(__name__)


class MatchupInputError(Exception):
    """Raised when a team cannot be built from the given names."""


def _split_names(team_arg: str) -> List[str]:
    return [name.strip() for name in team_arg.split(",") if name.strip()]


def _build_team(controller: MatchupController, label: str, names: List[str]):
    for name in names:
        character = controller.find_character(name)
        if character is None:
            raise MatchupInputError(f"Unknown character for {label}: {name}")
        failure = controller.select(label, character)
        if failure is not None:
            raise MatchupInputError(f"{label}: {failure.message}")


def run_matchup(
    csv_path: Path,
    team_a: str,
    team_b: str,
    charge_bonus: Optional[float] = None,
) -> MatchupReport:
    """Load the dataset, build both teams and simulate them.

    Raises:
        IngestionError: If the dataset cannot be read.
        MatchupInputError: If a team has unknown, duplicate or too
            few/many names.
    """
    characters = CharacterIngester(csv_path).read_characters()
    controller = MatchupController(characters)

    _build_team(controller, TEAM_A, _split_names(team_a))
    _build_team(controller, TEAM_B, _split_names(team_b))

    report = controller.run_simulation(charge_bonus=charge_bonus)
    if report is None:
        raise MatchupInputError(
            f"Both teams need five members ({TEAM_A}: {len(controller.get_team(TEAM_A))}, "
            f"{TEAM_B}: {len(controller.get_team(TEAM_B))})"
        )
    return report


def main(argv: List[str]) -> int:
    if len(argv) < 3:
        print(__doc__)
        return 1

    csv_path = Path(argv[0])
    try:
        charge_bonus = float(argv[3]) if len(argv) > 3 else None
    except ValueError:
        charge_bonus = math.nan
    if charge_bonus is not None and not math.isfinite(charge_bonus):
        logger.error("Invalid charge bonus: %s", argv[3])
        return 1

    try:
        report = run_matchup(csv_path, argv[1], argv[2], charge_bonus)
    except (IngestionError, MatchupInputError) as e:
        logger.error("Matchup failed: %s", e)
        return 1

    for line in report.lines():
        print(line)
    return 0


if __name__ == "__main__":
    setup_logging()
    sys.exit(main(sys.argv[1:]))
