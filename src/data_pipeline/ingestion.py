"""CSV ingestion for the character dataset.

Handles the quirks of the character table:
- Stats live at fixed column positions; the columns between them are unused
- The burst curve is every column whose header starts with ``F``
- Malformed numbers must not abort the load (they default to zero)
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from src.data_pipeline.config import (
    AMMO_COLUMN,
    BURST_VALUE_COLUMN,
    FRAME_COLUMN_PREFIX,
    NAME_COLUMN,
    RATE_OF_FIRE_COLUMN,
    RELOAD_TIME_COLUMN,
    WEAPON_TYPE_COLUMN,
)
from src.simulation_engine.models import CharacterRecord

logger = logging.getLogger(__name__)

_UINT_MAX = 2**32 - 1


class IngestionError(Exception):
    """Raised when the character CSV cannot be read."""


def _text(value) -> Optional[str]:
    """Cell text, or None for cells missing from a short row."""
    return None if pd.isna(value) else value


def _cell(row: pd.Series, position: int) -> Optional[str]:
    """Text of the cell at ``position``, or None if the table is too narrow."""
    if position >= len(row):
        return None
    return _text(row.iloc[position])


def _parse_float(value: Optional[str], row_num: int, column: str) -> float:
    """Parse a float cell, logging and defaulting to 0.0 on bad input."""
    if value is None:
        return 0.0
    try:
        return float(value)
    except ValueError:
        logger.warning(
            "Row %d: Failed to parse %s %r, using 0.0", row_num, column, value
        )
        return 0.0


def _parse_uint(value: Optional[str], row_num: int, column: str) -> int:
    """Parse an unsigned integer cell, logging and defaulting to 0 on bad input."""
    if value is None:
        return 0
    try:
        parsed = int(value)
    except ValueError:
        parsed = -1
    if not 0 <= parsed <= _UINT_MAX:
        logger.warning(
            "Row %d: Failed to parse %s %r, using 0", row_num, column, value
        )
        return 0
    return parsed


class CharacterIngester:
    """Reads the character CSV into :class:`CharacterRecord` objects.

    Every cell is read as text so that one malformed number only zeroes
    that field instead of failing the whole column.
    """

    def __init__(self, source: Union[str, Path, object]):
        self.source = source

    def read_frame(self) -> pd.DataFrame:
        """Read the raw table with all cells as strings.

        Raises:
            IngestionError: if the file cannot be read or parsed as CSV.
        """
        try:
            df = pd.read_csv(self.source, dtype=str, keep_default_na=False)
        except Exception as e:
            raise IngestionError(f"Failed to read character CSV: {e}") from e
        return df

    def frame_columns(self, df: pd.DataFrame) -> List[str]:
        """Headers of the burst curve columns, in column order."""
        return [
            col for col in df.columns if str(col).startswith(FRAME_COLUMN_PREFIX)
        ]

    def read_characters(self) -> List[CharacterRecord]:
        """Parse every row into a CharacterRecord.

        Raises:
            IngestionError: if the file cannot be read.
        """
        df = self.read_frame()
        frame_cols = self.frame_columns(df)
        logger.info(
            "Reading %d characters with %d frame columns", len(df), len(frame_cols)
        )

        characters = [
            self._row_to_character(row_num, row, frame_cols)
            for row_num, (_, row) in enumerate(df.iterrows())
        ]

        logger.info("Loaded %d characters", len(characters))
        return characters

    def _row_to_character(
        self, row_num: int, row: pd.Series, frame_cols: List[str]
    ) -> CharacterRecord:
        frames = tuple(
            _parse_float(_text(row[col]), row_num, f"frame {col}")
            for col in frame_cols
        )
        return CharacterRecord(
            name=_cell(row, NAME_COLUMN) or "",
            weapon_type=_cell(row, WEAPON_TYPE_COLUMN) or "",
            reload_time=_parse_float(
                _cell(row, RELOAD_TIME_COLUMN), row_num, "ReloadTime"
            ),
            ammo_capacity=_parse_uint(_cell(row, AMMO_COLUMN), row_num, "Ammo"),
            rate_of_fire=_parse_uint(
                _cell(row, RATE_OF_FIRE_COLUMN), row_num, "RoF"
            ),
            burst_value=_parse_float(
                _cell(row, BURST_VALUE_COLUMN), row_num, "BurstValue"
            ),
            frame_curve=frames,
        )


def load_characters(source: Union[str, Path, object]) -> List[CharacterRecord]:
    """Load characters, returning an empty list if the file is unreadable."""
    try:
        return CharacterIngester(source).read_characters()
    except IngestionError:
        logger.exception("Could not load characters from %s", source)
        return []
