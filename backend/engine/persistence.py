"""
Save file persistence for the city state.

A save is a single record of whitespace-separated fields in this order:
year, population, wheat, land, death_percentage_sum. The land price is not
saved; it is rolled again at the start of the next year anyway.
"""

import os
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from .game_state import GameState

logger = logging.getLogger(__name__)

DEFAULT_SAVE_FILE = "savegame.txt"
RECORD_FIELDS = ("year", "population", "wheat", "land", "death_percentage_sum")


class PersistenceError(Exception):
    """Base exception for persistence operations."""

    pass


class SaveFileCorrupted(PersistenceError):
    """Raised when save file is corrupted or invalid."""

    pass


def format_record(state: GameState) -> str:
    """Serialize a state into the one-line save record."""
    year, population, wheat, land, death_sum = state.to_record()
    return f"{year} {population} {wheat} {land} {float(death_sum)!r}\n"


def parse_record(text: str) -> GameState:
    """
    Parse a save record back into a GameState.

    Raises:
        SaveFileCorrupted: If the record has the wrong shape or values
    """
    fields = text.split()
    if len(fields) != len(RECORD_FIELDS):
        raise SaveFileCorrupted(
            f"Expected {len(RECORD_FIELDS)} fields in save record, got {len(fields)}"
        )

    try:
        values = [int(field) for field in fields[:-1]]
        values.append(float(fields[-1]))
    except ValueError as e:
        raise SaveFileCorrupted(f"Save record has a non-numeric field: {e}") from e

    try:
        return GameState(**dict(zip(RECORD_FIELDS, values)))
    except ValidationError as e:
        raise SaveFileCorrupted(f"Save record is out of range: {e}") from e


class SaveFile:
    """
    One save slot on disk.

    Saving overwrites the whole record; it is best effort and not crash-safe.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_SAVE_FILE):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def save(self, state: GameState) -> None:
        """
        Overwrite the save slot with the given state.

        Raises:
            PersistenceError: If the file cannot be written
        """
        try:
            if self.path.parent and not self.path.parent.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(format_record(state))
        except OSError as e:
            raise PersistenceError(
                f"Failed to save game to {self.path}: {str(e)}"
            ) from e

        logger.info(f"Saved year {state.year} to {self.path}")

    def load(self) -> Optional[GameState]:
        """
        Load the saved state.

        Returns:
            The saved GameState, or None if there is no save file

        Raises:
            SaveFileCorrupted: If the file exists but cannot be parsed
            PersistenceError: If the file exists but cannot be read
        """
        if not self.exists():
            logger.info(f"No saved game at {self.path}")
            return None

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            raise PersistenceError(
                f"Failed to read save file {self.path}: {str(e)}"
            ) from e

        state = parse_record(text)
        logger.info(f"Loaded year {state.year} from {self.path}")
        return state

    def delete(self) -> bool:
        """
        Remove the save file.

        Returns:
            True if a file was removed, False if there was none
        """
        try:
            os.remove(self.path)
        except FileNotFoundError:
            return False
        logger.info(f"Deleted save file {self.path}")
        return True
