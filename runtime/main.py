"""
Main game runner for Hammurabi.

This module provides the driving loop: it owns the GameState, offers to
resume a saved reign, plays the configured number of years through the
turn engine and finishes with the ruler's rating.
"""

import argparse
import random
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from backend.engine.game_state import GameState
from backend.engine.validator import InputValidator
from backend.engine.turn_engine import TurnEngine
from backend.engine.rating import ReignSummary, rate_reign
from backend.engine.persistence import SaveFile, PersistenceError
from narration import MessageCatalog
from runtime.console import ConsoleIO
import config

logger = logging.getLogger(__name__)


class GameConfig(BaseModel):
    """Settings for one game session."""

    years_to_play: int = Field(default=3, ge=1)
    save_file: str = "savegame.txt"
    language: str = "en"
    seed: Optional[int] = None
    max_input_attempts: Optional[int] = Field(default=None, ge=1)

    @classmethod
    def from_env(cls) -> "GameConfig":
        """Build settings from config.py (which reads the environment)."""
        return cls(
            years_to_play=config.YEARS_TO_PLAY,
            save_file=config.SAVE_FILE,
            language=config.LANGUAGE,
            seed=config.SEED,
            max_input_attempts=config.MAX_INPUT_ATTEMPTS,
        )


class GameOutcome(str, Enum):
    COMPLETED = "completed"  # played every year and got a rating
    SAVED = "saved"  # ruler left early, state written to the save file
    OVERTHROWN = "overthrown"  # too many starved, game over


@dataclass
class GameResult:
    outcome: GameOutcome
    state: GameState
    summary: Optional[ReignSummary] = None


def setup_logging(debug: bool = False, log_file: str = config.LOG_FILE) -> None:
    """Set up logging; narration owns stdout, so logs go to a file."""
    level = logging.DEBUG if debug else logging.INFO
    handlers: List[logging.Handler] = [logging.FileHandler(log_file, encoding="utf-8")]
    if debug:
        handlers.append(logging.StreamHandler())
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def _said_yes(answer: str) -> bool:
    return answer.strip().lower().startswith("y")


def _load_saved_state(save_file: SaveFile) -> Optional[GameState]:
    """Load the saved reign, treating an unreadable save as no save."""
    try:
        return save_file.load()
    except PersistenceError as e:
        logger.warning(f"Ignoring unusable save file: {e}")
        return None


def display_state(state: GameState, io, catalog: MessageCatalog) -> None:
    """Show the city's figures at the start of a year."""
    summary = state.summary()
    for key in ("year", "population", "wheat", "land"):
        io.show(catalog.render(f"state_{key}", **{key: summary[key]}))


def play_game(
    game_config: GameConfig,
    io,
    save_file: Optional[SaveFile] = None,
    rng: Optional[random.Random] = None,
    catalog: Optional[MessageCatalog] = None,
    new_game: bool = False,
) -> GameResult:
    """
    Play one reign to its end.

    Args:
        game_config: Session settings
        io: Object providing show(), read_integer() and read_answer()
        save_file: Save slot, defaults to game_config.save_file
        rng: Random source, seeded from game_config.seed if not given
        catalog: Message catalog, loaded from game_config.language if not given
        new_game: Skip the offer to resume a saved reign

    Returns:
        GameResult describing how the reign ended
    """
    if save_file is None:
        save_file = SaveFile(game_config.save_file)
    if rng is None:
        # Seeded once per process; None draws the seed from the system
        rng = random.Random(game_config.seed)
    if catalog is None:
        catalog = MessageCatalog(game_config.language)

    state = GameState()
    if not new_game:
        saved = _load_saved_state(save_file)
        if saved is not None:
            io.show(catalog.render("prompt_continue_saved"))
            if _said_yes(io.read_answer()):
                state = saved
                logger.info(f"Resuming saved reign at year {state.year}")

    validator = InputValidator(io, io, catalog, game_config.max_input_attempts)
    engine = TurnEngine(validator, io, catalog, rng)

    while state.year <= game_config.years_to_play:
        display_state(state, io, catalog)
        io.show(catalog.render("prompt_quit"))
        if _said_yes(io.read_answer()):
            save_file.save(state)
            io.show(catalog.render("saved_goodbye"))
            return GameResult(outcome=GameOutcome.SAVED, state=state)

        if not engine.advance_year(state):
            io.show(catalog.render("game_over"))
            return GameResult(outcome=GameOutcome.OVERTHROWN, state=state)

    save_file.delete()
    # The death rate sum covers every year completed so far, including any
    # played under a longer setting before the reign was saved
    summary = rate_reign(
        state.death_percentage_sum,
        state.year - 1,
        state.land,
        state.population,
    )
    logger.info(
        f"Reign finished: P={summary.average_death_rate:.3f}, "
        f"L={summary.land_per_person}, rating={summary.rating.name}"
    )
    io.show(catalog.render(summary.rating.value))
    return GameResult(outcome=GameOutcome.COMPLETED, state=state, summary=summary)


def run_game(
    game_config: Optional[GameConfig] = None,
    debug: bool = False,
    new_game: bool = False,
) -> Optional[GameResult]:
    """
    Run an interactive game on the console.

    Args:
        game_config: Session settings, read from the environment if None
        debug: Enable debug logging and re-raise errors
        new_game: Ignore any saved reign
    """
    setup_logging(debug)

    if game_config is None:
        game_config = GameConfig.from_env()

    try:
        return play_game(game_config, ConsoleIO(), new_game=new_game)
    except (KeyboardInterrupt, EOFError):
        print()
        logger.info("Game interrupted by the ruler")
        return None
    except Exception as e:
        logger.error(f"Game aborted: {e}")
        print(f"Failed to run game: {e}")
        if debug:
            raise
        return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rule the city of Hammurabi")
    parser.add_argument("--years", type=int, help="Number of years to play")
    parser.add_argument("--save-file", help="Save file path")
    parser.add_argument("--language", help="Message catalog (en, ru)")
    parser.add_argument("--seed", type=int, help="Fixed random seed")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    parser.add_argument(
        "--new-game", action="store_true", help="Ignore the saved game, if any"
    )
    return parser


def config_from_args(args) -> GameConfig:
    """Apply command line overrides on top of the environment settings."""
    overrides = {
        "years_to_play": args.years,
        "save_file": args.save_file,
        "language": args.language,
        "seed": args.seed,
    }
    base = GameConfig.from_env()
    return GameConfig(
        **{**base.model_dump(), **{k: v for k, v in overrides.items() if v is not None}}
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    run_game(config_from_args(args), debug=args.debug, new_game=args.new_game)


if __name__ == "__main__":
    main()
