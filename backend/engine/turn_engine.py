"""
Turn engine - the rules of one year in the city.

Each call to advance_year runs, in order: land price roll, buying and
selling land, feeding the people, planting, harvest, rats, starvation,
plague and immigration, then moves the calendar forward. The GameState is
mutated in place; the return value says whether the reign goes on.
"""

import math
import random
import logging
from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional

from .game_state import GameState
from .validator import InputValidator, MessageRenderer, OutputSink


logger = logging.getLogger(__name__)

# Land market
MIN_LAND_PRICE = 17
MAX_LAND_PRICE = 26

# Farming
SEED_PER_ACRE = 0.5  # bushels
ACRES_PER_WORKER = 10
MIN_HARVEST_MULTIPLIER = 1
MAX_HARVEST_MULTIPLIER = 6
RATS_PERCENT = 7

# People
BUSHELS_PER_PERSON = 20
GAME_OVER_DEATH_RATE = 0.45
PLAGUE_CHANCE_PERCENT = 15
IMMIGRATION_BASE_YIELD = 5
IMMIGRATION_FOOD_DIVISOR = 600
MAX_IMMIGRANTS = 50


@dataclass
class YearReport:
    """Everything that happened during one advance_year call."""

    year: int
    land_price: int
    land_bought: int = 0
    land_sold: int = 0
    wheat_fed: int = 0
    land_planted: int = 0
    harvest_multiplier: int = 0
    harvest: int = 0
    rats: int = 0
    starvation: int = 0
    death_percentage: float = 0.0
    plague: bool = False
    immigrants: int = 0
    continues: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging."""
        return asdict(self)


def max_plantable(state: GameState) -> int:
    """Acres that can be sown, limited by land, seed and hands to work it."""
    return min(
        state.land,
        state.wheat * 2,  # half a bushel of seed per acre
        state.population * ACRES_PER_WORKER,
    )


def seed_cost(land_to_plant: int) -> int:
    """
    Seed consumed by planting.

    The stock holds whole bushels and a fractional remainder is truncated, so
    half a bushel per acre costs an odd planting the extra half.
    """
    return math.ceil(land_to_plant * SEED_PER_ACRE)


def starvation_rate(starvation: int, population: int) -> float:
    """Fraction of the population lost to hunger, 0.0 for an empty city."""
    if population <= 0:
        return 0.0
    return starvation / population


def yield_ratio(harvest: int, land_to_plant: int) -> int:
    """Bushels harvested per planted acre, 0 when nothing was planted."""
    if land_to_plant <= 0:
        return 0
    return harvest // land_to_plant


def compute_immigrants(harvest: int, land_to_plant: int, wheat_to_feed: int) -> int:
    """
    Newcomers drawn by lean harvests elsewhere and generous rations here.

    The raw value (5 - yield) * food / 600 is clamped to [0, 50]. Negative
    raw values clamp to 0, so floor vs. truncating division is irrelevant.
    """
    raw = (
        (IMMIGRATION_BASE_YIELD - yield_ratio(harvest, land_to_plant))
        * wheat_to_feed
        // IMMIGRATION_FOOD_DIVISOR
    )
    return max(0, min(MAX_IMMIGRANTS, raw))


def roll_rats(rng: random.Random, wheat: int) -> int:
    """Bushels eaten by rats, drawn from [0, floor(wheat * 0.07))."""
    ceiling = wheat * RATS_PERCENT // 100
    if ceiling <= 0:
        return 0
    return rng.randrange(ceiling)


class TurnEngine:
    """Applies one year of city rules to a GameState."""

    def __init__(
        self,
        validator: InputValidator,
        sink: OutputSink,
        catalog: MessageRenderer,
        rng: Optional[random.Random] = None,
    ):
        """
        Args:
            validator: Source of the ruler's bounded decisions
            sink: Where year-end narration goes
            catalog: MessageCatalog for prompts and reports
            rng: Random source seeded once by the caller
        """
        if rng is None:
            rng = random.Random()
        self.validator = validator
        self.sink = sink
        self.catalog = catalog
        self.rng = rng
        self.last_report: Optional[YearReport] = None

    def _say(self, key: str, **values) -> None:
        self.sink.show(self.catalog.render(key, **values))

    def _ask(self, key: str, maximum: int) -> int:
        return self.validator.request_bounded_integer(
            self.catalog.render(f"prompt_{key}"),
            0,
            maximum,
            self.catalog.render(f"error_{key}"),
        )

    def advance_year(self, state: GameState) -> bool:
        """
        Play one year.

        Args:
            state: City state, mutated in place

        Returns:
            False if more than 45% of the people starved this year, else True
        """
        # Price roll
        state.land_price = self.rng.randint(MIN_LAND_PRICE, MAX_LAND_PRICE)
        report = YearReport(year=state.year, land_price=state.land_price)
        self._say("land_price", price=state.land_price)

        # Buy land
        land_to_buy = self._ask("buy", state.wheat // state.land_price)
        state.land += land_to_buy
        state.wheat -= land_to_buy * state.land_price
        report.land_bought = land_to_buy

        # Sell land
        land_to_sell = self._ask("sell", state.land)
        state.land -= land_to_sell
        state.wheat += land_to_sell * state.land_price
        report.land_sold = land_to_sell

        # Feed the people
        wheat_to_feed = self._ask("feed", state.wheat)
        state.wheat -= wheat_to_feed
        report.wheat_fed = wheat_to_feed

        # Plant
        land_to_plant = self._ask("plant", max_plantable(state))
        state.wheat -= seed_cost(land_to_plant)
        report.land_planted = land_to_plant

        # Harvest
        multiplier = self.rng.randint(MIN_HARVEST_MULTIPLIER, MAX_HARVEST_MULTIPLIER)
        harvest = land_to_plant * multiplier
        state.wheat += harvest
        report.harvest_multiplier = multiplier
        report.harvest = harvest
        self._say("harvest", harvest=harvest, multiplier=multiplier)

        # Rats
        rats = roll_rats(self.rng, state.wheat)
        state.wheat -= rats
        report.rats = rats
        self._say("rats", rats=rats)

        # Starvation; the verdict is reached here but the losses are still
        # applied and narrated before returning.
        starvation = max(0, state.population - wheat_to_feed // BUSHELS_PER_PERSON)
        death_percentage = starvation_rate(starvation, state.population)
        state.death_percentage_sum += death_percentage
        continues = death_percentage <= GAME_OVER_DEATH_RATE
        report.starvation = starvation
        report.death_percentage = death_percentage
        if starvation > 0:
            state.population -= starvation
            self._say("starvation", starvation=starvation)

        # Plague
        if self.rng.randrange(100) < PLAGUE_CHANCE_PERCENT:
            state.population //= 2
            report.plague = True
            self._say("plague")

        # Immigration
        immigrants = compute_immigrants(harvest, land_to_plant, wheat_to_feed)
        if immigrants > 0:
            state.population += immigrants
            report.immigrants = immigrants
            self._say("immigrants", immigrants=immigrants)

        state.year += 1
        report.continues = continues
        self.last_report = report

        logger.debug(f"Year {report.year} resolved: {report.to_dict()}")
        errors = state.validate_invariants()
        if errors:
            logger.error(f"State invariants violated after year {report.year}: {errors}")
        if not continues:
            logger.info(
                f"Reign ends in year {report.year}: {death_percentage:.0%} starved"
            )

        return continues


def advance_year(
    state: GameState,
    validator: InputValidator,
    sink: OutputSink,
    catalog: MessageRenderer,
    rng: Optional[random.Random] = None,
) -> bool:
    """Convenience wrapper running a single year with a throwaway engine."""
    return TurnEngine(validator, sink, catalog, rng).advance_year(state)
