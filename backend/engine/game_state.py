"""
Core data structures for the Hammurabi city state.

GameState is the single mutable snapshot of the city. The driving loop owns
it and threads it through the turn engine by parameter.
"""

from typing import Dict, Any, List
from pydantic import BaseModel, ConfigDict, Field


# Starting values of a fresh reign
DEFAULT_YEAR = 1
DEFAULT_POPULATION = 100
DEFAULT_WHEAT = 2800
DEFAULT_LAND = 1000
DEFAULT_LAND_PRICE = 20


class GameState(BaseModel):
    """
    City state for one reign.

    Mutated in place by the turn engine, one year at a time. The only value
    carried across years besides the current snapshot is the running sum of
    yearly starvation rates, which feeds the end-of-game rating.
    """

    model_config = ConfigDict(extra="forbid")  # Strict validation

    year: int = Field(default=DEFAULT_YEAR, ge=1)
    population: int = Field(default=DEFAULT_POPULATION, ge=0)
    wheat: int = Field(default=DEFAULT_WHEAT, ge=0)  # bushels
    land: int = Field(default=DEFAULT_LAND, ge=0)  # acres
    land_price: int = DEFAULT_LAND_PRICE  # bushels per acre, rolled each year
    death_percentage_sum: float = Field(default=0.0, ge=0.0)

    def validate_invariants(self) -> List[str]:
        """
        Check state invariants and return a list of violations.

        Field constraints are only enforced at construction time, so the
        engine calls this after each year to catch arithmetic slips.

        Returns:
            List of error messages (empty when the state is consistent)
        """
        errors = []

        if self.year < 1:
            errors.append(f"year must be >= 1, got {self.year}")
        for name in ("population", "wheat", "land"):
            value = getattr(self, name)
            if value < 0:
                errors.append(f"{name} must be >= 0, got {value}")
        if self.death_percentage_sum < 0:
            errors.append(
                f"death_percentage_sum must be >= 0, got {self.death_percentage_sum}"
            )

        return errors

    def to_record(self) -> List[Any]:
        """Flat ordered record used by the save file."""
        return [
            self.year,
            self.population,
            self.wheat,
            self.land,
            self.death_percentage_sum,
        ]

    def summary(self) -> Dict[str, int]:
        """Values shown to the ruler at the start of each year."""
        return {
            "year": self.year,
            "population": self.population,
            "wheat": self.wheat,
            "land": self.land,
        }
