"""
End-of-reign rating.

Classifies the ruler from the average yearly starvation rate and the acres
of land per inhabitant left at the end of the game.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple


class Rating(str, Enum):
    """Outcomes from harshest to best. Values are message catalog keys."""

    EXILED = "rating_exiled"
    IRON_HAND = "rating_iron_hand"
    FAIR = "rating_fair"
    MAGNIFICENT = "rating_magnificent"


# (rating, starvation rate must exceed, land per person must be below)
RATING_THRESHOLDS: List[Tuple[Rating, float, int]] = [
    (Rating.EXILED, 0.33, 7),
    (Rating.IRON_HAND, 0.1, 9),
    (Rating.FAIR, 0.03, 10),
]


@dataclass
class ReignSummary:
    """Figures the rating is derived from."""

    average_death_rate: float
    land_per_person: int
    rating: Rating


def average_death_rate(death_percentage_sum: float, years_played: int) -> float:
    if years_played <= 0:
        return 0.0
    return death_percentage_sum / years_played


def land_per_person(land: int, population: int) -> int:
    """Whole acres per inhabitant; an empty city has no land per person."""
    if population <= 0:
        return 0
    return land // population


def rate_reign(
    death_percentage_sum: float, years_played: int, land: int, population: int
) -> ReignSummary:
    """
    Pick the rating for a finished reign. First matching tier wins.

    Args:
        death_percentage_sum: Sum of each year's starvation rate
        years_played: Number of years the sum covers
        land: Acres owned at the end
        population: Inhabitants at the end

    Returns:
        ReignSummary with the derived figures and the selected rating
    """
    p = average_death_rate(death_percentage_sum, years_played)
    l = land_per_person(land, population)

    for rating, death_limit, land_limit in RATING_THRESHOLDS:
        if p > death_limit and l < land_limit:
            return ReignSummary(average_death_rate=p, land_per_person=l, rating=rating)

    return ReignSummary(
        average_death_rate=p, land_per_person=l, rating=Rating.MAGNIFICENT
    )
