"""Helper functions for rental price calculations."""

from dataclasses import dataclass
from typing import Dict, Optional

from .car_type import CarType

DAYS_IN_WEEK = 7


@dataclass(frozen=True)
class Rate:
    """Price of one day and of a full week for a car type."""

    daily: int
    weekly: int


RATES: Dict[CarType, Rate] = {
    CarType.A: Rate(daily=100, weekly=630),
    CarType.B: Rate(daily=150, weekly=945),
    CarType.C: Rate(daily=180, weekly=1134),
    CarType.D: Rate(daily=240, weekly=1512),
}


def calc_price(car_type: Optional[CarType], days: int) -> int:
    """
    Calculate the rental price.

    - Each full week: the type's weekly rate
    - Remaining days: the type's daily rate
    - Type without a rate: 0
    """
    rate = RATES.get(car_type)
    if rate is None:
        return 0
    weeks, extra_days = divmod(days, DAYS_IN_WEEK)
    return weeks * rate.weekly + extra_days * rate.daily
