"""
Car rental domain models.

This package provides value types for a car-rental business:
- CarType: Rental classes A-D (D is the premium class)
- Date: Calendar date with validation and day arithmetic
- Car: Rentable vehicle with a quality ordering
- Rent: Booking aggregate with pricing, upgrades and overlap merging
- Relation: How two rental periods relate to each other
"""

from .car_type import CarType
from .date import Date
from .car import Car
from .pricing import DAYS_IN_WEEK, RATES, Rate, calc_price
from .interval import Relation, classify, is_disjoint
from .rent import Rent
from .loader import load_rentals, parse_date

__all__ = [
    "CarType",
    "Date",
    "Car",
    "Rent",
    "Rate",
    "RATES",
    "DAYS_IN_WEEK",
    "calc_price",
    "Relation",
    "classify",
    "is_disjoint",
    "load_rentals",
    "parse_date",
]
