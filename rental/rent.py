"""Rent class - the booking aggregate with pricing and merge rules."""

import copy
from typing import Optional

from .car import Car
from .date import Date
from .interval import Relation, classify, is_disjoint
from .pricing import calc_price


class Rent:
    """
    A customer's booking of a car from a pickup date to a return date.

    The car and both dates are copied in and copied out, so callers never
    share them with the rent. The return date is always after the pickup
    date: a return date on or before pickup becomes the day after pickup.
    The one exception is a pickup on 31/12/9999: its next day is out of
    range and falls back to 01/01/2000, so the return date ends up before
    the pickup date.
    """

    def __init__(self, name: str, car: Car, pick_date: Date, return_date: Date):
        self.name = name
        self._car = copy.copy(car)
        self._pick_date = copy.copy(pick_date)
        if return_date.after(pick_date):
            self._return_date = copy.copy(return_date)
        else:
            self._return_date = pick_date.tomorrow()

    @property
    def car(self) -> Car:
        return copy.copy(self._car)

    @car.setter
    def car(self, value: Car) -> None:
        self._car = copy.copy(value)

    @property
    def pick_date(self) -> Date:
        return copy.copy(self._pick_date)

    @pick_date.setter
    def pick_date(self, value: Date) -> None:
        if value.before(self._return_date):
            self._pick_date = copy.copy(value)

    @property
    def return_date(self) -> Date:
        return copy.copy(self._return_date)

    @return_date.setter
    def return_date(self, value: Date) -> None:
        if value.after(self._pick_date):
            self._return_date = copy.copy(value)

    def how_many_days(self) -> int:
        """Number of rental days."""
        return self._pick_date.difference(self._return_date)

    def get_price(self) -> int:
        """Total price: full weeks at the weekly rate, the rest per day."""
        return calc_price(self._car.car_type, self.how_many_days())

    def upgrade(self, new_car: Car) -> int:
        """
        Switch to new_car if it is better than the current car.

        Returns the extra cost of the switch, or 0 when new_car is not
        better (the rent is left unchanged in that case).
        """
        if not new_car.better(self._car):
            return 0
        old_price = self.get_price()
        self._car = copy.copy(new_car)
        return self.get_price() - old_price

    def relation_to(self, other: "Rent") -> Relation:
        """How this rent's period sits relative to other's."""
        return classify(
            self._pick_date, self._return_date, other._pick_date, other._return_date
        )

    def overlap(self, other: "Rent") -> Optional["Rent"]:
        """
        Merge a double booking.

        When both rents are for the same customer and the same car and their
        periods share a day or touch, returns a new rent covering both
        periods. Otherwise returns None. Neither rent is modified.
        """
        if self.name != other.name or self._car != other._car:
            return None
        if is_disjoint(self.relation_to(other)):
            return None
        start = min(self._pick_date, other._pick_date)
        end = max(self._return_date, other._return_date)
        return Rent(self.name, self._car, start, end)

    def __eq__(self, other):
        if not isinstance(other, Rent):
            return NotImplemented
        return (
            self.name == other.name
            and self._pick_date == other._pick_date
            and self._return_date == other._return_date
            and self._car == other._car
        )

    def __str__(self) -> str:
        return (
            f"Name:{self.name} From:{self._pick_date} To:{self._return_date} "
            f"Type:{self._car.car_type.value} Days:{self.how_many_days()} "
            f"Price:{self.get_price()}"
        )

    def __repr__(self) -> str:
        return (
            f"Rent({self.name!r}, {self._car!r}, "
            f"{self._pick_date!r}, {self._return_date!r})"
        )
