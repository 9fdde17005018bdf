"""Car class for rental vehicle descriptors."""

from typing import Union

from .car_type import CarType

MIN_ID = 1000000
MAX_ID = 9999999
DEFAULT_ID = 9999999
DEFAULT_TYPE = CarType.A


def is_valid_id(car_id: int) -> bool:
    """Car ids are 7-digit numbers."""
    return MIN_ID <= car_id <= MAX_ID


class Car:
    """
    A rentable car.

    The id must be a 7-digit number and the type one of A-D; anything else
    falls back to 9999999 / A on construction and is ignored by the setters.
    Brand and gearbox are free.
    """

    def __init__(
        self,
        car_id: int,
        car_type: Union[CarType, str],
        brand: str,
        is_manual: bool,
    ):
        self._car_id = car_id if is_valid_id(car_id) else DEFAULT_ID
        self._car_type = CarType.parse(car_type) or DEFAULT_TYPE
        self.brand = brand
        self.is_manual = is_manual

    @property
    def car_id(self) -> int:
        return self._car_id

    @car_id.setter
    def car_id(self, value: int) -> None:
        if is_valid_id(value):
            self._car_id = value

    @property
    def car_type(self) -> CarType:
        return self._car_type

    @car_type.setter
    def car_type(self, value: Union[CarType, str]) -> None:
        parsed = CarType.parse(value)
        if parsed is not None:
            self._car_type = parsed

    @property
    def gear(self) -> str:
        """Gearbox label used in the string form."""
        return "manual" if self.is_manual else "auto"

    def better(self, other: "Car") -> bool:
        """
        True if this car ranks strictly above other.

        A higher type always wins; on the same type an automatic car beats
        a manual one.
        """
        if self._car_type != other._car_type:
            return self._car_type > other._car_type
        return not self.is_manual and other.is_manual

    def worse(self, other: "Car") -> bool:
        return other.better(self)

    def __eq__(self, other):
        # Id is not part of business equality
        if not isinstance(other, Car):
            return NotImplemented
        return (
            self._car_type == other._car_type
            and self.brand == other.brand
            and self.is_manual == other.is_manual
        )

    def __str__(self) -> str:
        return (
            f"id:{self._car_id} type:{self._car_type.value} "
            f"brand:{self.brand} gear:{self.gear}"
        )

    def __repr__(self) -> str:
        return (
            f"Car({self._car_id}, {self._car_type.value!r}, "
            f"{self.brand!r}, {self.is_manual})"
        )
