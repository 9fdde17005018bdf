"""CarType enum for rental vehicle classes."""

from enum import Enum
from typing import Optional, Union


class CarType(Enum):
    """Rental class of a car. D is the premium class, A the basic one."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"

    @property
    def rank(self) -> int:
        """Position in the quality ordering (A=0 ... D=3)."""
        return list(CarType).index(self)

    def __lt__(self, other):
        if not isinstance(other, CarType):
            return NotImplemented
        return self.rank < other.rank

    def __gt__(self, other):
        if not isinstance(other, CarType):
            return NotImplemented
        return self.rank > other.rank

    def __le__(self, other):
        if not isinstance(other, CarType):
            return NotImplemented
        return self.rank <= other.rank

    def __ge__(self, other):
        if not isinstance(other, CarType):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def parse(cls, value: Union["CarType", str, None]) -> Optional["CarType"]:
        """Return the CarType for an enum member or its letter, None if unknown."""
        if isinstance(value, CarType):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                return None
        return None
