"""Date class - calendar value with validation, ordering and day arithmetic."""

import datetime
from functools import total_ordering

MIN_DAY = 1
MAX_DAY = 31
MIN_MONTH = 1
MAX_MONTH = 12
MIN_YEAR = 1000
MAX_YEAR = 9999

DEFAULT_DAY = 1
DEFAULT_MONTH = 1
DEFAULT_YEAR = 2000

# Index 0 is unused so the table can be indexed by month number
DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
FEBRUARY = 2


def is_leap(year: int) -> bool:
    """Gregorian leap year: divisible by 400, or by 4 and not by 100."""
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def days_in_month(month: int, year: int) -> int:
    """Number of days in the given month."""
    if month == FEBRUARY and is_leap(year):
        return 29
    return DAYS_IN_MONTH[month]


def day_number(day: int, month: int, year: int) -> int:
    """
    Ordinal day number used to order dates and compute differences.

    January and February count as months 13 and 14 of the previous year
    so the leap day falls at the end of the formula's year. All divisions
    truncate, which is what makes the month term come out right.
    """
    if month < 3:
        year -= 1
        month += 12
    return (
        365 * year
        + year // 4
        - year // 100
        + year // 400
        + ((month + 1) * 306) // 10
        + (day - 62)
    )


@total_ordering
class Date:
    """
    A calendar date between 01/01/1000 and 31/12/9999.

    Construction never fails: an invalid day/month/year triple gives the
    default date 01/01/2000. Use Date.is_valid() beforehand when the caller
    needs to tell the two apart. Setters ignore values that would make the
    date invalid.
    """

    def __init__(self, day: int, month: int, year: int):
        if not Date.is_valid(day, month, year):
            day, month, year = DEFAULT_DAY, DEFAULT_MONTH, DEFAULT_YEAR
        self._day = day
        self._month = month
        self._year = year

    @staticmethod
    def is_valid(day: int, month: int, year: int) -> bool:
        """Check whether the triple names a real date in the supported range."""
        if year < MIN_YEAR or year > MAX_YEAR:
            return False
        if month < MIN_MONTH or month > MAX_MONTH:
            return False
        if day < MIN_DAY or day > MAX_DAY:
            return False
        return day <= days_in_month(month, year)

    @classmethod
    def from_date(cls, value: datetime.date) -> "Date":
        """Build a Date from a datetime.date (or datetime)."""
        return cls(value.day, value.month, value.year)

    def to_date(self) -> datetime.date:
        return datetime.date(self._year, self._month, self._day)

    @property
    def day(self) -> int:
        return self._day

    @day.setter
    def day(self, value: int) -> None:
        if Date.is_valid(value, self._month, self._year):
            self._day = value

    @property
    def month(self) -> int:
        return self._month

    @month.setter
    def month(self, value: int) -> None:
        if Date.is_valid(self._day, value, self._year):
            self._month = value

    @property
    def year(self) -> int:
        return self._year

    @year.setter
    def year(self, value: int) -> None:
        if Date.is_valid(self._day, self._month, value):
            self._year = value

    @property
    def ordinal(self) -> int:
        """Day number of this date (see day_number)."""
        return day_number(self._day, self._month, self._year)

    def before(self, other: "Date") -> bool:
        """True if this date is strictly earlier than other."""
        return self.ordinal < other.ordinal

    def after(self, other: "Date") -> bool:
        """True if this date is strictly later than other."""
        return other.before(self)

    def difference(self, other: "Date") -> int:
        """Number of days between the two dates, never negative."""
        return abs(self.ordinal - other.ordinal)

    def tomorrow(self) -> "Date":
        """
        The following calendar day.

        Tries the next day in the month, then the first of the next month,
        then the first of January of the next year.
        """
        if Date.is_valid(self._day + 1, self._month, self._year):
            return Date(self._day + 1, self._month, self._year)
        if Date.is_valid(DEFAULT_DAY, self._month + 1, self._year):
            return Date(DEFAULT_DAY, self._month + 1, self._year)
        return Date(DEFAULT_DAY, DEFAULT_MONTH, self._year + 1)

    def __eq__(self, other):
        if not isinstance(other, Date):
            return NotImplemented
        return (self._day, self._month, self._year) == (
            other._day,
            other._month,
            other._year,
        )

    def __lt__(self, other):
        if not isinstance(other, Date):
            return NotImplemented
        return self.before(other)

    def __str__(self) -> str:
        return f"{self._day:02d}/{self._month:02d}/{self._year}"

    def __repr__(self) -> str:
        return f"Date({self._day}, {self._month}, {self._year})"
