"""YAML loading utilities for bookings files."""

import datetime
import json
import re
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml
from dateutil import parser as date_parser

from .car import Car
from .date import Date
from .rent import Rent

# Two defaults that differ in every field: a field missing from the text
# shows up as a difference between the two parses
_DEFAULTS = (datetime.datetime(2000, 1, 1), datetime.datetime(2001, 2, 2))

_YEAR_FIRST = re.compile(r"^\d{4}")


def parse_date(value: Union[str, datetime.date]) -> Date:
    """
    Parse a bookings-file date.

    Accepts ISO dates (2023-06-15) and day-first dates (15/06/2023).
    Raises ValueError when the text is not a date, or when it leaves out
    the day, month or year.
    """
    if isinstance(value, datetime.date):
        return Date.from_date(value)
    text = str(value).strip()
    year_first = bool(_YEAR_FIRST.match(text))
    try:
        first, second = (
            date_parser.parse(
                text, default=default, yearfirst=year_first, dayfirst=not year_first
            )
            for default in _DEFAULTS
        )
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Invalid date: {value!r}") from e
    if first != second:
        raise ValueError(f"Incomplete date: {value!r} (need day, month and year)")
    return Date.from_date(first)


def _parse_object(dct: Dict[str, Any]) -> Union[Car, Rent, dict]:
    """Parse dictionary into appropriate object type."""
    # Car object (inside a rental's 'car' key)
    if "brand" in dct and "type" in dct:
        car_id = dct.get("id", 0)
        if not isinstance(car_id, int) or isinstance(car_id, bool):
            raise ValueError(f"Invalid car id: {car_id!r} (must be a number)")
        return Car(
            car_id,
            str(dct["type"]),
            dct["brand"],
            dct.get("manual", False),
        )
    # Rental entry
    elif "name" in dct and "car" in dct:
        if not isinstance(dct["car"], Car):
            raise ValueError(
                f"Invalid car for rental of {dct['name']!r}: type and brand are required"
            )
        return Rent(
            dct["name"],
            dct["car"],
            parse_date(dct["pickDate"]),
            parse_date(dct["returnDate"]),
        )
    else:
        # Return dict as-is for unknown structures (like the top level)
        return dct


def load_rentals(filename: Union[str, Path]) -> List[Rent]:
    """Load the rentals listed in a YAML bookings file."""
    with open(filename, "rb") as fp:
        # YAML turns unquoted ISO dates into date objects; keep them as strings
        json_data = json.dumps(yaml.load(fp, Loader=yaml.SafeLoader), default=str)
    data = json.loads(json_data, object_hook=_parse_object)
    if not isinstance(data, dict):
        return []
    return data.get("rentals") or []
