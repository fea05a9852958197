"""Parsing of vehicle records from semicolon-separated lines and files."""

import logging
import re
from typing import List

from carledger.validator import is_valid_car_number, is_valid_date
from carledger.vehicles import Automobile, PassengerCar, Truck

_log = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _to_int(text: str) -> int:
    stripped = text.strip()
    if not _INT_RE.fullmatch(stripped):
        raise ValueError(f"not an integer: {text!r}")
    value = int(stripped)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def parse_line(line: str) -> Automobile:
    """Build a vehicle from ``date;number[;weight]`` or ``date;number;color;speed``.

    Raises ValueError if the line is malformed or fails validation.
    """
    tokens = line.split(";")
    if len(tokens) < 2:
        raise ValueError(f"too few fields: {line!r}")

    date, number = tokens[0], tokens[1]
    if not is_valid_date(date):
        raise ValueError(f"invalid date: {date!r}")
    if not is_valid_car_number(number):
        raise ValueError(f"invalid car number: {number!r}")

    if len(tokens) == 2:
        return Automobile(date, number)
    if len(tokens) == 3:
        return Truck(date, number, _to_int(tokens[2]))
    if len(tokens) == 4:
        return PassengerCar(date, number, tokens[2], _to_int(tokens[3]))
    raise ValueError(f"too many fields: {line!r}")


def parse_file(filename) -> List[Automobile]:
    """Read vehicles from a text file, skipping blank and invalid lines.

    Raises OSError if the file cannot be opened.
    """
    cars: List[Automobile] = []
    with open(filename, encoding="utf-8") as handle:
        for raw in handle:
            line = raw.strip()
            if not line:
                continue
            try:
                cars.append(parse_line(line))
            except ValueError:
                _log.warning("Строка пропущена (не прошла валидацию): %s", line)
    return cars