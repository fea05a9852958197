"""Validation of registration dates and car numbers."""

import re

# Year: four digits, month: 01-12, day: 01-31.
_DATE_RE = re.compile(r"^(?:\d{4})\.(0[1-9]|1[0-2])\.(0[1-9]|[12][0-9]|3[01])$")
# One letter, three digits, two letters, e.g. A000AA.
_CAR_NUMBER_RE = re.compile(r"^[A-Z]\d{3}[A-Z]{2}$")


def is_valid_date(date: str) -> bool:
    """Return True if *date* has the form YYYY.MM.DD with a plausible month and day."""
    return _DATE_RE.search(date) is not None


def is_valid_car_number(number: str) -> bool:
    """Return True if *number* has the form A000AA."""
    return _CAR_NUMBER_RE.search(number) is not None