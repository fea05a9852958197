"""An editable table of vehicles with loading, saving and a click counter."""

import re
from typing import List, Optional, Sequence

from carledger.parsing import parse_file

_WEIGHT_RE = re.compile(r"Вес: (\d+)")
_PASSENGER_RE = re.compile(r"Цвет: (.*), Скорость: (\d+)")


def click_message(count: int) -> str:
    """Return the text reporting how many times a button was pressed."""
    return f"Кнопка нажата: {count} раз(а)\n"


def row_to_line(row: Sequence[str]) -> Optional[str]:
    """Turn a table row back into a file line, or None if it cannot be saved."""
    vehicle_type, number, date, extra = row
    if vehicle_type == "Автомобиль":
        return f"{date};{number}"
    if vehicle_type == "Грузовик":
        match = _WEIGHT_RE.search(extra)
        if match:
            return f"{date};{number};{match.group(1)}"
        return None
    if vehicle_type == "Легковая":
        match = _PASSENGER_RE.search(extra)
        if match:
            return f"{date};{number};{match.group(1)};{match.group(2)}"
        return None
    return None


class CarTable:
    """Rows of vehicle data plus a count of the actions performed on them."""

    HEADERS = ("Тип", "Номер", "Дата", "Доп. параметры")

    def __init__(self) -> None:
        self.rows: List[List[str]] = []
        self.clicks = 0

    def add_row(self) -> None:
        """Append an empty row."""
        self.clicks += 1
        self.rows.append([""] * len(self.HEADERS))

    def delete_row(self, index: Optional[int]) -> None:
        """Remove the row at *index*; raise IndexError if no valid row is selected."""
        self.clicks += 1
        if index is None or not 0 <= index < len(self.rows):
            raise IndexError("Сначала выберите строку для удаления.")
        del self.rows[index]

    def load_file(self, filename) -> None:
        """Append the vehicles read from *filename*."""
        self.clicks += 1
        self.rows.extend(car.to_table_row() for car in parse_file(filename))

    def save_file(self, filename) -> None:
        """Write every savable row to *filename*."""
        self.clicks += 1
        with open(filename, "w", encoding="utf-8") as handle:
            for row in self.rows:
                line = row_to_line(row)
                if line is not None:
                    handle.write(line + "\n")

    def clear(self) -> None:
        """Remove all rows."""
        self.clicks += 1
        self.rows.clear()

    def click_text(self) -> str:
        """Return the click counter message for the current count."""
        return click_message(self.clicks)