"""Vehicle records and their table representation."""

from dataclasses import dataclass
from typing import ClassVar, List


@dataclass(frozen=True)
class Automobile:
    """A generic automobile with a registration date and a car number."""

    date: str
    car_number: str

    vehicle_type: ClassVar[str] = "Автомобиль"

    def _details(self) -> str:
        return "-"

    def to_table_row(self) -> List[str]:
        """Return the row shown in the table: type, number, date, extra details."""
        return [self.vehicle_type, self.car_number, self.date, self._details()]


@dataclass(frozen=True)
class PassengerCar(Automobile):
    """A passenger car with a colour and a speed."""

    color: str
    speed: int

    vehicle_type: ClassVar[str] = "Легковая"

    def _details(self) -> str:
        return f"Цвет: {self.color}, Скорость: {self.speed}"

    def to_table_row(self) -> List[str]:
        return super().to_table_row()


@dataclass(frozen=True)
class Truck(Automobile):
    """A truck with a weight in kilograms."""

    weight: int

    vehicle_type: ClassVar[str] = "Грузовик"

    def _details(self) -> str:
        return f"Вес: {self.weight} кг"

    def to_table_row(self) -> List[str]:
        return super().to_table_row()