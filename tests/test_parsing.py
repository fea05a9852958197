import pytest

from carledger.parsing import parse_file, parse_line
from carledger.vehicles import Automobile, PassengerCar, Truck


def test_parse_two_fields_gives_automobile():
    assert parse_line("2024.10.01;A000AA") == Automobile("2024.10.01", "A000AA")


def test_parse_three_fields_gives_truck():
    assert parse_line("2024.10.01;A000AA;1500") == Truck("2024.10.01", "A000AA", 1500)


def test_parse_four_fields_gives_passenger_car():
    assert parse_line("2024.10.01;A000AA;red;120") == PassengerCar(
        "2024.10.01", "A000AA", "red", 120
    )


def test_signed_number_accepted():
    assert parse_line("2024.10.01;A000AA;+5") == Truck("2024.10.01", "A000AA", 5)


@pytest.mark.parametrize(
    "line",
    [
        "",
        "2024.10.01",
        "2024.13.01;A000AA",
        "2024.10.01;a000aa",
        "2024.10.01;A000AA;heavy",
        "2024.10.01;A000AA;1_000",
        "2024.10.01;A000AA;2147483648",
        "2024.10.01;A000AA;red;fast",
        "2024.10.01;A000AA;red;120;extra",
    ],
)
def test_invalid_lines_raise(line):
    with pytest.raises(ValueError):
        parse_line(line)


def test_parse_file_skips_blank_and_invalid(tmp_path):
    path = tmp_path / "cars.txt"
    path.write_text(
        "2024.10.01;A000AA\n"
        "\n"
        "bad line\n"
        "  1999.12.31;B000BB;700  \n"
        "2000.06.15;C000CC;green;90\n",
        encoding="utf-8",
    )
    cars = parse_file(path)
    assert cars == [
        Automobile("2024.10.01", "A000AA"),
        Truck("1999.12.31", "B000BB", 700),
        PassengerCar("2000.06.15", "C000CC", "green", 90),
    ]


def test_parse_file_missing_raises(tmp_path):
    with pytest.raises(OSError):
        parse_file(tmp_path / "missing.txt")


def test_parse_file_empty(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert parse_file(path) == []