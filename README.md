# carledger

A small register of vehicles kept in a plain text file. It can read register
files, check the dates and number plates in them, hold the records as table
rows, and write them back out.

## File format

Each line holds one vehicle, with fields separated by `;`. Files are read and
written as UTF-8.

| Fields                    | Vehicle        |
|---------------------------|----------------|
| `date;number`             | `Automobile`   |
| `date;number;weight`      | `Truck`        |
| `date;number;color;speed` | `PassengerCar` |

- A date has the form `YYYY.MM.DD`. The month must be `01`–`12` and the day `01`–`31`.
  Only the shape is checked, so `2024.02.31` is accepted.
- A number plate is one capital Latin letter, three digits and two capital
  Latin letters, for example `X000XX`.
- Weight and speed are integers (an optional sign is allowed) that fit in
  32 bits.

When a file is read, blank lines are skipped. Lines that fail validation are
skipped too, and a warning is logged through the `carledger.parsing` logger.

Example file:

```
2024.10.01;X000XX
2024.10.02;Y111YY;3500
2024.10.03;Z222ZZ;red;180
```

## Installation

```
pip install .
```

## Command line

```
carledger cars.txt more.txt -o combined.txt
```

This loads every file given, in order, and prints the records as a table with
the columns `Тип | Номер | Дата | Доп. параметры`. With `-o`/`--output` the
combined records are also written to that file. If a file cannot be read or
written, an error message goes to standard error and the exit status is 1.

## Library use

```python
from carledger.validator import is_valid_date, is_valid_car_number
from carledger.parsing import parse_line, parse_file
from carledger.table import CarTable, row_to_line, click_message

is_valid_date("2024.10.01")        # True
is_valid_car_number("X000XX")      # True

car = parse_line("2024.10.02;Y111YY;3500")
car.to_table_row()                 # ['Грузовик', 'Y111YY', '2024.10.02', 'Вес: 3500 кг']

table = CarTable()
table.load_file("cars.txt")
table.save_file("copy.txt")
table.click_text()                 # 'Кнопка нажата: 2 раз(а)\n'
```

- `parse_line` returns an `Automobile`, `Truck` or `PassengerCar` (immutable
  dataclasses) and raises `ValueError` for a malformed or invalid line.
- `parse_file` returns the list of vehicles read from a file and raises
  `OSError` if the file cannot be opened.
- `CarTable.rows` is a plain list of four-string rows that can be edited
  directly. `add_row()` appends an empty row, `delete_row(index)` removes one
  (raising `IndexError` if the index is `None` or out of range), `clear()`
  removes all of them, `load_file()` appends the rows from a file and
  `save_file()` writes them out.
- `row_to_line` turns a row back into a file line, or returns `None` if the
  row cannot be saved. Rows of an unknown type, empty rows, and rows whose
  details do not match the expected text are left out when saving.
- Every table action counts as a click: adding, deleting (even when it
  fails), loading, saving and clearing. `click_text()` reports the count
  through `click_message`.

## What it does not do

There is no interactive or graphical table editor. The `carledger` command
only loads, prints and optionally saves; editing is done in code through
`CarTable`.

## Running the tests

```
pip install .[test]
pytest
```