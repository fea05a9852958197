from carledger.cli import main
from carledger.table import CarTable


def test_main_prints_rows(tmp_path, capsys):
    source = tmp_path / "cars.txt"
    source.write_text("2024.10.01;A000AA\n1999.12.31;B000BB;700\n", encoding="utf-8")
    assert main([str(source)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == " | ".join(CarTable.HEADERS)
    assert lines[1] == "Автомобиль | A000AA | 2024.10.01 | -"
    assert len(lines) == 3


def test_main_saves_output(tmp_path):
    source = tmp_path / "cars.txt"
    content = "2000.06.15;C000CC;green;90\n"
    source.write_text(content, encoding="utf-8")
    target = tmp_path / "out.txt"
    assert main([str(source), "-o", str(target)]) == 0
    assert target.read_text(encoding="utf-8") == content


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Ошибка" in capsys.readouterr().err