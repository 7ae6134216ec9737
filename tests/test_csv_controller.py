import logging
from pathlib import Path

import pytest

from controllers.csv_controller import CellIndexError, CSVController
from services.csv_service import CSVFileNotFoundError, CSVReadError, EmptyCSVError

LOGGER_NAME = "tests.csv_controller"


@pytest.fixture
def controller(caplog) -> CSVController:
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)
    return CSVController(log=logging.getLogger(LOGGER_NAME))


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_load_csv_reports_status_line(controller, caplog, tmp_path: Path) -> None:
    path = _write(tmp_path, "data.csv", "a,b\nc,d,e\n")
    table = controller.load_csv(path)
    assert controller.table is table
    assert table.column_count == 3
    assert "Loaded CSV 'data.csv' with 2 rows and 3 columns." in caplog.messages


def test_load_csv_missing_file(controller, caplog, tmp_path: Path) -> None:
    missing = tmp_path / "missing.csv"
    with pytest.raises(CSVFileNotFoundError):
        controller.load_csv(missing)
    assert controller.table is None
    assert f"load_csv: file not found: {missing}" in caplog.messages


def test_load_csv_empty_file_clears_previous_table(controller, caplog, tmp_path: Path) -> None:
    controller.load_csv(_write(tmp_path, "full.csv", "x,y\n"))
    empty = _write(tmp_path, "empty.csv", "")
    with pytest.raises(EmptyCSVError):
        controller.load_csv(empty)
    assert controller.table is None
    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert record.getMessage() == f"load_csv: file is empty: {empty}"


def test_load_csv_read_failure_is_logged_and_reraised(controller, caplog, tmp_path: Path) -> None:
    with pytest.raises(CSVReadError):
        controller.load_csv(tmp_path)
    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.exc_info is not None


def test_reload_replaces_table(controller, tmp_path: Path) -> None:
    first = controller.load_csv(_write(tmp_path, "one.csv", "1,2\n"))
    second = controller.load_csv(_write(tmp_path, "two.csv", "3\n4\n"))
    assert controller.table is second
    assert first.rows == (("1", "2"),)
    assert second.rows == (("3",), ("4",))


def test_get_cell_uses_one_based_title(controller, tmp_path: Path) -> None:
    controller.load_csv(_write(tmp_path, "grid.csv", 'a,b\n"x, y",z\n'))
    cell = controller.get_cell(1, 0)
    assert cell.value == "x, y"
    assert cell.title == "cell[2,1]"


def test_get_cell_on_padding_returns_empty_string(controller, tmp_path: Path) -> None:
    controller.load_csv(_write(tmp_path, "ragged.csv", "a\nb,c\n"))
    assert controller.get_cell(0, 1).value == ""


@pytest.mark.parametrize("row, column", [(-1, 0), (0, -1), (2, 0), (0, 2)])
def test_get_cell_rejects_out_of_range(controller, tmp_path: Path, row, column) -> None:
    controller.load_csv(_write(tmp_path, "small.csv", "a,b\nc,d\n"))
    with pytest.raises(CellIndexError):
        controller.get_cell(row, column)


def test_get_cell_without_table(controller) -> None:
    with pytest.raises(IndexError):
        controller.get_cell(0, 0)


def test_get_cell_in_zero_column_table(controller, tmp_path: Path) -> None:
    controller.load_csv(_write(tmp_path, "blank.csv", "\n"))
    assert controller.table.row_count == 1
    with pytest.raises(CellIndexError):
        controller.get_cell(0, 0)


def test_load_csv_goes_through_service_reader(controller, monkeypatch, tmp_path: Path) -> None:
    from models.csv_model import CSVTable
    from services.csv_service import CSVService

    calls = []
    stub = CSVTable(columns=["col1"], rows=[["stub"]])

    def fake_read_csv(path):
        calls.append(path)
        return stub

    monkeypatch.setattr(CSVService, "read_csv", staticmethod(fake_read_csv))
    path = _write(tmp_path, "any.csv", "ignored\n")
    assert controller.load_csv(path) is stub
    assert calls == [path]
    assert controller.table is stub
