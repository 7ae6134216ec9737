import logging
from pathlib import Path
from typing import NamedTuple, Optional, Union

from models.csv_model import CSVTable
from services.csv_service import (
    CSVFileNotFoundError,
    CSVReadError,
    CSVService,
    EmptyCSVError,
)
from services.logging_service import APP_LOGGER

logger = logging.getLogger(f"{APP_LOGGER}.{__name__}")


class CellIndexError(IndexError):
    pass


class CellValue(NamedTuple):
    row: int
    column: int
    value: str

    @property
    def title(self) -> str:
        # Shown to the user with 1-based coordinates
        return f"cell[{self.row + 1},{self.column + 1}]"


class CSVController:
    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger
        self._table: CSVTable | None = None

    @property
    def table(self) -> Optional[CSVTable]:
        return self._table

    def clear(self):
        self._table = None

    # --- LOADING ---
    def load_csv(self, path: Union[str, Path]) -> CSVTable:
        path = Path(path)
        if not path.exists():
            self.log.warning("load_csv: file not found: %s", path)
            raise CSVFileNotFoundError(path)

        try:
            table = CSVService.read_csv(path)
        except CSVFileNotFoundError:
            # Removed between the check and the read
            self.log.warning("load_csv: file not found: %s", path)
            raise
        except CSVReadError:
            self.log.exception("load_csv: failed to read %s", path)
            raise
        except EmptyCSVError:
            self.log.warning("load_csv: file is empty: %s", path)
            self.clear()
            raise

        self._table = table
        self.log.info(
            "Loaded CSV '%s' with %d rows and %d columns.",
            path.name, table.row_count, table.column_count,
        )
        return table

    # --- CELL LOOKUP ---
    def get_cell(self, row: int, column: int) -> CellValue:
        if self._table is None:
            raise CellIndexError("No CSV loaded.")
        if row < 0 or column < 0:
            raise CellIndexError(f"Negative cell index ({row}, {column}).")
        if row >= self._table.row_count or column >= self._table.column_count:
            raise CellIndexError(
                f"Cell ({row}, {column}) outside table of "
                f"{self._table.row_count}x{self._table.column_count}."
            )
        return CellValue(row, column, self._table.cell(row, column))
