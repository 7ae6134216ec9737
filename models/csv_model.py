from typing import Sequence, Tuple


class CSVTable:
    """
    Represents the CSV in memory:
      - columns: synthesized headers (col1, col2, ...)
      - rows: tuple of rows, each padded to len(columns)
    Built once per load and never modified afterwards.
    """

    __slots__ = ("_columns", "_rows")

    def __init__(self, columns: Sequence[str] = (), rows: Sequence[Sequence[str]] = ()):
        self._columns: Tuple[str, ...] = tuple(columns)
        self._rows: Tuple[Tuple[str, ...], ...] = tuple(tuple(r) for r in rows)
        width = len(self._columns)
        for i, row in enumerate(self._rows):
            if len(row) != width:
                raise ValueError(f"Row {i} has {len(row)} fields, expected {width}.")

    @property
    def columns(self) -> Tuple[str, ...]:
        return self._columns

    @property
    def rows(self) -> Tuple[Tuple[str, ...], ...]:
        return self._rows

    @property
    def column_count(self) -> int:
        return len(self._columns)

    @property
    def row_count(self) -> int:
        return len(self._rows)

    def cell(self, row: int, column: int) -> str:
        # Negative indices are rejected instead of wrapping around
        if row < 0 or row >= self.row_count:
            raise IndexError(f"Row index {row} out of range (0..{self.row_count - 1}).")
        if column < 0 or column >= self.column_count:
            raise IndexError(f"Column index {column} out of range (0..{self.column_count - 1}).")
        return self._rows[row][column]

    def __eq__(self, other) -> bool:
        if not isinstance(other, CSVTable):
            return NotImplemented
        return self._columns == other._columns and self._rows == other._rows

    def __repr__(self) -> str:
        return f"CSVTable(rows={self.row_count}, columns={self.column_count})"
