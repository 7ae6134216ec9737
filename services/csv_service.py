from pathlib import Path
from typing import List, Sequence, Union

from models.csv_model import CSVTable
from services.csv_parser import parse_line


class CSVServiceError(Exception):
    pass


class CSVFileNotFoundError(CSVServiceError):
    def __init__(self, path):
        super().__init__(f"File not found: {path}")
        self.path = str(path)


class CSVReadError(CSVServiceError):
    def __init__(self, path, reason: str):
        super().__init__(f"Could not read {path}: {reason}")
        self.path = str(path)


class EmptyCSVError(CSVServiceError):
    def __init__(self, path=None):
        super().__init__("CSV file is empty." if path is None else f"CSV file is empty: {path}")
        self.path = None if path is None else str(path)


class CSVService:
    """
    Reads CSV files and turns their lines into a rectangular CSVTable.
    - File reading tolerates a BOM and falls back to Latin-1.
    - Short rows are padded with empty strings up to the widest row.
    """

    ENCODING = "utf-8-sig"
    FALLBACK_ENCODING = "latin-1"
    HEADER_PREFIX = "col"

    @staticmethod
    def _read_with(path, encoding: str) -> List[str]:
        # Universal newlines: \n, \r\n and \r all end a line; blank lines are kept
        try:
            with open(path, "r", encoding=encoding) as f:
                return [line.rstrip("\n") for line in f]
        except FileNotFoundError:
            raise CSVFileNotFoundError(path)
        except OSError as e:
            raise CSVReadError(path, e.strerror or str(e)) from e

    @staticmethod
    def read_lines(path: Union[str, Path]) -> List[str]:
        try:
            return CSVService._read_with(path, CSVService.ENCODING)
        except UnicodeDecodeError:
            # Latin-1 maps every byte, so this read always decodes
            return CSVService._read_with(path, CSVService.FALLBACK_ENCODING)

    @staticmethod
    def column_headers(count: int) -> List[str]:
        return [f"{CSVService.HEADER_PREFIX}{i + 1}" for i in range(count)]

    @staticmethod
    def build_table(lines: Sequence[str]) -> CSVTable:
        if not lines:
            raise EmptyCSVError()

        # 1. Parse everything first
        parsed = [parse_line(line) for line in lines]

        # 2. Width of the widest row
        max_cols = max(len(row) for row in parsed)

        # 3. Copy each row into its final width
        padded = []
        for row in parsed:
            out = [""] * max_cols
            out[:len(row)] = row
            padded.append(out)

        return CSVTable(columns=CSVService.column_headers(max_cols), rows=padded)

    @staticmethod
    def read_csv(path: Union[str, Path]) -> CSVTable:
        lines = CSVService.read_lines(path)
        if not lines:
            raise EmptyCSVError(path)
        return CSVService.build_table(lines)
