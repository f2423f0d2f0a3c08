"""
Spreadsheet utility.

Decodes an uploaded review spreadsheet into plain row dicts.
"""

import io
import logging
import os
from typing import Any, Dict, List, Union

import pandas as pd

import config.settings as settings

logger = logging.getLogger(__name__)


class SpreadsheetDecodeError(Exception):
    """Raised when a spreadsheet cannot be read. No rows are returned."""


def _is_empty_cell(value: Any) -> bool:
    """Empty cells arrive as NaN/None, or as "" with NA parsing disabled."""
    if isinstance(value, str):
        return value == ""
    return value is None or bool(pd.isna(value))


class SpreadsheetReader:
    """
    Reads the first sheet of an .xlsx/.xls workbook.

    Each data row becomes a dict of column header -> cell value.
    Empty cells are left out of the dict, so callers only see the
    columns a row actually has.
    """

    def __init__(self, sheet_index: int = settings.SHEET_INDEX):
        """
        Initialize spreadsheet reader.

        Args:
            sheet_index: Which sheet to read (0 = first)
        """
        self.sheet_index = sheet_index

    def read_file(self, path: Union[str, os.PathLike]) -> List[Dict[str, Any]]:
        """
        Read rows from a workbook on disk.

        Args:
            path: Path to an .xlsx or .xls file

        Returns:
            Row dicts in sheet order

        Raises:
            SpreadsheetDecodeError: If the file is missing, has an
                unsupported extension, or cannot be parsed
        """
        path = os.fspath(path)
        extension = os.path.splitext(path)[1].lower()

        if extension not in settings.SUPPORTED_EXTENSIONS:
            raise SpreadsheetDecodeError(
                f"Unsupported file type '{extension}'. "
                f"Expected one of {', '.join(settings.SUPPORTED_EXTENSIONS)}"
            )

        if not os.path.exists(path):
            raise SpreadsheetDecodeError(f"File not found: {path}")

        try:
            with open(path, 'rb') as f:
                data = f.read()
        except OSError as e:
            raise SpreadsheetDecodeError(f"Failed to read {path}: {e}") from e

        logger.info(f"Read {len(data)} bytes from {path}")
        return self.read_bytes(data)

    def read_bytes(self, data: bytes) -> List[Dict[str, Any]]:
        """
        Read rows from raw workbook bytes.

        Args:
            data: File contents

        Returns:
            Row dicts in sheet order

        Raises:
            SpreadsheetDecodeError: If the bytes are not a readable workbook
        """
        if not data:
            raise SpreadsheetDecodeError("Empty file")

        try:
            # Literal "NA", "N/A", "null" etc. stay text; only empty cells are missing
            df = pd.read_excel(
                io.BytesIO(data),
                sheet_name=self.sheet_index,
                keep_default_na=False,
                na_values=[]
            )
        except Exception as e:
            logger.error(f"Failed to decode spreadsheet: {e}")
            raise SpreadsheetDecodeError(f"Failed to decode spreadsheet: {e}") from e

        rows = self._to_rows(df)
        logger.info(f"Decoded {len(rows)} rows with columns {list(df.columns)}")
        return rows

    @staticmethod
    def _to_rows(df: pd.DataFrame) -> List[Dict[str, Any]]:
        """Convert a DataFrame to row dicts, dropping empty cells."""
        rows = []
        for record in df.to_dict(orient="records"):
            row = {
                str(column): value
                for column, value in record.items()
                if not _is_empty_cell(value)
            }
            if row:
                rows.append(row)
        return rows


# Notes:
#
# 1. pandas picks the engine from the content: openpyxl for .xlsx,
#    xlrd for legacy .xls. Both must be installed.
#
# 2. read_bytes either returns every row or raises. A partially
#    decoded sheet never reaches the ingestion agent.
#
# 3. Fully blank rows are skipped; rows with only some cells filled
#    come through with just those keys.
