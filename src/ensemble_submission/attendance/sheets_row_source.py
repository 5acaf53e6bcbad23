from __future__ import annotations

import logging
from typing import Sequence

from googleapiclient.errors import HttpError

from ..core.constants import ATTENDANCE_RANGE_COLUMNS, DEFAULT_CATEGORY_COLUMN, DEFAULT_NAME_COLUMN
from ..integrations.connection import GoogleConnection
from ..integrations.sheets_base import a1_range, get_values, is_missing_range
from .model import AttendanceRow, decode_row
from .repository import AttendanceRowSource

LOGGER = logging.getLogger(__name__)


class SheetsAttendanceRowSource(AttendanceRowSource):
    """One attendance tab per piece, header on row 1."""

    def __init__(
        self,
        conn: GoogleConnection,
        *,
        name_column: int = DEFAULT_NAME_COLUMN,
        category_column: int = DEFAULT_CATEGORY_COLUMN,
    ):
        self._conn = conn
        self._name_column = int(name_column)
        self._category_column = int(category_column)

    def fetch(self, piece: str) -> Sequence[AttendanceRow]:
        try:
            values = get_values(
                self._conn.sheets(),
                spreadsheet_id=self._conn.config.sheet_id,
                range_=a1_range(piece, ATTENDANCE_RANGE_COLUMNS),
            )
        except HttpError as e:
            if is_missing_range(e):
                LOGGER.info("Attendance tab %r not found; treating as empty", piece)
                return []
            raise

        return [
            decode_row(piece, r, name_column=self._name_column, category_column=self._category_column)
            for r in values
        ]
