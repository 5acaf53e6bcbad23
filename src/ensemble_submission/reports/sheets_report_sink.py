from __future__ import annotations

from typing import Any, Optional, Sequence

from ..integrations.connection import GoogleConnection
from ..integrations.sheets_base import a1_range
from .repository import ReportSink


class SheetsReportSink(ReportSink):
    def __init__(self, conn: GoogleConnection):
        self._conn = conn

    def _spreadsheets(self):
        return self._conn.sheets().spreadsheets()

    def _sheet_id(self, title: str) -> Optional[int]:
        meta = (
            self._spreadsheets()
            .get(spreadsheetId=self._conn.config.sheet_id, fields="sheets.properties")
            .execute()
        )
        for s in meta.get("sheets") or []:
            props = s.get("properties") or {}
            if props.get("title") == title:
                return props.get("sheetId")
        return None

    def _batch_update(self, request: dict) -> dict:
        return (
            self._spreadsheets()
            .batchUpdate(spreadsheetId=self._conn.config.sheet_id, body={"requests": [request]})
            .execute()
        )

    def exists(self, title: str) -> bool:
        return self._sheet_id(title) is not None

    def create(self, title: str) -> None:
        self._batch_update({"addSheet": {"properties": {"title": title}}})

    def clear(self, title: str) -> None:
        sheet_id = self._sheet_id(title)
        if sheet_id is None:
            return
        self._batch_update(
            {
                "updateCells": {
                    "range": {"sheetId": sheet_id},
                    "fields": "userEnteredValue",
                }
            }
        )

    def write(self, title: str, rows: Sequence[Sequence[Any]]) -> None:
        (
            self._spreadsheets()
            .values()
            .update(
                spreadsheetId=self._conn.config.sheet_id,
                range=a1_range(title, "A1"),
                valueInputOption="USER_ENTERED",
                body={"values": [list(r) for r in rows]},
            )
            .execute()
        )
