from __future__ import annotations

from typing import Any, List

from googleapiclient.errors import HttpError

MISSING_RANGE_MESSAGE = "Unable to parse range"


def a1_range(title: str, cells: str = "") -> str:
    """Quote a tab title for A1 notation: 'My tab'!A2:H."""
    quoted = "'" + title.replace("'", "''") + "'"
    return f"{quoted}!{cells}" if cells else quoted


def drive_literal(value: str) -> str:
    """Escape a value for use inside a Drive query string literal."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def get_values(sheets: Any, *, spreadsheet_id: str, range_: str) -> List[List[Any]]:
    data = sheets.spreadsheets().values().get(spreadsheetId=spreadsheet_id, range=range_).execute()
    return list(data.get("values") or [])


def is_missing_range(error: HttpError) -> bool:
    """Sheets answers 400 "Unable to parse range: ..." when the tab does not exist."""
    status = getattr(error.resp, "status", None)
    if int(status or 0) != 400:
        return False
    content = error.content or b""
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")
    return MISSING_RANGE_MESSAGE in content
