from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Mapping, Optional

from ..core.constants import UPLOAD_NAME_SEPARATOR
from ..integrations.connection import GoogleConnection
from ..integrations.sheets_base import drive_literal
from .repository import UploadCounter

LOGGER = logging.getLogger(__name__)

FOLDER_MIME = "application/vnd.google-apps.folder"


def uploader_name(filename: Optional[str]) -> str:
    """'홍길동_취타_1700000000.mp3' -> '홍길동'."""
    if not filename:
        return ""
    return filename.split(UPLOAD_NAME_SEPARATOR, 1)[0].strip()


class DriveUploadCounter(UploadCounter):
    """Counts audio files in per-piece folders under one parent folder."""

    def __init__(self, conn: GoogleConnection, *, page_size: int = 1000):
        self._conn = conn
        self._page_size = int(page_size)

    def _find_folder_id(self, piece: str) -> Optional[str]:
        parent = self._conn.config.parent_folder_id
        data = (
            self._conn.drive()
            .files()
            .list(
                q=(
                    f"mimeType='{FOLDER_MIME}' and name='{drive_literal(piece)}' "
                    f"and '{drive_literal(parent)}' in parents and trashed=false"
                ),
                fields="files(id)",
                spaces="drive",
                pageSize=1,
            )
            .execute()
        )
        files = data.get("files") or []
        # Duplicate folders with the same name: the first one wins.
        return files[0].get("id") if files else None

    def _iter_file_names(self, folder_id: str, *, name_prefix: Optional[str] = None) -> Iterator[str]:
        q = f"'{drive_literal(folder_id)}' in parents and trashed=false and mimeType!='{FOLDER_MIME}'"
        if name_prefix:
            q += f" and name contains '{drive_literal(name_prefix)}'"

        page_token: Optional[str] = None
        while True:
            data: dict[str, Any] = (
                self._conn.drive()
                .files()
                .list(
                    q=q,
                    fields="nextPageToken, files(name)",
                    spaces="drive",
                    pageSize=self._page_size,
                    pageToken=page_token,
                )
                .execute()
            )
            for f in data.get("files") or []:
                yield f.get("name") or ""
            page_token = data.get("nextPageToken")
            if not page_token:
                break

    def counts_by_person(self, piece: str) -> Mapping[str, int]:
        folder_id = self._find_folder_id(piece)
        if not folder_id:
            LOGGER.info("No upload folder for piece %r", piece)
            return {}

        counts: dict[str, int] = {}
        for filename in self._iter_file_names(folder_id):
            name = uploader_name(filename)
            if name:
                counts[name] = counts.get(name, 0) + 1
        return counts

    def counts_by_piece(self, name: str, pieces: Iterable[str]) -> Mapping[str, int]:
        wanted = name.strip()
        counts: dict[str, int] = {}
        for piece in pieces:
            folder_id = self._find_folder_id(piece)
            if not folder_id:
                counts[piece] = 0
                continue
            # "contains" is a substring match server-side; filter to the exact prefix here.
            counts[piece] = sum(
                1
                for filename in self._iter_file_names(folder_id, name_prefix=f"{wanted}{UPLOAD_NAME_SEPARATOR}")
                if uploader_name(filename) == wanted
            )
        return counts
