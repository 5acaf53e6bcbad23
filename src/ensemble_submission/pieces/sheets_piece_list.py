from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ..core.constants import PIECE_CONFIG_RANGE
from ..integrations.connection import GoogleConnection
from ..integrations.sheets_base import get_values
from .cache import TtlCache
from .repository import PieceList

LOGGER = logging.getLogger(__name__)


class FixedPieceList(PieceList):
    def __init__(self, pieces: Iterable[str]):
        self._pieces = tuple(p.strip() for p in pieces if p and p.strip())

    def list(self) -> Sequence[str]:
        return list(self._pieces)


class SheetsPieceList(PieceList):
    """Piece names from CONFIG!A:A, header row excluded."""

    def __init__(self, conn: GoogleConnection):
        self._conn = conn

    def list(self) -> Sequence[str]:
        values = get_values(
            self._conn.sheets(),
            spreadsheet_id=self._conn.config.sheet_id,
            range_=PIECE_CONFIG_RANGE,
        )
        names = []
        for r in values[1:]:
            name = str(r[0]).strip() if r and r[0] is not None else ""
            if name and name not in names:
                names.append(name)
        LOGGER.debug("Loaded %d piece names from config tab", len(names))
        return names


class CachedPieceList(PieceList):
    def __init__(self, inner: PieceList, cache: TtlCache[Sequence[str]]):
        self._inner = inner
        self._cache = cache

    def list(self) -> Sequence[str]:
        return list(self._cache.get_or_load(lambda: list(self._inner.list())))
