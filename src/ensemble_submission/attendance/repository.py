from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRow


class AttendanceRowSource(Protocol):
    def fetch(self, piece: str) -> Sequence[AttendanceRow]:
        """Rows of the piece's attendance tab; empty when the tab is gone."""

        raise NotImplementedError
