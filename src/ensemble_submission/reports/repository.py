from __future__ import annotations

from typing import Any, Protocol, Sequence


class ReportSink(Protocol):
    def exists(self, title: str) -> bool:
        raise NotImplementedError

    def create(self, title: str) -> None:
        raise NotImplementedError

    def clear(self, title: str) -> None:
        """Blank every cell value of the destination, keeping the tab."""

        raise NotImplementedError

    def write(self, title: str, rows: Sequence[Sequence[Any]]) -> None:
        """Write `rows` starting at the top-left cell."""

        raise NotImplementedError
