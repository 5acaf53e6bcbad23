from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from ..core.constants import DEFAULT_REPORT_TITLE, REPORT_HEADER
from ..fines.model import ReportRow
from .repository import ReportSink

LOGGER = logging.getLogger(__name__)


class ReportMaterializer:
    """Replace the whole report tab with header + one row per person.

    The tab is created when absent and cleared when present; rows are never
    appended to a previous run's output.
    """

    def __init__(self, sink: ReportSink, *, title: str = DEFAULT_REPORT_TITLE, sort_by_name: bool = False):
        self._sink = sink
        self._title = title
        self._sort_by_name = bool(sort_by_name)

    @property
    def title(self) -> str:
        return self._title

    def to_table(self, rows: Iterable[ReportRow]) -> list[list[Any]]:
        ordered: Sequence[ReportRow] = list(rows)
        if self._sort_by_name:
            ordered = sorted(ordered, key=lambda r: r.name)
        return [list(REPORT_HEADER), *(r.as_cells() for r in ordered)]

    def materialize(self, rows: Iterable[ReportRow]) -> int:
        table = self.to_table(rows)

        if self._sink.exists(self._title):
            self._sink.clear(self._title)
        else:
            LOGGER.info("Creating report tab %r", self._title)
            self._sink.create(self._title)

        self._sink.write(self._title, table)
        LOGGER.info("Wrote %d report rows to %r", len(table) - 1, self._title)
        return len(table) - 1
