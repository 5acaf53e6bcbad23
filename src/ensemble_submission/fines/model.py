from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..attendance.model import Counts


@dataclass(frozen=True)
class ReportRow:
    """Read-model: one person's line in the fine report."""

    name: str
    counts: Counts
    required_audio: int
    submitted_audio: int
    missing_audio: int
    fine: int

    def as_cells(self) -> list[Any]:
        c = self.counts
        return [
            self.name,
            c.fixed_excuse_absence,
            c.general_excuse_absence,
            c.absence,
            c.late,
            self.required_audio,
            self.submitted_audio,
            self.missing_audio,
            self.fine,
        ]


@dataclass(frozen=True)
class ReportData:
    rows: list[ReportRow]


@dataclass(frozen=True)
class PieceRequirement:
    piece: str
    required: int
    breakdown: Counts

    def as_dict(self) -> dict[str, Any]:
        return {"required": self.required, "breakdown": self.breakdown.as_dict()}
