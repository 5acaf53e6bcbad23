from __future__ import annotations

from typing import Iterable

from .model import AttendanceRow, Counts


class AttendanceTally:
    """Turn attendance rows of one piece into per-person Counts.

    Every row with a non-empty name seeds a zeroed entry, even when its label
    is not a known category. Unknown labels and nameless rows are skipped.
    """

    def tally(self, rows: Iterable[AttendanceRow]) -> dict[str, Counts]:
        by_name: dict[str, Counts] = {}
        for row in rows:
            name = row.name.strip()
            if not name:
                continue
            counts = by_name.setdefault(name, Counts())
            category = row.category
            if category is not None:
                by_name[name] = counts.incremented(category)
        return by_name

    def tally_for(self, rows: Iterable[AttendanceRow], name: str) -> Counts:
        wanted = name.strip()
        return self.tally(r for r in rows if r.name.strip() == wanted).get(wanted, Counts())


def merge_counts(per_piece: Iterable[dict[str, Counts]]) -> dict[str, Counts]:
    """Sum per-piece tallies; keeps first-appearance order of names."""
    merged: dict[str, Counts] = {}
    for tally in per_piece:
        for name, counts in tally.items():
            merged[name] = merged.get(name, Counts()) + counts
    return merged
