from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Sequence

from ..core.enums import Category


@dataclass(frozen=True)
class AttendanceRow:
    """Thực thể miền (domain): một dòng điểm danh của một bản nhạc."""

    piece: str
    name: str
    label: str

    @property
    def category(self) -> Category | None:
        return Category.from_label(self.label)


@dataclass(frozen=True)
class Counts:
    """Per-category tally for one person (one piece, or summed over pieces)."""

    fixed_excuse_absence: int = 0
    general_excuse_absence: int = 0
    absence: int = 0
    late: int = 0

    def get(self, category: Category) -> int:
        return getattr(self, _FIELDS[category])

    def incremented(self, category: Category, by: int = 1) -> "Counts":
        field = _FIELDS[category]
        return replace(self, **{field: getattr(self, field) + by})

    def __add__(self, other: "Counts") -> "Counts":
        if not isinstance(other, Counts):
            return NotImplemented
        return Counts(
            fixed_excuse_absence=self.fixed_excuse_absence + other.fixed_excuse_absence,
            general_excuse_absence=self.general_excuse_absence + other.general_excuse_absence,
            absence=self.absence + other.absence,
            late=self.late + other.late,
        )

    def as_dict(self) -> dict[str, int]:
        """Keyed by sheet label, the shape the lookup API returns."""
        return {category.value: self.get(category) for category in Category}


_FIELDS = {
    Category.FIXED_EXCUSE_ABSENCE: "fixed_excuse_absence",
    Category.GENERAL_EXCUSE_ABSENCE: "general_excuse_absence",
    Category.ABSENCE: "absence",
    Category.LATE: "late",
}


def _cell(values: Sequence[Any], index: int) -> str:
    if index < len(values) and values[index] is not None:
        return str(values[index]).strip()
    return ""


def decode_row(piece: str, values: Sequence[Any], *, name_column: int, category_column: int) -> AttendanceRow:
    """Decode one raw sheet row; short rows and empty cells become ""."""
    return AttendanceRow(
        piece=piece,
        name=_cell(values, name_column),
        label=_cell(values, category_column),
    )
