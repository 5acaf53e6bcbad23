from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """Nhãn chuyên cần trong sheet điểm danh (giá trị đúng như ghi trong sheet)."""

    FIXED_EXCUSE_ABSENCE = "고정결석계"
    GENERAL_EXCUSE_ABSENCE = "일반결석계"
    ABSENCE = "결석"
    LATE = "지각"

    @classmethod
    def from_label(cls, label: str) -> "Category | None":
        """Exact match only; unknown labels return None."""
        try:
            return cls(label)
        except ValueError:
            return None


class RequirementScope(str, Enum):
    """Where the audio requirement formula is applied."""

    PIECE = "piece"
    TOTAL = "total"
