from __future__ import annotations

from ...attendance.model import Counts
from ...common.validators import require_non_negative
from ...core import constants
from .base import FineCalculator, RequirementCalculator


def late_pairs(late: int, *, pair_size: int = constants.LATE_PAIR_SIZE) -> int:
    """Lates counted in whole pairs: 1 -> 0, 2 -> 2, 3 -> 2, 4 -> 4."""
    return (require_non_negative(late, "late") // pair_size) * pair_size


class StandardRequirementCalculator(RequirementCalculator):
    """Standard rule: fixed excuse x1, general excuse x2, absence x2, lates by pair."""

    def __init__(
        self,
        *,
        fixed_excuse_weight: int = constants.FIXED_EXCUSE_WEIGHT,
        general_excuse_weight: int = constants.GENERAL_EXCUSE_WEIGHT,
        absence_weight: int = constants.ABSENCE_WEIGHT,
        late_pair_size: int = constants.LATE_PAIR_SIZE,
        late_pair_weight: int = constants.LATE_PAIR_WEIGHT,
    ):
        if late_pair_size <= 0:
            raise ValueError("late_pair_size must be positive")
        self.fixed_excuse_weight = int(fixed_excuse_weight)
        self.general_excuse_weight = int(general_excuse_weight)
        self.absence_weight = int(absence_weight)
        self.late_pair_size = int(late_pair_size)
        self.late_pair_weight = int(late_pair_weight)

    def required_audio(self, counts: Counts) -> int:
        pairs = late_pairs(counts.late, pair_size=self.late_pair_size) // self.late_pair_size
        return (
            counts.fixed_excuse_absence * self.fixed_excuse_weight
            + counts.general_excuse_absence * self.general_excuse_weight
            + counts.absence * self.absence_weight
            + pairs * self.late_pair_weight
        )


class StandardFineCalculator(FineCalculator):
    """Standard rule: every absence and every missing audio file is fined.

    Lates and excused absences only add to the audio requirement.
    """

    def __init__(
        self,
        *,
        absence_rate: int = constants.ABSENCE_FINE_RATE,
        audio_rate: int = constants.AUDIO_FINE_RATE,
    ):
        self.absence_rate = int(absence_rate)
        self.audio_rate = int(audio_rate)

    def fine(self, *, absence: int, missing_audio: int) -> int:
        absence = require_non_negative(absence, "absence")
        missing_audio = require_non_negative(missing_audio, "missing_audio")
        return absence * self.absence_rate + missing_audio * self.audio_rate
