from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import Counts


class RequirementCalculator(ABC):
    """Calculator interface: attendance counts -> audio files owed."""

    @abstractmethod
    def required_audio(self, counts: Counts) -> int:
        raise NotImplementedError


class FineCalculator(ABC):
    """Calculator interface: absences and missing audio -> fine amount."""

    @abstractmethod
    def fine(self, *, absence: int, missing_audio: int) -> int:
        raise NotImplementedError
