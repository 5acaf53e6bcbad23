from __future__ import annotations

from typing import Iterable, Mapping, Protocol


class UploadCounter(Protocol):
    def counts_by_person(self, piece: str) -> Mapping[str, int]:
        """Uploaded file count per person name inside one piece folder."""

        raise NotImplementedError

    def counts_by_piece(self, name: str, pieces: Iterable[str]) -> Mapping[str, int]:
        """Uploaded file count of one person for each piece (0 when none)."""

        raise NotImplementedError
