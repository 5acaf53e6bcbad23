from __future__ import annotations

from typing import Protocol, Sequence


class PieceList(Protocol):
    def list(self) -> Sequence[str]:
        raise NotImplementedError
