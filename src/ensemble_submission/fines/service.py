from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Mapping, Optional, Sequence, TypeVar

from ..attendance.model import Counts
from ..attendance.repository import AttendanceRowSource
from ..attendance.tally import AttendanceTally, merge_counts
from ..common.validators import require_non_empty
from ..core.enums import RequirementScope
from ..core.exceptions import CollaboratorError, DomainError, ReportInProgressError
from ..pieces.repository import PieceList
from ..reports.materializer import ReportMaterializer
from ..submissions.reconciler import SubmissionReconciler
from ..submissions.repository import UploadCounter
from .calculator.base import FineCalculator, RequirementCalculator
from .calculator.standard_calculator import StandardFineCalculator, StandardRequirementCalculator
from .model import PieceRequirement, ReportData, ReportRow

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class FineReportService:
    """Attendance -> audio requirement -> fine, for everyone or one person.

    Collaborator calls (sheets, drive) are the only I/O. Any failure there
    aborts the whole run and surfaces as CollaboratorError; nothing partial
    is returned or written.
    """

    def __init__(
        self,
        rows: AttendanceRowSource,
        uploads: UploadCounter,
        pieces: PieceList,
        materializer: ReportMaterializer,
        *,
        tally: Optional[AttendanceTally] = None,
        requirement: Optional[RequirementCalculator] = None,
        fines: Optional[FineCalculator] = None,
        reconciler: Optional[SubmissionReconciler] = None,
        scope: RequirementScope = RequirementScope.PIECE,
        fetch_workers: int = 1,
    ):
        self._rows = rows
        self._uploads = uploads
        self._pieces = pieces
        self._materializer = materializer
        self._tally = tally or AttendanceTally()
        self._requirement = requirement or StandardRequirementCalculator()
        self._fines = fines or StandardFineCalculator()
        self._reconciler = reconciler or SubmissionReconciler()
        self._scope = RequirementScope(scope)
        self._fetch_workers = max(int(fetch_workers), 1)
        self._run_lock = threading.Lock()

    def _call(self, what: str, fn: Callable[[], T]) -> T:
        try:
            return fn()
        except DomainError:
            raise
        except Exception as e:
            LOGGER.exception("Collaborator call failed: %s", what)
            raise CollaboratorError(f"{what} failed") from e

    def _per_piece(self, what: str, pieces: Sequence[str], fn: Callable[[str], T]) -> list[T]:
        """Run `fn` for every piece; results keep the piece order."""

        def one(piece: str) -> T:
            return self._call(f"{what} for piece {piece!r}", lambda: fn(piece))

        if self._fetch_workers == 1 or len(pieces) <= 1:
            return [one(p) for p in pieces]
        with ThreadPoolExecutor(max_workers=self._fetch_workers) as pool:
            return list(pool.map(one, pieces))

    @property
    def report_title(self) -> str:
        return self._materializer.title

    def list_pieces(self) -> list[str]:
        return list(self._call("piece list", self._pieces.list))

    def _required(self, per_piece: Sequence[Counts], total: Counts) -> int:
        if self._scope is RequirementScope.TOTAL:
            return self._requirement.required_audio(total)
        return sum(self._requirement.required_audio(c) for c in per_piece)

    def build_report(self) -> ReportData:
        pieces = self.list_pieces()

        tallies = self._per_piece("attendance fetch", pieces, lambda p: self._tally.tally(self._rows.fetch(p)))
        uploads = self._per_piece("upload count", pieces, self._uploads.counts_by_person)

        submitted: dict[str, int] = {}
        for per_person in uploads:
            for name, n in per_person.items():
                submitted[name] = submitted.get(name, 0) + int(n)

        totals = merge_counts(tallies)
        out: list[ReportRow] = []
        for name, total in totals.items():
            per_piece = [t[name] for t in tallies if name in t]
            required = self._required(per_piece, total)
            sent = submitted.get(name, 0)
            missing = self._reconciler.missing(required, sent)
            out.append(
                ReportRow(
                    name=name,
                    counts=total,
                    required_audio=required,
                    submitted_audio=sent,
                    missing_audio=missing,
                    fine=self._fines.fine(absence=total.absence, missing_audio=missing),
                )
            )
        return ReportData(rows=out)

    def run_report(self) -> int:
        """Build and write the report tab; returns the number of person rows."""
        if not self._run_lock.acquire(blocking=False):
            raise ReportInProgressError("A report run is already in progress")
        try:
            report = self.build_report()
            written = self._call("report write", lambda: self._materializer.materialize(report.rows))
        finally:
            self._run_lock.release()
        LOGGER.info("Fine report finished: %d people", written)
        return written

    def requirements_for(self, name: Optional[str]) -> dict[str, PieceRequirement]:
        """Per-piece requirement of one person; pieces owing nothing are left out."""
        person = require_non_empty(name, "name")
        pieces = self.list_pieces()
        rows = self._per_piece("attendance fetch", pieces, self._rows.fetch)

        result: dict[str, PieceRequirement] = {}
        for piece, piece_rows in zip(pieces, rows):
            counts = self._tally.tally_for(piece_rows, person)
            required = self._requirement.required_audio(counts)
            if required > 0:
                result[piece] = PieceRequirement(piece=piece, required=required, breakdown=counts)
        return result

    def submissions_for(self, name: Optional[str]) -> Mapping[str, int]:
        person = require_non_empty(name, "name")
        pieces = self.list_pieces()
        counts = self._call("upload count", lambda: self._uploads.counts_by_piece(person, pieces))
        return {piece: int(counts.get(piece, 0)) for piece in pieces}
