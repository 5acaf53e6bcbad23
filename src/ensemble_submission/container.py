from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .attendance.sheets_row_source import SheetsAttendanceRowSource
from .core import constants
from .core.enums import RequirementScope
from .fines.calculator.standard_calculator import StandardFineCalculator, StandardRequirementCalculator
from .fines.service import FineReportService
from .integrations.connection import GoogleConfig, GoogleConnection
from .pieces.cache import TtlCache
from .pieces.repository import PieceList
from .pieces.sheets_piece_list import CachedPieceList, FixedPieceList, SheetsPieceList
from .reports.materializer import ReportMaterializer
from .reports.sheets_report_sink import SheetsReportSink
from .submissions.drive_upload_counter import DriveUploadCounter


@dataclass(frozen=True)
class Container:
    conn: GoogleConnection

    rows_source: SheetsAttendanceRowSource
    upload_counter: DriveUploadCounter
    piece_list: PieceList
    report_sink: SheetsReportSink

    fine_report_service: FineReportService
    report_secret: str | None = None


def build_container(*, google_config: dict, settings: Any) -> Container:
    config = GoogleConfig(
        sheet_id=str(google_config["sheet_id"]),
        parent_folder_id=str(google_config["parent_folder_id"]),
        client_email=google_config.get("client_email"),
        private_key=google_config.get("private_key"),
        client_id=google_config.get("client_id"),
        client_secret=google_config.get("client_secret"),
        refresh_token=google_config.get("refresh_token"),
    )
    conn = GoogleConnection.get_instance(config)

    rows_source = SheetsAttendanceRowSource(
        conn,
        name_column=getattr(settings, "NAME_COLUMN", constants.DEFAULT_NAME_COLUMN),
        category_column=getattr(settings, "CATEGORY_COLUMN", constants.DEFAULT_CATEGORY_COLUMN),
    )
    upload_counter = DriveUploadCounter(conn)
    report_sink = SheetsReportSink(conn)

    fixed = list(getattr(settings, "PIECES", None) or [])
    if fixed:
        piece_list: PieceList = FixedPieceList(fixed)
    else:
        ttl = getattr(settings, "PIECE_CACHE_TTL_SECONDS", constants.DEFAULT_PIECE_CACHE_TTL_SECONDS)
        piece_list = CachedPieceList(SheetsPieceList(conn), TtlCache(ttl))

    materializer = ReportMaterializer(
        report_sink,
        title=getattr(settings, "REPORT_TITLE", constants.DEFAULT_REPORT_TITLE),
        sort_by_name=bool(getattr(settings, "REPORT_SORT_BY_NAME", False)),
    )
    fine_report_service = FineReportService(
        rows_source,
        upload_counter,
        piece_list,
        materializer,
        requirement=StandardRequirementCalculator(),
        fines=StandardFineCalculator(
            absence_rate=getattr(settings, "ABSENCE_FINE_RATE", constants.ABSENCE_FINE_RATE),
            audio_rate=getattr(settings, "AUDIO_FINE_RATE", constants.AUDIO_FINE_RATE),
        ),
        scope=RequirementScope(getattr(settings, "REQUIREMENT_SCOPE", RequirementScope.PIECE.value)),
        fetch_workers=getattr(settings, "FETCH_WORKERS", 1),
    )

    return Container(
        conn=conn,
        rows_source=rows_source,
        upload_counter=upload_counter,
        piece_list=piece_list,
        report_sink=report_sink,
        fine_report_service=fine_report_service,
        report_secret=getattr(settings, "REPORT_SECRET", None),
    )
