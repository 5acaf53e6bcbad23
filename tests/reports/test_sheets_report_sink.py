from __future__ import annotations

from ensemble_submission.attendance.model import Counts
from ensemble_submission.fines.model import ReportRow
from ensemble_submission.integrations.connection import GoogleConfig
from ensemble_submission.reports.materializer import ReportMaterializer
from ensemble_submission.reports.sheets_report_sink import SheetsReportSink


class FakeRequest:
    def __init__(self, payload):
        self._payload = payload

    def execute(self):
        return self._payload


class FakeSpreadsheets:
    """Records batchUpdate bodies and values.update calls; addSheet adds a tab."""

    def __init__(self, tabs: dict[str, int]):
        self.tabs = dict(tabs)
        self.batches: list[dict] = []
        self.updates: list[dict] = []

    def get(self, spreadsheetId, fields=None):
        sheets = [{"properties": {"title": t, "sheetId": i}} for t, i in self.tabs.items()]
        return FakeRequest({"sheets": sheets})

    def batchUpdate(self, spreadsheetId, body):
        self.batches.append(body)
        for req in body["requests"]:
            if "addSheet" in req:
                title = req["addSheet"]["properties"]["title"]
                self.tabs[title] = 100 + len(self.tabs)
        return FakeRequest({})

    def values(self):
        return self

    def update(self, spreadsheetId, range, valueInputOption, body):
        self.updates.append({"range": range, "valueInputOption": valueInputOption, "values": body["values"]})
        return FakeRequest({})


class FakeSheets:
    def __init__(self, tabs):
        self.api = FakeSpreadsheets(tabs)

    def spreadsheets(self):
        return self.api


class FakeConnection:
    def __init__(self, tabs=None):
        self.config = GoogleConfig(sheet_id="sheet", parent_folder_id="parent")
        self._sheets = FakeSheets(tabs or {})

    def sheets(self):
        return self._sheets


def test_exists_and_create_send_add_sheet():
    conn = FakeConnection({"취타": 0})
    sink = SheetsReportSink(conn)

    assert sink.exists("취타")
    assert not sink.exists("벌금_정산")
    sink.create("벌금_정산")

    assert conn.sheets().api.batches == [{"requests": [{"addSheet": {"properties": {"title": "벌금_정산"}}}]}]
    assert sink.exists("벌금_정산")


def test_clear_blanks_values_of_the_matching_tab_even_with_sheet_id_zero():
    conn = FakeConnection({"벌금_정산": 0, "취타": 7})

    SheetsReportSink(conn).clear("벌금_정산")

    assert conn.sheets().api.batches == [
        {"requests": [{"updateCells": {"range": {"sheetId": 0}, "fields": "userEnteredValue"}}]}
    ]


def test_clear_of_absent_tab_sends_nothing():
    conn = FakeConnection({})

    SheetsReportSink(conn).clear("벌금_정산")

    assert conn.sheets().api.batches == []


def test_write_starts_at_a1_with_user_entered_values():
    conn = FakeConnection({"벌금_정산": 3})

    SheetsReportSink(conn).write("벌금_정산", [("이름", "결석"), ("Kim", 1)])

    assert conn.sheets().api.updates == [
        {"range": "'벌금_정산'!A1", "valueInputOption": "USER_ENTERED", "values": [["이름", "결석"], ["Kim", 1]]}
    ]


def test_materializer_over_sheets_creates_then_clears():
    conn = FakeConnection({})
    materializer = ReportMaterializer(SheetsReportSink(conn), title="벌금_정산")
    rows = [ReportRow(name="Kim", counts=Counts(absence=1), required_audio=2, submitted_audio=0, missing_audio=2, fine=9000)]

    materializer.materialize(rows)
    materializer.materialize(rows)

    api = conn.sheets().api
    assert [next(iter(b["requests"][0])) for b in api.batches] == ["addSheet", "updateCells"]
    assert len(api.updates) == 2
    assert api.updates[0] == api.updates[1]
