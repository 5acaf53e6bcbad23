from __future__ import annotations

from ensemble_submission.attendance.model import Counts
from ensemble_submission.core.constants import REPORT_HEADER
from ensemble_submission.fines.model import ReportRow
from ensemble_submission.reports.materializer import ReportMaterializer


class InMemorySink:
    """Tabs as lists of rows; clear blanks values but keeps the tab."""

    def __init__(self):
        self.tabs: dict[str, list[list]] = {}
        self.calls: list[str] = []

    def exists(self, title):
        return title in self.tabs

    def create(self, title):
        self.calls.append("create")
        self.tabs[title] = []

    def clear(self, title):
        self.calls.append("clear")
        self.tabs[title] = []

    def write(self, title, rows):
        self.calls.append("write")
        tab = self.tabs[title]
        for i, r in enumerate(rows):
            if i < len(tab):
                tab[i] = list(r)
            else:
                tab.append(list(r))


def _row(name, absence=0, missing=0, fine=0):
    return ReportRow(
        name=name,
        counts=Counts(absence=absence),
        required_audio=absence * 2,
        submitted_audio=absence * 2 - missing,
        missing_audio=missing,
        fine=fine,
    )


def test_creates_tab_when_absent_and_writes_header_first():
    sink = InMemorySink()
    m = ReportMaterializer(sink, title="벌금_정산")

    written = m.materialize([_row("Kim", 1, 1, 6000), _row("Lee")])

    assert written == 2
    assert sink.calls == ["create", "write"]
    assert sink.tabs["벌금_정산"][0] == list(REPORT_HEADER)
    assert sink.tabs["벌금_정산"][1] == ["Kim", 0, 0, 1, 0, 2, 1, 1, 6000]


def test_rerun_with_same_input_is_idempotent():
    sink = InMemorySink()
    m = ReportMaterializer(sink, title="r")
    rows = [_row("Kim", 1), _row("Lee")]

    m.materialize(rows)
    first = [list(r) for r in sink.tabs["r"]]
    m.materialize(rows)

    assert sink.tabs["r"] == first
    assert sink.calls == ["create", "write", "clear", "write"]


def test_rerun_with_fewer_people_leaves_no_stale_row():
    sink = InMemorySink()
    m = ReportMaterializer(sink, title="r")

    m.materialize([_row("Kim"), _row("Lee"), _row("Park")])
    m.materialize([_row("Kim"), _row("Lee")])

    assert len(sink.tabs["r"]) == 3
    assert [r[0] for r in sink.tabs["r"][1:]] == ["Kim", "Lee"]


def test_keeps_input_order_unless_sorting_requested():
    rows = [_row("Park"), _row("Kim")]

    assert [r[0] for r in ReportMaterializer(InMemorySink()).to_table(rows)[1:]] == ["Park", "Kim"]
    assert [r[0] for r in ReportMaterializer(InMemorySink(), sort_by_name=True).to_table(rows)[1:]] == ["Kim", "Park"]
