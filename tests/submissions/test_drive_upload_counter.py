from __future__ import annotations

from ensemble_submission.integrations.connection import GoogleConfig
from ensemble_submission.submissions.drive_upload_counter import DriveUploadCounter, uploader_name


class FakeRequest:
    def __init__(self, payload):
        self._payload = payload

    def execute(self):
        return self._payload


class FakeFiles:
    """Folders by name; folder contents served in pages of `page_size`."""

    def __init__(self, folders: dict[str, list[str]], page_size: int = 2):
        self._folders = folders
        self._page_size = page_size
        self.calls: list[dict] = []

    def list(self, **kwargs):
        self.calls.append(kwargs)
        q = kwargs["q"]
        if "mimeType='application/vnd.google-apps.folder'" in q:
            for name in self._folders:
                if f"name='{name}'" in q:
                    return FakeRequest({"files": [{"id": f"id-{name}"}]})
            return FakeRequest({"files": []})

        folder = next(n for n in self._folders if f"'id-{n}' in parents" in q)
        names = self._folders[folder]
        if "name contains '" in q:
            needle = q.split("name contains '", 1)[1].rstrip("'")
            names = [n for n in names if needle in n]
        start = int(kwargs.get("pageToken") or 0)
        page = names[start : start + self._page_size]
        payload = {"files": [{"name": n} for n in page]}
        if start + self._page_size < len(names):
            payload["nextPageToken"] = str(start + self._page_size)
        return FakeRequest(payload)


class FakeDrive:
    def __init__(self, files: FakeFiles):
        self._files = files

    def files(self):
        return self._files


class FakeConnection:
    def __init__(self, files: FakeFiles):
        self.config = GoogleConfig(sheet_id="sheet", parent_folder_id="parent")
        self._drive = FakeDrive(files)

    def drive(self):
        return self._drive


def test_uploader_name_is_prefix_before_underscore():
    assert uploader_name("Kim_취타_1700000000.mp3") == "Kim"
    assert uploader_name("noseparator.mp3") == "noseparator.mp3"
    assert uploader_name("") == ""
    assert uploader_name(None) == ""


def test_counts_by_person_pages_through_folder():
    files = FakeFiles(
        {"취타": ["Kim_취타_1.mp3", "Kim_취타_2.mp3", "Lee_취타_1.mp3", "_orphan.mp3", "Kim_취타_3.mp3"]},
        page_size=2,
    )
    counter = DriveUploadCounter(FakeConnection(files))

    assert counter.counts_by_person("취타") == {"Kim": 3, "Lee": 1}
    # 1 folder lookup + 3 pages
    assert len(files.calls) == 4


def test_counts_by_person_missing_folder_is_empty():
    counter = DriveUploadCounter(FakeConnection(FakeFiles({})))

    assert counter.counts_by_person("축제") == {}


def test_counts_by_piece_matches_exact_name_only():
    files = FakeFiles(
        {
            "취타": ["Kim_취타_1.mp3", "BigKim_취타_1.mp3"],
            "도드리": ["Kim_도드리_1.mp3", "Kim_도드리_2.mp3"],
        }
    )
    counter = DriveUploadCounter(FakeConnection(files))

    result = counter.counts_by_piece("Kim", ["취타", "도드리", "축제"])

    assert result == {"취타": 1, "도드리": 2, "축제": 0}


def test_folder_query_escapes_quotes():
    files = FakeFiles({})
    counter = DriveUploadCounter(FakeConnection(files))

    counter.counts_by_person("Kim's piece")

    assert "name='Kim\\'s piece'" in files.calls[0]["q"]
