import os

from ..core import constants


def _env_list(key: str) -> list[str]:
    raw = os.getenv(key, "")
    return [p.strip() for p in raw.split(",") if p.strip()]


GOOGLE_CONFIG = {
    "sheet_id": os.getenv("GOOGLE_SHEETS_SHEET_ID", ""),
    "parent_folder_id": os.getenv("GOOGLE_DRIVE_PARENT_FOLDER_ID", ""),
    # Either name works for the service account
    "client_email": os.getenv("GOOGLE_CLIENT_EMAIL") or os.getenv("GOOGLE_SHEETS_CLIENT_EMAIL"),
    "private_key": os.getenv("GOOGLE_PRIVATE_KEY") or os.getenv("GOOGLE_SHEETS_PRIVATE_KEY"),
    "client_id": os.getenv("CLIENT_ID"),
    "client_secret": os.getenv("CLIENT_SECRET"),
    "refresh_token": os.getenv("REFRESH_TOKEN"),
}

REPORT_SECRET = os.getenv("REPORT_SECRET")

# Empty -> piece names are read from the CONFIG tab
PIECES = _env_list("PIECES")
PIECE_CACHE_TTL_SECONDS = int(os.getenv("PIECE_CACHE_TTL_SECONDS", str(constants.DEFAULT_PIECE_CACHE_TTL_SECONDS)))

REPORT_TITLE = os.getenv("REPORT_TITLE", constants.DEFAULT_REPORT_TITLE)
REPORT_SORT_BY_NAME = bool(int(os.getenv("REPORT_SORT_BY_NAME", "0")))
REQUIREMENT_SCOPE = os.getenv("REQUIREMENT_SCOPE", "piece")

ABSENCE_FINE_RATE = int(os.getenv("ABSENCE_FINE_RATE", str(constants.ABSENCE_FINE_RATE)))
AUDIO_FINE_RATE = int(os.getenv("AUDIO_FINE_RATE", str(constants.AUDIO_FINE_RATE)))

NAME_COLUMN = int(os.getenv("NAME_COLUMN", str(constants.DEFAULT_NAME_COLUMN)))
CATEGORY_COLUMN = int(os.getenv("CATEGORY_COLUMN", str(constants.DEFAULT_CATEGORY_COLUMN)))

FETCH_WORKERS = int(os.getenv("FETCH_WORKERS", "1"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
