"""Constants and defaults.

Note: Keep business constants here to avoid magic numbers spread across code.
"""

# Audio submissions owed per occurrence
FIXED_EXCUSE_WEIGHT = 1
GENERAL_EXCUSE_WEIGHT = 2
ABSENCE_WEIGHT = 2
# Every LATE_PAIR_SIZE lates owe LATE_PAIR_WEIGHT audio files; the remainder owes nothing yet.
LATE_PAIR_SIZE = 2
LATE_PAIR_WEIGHT = 2

# Won per occurrence
ABSENCE_FINE_RATE = 3_000
AUDIO_FINE_RATE = 3_000

DEFAULT_REPORT_TITLE = "벌금_정산"
REPORT_HEADER = (
    "이름",
    "고정결석계",
    "일반결석계",
    "결석",
    "지각",
    "필요 음원",
    "제출",
    "미제출",
    "벌금(원)",
)

DEFAULT_PIECE_CACHE_TTL_SECONDS = 5 * 60
PIECE_CONFIG_RANGE = "CONFIG!A:A"

# Attendance tab layout: A2:H, name in column B, label in column E
ATTENDANCE_RANGE_COLUMNS = "A2:H"
DEFAULT_NAME_COLUMN = 1
DEFAULT_CATEGORY_COLUMN = 4

# Uploaded files are named "{name}_{piece}_{timestamp}.mp3"
UPLOAD_NAME_SEPARATOR = "_"
