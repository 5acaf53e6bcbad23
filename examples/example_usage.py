"""Ví dụ: dùng service layer (không qua Flask).

Prints the report rows without writing the report tab.
"""

import importlib

from dotenv import load_dotenv

from ensemble_submission.container import build_container
from ensemble_submission.settings import get_settings_module


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(google_config=settings.GOOGLE_CONFIG, settings=settings)
    for row in container.fine_report_service.build_report().rows:
        print(row.as_cells())
    print(container.fine_report_service.requirements_for("홍길동"))


if __name__ == "__main__":
    main()
