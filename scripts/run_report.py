"""Run the fine report once, without going through HTTP.

Note: Dùng khi cần chạy tay (ví dụ cuối kỳ), cùng cấu hình với web app.
"""

from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from ensemble_submission.container import build_container
from ensemble_submission.core.exceptions import DomainError
from ensemble_submission.settings import get_settings_module


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format="%(levelname)s %(message)s")

    container = build_container(google_config=settings.GOOGLE_CONFIG, settings=settings)
    try:
        written = container.fine_report_service.run_report()
    except DomainError as e:
        raise SystemExit(f"Report failed: {e}")
    print(f"OK: {written} rows -> {container.fine_report_service.report_title}")


if __name__ == "__main__":
    main()
