from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from .container import build_container
from .fines.controller import register as register_fines
from .settings import get_settings_module

LOGGER = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    google_config = getattr(settings, "GOOGLE_CONFIG")
    LOGGER.info(
        "[ensemble-submission] settings=%s sheet=%s folder=%s",
        settings_module,
        google_config.get("sheet_id") or "-",
        google_config.get("parent_folder_id") or "-",
    )

    container = build_container(google_config=google_config, settings=settings)
    register_fines(app, container)

    return app
