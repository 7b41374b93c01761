from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import build_container
from .employees.controller import register as register_employees

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)


def create_app(*, data_file: Optional[str] = None) -> Flask:
    """Build the app and restore the saved registry.

    ``data_file`` overrides the configured DATA_FILE (tests pass a tmp path).
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["HOST"] = getattr(settings, "HOST")
    app.config["PORT"] = int(getattr(settings, "PORT"))
    app.config["DATA_FILE"] = getattr(settings, "DATA_FILE") if data_file is None else data_file

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("settings=%s data_file=%s", settings_module, app.config["DATA_FILE"] or "<memory>")

    container = build_container(data_file=app.config["DATA_FILE"])
    status = container.employee_service.load()
    logger.info("startup load: %s", status.message)

    app.extensions["payroll_desk"] = container
    register_employees(app, container)

    return app
