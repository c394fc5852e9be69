from __future__ import annotations

import importlib

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_config import configure_logging, get_logger
from .container import build_container
from .timesheet.controller import register as register_timesheet

SETTING_NAMES = (
    "ATTENDANCE_BONUS",
    "NO_LEAVE_BONUS",
    "LATE_THRESHOLD_MINUTES",
    "CURRENCY_SYMBOL",
    "MAX_SESSIONS",
)


def create_app(overrides: dict | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["LOG_LEVEL"] = getattr(settings, "LOG_LEVEL", "INFO")
    for name in SETTING_NAMES:
        if hasattr(settings, name):
            app.config[name] = getattr(settings, name)
    app.config.update(overrides or {})

    logger = configure_logging(app.config["LOG_LEVEL"])
    get_logger("main").info("settings=%s debug=%s", settings_module, app.config["DEBUG"])
    logger.debug("payroll rules: %s", {name: app.config.get(name) for name in SETTING_NAMES})

    container = build_container(
        settings={name: app.config[name] for name in SETTING_NAMES if name in app.config},
        clock=app.config.get("CLOCK"),
    )
    app.extensions["timesheet_pay"] = container

    register_timesheet(app, container)
    return app
