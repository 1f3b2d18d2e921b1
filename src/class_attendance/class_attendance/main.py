from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.web import register_error_handlers
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .locations.controller import register as register_locations
from .reports.controller import register as register_reports
from .schedules.controller import register as register_schedules

logger = logging.getLogger("class_attendance")

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            tolerance_minutes=int(getattr(settings, "ATTENDANCE_TOLERANCE_MINUTES", 0)),
            duplicate_policy=getattr(settings, "ATTENDANCE_DUPLICATE_POLICY", "retryable"),
            require_enrollment=bool(getattr(settings, "ATTENDANCE_REQUIRE_ENROLLMENT", False)),
            history_per_page=int(getattr(settings, "HISTORY_PER_PAGE", 15)),
        )

    register_error_handlers(app)
    register_attendance(app, container)
    register_schedules(app, container)
    register_locations(app, container)
    register_reports(app, container)

    return app
