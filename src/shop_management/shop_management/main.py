from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .database.connection import DBConfig, DatabaseConnection
from .payroll.policy import PayrollPolicy
from .attendance.controller import register as register_attendance
from .employees.controller import register as register_employees
from .payroll.controller import register as register_payroll

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def _bootstrap_database(settings, db_config: dict) -> None:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(conn, schema_path=DATABASE_DIR / "schema.sql")
        logger.info("schema ready (tables=%d)", len(list_tables(conn)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(conn, seed_path=DATABASE_DIR / "seed.sql")
        logger.info("demo seed ready")


def create_app(container: Optional[Container] = None) -> Flask:
    """Flask app factory.

    Pass a prebuilt ``container`` to skip settings-driven DB wiring (tests).
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

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
        _bootstrap_database(settings, db_config)
        container = build_container(
            db_config=db_config,
            policy=PayrollPolicy.from_settings(settings),
            admin_chat_id=getattr(settings, "TELEGRAM_ADMIN_CHAT_ID", None),
        )

    register_employees(app, container)
    register_attendance(app, container)
    register_payroll(app, container)

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    return app
