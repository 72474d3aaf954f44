"""Create the schema (and optionally load demo data) for the configured database.

Usage: APP_ENV=development python scripts/setup_db.py [--seed]
"""
from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.shop_management.shop_management.database.bootstrap import apply_schema, apply_seed_sql, list_tables
from src.shop_management.shop_management.database.connection import DBConfig, DatabaseConnection

logger = logging.getLogger("setup_db")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--seed", action="store_true", help="also load database/seed.sql")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s [%(name)s] %(message)s")

    config = DBConfig.from_mapping(importlib.import_module(get_settings_module()).DB_CONFIG)
    conn = DatabaseConnection.get_instance(config)

    apply_schema(conn, schema_path=REPO_ROOT / "database" / "schema.sql")
    if args.seed:
        apply_seed_sql(conn, seed_path=REPO_ROOT / "database" / "seed.sql")

    logger.info(
        "%s@%s:%s/%s ready (tables=%d)",
        config.user,
        config.host,
        config.port,
        config.database,
        len(list_tables(conn)),
    )


if __name__ == "__main__":
    main()
