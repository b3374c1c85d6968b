"""Apply schema.sql and create the first administrator.

Usage: APP_ENV=production python scripts/init_db.py
"""
from __future__ import annotations

import importlib
import logging

from frota_premio.database.bootstrap import apply_schema, ensure_admin_user, list_tables
from frota_premio.settings import get_settings_module


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config)
    username = getattr(settings, "ADMIN_USERNAME", None)
    if username:
        ensure_admin_user(
            db_config,
            username=username,
            password=settings.ADMIN_PASSWORD,
            email=settings.ADMIN_EMAIL,
        )

    tables = list_tables(db_config)
    logging.info(
        "schema ok -> %s@%s:%s/%s (tables=%d)",
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
        len(tables),
    )


if __name__ == "__main__":
    main()
