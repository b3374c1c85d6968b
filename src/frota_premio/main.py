from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .bonus.controller import register as register_bonus
from .container import Container, build_container
from .corrections.controller import register as register_corrections
from .database.bootstrap import apply_schema, ensure_admin_user, list_tables
from .drivers.controller import register as register_drivers
from .fuel.controller import register as register_fuel
from .imports.controller import register as register_imports
from .logbook.controller import register as register_logbook
from .settings import get_settings_module
from .stoppages.controller import register as register_stoppages
from .support.controller import register as register_support
from .trips.controller import register as register_trips

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or "INFO").upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["UPLOAD_FOLDER"] = getattr(settings, "UPLOAD_FOLDER")
    app.config["META_FIXA"] = float(getattr(settings, "META_FIXA"))
    app.config["MAX_CONTENT_LENGTH"] = 16 * 1024 * 1024

    if app.config["DEBUG"]:
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_CREATE_ADMIN", False)):
            ensure_admin_user(
                db_config,
                username=getattr(settings, "ADMIN_USERNAME"),
                password=getattr(settings, "ADMIN_PASSWORD"),
                email=getattr(settings, "ADMIN_EMAIL"),
            )
        container = build_container(
            db_config=db_config,
            upload_folder=app.config["UPLOAD_FOLDER"],
            goal=app.config["META_FIXA"],
        )

    app.extensions["frota_premio.container"] = container

    register_drivers(app, container)
    register_bonus(app, container)
    register_trips(app, container)
    register_corrections(app, container)
    register_stoppages(app, container)
    register_fuel(app, container)
    register_imports(app, container)
    register_logbook(app, container)
    register_support(app, container)

    return app
