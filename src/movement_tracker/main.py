from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_utils import configure_logging
from .common.web import register_error_handlers
from .container import Container, build_container
from .movements.controller import register as register_movements
from .presence.controller import register as register_presence
from .reports.controller import register as register_reports
from .staff.controller import register as register_staff

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    if not getattr(settings, "TESTING", False):
        # pytest owns the root logger under test.
        configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        store_config = getattr(settings, "STORE_CONFIG")
        if not store_config.get("url"):
            raise RuntimeError("STORE_URL is not configured")
        container = build_container(
            store_config=store_config,
            refresh_interval=float(getattr(settings, "REFRESH_INTERVAL_SECONDS", 60)),
            utc_offset_hours=getattr(settings, "LOCAL_UTC_OFFSET_HOURS", None),
        )
        logger.info("settings=%s store=%s", settings_module, store_config["url"])

    app.extensions["movement_tracker"] = container
    register_error_handlers(app)

    register_staff(app, container)
    register_movements(app, container)
    register_presence(app, container)
    register_reports(app, container)

    if bool(getattr(settings, "AUTO_REFRESH", False)):
        container.data_service.refresh()
        container.refresher.start()

    return app
