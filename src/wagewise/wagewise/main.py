from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, session

from config import get_settings_module

from .common.datetime_utils import format_date_display
from .common.formatting import format_inr, format_number
from .common.pending import get_pending
from .common.status import current_status
from .container import build_container, build_store
from .core.constants import DEFAULT_NAME_HISTORY_LIMIT, DEFAULT_STATUS_MESSAGE_SECONDS
from .daily_logs.controller import register as register_daily_logs
from .database.bootstrap import apply_schema, list_tables
from .database.store import KeyValueStore
from .employees.controller import register as register_employees
from .ledger.controller import register as register_ledger
from .products.controller import register as register_products

REPO_ROOT = Path(__file__).resolve().parents[3]


def create_app(*, store: Optional[KeyValueStore] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["STATUS_MESSAGE_SECONDS"] = int(getattr(settings, "STATUS_MESSAGE_SECONDS", DEFAULT_STATUS_MESSAGE_SECONDS))

    backend = str(getattr(settings, "STORAGE_BACKEND", "json"))
    db_config = getattr(settings, "DB_CONFIG", None)

    if store is None:
        if backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            app.logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        store = build_store(backend, data_file=getattr(settings, "DATA_FILE", None), db_config=db_config)

    if app.config["DEBUG"]:
        app.logger.info("[wagewise] settings=%s storage=%s", settings_module, type(store).__name__)

    container = build_container(
        store=store,
        name_history_limit=int(getattr(settings, "NAME_HISTORY_LIMIT", DEFAULT_NAME_HISTORY_LIMIT)),
    )
    app.extensions["wagewise"] = container

    @app.context_processor
    def inject_view_helpers():
        return {
            "status_message": current_status(session),
            "pending_action": get_pending(session),
            "format_inr": format_inr,
            "format_number": format_number,
            "format_date": format_date_display,
        }

    register_daily_logs(app, container)
    register_products(app, container)
    register_ledger(app, container)
    register_employees(app, container)

    return app
