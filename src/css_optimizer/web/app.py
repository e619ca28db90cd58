from __future__ import annotations

from flask import Flask

from css_optimizer.store.db import Database
from css_optimizer.store.migrations import run_migrations
from css_optimizer.store.repositories import SettingsRepository


def create_app(db: Database | None = None, config: dict | None = None) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(config or {})

    if db is None:
        db = Database(":memory:")
        db.connect()
        run_migrations(db)

    app.extensions["db"] = db
    app.extensions["settings_repo"] = SettingsRepository(db)

    from css_optimizer.web.routes.api import api_bp
    from css_optimizer.web.routes.settings import settings_bp

    app.register_blueprint(settings_bp)
    app.register_blueprint(api_bp, url_prefix="/api")

    return app
