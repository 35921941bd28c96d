"""Flask application package."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dotenv import load_dotenv
from flask import Flask


def create_app(config_overrides: Mapping[str, Any] | None = None) -> Flask:
    """Application factory.

    Args:
        config_overrides: Values applied on top of the environment config
            (used by tests).

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from lotto_checker.check_api import init_check_client
    from lotto_checker.config import get_config
    from lotto_checker.error_handlers import register_error_handlers
    from lotto_checker.logging_config import configure_logging
    from lotto_checker.routes.check import check_bp
    from lotto_checker.routes.health import health_bp
    from lotto_checker.routes.web import web_bp

    app = Flask(__name__)
    app.config.from_object(get_config())
    if config_overrides:
        app.config.update(config_overrides)

    configure_logging(app)
    init_check_client(app)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(web_bp)
    app.register_blueprint(check_bp, url_prefix="/api")

    return app
