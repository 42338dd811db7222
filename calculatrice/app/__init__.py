"""Application factory and app-wide configuration."""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from calculatrice.app.api.routes import api_bp
from calculatrice.config import Settings, get_settings
from calculatrice.core.store import CalculatorStore


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance with a fresh calculator collection."""
    settings = settings or get_settings()

    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("calculatrice").setLevel(settings.log_level.upper())

    app = Flask(__name__)
    app.extensions["calculator_store"] = CalculatorStore(settings=settings)

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
