"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from practice_api.app.api.routes import api_bp
from practice_api.config import ServerSettings


def create_app(settings: Optional[ServerSettings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or ServerSettings()
    app = Flask(__name__)

    CORS(
        app,
        resources={r"/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp)
    return app
