"""
Flask application factory for Resume Intake.
Sets up configuration, storage and database clients, CORS, logging, and
registers blueprints.
"""

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS
from dotenv import load_dotenv

from resume_intake.config import AppConfig
from resume_intake.extensions import init_services
from resume_intake.services.object_store import ObjectStoreClient
from resume_intake.services.resume_management import ResumeRepository

logger = logging.getLogger(__name__)


def _configure_logging(app: Flask, log_path: str) -> None:
    """Info level logging to stderr and a rotating file, unless already configured."""
    root = logging.getLogger()
    if not root.handlers:
        root.setLevel(logging.INFO)
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)s [%(name)s] %(message)s"
        )
        sh = logging.StreamHandler()
        sh.setLevel(logging.INFO)
        sh.setFormatter(formatter)
        root.addHandler(sh)
        try:
            fh = RotatingFileHandler(log_path, maxBytes=5 * 1024 * 1024, backupCount=2)
        except OSError as e:
            logger.warning(f"File logging disabled, cannot open {log_path}: {e}")
        else:
            fh.setLevel(logging.INFO)
            fh.setFormatter(formatter)
            root.addHandler(fh)

    app.logger.setLevel(logging.INFO)


def create_app(
    config: Optional[AppConfig] = None,
    object_store: Optional[ObjectStoreClient] = None,
    repository: Optional[ResumeRepository] = None,
) -> Flask:
    """Create and configure the Flask application.

    Raises:
        ConfigError: If required configuration is missing
        ObjectStoreInitError: If the storage client cannot be initialized
    """
    # Load .env for development convenience
    load_dotenv()

    if config is None:
        config = AppConfig()
    config.validate()

    app = Flask(__name__)
    app.config.setdefault("SECRET_KEY", config.secret_key)
    app.config["RESUME_INTAKE"] = config

    _configure_logging(app, config.log_path)

    init_services(app, config, object_store=object_store, repository=repository)

    CORS(
        app,
        resources={r"/api/*": {"origins": config.cors_origins}},
        supports_credentials=True,
    )

    from resume_intake.blueprints.api import api_bp

    app.register_blueprint(api_bp)

    @app.get("/healthz")
    def healthz():
        return jsonify({"status": "ok"})

    logger.info(f"Resume intake configured: {config.to_dict()}")
    return app
