# /app/__init__.py
import os
import logging
from flask import Flask, jsonify
from dotenv import load_dotenv
from config import ProductionConfig
from pricing_tracker.config_service import ConfigManager
from app.routes import detect_file_bp, seasons_bp


load_dotenv()


def init_sentry():
    """Initialize Sentry error tracking if SENTRY_DSN is configured."""
    sentry_dsn = os.getenv("SENTRY_DSN")
    if not sentry_dsn:
        return

    try:
        import sentry_sdk
        from sentry_sdk.integrations.flask import FlaskIntegration
        from sentry_sdk.integrations.logging import LoggingIntegration

        # Determine environment from ENV variable or default to development
        environment = os.getenv("FLASK_ENV") or os.getenv("ENV") or "development"

        sentry_sdk.init(
            dsn=sentry_dsn,
            environment=environment,
            integrations=[
                FlaskIntegration(),
                LoggingIntegration(
                    level=logging.INFO,       # Capture info and above as breadcrumbs
                    event_level=logging.ERROR  # Send errors and above as events
                ),
            ],
            traces_sample_rate=float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.1")),
            attach_stacktrace=True,
            debug=os.getenv("SENTRY_DEBUG", "0") == "1",
        )
        logging.info(f"Sentry initialized for environment: {environment}")
    except ImportError:
        logging.warning("sentry-sdk not installed, error tracking disabled")
    except Exception as e:
        logging.error(f"Failed to initialize Sentry: {e}")


def create_app(config_name: str = "", config_manager: ConfigManager | None = None):
    # Initialize Sentry before creating app to catch initialization errors
    init_sentry()

    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(ProductionConfig)

    # Load base config (DevelopmentConfig / TestingConfig / ProductionConfig)
    if config_name:
        app.config.from_object(f"config.{config_name}Config")

    # Merge JSON config
    config_manager = config_manager or ConfigManager()
    app.config.update(config_manager.config)
    app.extensions["config_manager"] = config_manager

    # Logging (basic)
    logging.basicConfig(
        level=logging.DEBUG if app.config.get("DEBUG") else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,  # prevent duplicate handlers in some reload scenarios
    )
    logging.debug("config loaded from %s", config_manager.resolved_path)

    @app.errorhandler(413)
    def too_large(_err):
        return jsonify({"success": False, "error": "File is too large"}), 413

    @app.get("/api/health")
    def health():
        return jsonify({"ok": True})

    # Blueprints
    app.register_blueprint(detect_file_bp)
    app.register_blueprint(seasons_bp)

    return app
