import os
from flask import Flask, jsonify

# Load .env only for local/dev. In prod, env vars come from the platform.
if os.getenv("APP_ENV", "development") != "production":
    from dotenv import load_dotenv
    load_dotenv(".env", override=True)


from .config import get_config
from .extensions import db, migrate, mail, cors
from .observability import init_logging, init_sentry
from .services import (
    EXTENSION_KEY,
    FeedbackNotifier,
    PasswordPolicy,
    RecordStore,
    Services,
    intake_from_config,
)

def create_app(config_object=None, *, store=None, intake=None, notifier=None, passwords=None):
    """
    Build the app. Collaborators default to the real implementations and can be
    swapped (e.g. fakes in tests) through the keyword arguments.
    """
    app = Flask(__name__, template_folder="templates", static_folder=None)

    # Config: clean, explicit, class-based
    app.config.from_object(config_object or get_config())

    # Enforce hard requirements at startup (not at import time)
    env_key = (os.getenv("APP_ENV", "development") or "development").lower()
    if env_key in ("staging", "production") and not os.getenv("DATABASE_URL"):
        raise RuntimeError("Missing required environment variable: DATABASE_URL")

    init_logging(app)
    init_sentry(app)

    # Init extensions
    db.init_app(app)
    migrate.init_app(app, db, directory="migrations")
    mail.init_app(app)
    cors.init_app(app, resources={r"/*": {"origins": app.config.get("CORS_ORIGINS", "*")}})

    if not (app.config.get("MAIL_USERNAME") and app.config.get("MAIL_PASSWORD")):
        app.logger.warning("EMAIL_USER/EMAIL_PASS missing; feedback notifications are disabled")

    app.extensions[EXTENSION_KEY] = Services(
        store=store or RecordStore(),
        intake=intake or intake_from_config(app.config),
        notifier=notifier or FeedbackNotifier(),
        passwords=passwords or PasswordPolicy(app.config.get("PASSWORD_POLICY", "hash")),
    )

    from .blueprints.api import bp as api_bp
    from .blueprints.uploads import bp as uploads_bp

    app.register_blueprint(api_bp)          # "/api"
    app.register_blueprint(uploads_bp)      # "/uploads"

    # Health
    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}, 200

    # Error handlers: every failure surfaces as {"error": ...}
    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "Not Found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"error": "Method Not Allowed"}), 405

    @app.errorhandler(500)
    def server_error(e):
        return jsonify({"error": "Internal Server Error"}), 500

    # CLI commands (ops-grade utilities)
    from .cli import register_cli
    register_cli(app)

    return app
