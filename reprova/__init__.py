# reprova/__init__.py
import logging
from flask import Flask, request

from config import Config
from .extensions import cors, init_logging, init_db
from .metrics import init_metrics
from .services import QuestionService

# Blueprints
from .blueprints.questions import create_questions_bp


def create_app(test_config: dict | None = None, mongo=None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    init_logging(
        app.config["LOG_LEVEL"],
        app.config.get("LOG_FILE"),
        app.config["LOG_MAX_BYTES"],
        app.config["LOG_BACKUP_COUNT"],
    )
    log = logging.getLogger(__name__)

    # --- Token ---
    token = app.config.get("REPROVA_TOKEN")
    if not token:
        log.warning("⚠️ REPROVA_TOKEN nicht gesetzt – Schreibzugriff ist gesperrt!")
        token = None
    else:
        log.info("🔑 REPROVA_TOKEN length=%d", len(token))

    # --- CORS ---
    origins_env = (app.config.get("CORS_ORIGINS") or "").strip()
    if origins_env == "*":
        cors.init_app(app, origins="*", allow_headers=["Content-Type"])
        log.info("CORS: origins='*'")
    else:
        origins = [o.strip() for o in origins_env.split(",") if o.strip()]
        if not origins:
            origins = ["http://localhost:8080", "http://127.0.0.1:8080"]
        cors.init_app(app, origins=origins, allow_headers=["Content-Type"])
        log.info("CORS: origins=%s", origins)

    # --- Mongo verbinden (oder übergebene Instanz nutzen) ---
    if mongo is not None:
        app.config["MONGO"] = mongo
    mongo = init_db(app)

    # --- Prometheus-Metriken ---
    init_metrics(app)

    # --- Blueprints registrieren ---
    app.register_blueprint(create_questions_bp(QuestionService(mongo), token))

    # --- Request/Response Logging ---
    @app.before_request
    def _log_req():
        logging.getLogger("req").info("⇢ %s %s", request.method, request.path)

    @app.after_request
    def _log_resp(resp):
        logging.getLogger("req").info("⇠ %s (%s %s)", resp.status, request.method, request.path)
        return resp

    # --- Health ---
    @app.get("/health")
    def health():
        from .utils import _now
        return {"ok": True, "time": _now()}

    return app
