# reprova/extensions.py
import os, sys, logging
from logging.handlers import RotatingFileHandler
from flask_cors import CORS
from pymongo.errors import PyMongoError

from .database import Mongo

cors = CORS()

def init_logging(level="DEBUG", log_file=None, max_bytes=5_000_000, backup_cnt=3):
    logger = logging.getLogger()
    if logger.handlers:
        return
    level = level.upper()
    logger.setLevel(level)

    fmt = "%(asctime)s %(levelname)-8s [%(filename)s:%(lineno)d] %(message)s"
    formatter = logging.Formatter(fmt)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    console.setLevel(level)

    if log_file is None:
        log_file = os.path.join(os.path.dirname(__file__), "..", "log.txt")
    file = RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=backup_cnt,
        encoding="utf-8",
    )
    file.setFormatter(formatter)
    file.setLevel(level)

    logger.addHandler(console)
    logger.addHandler(file)

def init_db(app):
    """Erzeuge die globale Mongo-Instanz in app.config['MONGO'] (nur einmal)."""
    if "MONGO" in app.config:
        return app.config["MONGO"]
    uri = app.config.get("MONGO_URI")
    if not uri:
        logging.getLogger(__name__).critical("❌ REPROVA_MONGO nicht gesetzt!")
        raise SystemExit("REPROVA_MONGO fehlt – Server stoppt!")
    try:
        app.config["MONGO"] = Mongo.get_instance(uri, app.config.get("MONGO_DB", "reprova"))
    except PyMongoError as e:
        logging.getLogger(__name__).critical(f"❌ MongoDB nicht erreichbar: {e}")
        raise SystemExit("MongoDB nicht erreichbar – Server stoppt!")
    return app.config["MONGO"]
