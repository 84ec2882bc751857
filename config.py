from os import environ


class Config:
    # ➜ Verbindungs-String ist Pflicht, ohne ihn startet der Server nicht.
    MONGO_URI = environ.get("REPROVA_MONGO")
    MONGO_DB  = environ.get("REPROVA_DB", "reprova")

    # Gemeinsames Secret für Schreibzugriff + private Fragen
    REPROVA_TOKEN = environ.get("REPROVA_TOKEN")

    # CORS (optional, Komma-getrennt)
    CORS_ORIGINS = environ.get("CORS_ORIGINS", "*")

    # Logging
    LOG_LEVEL        = environ.get("LOG_LEVEL", "DEBUG")
    LOG_FILE         = environ.get("LOG_FILE")
    LOG_MAX_BYTES    = int(environ.get("LOG_MAX_BYTES", 5_000_000))  # ~5 MB
    LOG_BACKUP_COUNT = int(environ.get("LOG_BACKUP_COUNT", 3))
