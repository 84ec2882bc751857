# reprova/database.py
"""
MongoDB-Anbindung.
- genau ein MongoClient pro Prozess (Lock-geschützt)
- Zugriff auf benannte Collections der Applikations-DB
"""

from __future__ import annotations
import logging
import threading
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection

log = logging.getLogger(__name__)


class Mongo:
    _instance: Optional["Mongo"] = None
    _lock = threading.Lock()

    def __init__(self, uri: str, name: str = "reprova", client: Optional[MongoClient] = None):
        self.client = client if client is not None else MongoClient(uri)
        # Verbindung überprüfen, sonst kann der Server nichts ausliefern
        self.client.admin.command("ping")
        self.db = self.client[name]
        log.info("🗄️  MongoDB verbunden – DB: %s", name)

    @classmethod
    def get_instance(cls, uri: str, name: str = "reprova") -> "Mongo":
        """Liefert die prozessweite Instanz, erzeugt sie beim ersten Aufruf."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls(uri, name)
            return cls._instance

    def get_collection(self, name: str) -> Collection:
        return self.db[name]

    def close(self) -> None:
        self.client.close()
