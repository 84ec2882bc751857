import os
import sys
import time
import logging

import requests
from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.errors import PyMongoError

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")


def check_database_connection(uri):
    """Prüft, ob die Datenbank erreichbar ist."""
    try:
        logging.info("Überprüfe die Verbindung zur Datenbank...")
        with MongoClient(uri, serverSelectionTimeoutMS=5000) as client:
            client.admin.command("ping")
        logging.info("✅ Verbindung zur Datenbank erfolgreich.")
        return True
    except PyMongoError as e:
        logging.error(f"❌ Verbindung zur Datenbank fehlgeschlagen: {e}")
        return False


def check_api_endpoints(base_url):
    """Prüft die Erreichbarkeit der API-Endpunkte."""
    endpoints = ["/health", "/api/questions"]

    success = True
    for path in endpoints:
        try:
            logging.info(f"Teste API-Endpunkt: {base_url}{path}")
            response = requests.get(f"{base_url}{path}", timeout=10)
            if response.status_code == 200:
                logging.info(f"✅ API {path} ist erreichbar. Status: {response.status_code}")
            else:
                logging.error(f"❌ API {path} nicht erreichbar. Status: {response.status_code}")
                success = False
        except requests.RequestException as e:
            logging.error(f"❌ Fehler beim Testen von {path}: {e}")
            success = False

    return success


if __name__ == "__main__":
    load_dotenv()
    logging.info("Starte Start-Up Checks...")

    db_ok = check_database_connection(os.environ.get("REPROVA_MONGO"))

    logging.info("Warte, bis der Server startet (5 Sekunden)...")
    time.sleep(5)
    base_url = os.environ.get("REPROVA_URL", f"http://127.0.0.1:{os.environ.get('PORT', 8080)}")
    api_ok = check_api_endpoints(base_url)

    if db_ok and api_ok:
        logging.info("✅ Alle Checks erfolgreich. Die Anwendung ist bereit.")
    else:
        logging.error("❌ Ein oder mehrere Checks sind fehlgeschlagen.")
        sys.exit(1)
