import os
import json
import logging

from dotenv import load_dotenv

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)


def upload_questions(service, data_file=None):
    """
    Lädt eine lokale questions.json über den QuestionService in die MongoDB.
    - Array oder einzelnes Objekt
    - ungültige Einträge werden übersprungen und geloggt
    Gibt (angelegt, übersprungen) zurück.
    """
    # 1) JSON-Datei suchen
    if data_file is None:
        data_file = os.path.join(os.getcwd(), "data", "questions.json")
    if not os.path.exists(data_file):
        logging.error(f"Die Datei {data_file} wurde nicht gefunden.")
        return 0, 0

    # 2) JSON laden
    with open(data_file, "r", encoding="utf-8") as f:
        questions_data = json.load(f)

    # 3) Einzelnes Objekt wie ein Array mit einem Element behandeln
    if isinstance(questions_data, dict):
        questions_data = [questions_data]
    elif not isinstance(questions_data, list):
        logging.error("questions.json hat kein erwartetes Format (weder Array noch Objekt).")
        return 0, 0

    created, skipped = 0, 0
    for i, doc in enumerate(questions_data):
        if service.create(doc):
            created += 1
        else:
            logging.warning(f"Eintrag {i} übersprungen (ungültig).")
            skipped += 1

    logging.info(f"Erfolgreich hochgeladen: {created} Fragen, {skipped} übersprungen.")
    return created, skipped


if __name__ == "__main__":
    load_dotenv()

    from config import Config
    from reprova.database import Mongo
    from reprova.services import QuestionService

    mongo = Mongo(Config.MONGO_URI, Config.MONGO_DB)
    try:
        upload_questions(QuestionService(mongo))
    finally:
        mongo.close()
