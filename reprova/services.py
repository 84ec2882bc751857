# reprova/services.py
"""
CRUD auf der `questions`-Collection.
Keine Autorisierung hier, das macht der Controller.
"""

from __future__ import annotations
import logging
from typing import Optional, Union

from bson.objectid import ObjectId, InvalidId
from pymongo.collection import Collection

from .models import Question, InvalidQuestion

log = logging.getLogger(__name__)

Payload = Union[str, bytes, dict]


def _object_id(qid) -> Optional[ObjectId]:
    # ObjectId(None) würde eine neue ID erzeugen
    if not qid:
        return None
    try:
        return ObjectId(qid)
    except (InvalidId, TypeError):
        return None


class QuestionService:
    COLLECTION = "questions"

    def __init__(self, mongo):
        self.mongo = mongo

    @property
    def collection(self) -> Collection:
        return self.mongo.get_collection(self.COLLECTION)

    def get_by_id(self, qid: str) -> Optional[Question]:
        oid = _object_id(qid)
        if oid is None:
            return None
        doc = self.collection.find_one({"_id": oid})
        return Question.from_document(doc) if doc else None

    def get_all(self, include_private: bool, theme: Optional[str] = None) -> list[Question]:
        """Alle Fragen; ohne `include_private` nur die öffentlichen."""
        q = {}
        if not include_private:
            q["pvt"] = False
        if theme:
            q["theme"] = theme
        return [Question.from_document(d) for d in self.collection.find(q)]

    def create(self, payload: Payload) -> Optional[str]:
        """Legt eine neue Frage an, die DB vergibt die ID. Gibt die ID zurück."""
        try:
            question = Question.from_json(payload)
        except InvalidQuestion as e:
            log.error("create: ungültige Question: %s", e)
            return None

        res = self.collection.insert_one(question.to_document())
        if res.inserted_id is None:
            return None
        log.info("create: Question %s angelegt", res.inserted_id)
        return str(res.inserted_id)

    def update(self, qid: Optional[str], payload: Payload) -> bool:
        """Ersetzt den Inhalt der Frage `qid` komplett, die ID bleibt."""
        oid = _object_id(qid)
        if oid is None:
            log.error("update: ungültige ID %r", qid)
            return False
        try:
            question = Question.from_json(payload)
        except InvalidQuestion as e:
            log.error("update: ungültige Question: %s", e)
            return False

        question.id = str(oid)
        res = self.collection.replace_one({"_id": oid}, question.to_document())
        return res.matched_count == 1

    def delete_by_id(self, qid: Optional[str]) -> bool:
        oid = _object_id(qid)
        if oid is None:
            return False
        res = self.collection.delete_one({"_id": oid})
        return res.deleted_count == 1
