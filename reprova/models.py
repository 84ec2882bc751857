# reprova/models.py
# -*- coding: utf-8 -*-
"""
Question-Entity + Umwandlung Wire-JSON <-> Entity <-> Mongo-Dokument.
- `id` kommt immer aus der DB (ObjectId als String)
- `pvt` fehlt → Frage ist privat
- alle anderen Felder werden unverändert durchgereicht
"""

from __future__ import annotations
import json
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from bson.objectid import ObjectId


class InvalidQuestion(ValueError):
    """Payload ist kein gültiges Question-Objekt."""


@dataclass
class Question:
    id: Optional[str] = None
    pvt: bool = True
    content: dict = field(default_factory=dict)

    # ───────── Wire → Entity ─────────────────────────

    @classmethod
    def from_json(cls, payload: Union[str, bytes, dict]) -> "Question":
        if isinstance(payload, (str, bytes)):
            try:
                payload = json.loads(payload)
            except (ValueError, RecursionError) as e:
                raise InvalidQuestion(f"kein JSON: {e}") from e

        if not isinstance(payload, dict):
            raise InvalidQuestion("Question muss ein JSON-Objekt sein")

        content = {k: v for k, v in payload.items() if k not in ("id", "_id", "pvt")}
        pvt = payload.get("pvt", True)
        if not isinstance(pvt, bool):
            raise InvalidQuestion("pvt muss true oder false sein")

        return cls(pvt=pvt, content=content)

    # ───────── Entity ↔ Dokument ──────────────────────

    @classmethod
    def from_document(cls, doc: dict) -> "Question":
        content = {k: v for k, v in doc.items() if k not in ("_id", "pvt")}
        return cls(
            id=str(doc["_id"]) if doc.get("_id") is not None else None,
            pvt=bool(doc.get("pvt", True)),
            content=content,
        )

    def to_document(self) -> dict:
        doc = dict(self.content)
        doc["pvt"] = self.pvt
        if self.id is not None:
            doc["_id"] = ObjectId(self.id)
        return doc

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "pvt": self.pvt, **self.content}
