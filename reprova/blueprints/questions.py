# reprova/blueprints/questions.py
import logging
from dataclasses import dataclass
from typing import Optional, Union

from flask import Blueprint, request, jsonify
from bson.errors import BSONError
from pymongo.errors import PyMongoError

from ..services import QuestionService

log = logging.getLogger(__name__)

# Feste Antworten (JSON-Strings)
OK           = "Ok"
INVALID      = "Invalid request"
UNAUTHORIZED = "Unauthorized"

# bson lehnt z.B. Ints > 8 Byte, NUL in Keys oder zu tiefe Verschachtelung ab
STORAGE_ERRORS = (PyMongoError, BSONError, OverflowError, RecursionError)


# ───────── GET-Varianten ──────────────────────────

@dataclass(frozen=True)
class ById:
    id: str
    auth: bool


@dataclass(frozen=True)
class All:
    auth: bool
    theme: Optional[str] = None


GetRequest = Union[ById, All]


def parse_get(args, auth: bool) -> GetRequest:
    qid = args.get("id")
    if qid is None:
        return All(auth=auth, theme=args.get("theme") or None)
    return ById(id=qid, auth=auth)


def get_by_id(service: QuestionService, req: ById):
    log.info("Fetching question %s", req.id)
    question = service.get_by_id(req.id)
    if question is None:
        log.error("Invalid request: Question %s nicht gefunden", req.id)
        return INVALID, 400
    if question.pvt and not req.auth:
        log.info("Unauthorized: Question %s ist privat", req.id)
        return UNAUTHORIZED, 403
    return question.to_dict(), 200


def get_all(service: QuestionService, req: All):
    log.info("Fetching questions (auth=%s, theme=%s)", req.auth, req.theme)
    questions = service.get_all(req.auth, theme=req.theme)
    return [q.to_dict() for q in questions], 200


def dispatch_get(service: QuestionService, req: GetRequest):
    if isinstance(req, ById):
        return get_by_id(service, req)
    return get_all(service, req)


# ───────── Blueprint ──────────────────────────────

def create_questions_bp(service: QuestionService, token: Optional[str]) -> Blueprint:
    """
    Installiert /api/questions:
    - GET    ?id=&token=&theme=
    - POST   ?token=        (Body: Question)
    - PUT    ?id=&token=    (Body: Question)
    - DELETE ?id=&token=
    Schreibzugriffe nur mit gültigem Token.
    """
    bp = Blueprint("questions", __name__, url_prefix="/api/questions")

    def authorized(given: Optional[str]) -> bool:
        return token is not None and given == token

    def respond(body, status: int):
        return jsonify(body), status

    @bp.get("")
    def get_questions():
        log.info("Received questions get")
        req = parse_get(request.args, authorized(request.args.get("token")))
        return respond(*dispatch_get(service, req))

    @bp.post("")
    def post_question():
        body = request.get_data(as_text=True)
        log.info("Received questions post: %s", body)

        if not authorized(request.args.get("token")):
            log.info("Unauthorized token bei POST")
            return respond(UNAUTHORIZED, 403)

        try:
            qid = service.create(body)
        except STORAGE_ERRORS as e:
            log.error("Invalid request payload! %s", e)
            return respond(INVALID, 400)

        log.info("Done. Responding...")
        return respond(OK, 200) if qid else respond(INVALID, 400)

    @bp.put("")
    def put_question():
        body = request.get_data(as_text=True)
        qid = request.args.get("id")
        log.info("Received questions put %s: %s", qid, body)

        if not authorized(request.args.get("token")):
            log.info("Unauthorized token bei PUT")
            return respond(UNAUTHORIZED, 403)

        if qid is None:
            log.error("Invalid request: id fehlt")
            return respond(INVALID, 400)

        try:
            success = service.update(qid, body)
        except STORAGE_ERRORS as e:
            log.error("Invalid request payload! %s", e)
            return respond(INVALID, 400)

        log.info("Done. Responding...")
        return respond(OK, 200) if success else respond(INVALID, 400)

    @bp.delete("")
    def delete_question():
        qid = request.args.get("id")
        log.info("Received questions delete %s", qid)

        if not authorized(request.args.get("token")):
            log.info("Unauthorized token bei DELETE")
            return respond(UNAUTHORIZED, 403)

        if qid is None:
            log.error("Invalid request: id fehlt")
            return respond(INVALID, 400)

        try:
            success = service.delete_by_id(qid)
        except STORAGE_ERRORS as e:
            log.error("Löschen von %s fehlgeschlagen: %s", qid, e)
            return respond(INVALID, 400)

        log.info("Done. Responding...")
        return respond(OK, 200) if success else respond(INVALID, 400)

    log.info("Setup /api/questions.")
    return bp
