import os
import sys
from unittest.mock import MagicMock

import pytest
from flask import Flask

# Projektwurzel zu sys.path hinzufügen, damit `reprova` und `config` importierbar sind,
# auch wenn pytest das Working Directory anders setzt.
ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from reprova import create_app
from reprova.blueprints.questions import create_questions_bp
from reprova.services import QuestionService

TOKEN = "s3cret"


@pytest.fixture
def collection():
    return MagicMock()


@pytest.fixture
def mongo(collection):
    """Mongo-Ersatz: jede Collection ist dieselbe MagicMock."""
    m = MagicMock()
    m.get_collection.return_value = collection
    return m


@pytest.fixture
def app(mongo, tmp_path):
    """App mit injizierter Mongo-Instanz, keine echte DB nötig."""
    app = create_app(
        {"TESTING": True, "REPROVA_TOKEN": TOKEN, "LOG_FILE": str(tmp_path / "log.txt")},
        mongo=mongo,
    )
    return app


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture
def service():
    return MagicMock(spec=QuestionService)


@pytest.fixture
def controller_client(service):
    """Nur der Questions-Blueprint mit gemocktem Service."""
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.register_blueprint(create_questions_bp(service, TOKEN))
    with app.test_client() as c:
        yield c
