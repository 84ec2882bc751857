import threading
from unittest.mock import patch

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from reprova import create_app
from reprova.database import Mongo


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    data = r.get_json()
    assert data["ok"] is True
    assert "time" in data


def test_metrics_endpoint(client):
    client.get("/health")
    r = client.get("/metrics")
    assert r.status_code == 200
    assert b"reprova_http_requests_total" in r.data


def test_missing_connection_string_stops_startup():
    with pytest.raises(SystemExit):
        create_app({"TESTING": True, "MONGO_URI": None})


@pytest.fixture
def fresh_mongo_singleton():
    Mongo._instance = None
    yield
    Mongo._instance = None


@patch("reprova.database.MongoClient")
def test_get_instance_creates_one_client(mock_client, fresh_mongo_singleton):
    results = []

    def worker():
        results.append(Mongo.get_instance("mongodb://example:27017", "reprova"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert mock_client.call_count == 1
    assert all(m is results[0] for m in results)
    mock_client.return_value.admin.command.assert_called_once_with("ping")


@patch("reprova.database.MongoClient")
def test_get_collection_uses_app_database(mock_client):
    mongo = Mongo("mongodb://example:27017", "reprova")
    mongo.get_collection("questions")
    mock_client.return_value.__getitem__.assert_called_once_with("reprova")
    mock_client.return_value.__getitem__.return_value.__getitem__.assert_called_once_with("questions")


@patch("reprova.database.MongoClient")
def test_init_db_with_uri(mock_client, fresh_mongo_singleton):
    app = create_app({"TESTING": True, "MONGO_URI": "mongodb://example:27017", "MONGO_DB": "x"})
    assert isinstance(app.config["MONGO"], Mongo)
    mock_client.assert_called_once_with("mongodb://example:27017")


@patch("reprova.database.MongoClient")
def test_failed_ping_stops_startup(mock_client, fresh_mongo_singleton):
    mock_client.return_value.admin.command.side_effect = ServerSelectionTimeoutError("down")

    with pytest.raises(SystemExit):
        create_app({"TESTING": True, "MONGO_URI": "mongodb://example:27017"})
    assert Mongo._instance is None
