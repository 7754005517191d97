"""Tests for the customer endpoints."""
import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from main import create_app


def test_health_ok(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["ok"] is True


def test_list_customers_empty(client):
    r = client.get("/customers")
    assert r.status_code == 200
    assert r.json() == []


def test_create_then_fetch_returns_same_customer(client, customer):
    uuid.UUID(customer["id"])
    assert customer["fname"] == "Ada"
    assert customer["lname"] == "Lovelace"
    assert customer["email"] == "ada@example.com"

    r = client.get(f"/customer/{customer['id']}")
    assert r.status_code == 200
    assert r.json() == customer


def test_create_ignores_client_id(client):
    supplied = str(uuid.uuid4())
    r = client.post("/customers", json={"id": supplied, "fname": "Grace", "email": "grace@example.com"})
    assert r.status_code == 200
    body = r.json()
    assert body["id"] != supplied
    assert body["lname"] is None

    assert client.get(f"/customer/{supplied}").status_code == 404
    assert client.get(f"/customer/{body['id']}").status_code == 200


def test_list_contains_created_customers(client):
    created = set()
    for i in range(3):
        r = client.post("/customers", json={"fname": f"User{i}", "lname": "Test", "email": f"user{i}@example.com"})
        assert r.status_code == 200
        created.add(r.json()["id"])

    r = client.get("/customers")
    assert r.status_code == 200
    listed = {c["id"] for c in r.json()}
    assert created <= listed


def test_duplicate_email_is_rejected(client, customer):
    r = client.post("/customers", json={"fname": "Other", "email": customer["email"]})
    assert r.status_code == 409
    assert "email" in r.json()["detail"]

    emails = [c["email"] for c in client.get("/customers").json()]
    assert emails.count(customer["email"]) == 1


def test_unknown_customer_is_not_found(client):
    r = client.get(f"/customer/{uuid.uuid4()}")
    assert r.status_code == 404
    assert r.json()["detail"] == "customer not found"


def test_malformed_id_is_client_error(client):
    r = client.get("/customer/not-a-uuid")
    assert r.status_code == 422


def test_malformed_json_is_client_error(client):
    r = client.post("/customers", content=b"{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 422


def test_missing_required_field_is_client_error(client):
    r = client.post("/customers", json={"lname": "NoFirst", "email": "nofirst@example.com"})
    assert r.status_code == 422


def test_database_error_becomes_500_and_server_keeps_serving(client, monkeypatch):
    from app.endpoints import customer as endpoint

    def boom(db):
        raise OperationalError("SELECT 1", {}, Exception("connection lost"))

    monkeypatch.setattr(endpoint.crud, "list_customers", boom)
    r = client.get("/customers")
    assert r.status_code == 500
    assert r.json()["detail"] == "database error"

    monkeypatch.undo()
    assert client.get("/customers").status_code == 200


def test_cors_headers_allow_any_origin_with_credentials(client):
    r = client.get("/customers", headers={"Origin": "http://example.org"})
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] in ("*", "http://example.org")
    assert r.headers["access-control-allow-credentials"] == "true"


def test_cors_preflight_limits_methods(client):
    r = client.options(
        "/customers",
        headers={"Origin": "http://example.org", "Access-Control-Request-Method": "POST"},
    )
    assert r.status_code == 200
    allowed = r.headers["access-control-allow-methods"]
    assert "POST" in allowed
    assert "GET" in allowed
    assert "DELETE" not in allowed


def test_startup_fails_when_database_unreachable(tmp_path):
    app = create_app(database_url=f"sqlite:///{tmp_path/'missing'/'dir'/'test.db'}")
    with pytest.raises(Exception):
        with TestClient(app):
            pass
