import pytest
from fastapi.testclient import TestClient

from main import create_app


@pytest.fixture()
def app(tmp_path):
    return create_app(database_url=f"sqlite:///{tmp_path/'test.db'}")


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def customer(client):
    r = client.post("/customers", json={"fname": "Ada", "lname": "Lovelace", "email": "ada@example.com"})
    assert r.status_code == 200
    return r.json()
