import pytest
from flask import Flask

from sampleworks.userapi import create_app, make_user_blueprint
from sampleworks.userstore import UserStore


@pytest.fixture
def web_dir(tmp_path):
    (tmp_path / "index.html").write_text("<h1>index page</h1>")
    (tmp_path / "app.js").write_text("console.log('app');")
    return tmp_path


@pytest.fixture
def client(web_dir):
    app = create_app(UserStore(), web_dir)
    app.testing = True
    return app.test_client()


@pytest.fixture
def bare_client():
    app = Flask("bare")
    app.register_blueprint(make_user_blueprint(UserStore()), url_prefix="/api/v1")
    app.testing = True
    return app.test_client()


def test_get_users(bare_client):
    resp = bare_client.get("/api/v1/users")
    assert resp.status_code == 200
    assert len(resp.get_json()) == 2


def test_get_user_by_id(bare_client):
    resp = bare_client.get("/api/v1/users/1")
    assert resp.status_code == 200
    assert resp.get_json()["id"] == "1"


def test_create_user(bare_client):
    new_user = {"name": "Test User", "email": "test@example.com"}
    resp = bare_client.post("/api/v1/users", json=new_user)
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["name"] == new_user["name"]
    assert body["email"] == new_user["email"]


def test_update_user(bare_client):
    update = {"name": "Updated User", "email": "updated@example.com"}
    resp = bare_client.put("/api/v1/users/1", json=update)
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["message"] == "User updated successfully"
    assert body["user"]["name"] == "Updated User"


def test_delete_user(bare_client):
    resp = bare_client.delete("/api/v1/users/1")
    assert resp.status_code == 200
    assert resp.get_json()["message"] == "User deleted successfully"
    assert bare_client.get("/api/v1/users/1").status_code == 404


def test_get_missing_user_is_404(client):
    resp = client.get("/api/v1/users/99")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "User not found"}


def test_update_missing_user_is_404(client):
    resp = client.put("/api/v1/users/99", json={"name": "Nobody"})
    assert resp.status_code == 404


def test_delete_missing_user_is_404(client):
    assert client.delete("/api/v1/users/99").status_code == 404


def test_partial_update_keeps_other_fields(client):
    resp = client.put("/api/v1/users/2", json={"name": "Jane Doe"})
    assert resp.get_json()["user"]["email"] == "jane@example.com"
    assert client.get("/api/v1/users/2").get_json()["name"] == "Jane Doe"


@pytest.mark.parametrize(
    "payload", [{"name": "Only Name"}, {"email": "x@example.com"}, {"name": "", "email": ""}]
)
def test_create_requires_fields(client, payload):
    resp = client.post("/api/v1/users", json=payload)
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_create_rejects_invalid_json(client):
    resp = client.post("/api/v1/users", data="not json", content_type="application/json")
    assert resp.status_code == 400


def test_created_user_is_listed(client):
    client.post("/api/v1/users", json={"name": "Test User", "email": "test@example.com"})
    names = [u["name"] for u in client.get("/api/v1/users").get_json()]
    assert "Test User" in names
    assert len(names) == 3


def test_health(client):
    resp = client.get("/health")
    assert resp.get_json() == {"status": "ok", "message": "Service is up and running"}


def test_hello(client):
    assert client.get("/api/v1/hello").get_json() == {"message": "Hello from the API!"}


def test_options_short_circuits_with_cors(client):
    resp = client.options("/api/v1/users")
    assert resp.status_code == 204
    assert resp.headers["Access-Control-Allow-Origin"] == "*"


def test_request_id_header(client):
    resp = client.get("/health")
    assert resp.headers["X-Request-ID"].isdigit()


def test_static_files(client):
    assert b"index page" in client.get("/").data
    assert b"console.log" in client.get("/static/app.js").data