from jose import jwt

from conftest import auth_headers, register
from core.config import get_settings
from models.user import User
from services.auth_service import auth_service


def test_register_returns_token_and_user_without_hash(client):
    body = register(client, email="Alice@Example.com")

    assert body["token"]
    assert body["user"]["email"] == "alice@example.com"
    assert body["user"]["name"] == "Alice"
    assert "password_hash" not in body["user"]
    assert "password" not in body["user"]


def test_token_claims(client):
    body = register(client)
    settings = get_settings()

    claims = jwt.decode(body["token"], settings.JWT_SECRET_KEY, algorithms=["HS256"])
    assert claims["id"] == body["user"]["id"]
    assert claims["email"] == "alice@example.com"
    assert "exp" in claims


def test_register_twice_is_rejected(client):
    register(client)

    res = client.post(
        "/api/register",
        json={"email": "alice@example.com", "password": "other", "name": "Other"},
    )
    assert res.status_code == 400
    assert res.json()["detail"] == "Email already registered"


def test_register_requires_all_fields(client):
    res = client.post("/api/register", json={"email": "a@example.com", "password": "", "name": "A"})
    assert res.status_code == 400

    res = client.post("/api/register", json={"email": "a@example.com", "password": "pw", "name": "  "})
    assert res.status_code == 400
    assert res.json()["detail"] == "All fields are required"


def test_password_is_stored_hashed(client, db_session):
    register(client, password="secret123")

    user = db_session.query(User).filter(User.email == "alice@example.com").one()
    assert user.password_hash != "secret123"
    assert auth_service.verify_password("secret123", user.password_hash)


def test_login(client):
    registered = register(client)

    res = client.post("/api/login", json={"email": "alice@example.com", "password": "secret123"})
    assert res.status_code == 200
    body = res.json()
    assert body["user"]["id"] == registered["user"]["id"]
    assert body["token"]


def test_wrong_password_and_unknown_email_look_the_same(client):
    register(client)

    wrong_password = client.post("/api/login", json={"email": "alice@example.com", "password": "nope"})
    unknown_email = client.post("/api/login", json={"email": "nobody@example.com", "password": "secret123"})
    empty_password = client.post("/api/login", json={"email": "alice@example.com", "password": ""})

    for res in (wrong_password, unknown_email, empty_password):
        assert res.status_code == 401
        assert res.json() == {"detail": "Invalid credentials"}


def test_protected_routes_require_bearer_token(client):
    assert client.get("/api/recipes").status_code == 401
    assert client.get("/api/recipes", headers={"Authorization": "Token abc"}).status_code == 401
    assert client.get("/api/recipes", headers=auth_headers("not-a-jwt")).status_code == 401


def test_token_signed_with_another_secret_is_rejected(client):
    body = register(client)
    forged = jwt.encode({"id": body["user"]["id"], "email": "alice@example.com"}, "other-secret", algorithm="HS256")

    assert client.get("/api/recipes", headers=auth_headers(forged)).status_code == 401


def test_expired_token_is_rejected(client):
    body = register(client)
    settings = get_settings()
    expired = jwt.encode(
        {"id": body["user"]["id"], "email": "alice@example.com", "exp": 1},
        settings.JWT_SECRET_KEY,
        algorithm="HS256",
    )

    assert client.get("/api/recipes", headers=auth_headers(expired)).status_code == 401


def test_update_profile_name(client, alice, db_session):
    res = client.put("/api/profile", json={"name": "  Alice Cooper "}, headers=alice["headers"])

    assert res.status_code == 200
    assert res.json() == {"name": "Alice Cooper"}
    assert db_session.get(User, alice["id"]).name == "Alice Cooper"


def test_update_profile_rejects_blank_name(client, alice):
    res = client.put("/api/profile", json={"name": " "}, headers=alice["headers"])

    assert res.status_code == 400
    assert res.json()["detail"] == "Name is required"


def test_update_profile_for_missing_user(client):
    settings = get_settings()
    token = jwt.encode({"id": 999, "email": "ghost@example.com"}, settings.JWT_SECRET_KEY, algorithm="HS256")

    res = client.put("/api/profile", json={"name": "Ghost"}, headers=auth_headers(token))
    assert res.status_code == 404
