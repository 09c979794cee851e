from __future__ import annotations

import pytest

from userhub.app import create_app
from userhub.infrastructure.db import ENGINE, Base, SessionLocal
from userhub.infrastructure.db.models import User


@pytest.fixture(autouse=True)
def reset_database() -> None:
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)


def test_register_login_verify_flow() -> None:
    app = create_app()

    with app.test_client() as client:
        register = client.post("/api/v1/register", json={"email": "a@x.com", "password": "secret1"})
        assert register.status_code == 201
        registered = register.get_json()
        assert registered["token"]
        user_id = registered["user"]["id"]

        duplicate = client.post("/api/v1/register", json={"email": "a@x.com", "password": "other1"})
        assert duplicate.status_code == 409
        assert duplicate.get_json()["error"] == "email_already_exists"

        wrong = client.post("/api/v1/login", json={"email": "a@x.com", "password": "wrong"})
        assert wrong.status_code == 401
        assert wrong.get_json()["error"] == "invalid_credentials"

        unknown = client.post("/api/v1/login", json={"email": "b@x.com", "password": "secret1"})
        assert unknown.status_code == 404

        login = client.post("/api/v1/login", json={"email": "a@x.com", "password": "secret1"})
        assert login.status_code == 200
        token = login.get_json()["token"]
        assert login.get_json()["id"] == user_id

        verify = client.get("/api/v1/verify", headers={"Authorization": f"Bearer {token}"})
        assert verify.status_code == 200
        assert verify.get_json() == {"ok": True, "id": user_id, "email": "a@x.com"}

        missing = client.get("/api/v1/verify")
        assert missing.status_code == 401
        assert missing.get_json()["error"] == "malformed_token"
        assert missing.headers["WWW-Authenticate"].startswith("Bearer")

        forged = client.get("/api/v1/verify", headers={"Authorization": f"Bearer {token}x"})
        assert forged.status_code == 401

    session = SessionLocal()
    try:
        stored = session.query(User).one()
        assert stored.email == "a@x.com"
        assert stored.password_hash != "secret1"
        assert "secret1" not in stored.password_hash
    finally:
        session.close()


def test_user_listing_and_update_flow() -> None:
    app = create_app()

    with app.test_client() as client:
        alice = client.post(
            "/api/v1/register", json={"email": "a@x.com", "password": "secret1", "name": "Alice"}
        ).get_json()["user"]
        client.post("/api/v1/register", json={"email": "b@x.com", "password": "secret2"})

        listing = client.get("/api/v1/users")
        assert listing.status_code == 200
        users = listing.get_json()["users"]
        assert [u["email"] for u in users] == ["a@x.com", "b@x.com"]
        assert all("password_hash" not in u and "password" not in u for u in users)

        fetched = client.get(f"/api/v1/users/{alice['id']}")
        assert fetched.status_code == 200
        assert fetched.get_json()["user"]["name"] == "Alice"
        assert client.get("/api/v1/users/999").status_code == 404

        renamed = client.patch(
            f"/api/v1/users/{alice['id']}", json={"name": "Alicia", "password": "secret3"}
        )
        assert renamed.status_code == 200
        assert renamed.get_json()["user"]["name"] == "Alicia"

        clash = client.patch(f"/api/v1/users/{alice['id']}", json={"email": "b@x.com"})
        assert clash.status_code == 409

        old_login = client.post("/api/v1/login", json={"email": "a@x.com", "password": "secret1"})
        assert old_login.status_code == 401
        new_login = client.post("/api/v1/login", json={"email": "a@x.com", "password": "secret3"})
        assert new_login.status_code == 200

        assert client.patch("/api/v1/users/999", json={"name": "ghost"}).status_code == 404


def test_greeting_health_and_security_headers() -> None:
    app = create_app()

    with app.test_client() as client:
        index = client.get("/")
        assert index.status_code == 200
        assert index.get_data(as_text=True) == "Hello, World!"

        health = client.get("/api/health")
        assert health.status_code == 200
        assert health.get_json() == {"ok": True, "database": "ok", "users_table": "present"}
        assert health.headers["X-Content-Type-Options"] == "nosniff"
        assert health.headers["Cache-Control"] == "no-store"


def test_out_of_range_user_id_is_not_found() -> None:
    app = create_app()
    huge = 99999999999999999999

    with app.test_client() as client:
        fetched = client.get(f"/api/v1/users/{huge}")
        patched = client.patch(f"/api/v1/users/{huge}", json={"name": "ghost"})

    assert fetched.status_code == 404
    assert fetched.get_json()["error"] == "user_not_found"
    assert patched.status_code == 404
    assert patched.get_json()["error"] == "user_not_found"


def test_created_at_is_stable_and_request_id_echoed() -> None:
    app = create_app()

    with app.test_client() as client:
        registered = client.post(
            "/api/v1/register",
            json={"email": "a@x.com", "password": "secret1"},
            headers={"X-Request-ID": "req-42"},
        )
        user = registered.get_json()["user"]
        fetched = client.get(f"/api/v1/users/{user['id']}")

    assert registered.headers["X-Request-ID"] == "req-42"
    assert fetched.headers["X-Request-ID"]
    assert fetched.get_json()["user"]["created_at"] == user["created_at"]
