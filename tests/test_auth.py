from __future__ import annotations

from app.core.security import create_access_token
from app.core.store import USERS


def _register(client, email="head.coach@example.com", password="correct-horse"):
    return client.post("/api/auth/register", json={"email": email, "password": password, "displayName": "Head"})


def test_register_login_me(client) -> None:
    r = _register(client)
    assert r.status_code == 201, r.text
    user = r.json()
    assert user["role"] == "coach"
    assert "passwordHash" not in user

    r = client.post("/api/auth/login", json={"email": "head.coach@example.com", "password": "correct-horse"})
    assert r.status_code == 200
    token = r.json()["access_token"]
    assert r.json()["user"]["id"] == user["id"]

    r = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200
    assert r.json()["email"] == "head.coach@example.com"


def test_register_twice_is_rejected(client) -> None:
    _register(client)

    r = _register(client, email="Head.Coach@example.com")

    assert r.status_code == 400
    assert r.json() == {"error": "Email already used"}


def test_short_password_is_rejected(client) -> None:
    r = _register(client, password="short")

    assert r.status_code == 400
    assert "error" in r.json()


def test_login_with_wrong_password(client) -> None:
    _register(client)

    r = client.post("/api/auth/login", json={"email": "head.coach@example.com", "password": "wrong-password"})

    assert r.status_code == 401
    assert r.json() == {"error": "Invalid credentials"}


def test_token_for_unknown_user_is_rejected(client) -> None:
    r = client.get("/api/users/me", headers={"Authorization": f"Bearer {create_access_token('ghost')}"})

    assert r.status_code == 401
    assert r.json() == {"error": "User inactive or not found"}


def test_only_admins_change_roles(client, auth_headers, coach_id) -> None:
    r = client.put(f"/api/users/{coach_id}/role", json={"role": "admin"}, headers=auth_headers)

    assert r.status_code == 403
    assert r.json() == {"error": "Only admins can modify user roles"}


def test_admin_promotes_coach(client, seed, coach_id, read_doc) -> None:
    admin_id = seed(USERS, {"email": "admin@example.com", "role": "admin", "isActive": True, "passwordHash": "x"})
    headers = {"Authorization": f"Bearer {create_access_token(admin_id)}"}

    r = client.put(f"/api/users/{coach_id}/role", json={"role": "admin"}, headers=headers)
    assert r.status_code == 200
    assert r.json()["role"] == "admin"
    assert read_doc(USERS, coach_id)["role"] == "admin"

    r = client.put(f"/api/users/{coach_id}/role", json={"role": "owner"}, headers=headers)
    assert r.status_code == 400

    r = client.put("/api/users/nobody/role", json={"role": "coach"}, headers=headers)
    assert r.status_code == 404
