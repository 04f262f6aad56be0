# /tests/test_auth_api.py

import logging


def test_health_check(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"].startswith("Campus Timetable Portal")
    assert "X-Request-ID" in response.headers


def test_register_and_login(client):
    payload = {"name": "Ada Instructor", "email": "Ada@Example.edu", "password": "password123", "role": "instructor"}
    response = client.post("/api/auth/register", json=payload)
    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "ada@example.edu"
    assert body["role"] == "instructor"
    assert "hashed_password" not in body

    token_response = client.post("/api/auth/token", data={"username": "ada@example.edu", "password": "password123"})
    assert token_response.status_code == 200
    token = token_response.json()["access_token"]

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["name"] == "Ada Instructor"


def test_duplicate_email_is_rejected(client):
    payload = {"name": "Ada", "email": "ada@example.edu", "password": "password123"}
    assert client.post("/api/auth/register", json=payload).status_code == 201
    response = client.post("/api/auth/register", json=payload)
    assert response.status_code == 409


def test_admin_cannot_self_register(client):
    payload = {"name": "Mallory", "email": "mallory@example.edu", "password": "password123", "role": "admin"}
    assert client.post("/api/auth/register", json=payload).status_code == 422


def test_wrong_password(client, instructor):
    response = client.post("/api/auth/token", data={"username": "ada@example.edu", "password": "nope-nope"})
    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_failed_login_log_omits_email(client, instructor, caplog):
    caplog.set_level(logging.DEBUG, logger="portal.services.user_service")
    client.post("/api/auth/token", data={"username": "ada@example.edu", "password": "nope-nope"})
    assert "Failed login attempt" in caplog.text
    assert "ada@example.edu" not in caplog.text


def test_invalid_token_is_unauthorized(client):
    response = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_missing_token_is_unauthorized(client):
    assert client.get("/api/auth/me").status_code == 401
