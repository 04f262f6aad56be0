# /tests/test_students_api.py

import pytest


@pytest.fixture
def registration(catalogue):
    return {
        "name": "Alice Doe",
        "email": "alice@example.edu",
        "roll_number": "cs-2026-001",
        "program_id": catalogue["program"],
        "major_id": catalogue["cs"],
        "section_id": catalogue["cs_a"],
    }


# --- Public endpoints ---

def test_catalogue_lookups(client, catalogue):
    programs = client.get("/api/students/programs").json()["programs"]
    assert [p["code"] for p in programs] == ["BSC"]

    majors = client.get("/api/students/majors", params={"program_id": catalogue["program"]}).json()["majors"]
    assert [m["name"] for m in majors] == ["Computer Science", "Mathematics"]

    sections = client.get("/api/students/sections", params={"major_id": catalogue["math"]}).json()["sections"]
    assert [s["name"] for s in sections] == ["MATH-A"]


def test_register_student(client, registration):
    response = client.post("/api/students/register", json=registration)
    assert response.status_code == 201
    body = response.json()
    assert body["roll_number"] == "CS-2026-001"
    assert body["status"] == "active"

    lookup = client.get("/api/students/roll/cs-2026-001")
    assert lookup.status_code == 200
    assert lookup.json()["id"] == body["id"]


def test_register_rejects_section_outside_major(client, registration, catalogue):
    registration["section_id"] = catalogue["math_a"]
    response = client.post("/api/students/register", json=registration)
    assert response.status_code == 400


def test_register_rejects_unknown_program(client, registration):
    registration["program_id"] = 999
    assert client.post("/api/students/register", json=registration).status_code == 404


def test_register_rejects_duplicate_roll_number(client, registration):
    assert client.post("/api/students/register", json=registration).status_code == 201
    registration["email"] = "someone.else@example.edu"
    response = client.post("/api/students/register", json=registration)
    assert response.status_code == 409
    assert "roll_number" in response.json()["detail"]


def test_unknown_roll_number(client):
    assert client.get("/api/students/roll/NOPE").status_code == 404


# --- Role gates ---

def test_admin_endpoints_require_admin(client, instructor, auth_headers, catalogue):
    assert client.get("/api/students/list").status_code == 401
    assert client.get("/api/students/list", headers=auth_headers(instructor)).status_code == 403
    assert client.get(f"/api/students/section/{catalogue['cs_a']}", headers=auth_headers(instructor)).status_code == 403


def test_instructor_endpoint_rejects_students(client, student_user, auth_headers):
    response = client.get("/api/students/instructor-enrolled", headers=auth_headers(student_user))
    assert response.status_code == 403


# --- Admin operations ---

def test_list_and_update_status(client, admin, auth_headers, registration):
    student_id = client.post("/api/students/register", json=registration).json()["id"]
    headers = auth_headers(admin)

    response = client.patch(f"/api/students/{student_id}/status", json={"status": "suspended"}, headers=headers)
    assert response.status_code == 200
    assert response.json()["status"] == "suspended"

    active = client.get("/api/students/list", params={"status": "active"}, headers=headers).json()["students"]
    suspended = client.get("/api/students/list", params={"status": "suspended"}, headers=headers).json()["students"]
    assert active == []
    assert [s["id"] for s in suspended] == [student_id]


def test_update_status_of_unknown_student(client, admin, auth_headers):
    response = client.patch("/api/students/999/status", json={"status": "inactive"}, headers=auth_headers(admin))
    assert response.status_code == 404


def test_students_by_section_and_export(client, admin, auth_headers, registration, catalogue):
    client.post("/api/students/register", json=registration)
    headers = auth_headers(admin)

    students = client.get(f"/api/students/section/{catalogue['cs_a']}", headers=headers).json()["students"]
    assert [s["roll_number"] for s in students] == ["CS-2026-001"]

    export = client.get(f"/api/students/section/{catalogue['cs_a']}/export", headers=headers)
    assert export.status_code == 200
    assert export.headers["content-type"].startswith("text/csv")
    lines = export.text.strip().splitlines()
    assert lines[0] == "Roll Number,Name,Email,Status,Section"
    assert lines[1] == "CS-2026-001,Alice Doe,alice@example.edu,active,CS-A"


def test_export_of_empty_section_is_header_only(client, admin, auth_headers, catalogue):
    export = client.get(f"/api/students/section/{catalogue['math_a']}/export", headers=auth_headers(admin))
    assert export.text.strip() == "Roll Number,Name,Email,Status,Section"


def test_export_of_unknown_section(client, admin, auth_headers):
    assert client.get("/api/students/section/999/export", headers=auth_headers(admin)).status_code == 404
