"""Tests for signup, login and logout across the three roles"""

PASSWORD = "testpass123"  # matches the seeded accounts in conftest

STUDENT_SIGNUP = {
    "name": "Asha",
    "email": "asha@example.com",
    "password": "secret123",
    "college": "COEP",
    "degree": "B.E.",
    "year": 2,
    "interests": ["Web Development"],
}


def test_student_signup(client, db_session):
    r = client.post("/api/auth/signup", json=STUDENT_SIGNUP)
    assert r.status_code == 201
    student = r.json()["student"]
    assert student["email"] == "asha@example.com"
    assert student["isVerified"] is False
    assert "password" not in student


def test_student_signup_duplicate_email_is_409(client, db_session):
    client.post("/api/auth/signup", json=STUDENT_SIGNUP)
    r = client.post("/api/auth/signup", json=STUDENT_SIGNUP)
    assert r.status_code == 409
    assert r.json()["detail"] == "Email already registered"


def test_student_signup_missing_fields_is_400(client, db_session):
    body = {k: v for k, v in STUDENT_SIGNUP.items() if k != "college"}
    assert client.post("/api/auth/signup", json=body).status_code == 400


def test_student_signup_validates_year_and_interests(client, db_session):
    assert client.post("/api/auth/signup", json={**STUDENT_SIGNUP, "year": 9}).status_code == 400
    assert client.post("/api/auth/signup", json={**STUDENT_SIGNUP, "interests": []}).status_code == 400


def test_student_signup_with_university(client, university):
    r = client.post("/api/auth/signup", json={**STUDENT_SIGNUP, "universityId": university.id})
    assert r.status_code == 201
    assert r.json()["student"]["university"]["name"] == "Test University"


def test_student_signup_unknown_university_is_404(client, db_session):
    r = client.post("/api/auth/signup", json={**STUDENT_SIGNUP, "universityId": "ghost"})
    assert r.status_code == 404


def test_student_login_sets_cookie(client, student):
    r = client.post("/api/auth/login", json={"email": student.email, "password": PASSWORD})
    assert r.status_code == 200
    assert r.cookies.get("studentId") == student.id
    assert "httponly" in r.headers["set-cookie"].lower()
    # Cookie is now carried by the client
    assert client.get("/api/students/profile").status_code == 200


def test_login_wrong_password_is_401(client, student):
    r = client.post("/api/auth/login", json={"email": student.email, "password": "wrong"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Invalid email or password"


def test_login_unknown_email_is_401(client, db_session):
    r = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "x"})
    assert r.status_code == 401


def test_employer_signup_and_login(client, db_session):
    body = {
        "name": "Ravi",
        "email": "ravi@acme.com",
        "password": "secret123",
        "company": "Acme",
        "designation": "Recruiter",
    }
    assert client.post("/api/employers/signup", json=body).status_code == 201
    assert client.post("/api/employers/signup", json=body).status_code == 409

    r = client.post("/api/employers/login", json={"email": "ravi@acme.com", "password": "secret123"})
    assert r.status_code == 200
    assert r.json()["employer"]["company"] == "Acme"
    assert r.cookies.get("employerId") == r.json()["employer"]["id"]


def test_student_credentials_do_not_log_in_employer(client, student):
    r = client.post("/api/employers/login", json={"email": student.email, "password": PASSWORD})
    assert r.status_code == 401


def test_admin_signup_and_login_grants_admin_routes(client, db_session):
    body = {"name": "Root", "email": "root@example.com", "password": "secret123", "role": "SUPER_ADMIN"}
    r = client.post("/api/admin/signup", json=body)
    assert r.status_code == 201
    assert r.json()["admin"]["role"] == "SUPER_ADMIN"

    assert client.get("/api/admin/stats").status_code == 401
    r = client.post("/api/admin/login", json={"email": "root@example.com", "password": "secret123"})
    assert r.status_code == 200
    assert client.get("/api/admin/stats").status_code == 200


def test_admin_signup_rejects_unknown_role(client, db_session):
    body = {"name": "X", "email": "x@example.com", "password": "p", "role": "OWNER"}
    assert client.post("/api/admin/signup", json=body).status_code == 400


def test_logout_clears_all_identity_cookies(client, student):
    client.post("/api/auth/login", json={"email": student.email, "password": PASSWORD})
    r = client.post("/api/auth/logout")
    assert r.status_code == 200
    set_cookies = r.headers.get_list("set-cookie")
    for name in ("studentId", "employerId", "adminId"):
        assert any(c.startswith(f"{name}=") for c in set_cookies)
    assert client.get("/api/students/profile").status_code == 401
