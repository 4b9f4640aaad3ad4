"""Tests for login, token checks and the health endpoint."""

from app.security import create_access_token


class TestLogin:
    def test_default_admin(self, seeded_client):
        response = seeded_client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})

        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["user"]["role"] == "admin"

        me = seeded_client.get("/api/auth/me", headers={"Authorization": f"Bearer {data['access_token']}"})
        assert me.status_code == 200
        assert me.json()["username"] == "admin"

    def test_admin_token_opens_admin_routes(self, seeded_client):
        token = seeded_client.post(
            "/api/auth/login", json={"username": "admin", "password": "admin123"}
        ).json()["access_token"]

        response = seeded_client.get("/api/formmasters", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200

    def test_form_master_login_by_email(self, client, admin_headers):
        client.post(
            "/api/formmasters",
            json={"name": "Mr. Tyav", "email": "tyav@school.com", "password": "chalk-dust"},
            headers=admin_headers,
        )

        response = client.post("/api/auth/login", json={"username": "tyav@school.com", "password": "chalk-dust"})

        assert response.status_code == 200
        assert response.json()["user"]["role"] == "form_master"

    def test_form_master_login_with_mixed_case_email(self, client, admin_headers):
        created = client.post(
            "/api/formmasters",
            json={"name": "Mr. Tyav", "email": "Tyav@School.COM", "password": "chalk-dust"},
            headers=admin_headers,
        )
        assert created.json()["email"] == "Tyav@School.COM"

        response = client.post("/api/auth/login", json={"username": "Tyav@School.COM", "password": "chalk-dust"})

        assert response.status_code == 200
        assert response.json()["user"]["username"] == "Tyav@School.COM"

    def test_form_master_with_local_domain(self, client, admin_headers):
        created = client.post(
            "/api/formmasters",
            json={"name": "Mrs. Ngozi", "email": "teacher@school.local", "password": "board-marker"},
            headers=admin_headers,
        )
        assert created.status_code == 200

        response = client.post("/api/auth/login", json={"username": "teacher@school.local", "password": "board-marker"})

        assert response.status_code == 200

    def test_wrong_password(self, seeded_client):
        response = seeded_client.post("/api/auth/login", json={"username": "admin", "password": "nope"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid username or password"}


class TestTokenCheck:
    def test_missing_token(self, client):
        response = client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json() == {"error": "Access token required"}

    def test_garbage_token(self, client):
        response = client.get("/api/students", headers={"Authorization": "Bearer not.a.token"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid or expired token"}

    def test_expired_token(self, client):
        token = create_access_token({"sub": "1", "username": "admin", "role": "admin"}, expires_minutes=-5)
        response = client.get("/api/students", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "OK"
