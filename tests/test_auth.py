"""
Unit tests for authentication.

Tests:
- Token endpoint
- Registration
- Admin gate behaviour on protected job routes
"""

from datetime import timedelta

from app.core.security import create_access_token, decode_token, verify_password
from app.models.user import User


class TestToken:
    """Test POST /auth/token"""

    def test_token_success(self, client, regular_user):
        response = client.post("/auth/token", json={"username": "u1", "password": "password1"})

        assert response.status_code == 200
        payload = decode_token(response.json()["token"])
        assert payload["sub"] == "u1"
        assert payload["is_admin"] is False

    def test_token_wrong_password(self, client, regular_user):
        response = client.post("/auth/token", json={"username": "u1", "password": "nope"})

        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Invalid username/password"

    def test_token_unknown_user(self, client, db_session):
        response = client.post("/auth/token", json={"username": "ghost", "password": "password1"})
        assert response.status_code == 401

    def test_token_bad_body(self, client, db_session):
        response = client.post("/auth/token", json={"username": 42})
        assert response.status_code == 400


class TestRegister:
    """Test POST /auth/register"""

    def test_register_success(self, client, db_session):
        response = client.post("/auth/register", json={
            "username": "new",
            "password": "password",
            "firstName": "New",
            "lastName": "User",
            "email": "new@jobly.io",
        })

        assert response.status_code == 201
        assert decode_token(response.json()["token"])["sub"] == "new"

        user = db_session.get(User, "new")
        assert user.is_admin is False
        assert user.hashed_password != "password"
        assert verify_password("password", user.hashed_password)

    def test_register_cannot_set_admin(self, client, db_session):
        response = client.post("/auth/register", json={
            "username": "sneaky",
            "password": "password",
            "firstName": "S",
            "lastName": "N",
            "email": "s@jobly.io",
            "isAdmin": True,
        })

        assert response.status_code == 400
        assert db_session.get(User, "sneaky") is None

    def test_register_duplicate(self, client, regular_user):
        response = client.post("/auth/register", json={
            "username": "u1",
            "password": "password",
            "firstName": "U",
            "lastName": "One",
            "email": "u1@jobly.io",
        })

        assert response.status_code == 400
        assert "Duplicate username" in response.json()["error"]["message"]

    def test_register_bad_email(self, client, db_session):
        response = client.post("/auth/register", json={
            "username": "new",
            "password": "password",
            "firstName": "New",
            "lastName": "User",
            "email": "not-an-email",
        })
        assert response.status_code == 400


class TestAdminGate:
    """The admin gate on DELETE /jobs/{id}"""

    def test_token_for_deleted_user(self, client, jobs):
        token = create_access_token(data={"sub": "ghost", "is_admin": True})
        response = client.delete(f"/jobs/{jobs['engineer']}", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_expired_token(self, client, jobs, admin_user):
        token = create_access_token(data={"sub": admin_user.username}, expires_delta=timedelta(minutes=-1))
        response = client.delete(f"/jobs/{jobs['engineer']}", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_admin_flag_read_from_database(self, client, jobs, regular_user):
        """A forged is_admin claim does not grant admin rights"""
        token = create_access_token(data={"sub": regular_user.username, "is_admin": True})
        response = client.delete(f"/jobs/{jobs['engineer']}", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 403

    def test_admin_token_from_login(self, client, jobs, admin_user):
        token = client.post("/auth/token", json={"username": "admin", "password": "adminpass"}).json()["token"]
        response = client.delete(f"/jobs/{jobs['engineer']}", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json() == {"deleted": jobs["engineer"]}
