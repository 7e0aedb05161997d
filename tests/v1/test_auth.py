"""Tests for the session endpoint."""

from fastapi import status

from student_sphere.core.access import Identity
from student_sphere.core.security import create_identity_token
from student_sphere.models import User


def test_session_reports_admin_capability(client, admin_headers) -> None:
    """An allow-listed email is reported as admin."""
    response = client.get("/api/v1/auth/session", headers=admin_headers)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["isAdmin"] is True
    assert data["user"]["email"] == "admin@uni.edu"


def test_session_for_student(client, author_headers) -> None:
    """Ordinary students are not admins."""
    response = client.get("/api/v1/auth/session", headers=author_headers)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["isAdmin"] is False
    assert data["user"]["status"] == "active"


def test_first_sign_in_creates_user(client, db_session) -> None:
    """A new identity gets a local user row."""
    token = create_identity_token(
        Identity(id="google-oauth2|erin", email="erin@uni.edu", name="Erin")
    )

    response = client.get(
        "/api/v1/auth/session", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == status.HTTP_200_OK
    user = db_session.get(User, "google-oauth2|erin")
    assert user is not None
    assert user.name == "Erin"


def test_session_requires_token(client) -> None:
    response = client.get("/api/v1/auth/session")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_session_rejects_garbage_token(client) -> None:
    response = client.get(
        "/api/v1/auth/session", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_session_for_identity_with_taken_email(client, author) -> None:
    """A second provider account reusing a known email gets a 400, not a 500."""
    token = create_identity_token(Identity(id="github|alice", email=author.email))

    response = client.get(
        "/api/v1/auth/session", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "already linked" in response.json()["detail"]
