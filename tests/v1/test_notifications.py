"""Tests for the notification endpoints."""

import pytest
from fastapi import status

from student_sphere.models import NotificationType
from student_sphere.services.notifications import create_notification


@pytest.fixture()
def author_notification(db_session, author):
    notification = create_notification(
        db_session,
        author.id,
        NotificationType.POST_DELETED,
        "Post Deleted",
        "Your post has been deleted.",
        post_title="Help with calculus",
    )
    db_session.commit()
    return notification


def test_list_requires_authentication(client) -> None:
    response = client.get("/api/v1/notifications")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_list_notifications(client, author_headers, author_notification) -> None:
    response = client.get("/api/v1/notifications", headers=author_headers)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["unreadCount"] == 1
    assert data["notifications"][0]["id"] == author_notification.id
    assert data["notifications"][0]["read"] is False


def test_mark_one_read(client, author_headers, author_notification) -> None:
    response = client.patch(
        "/api/v1/notifications",
        json={"notificationId": author_notification.id},
        headers=author_headers,
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["read"] is True
    data = client.get("/api/v1/notifications", headers=author_headers).json()
    assert data["unreadCount"] == 0


def test_cannot_mark_someone_elses_notification(
    client, reporter_headers, author_notification, db_session
) -> None:
    response = client.patch(
        "/api/v1/notifications",
        json={"notificationId": author_notification.id},
        headers=reporter_headers,
    )

    assert response.status_code == status.HTTP_403_FORBIDDEN
    db_session.refresh(author_notification)
    assert author_notification.read is False


def test_mark_missing_notification(client, author_headers) -> None:
    response = client.patch(
        "/api/v1/notifications",
        json={"notificationId": "missing"},
        headers=author_headers,
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_mark_read_requires_id(client, author_headers) -> None:
    response = client.patch("/api/v1/notifications", json={}, headers=author_headers)
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_mark_all_read(client, author_headers, author_notification) -> None:
    response = client.post("/api/v1/notifications", headers=author_headers)

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["updated"] == 1
    data = client.get("/api/v1/notifications", headers=author_headers).json()
    assert data["unreadCount"] == 0
