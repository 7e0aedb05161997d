"""Tests for mirroring provider identities into users."""

import pytest
from sqlalchemy import func, select

from student_sphere.core.access import Identity
from student_sphere.core.errors import ValidationError
from student_sphere.models import User, UserStatus
from student_sphere.services.user_service import upsert_user_from_identity


def test_first_sign_in_creates_user(db_session) -> None:
    user = upsert_user_from_identity(
        db_session, Identity(id="google-oauth2|erin", email="erin@uni.edu", name="Erin")
    )

    assert user.status == "active"
    assert db_session.get(User, "google-oauth2|erin") is user


def test_sign_in_refreshes_profile_but_not_status(db_session, make_user) -> None:
    make_user("google-oauth2|dave", "dave@uni.edu", "Dave", status=UserStatus.WARNED.value)

    user = upsert_user_from_identity(
        db_session,
        Identity(id="google-oauth2|dave", email="dave@uni.edu", name="David", image="a.png"),
    )

    assert user.name == "David"
    assert user.image == "a.png"
    assert user.status == "warned"


def test_new_subject_with_taken_email_is_rejected(db_session, author) -> None:
    with pytest.raises(ValidationError):
        upsert_user_from_identity(
            db_session, Identity(id="github|alice", email=author.email, name="Alice")
        )

    assert db_session.scalar(select(func.count()).select_from(User)) == 1


def test_changing_email_to_a_taken_one_is_rejected(db_session, author, reporter) -> None:
    with pytest.raises(ValidationError):
        upsert_user_from_identity(
            db_session, Identity(id=reporter.id, email=author.email)
        )

    db_session.refresh(reporter)
    assert reporter.email == "bob@uni.edu"
