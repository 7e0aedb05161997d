"""Tests for identity assertion tokens."""

import pytest
from jose import jwt

from student_sphere.core.access import Identity
from student_sphere.core.errors import AuthenticationError
from student_sphere.core.security import create_identity_token, decode_identity_token
from student_sphere.core.settings import settings


def test_decode_returns_provider_identity() -> None:
    identity = Identity(
        id="google-oauth2|123",
        email="alice@uni.edu",
        name="Alice",
        image="https://example.com/a.png",
    )
    assert decode_identity_token(create_identity_token(identity)) == identity


def test_expired_token_is_rejected() -> None:
    token = create_identity_token(Identity(id="1", email="a@uni.edu"), expires_minutes=-1)
    with pytest.raises(AuthenticationError):
        decode_identity_token(token)


def test_token_signed_with_other_secret_is_rejected() -> None:
    token = jwt.encode({"sub": "1"}, "not-the-secret", algorithm=settings.jwt_algorithm)
    with pytest.raises(AuthenticationError):
        decode_identity_token(token)


def test_token_without_subject_is_rejected() -> None:
    token = jwt.encode({"email": "a@uni.edu"}, settings.secret_key, algorithm=settings.jwt_algorithm)
    with pytest.raises(AuthenticationError):
        decode_identity_token(token)
