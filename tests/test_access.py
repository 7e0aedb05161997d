"""Tests for the administrator access policy."""

import pytest

from student_sphere.core.access import Identity, is_admin, require_admin
from student_sphere.core.errors import AuthorizationError
from student_sphere.core.settings import parse_admin_emails

ADMINS = frozenset({"admin@uni.edu", "dean@uni.edu"})


def test_parse_admin_emails_trims_and_drops_blanks() -> None:
    assert parse_admin_emails(" admin@uni.edu, dean@uni.edu ,,") == ADMINS
    assert parse_admin_emails("") == frozenset()
    assert parse_admin_emails(None) == frozenset()


def test_listed_email_is_admin() -> None:
    assert is_admin(Identity(id="1", email="dean@uni.edu"), ADMINS) is True


def test_match_is_exact_and_case_sensitive() -> None:
    assert is_admin(Identity(id="1", email="Admin@uni.edu"), ADMINS) is False
    assert is_admin(Identity(id="1", email="admin@uni.edu "), ADMINS) is False


def test_missing_email_is_never_admin() -> None:
    assert is_admin(Identity(id="1", email=None), ADMINS) is False
    assert is_admin(Identity(id="1", email=""), ADMINS) is False
    assert is_admin(None, ADMINS) is False


def test_empty_allow_list_means_no_admins() -> None:
    assert is_admin(Identity(id="1", email="admin@uni.edu"), frozenset()) is False


def test_default_allow_list_comes_from_settings(admin_allow_list) -> None:
    assert is_admin(Identity(id="1", email=admin_allow_list)) is True
    assert is_admin(Identity(id="2", email="someone@uni.edu")) is False


def test_require_admin_raises_for_non_admin() -> None:
    with pytest.raises(AuthorizationError):
        require_admin(Identity(id="1", email="student@uni.edu"), ADMINS)
    with pytest.raises(AuthorizationError):
        require_admin(None, ADMINS)


def test_require_admin_returns_identity() -> None:
    identity = Identity(id="1", email="admin@uni.edu")
    assert require_admin(identity, ADMINS) is identity
