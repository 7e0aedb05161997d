"""Tests for environment-driven settings."""

from student_sphere.core.settings import Settings


def test_admin_email_set_is_parsed_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("ADMIN_EMAILS", " admin@uni.edu, dean@uni.edu ,")

    assert Settings().admin_email_set == frozenset({"admin@uni.edu", "dean@uni.edu"})


def test_admin_email_set_defaults_to_empty(monkeypatch) -> None:
    monkeypatch.delenv("ADMIN_EMAILS", raising=False)

    assert Settings(_env_file=None).admin_email_set == frozenset()


def test_database_url_comes_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./other.db")

    configured = Settings()

    assert configured.database_url == "sqlite:///./other.db"
    assert not hasattr(configured, "database_url_sync")
