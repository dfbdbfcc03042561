"""Tests for configuration parsing."""

import pytest

from trip_quiz.config import Settings, parse_session_backend


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, "memory"), ("", "memory"), ("  ", "memory"), (" Supabase ", "supabase")],
)
def test_parse_session_backend(raw: str | None, expected: str) -> None:
    assert parse_session_backend(raw) == expected


def test_parse_session_backend_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="redis"):
        parse_session_backend("redis")


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SESSION_NAMESPACE", "kiosk-3")
    monkeypatch.setenv("RANDOM_SEED", "42")
    monkeypatch.setenv("CATALOG_CUSTOMERS_URL", "https://cdn.example.com/c.json")

    settings = Settings(_env_file=None)  # type: ignore[call-arg]

    assert settings.session_namespace == "kiosk-3"
    assert settings.random_seed == 42
    assert settings.uses_remote_catalog is False
