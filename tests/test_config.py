import pytest

from httperr.config import Settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)  # type: ignore[call-arg]
    assert settings.default_status_code == 500
    assert settings.text_media_types == ["text/plain", "text/html", "text/xml"]


def test_reads_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HTTPERR_DEFAULT_STATUS_CODE", "502")
    monkeypatch.setenv("HTTPERR_TEXT_MEDIA_TYPES", '["text/plain", "text/csv"]')

    settings = Settings(_env_file=None)  # type: ignore[call-arg]

    assert settings.default_status_code == 502
    assert settings.text_media_types == ["text/plain", "text/csv"]


def test_ignores_unprefixed_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEFAULT_STATUS_CODE", "418")
    assert Settings(_env_file=None).default_status_code == 500  # type: ignore[call-arg]
