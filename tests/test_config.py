import pytest
from pydantic import ValidationError

from paperforge.config import Settings, get_settings


def test_defaults(monkeypatch):
    for name in ("PROVIDER", "MAX_ATTEMPTS", "RETRY_BASE_DELAY", "WORDS_PER_PAGE"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.PROVIDER == "gemini"
    assert settings.MAX_ATTEMPTS == 5
    assert settings.RETRY_BASE_DELAY == 2.0
    assert settings.WORDS_PER_PAGE == 450


@pytest.mark.parametrize("attempts", [0, -1])
def test_max_attempts_must_be_positive(attempts):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, MAX_ATTEMPTS=attempts)


def test_max_attempts_from_environment(monkeypatch):
    monkeypatch.setenv("MAX_ATTEMPTS", "0")

    with pytest.raises(ValidationError):
        get_settings()
