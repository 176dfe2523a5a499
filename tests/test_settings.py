import pytest
from pydantic import ValidationError

from commitweave.config.settings import CONFIG_FILENAME, Settings


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("COMMITWEAVE_REQUEST_TIMEOUT", "5")
    monkeypatch.setenv("COMMITWEAVE_LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.request_timeout == 5
    assert settings.log_level == "DEBUG"
    assert settings.config_path == tmp_path / CONFIG_FILENAME


def test_log_file_lives_in_cache_dir(tmp_path):
    settings = Settings()

    assert settings.cache_dir == tmp_path / "cache" / "commitweave"
    assert settings.log_file.name == "commitweave.log"


def test_invalid_timeout_rejected(monkeypatch):
    monkeypatch.setenv("COMMITWEAVE_REQUEST_TIMEOUT", "0")
    with pytest.raises(ValidationError):
        Settings()
