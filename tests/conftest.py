import json
from pathlib import Path
from typing import Any, Dict

import pytest
from loguru import logger

from commitweave.config.defaults import default_document
from commitweave.config.store import ConfigStore


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv("COMMITWEAVE_CONFIG_PATH", str(tmp_path / "glinr-commit.json"))
    monkeypatch.setenv("COMMITWEAVE_GLOBAL_CONFIG_PATH", str(tmp_path / "home" / ".commitweaverc"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))
    monkeypatch.delenv("COMMITWEAVE_LOG_LEVEL", raising=False)
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test User")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test User")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@example.com")
    yield
    # CLI tests attach sinks to streams that are closed after each run
    logger.remove()


@pytest.fixture
def local_path(tmp_path: Path) -> Path:
    return tmp_path / "glinr-commit.json"


@pytest.fixture
def global_path(tmp_path: Path) -> Path:
    return tmp_path / "home" / ".commitweaverc"


@pytest.fixture
def store(local_path: Path, global_path: Path) -> ConfigStore:
    return ConfigStore(local_path, global_path)


@pytest.fixture
def document() -> Dict[str, Any]:
    return default_document()


@pytest.fixture
def write_json():
    def _write(path: Path, data: Any) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
