import asyncio
import io
import json
from pathlib import Path

import pytest
from git import Repo
from rich.console import Console

from commitweave.config.defaults import default_document
from commitweave.config.settings import Settings
from commitweave.core import CommitWeave
from commitweave.exceptions import BuilderStateError
from commitweave.git_ops.repository import GitRepository, GitRepositoryError
from commitweave.ui.console import CommitWeaveConsole


@pytest.fixture
def engine():
    console = CommitWeaveConsole(console=Console(file=io.StringIO(), width=120))
    return CommitWeave(Settings(), console=console)


@pytest.fixture
def repo(tmp_path):
    path = tmp_path / "repo"
    repository = Repo.init(path)
    (path / "README.md").write_text("hello\n", encoding="utf-8")
    repository.index.add(["README.md"])
    return repository


def test_create_commit(engine, repo):
    message = asyncio.run(engine.create_commit(
        commit_type="docs",
        subject="add readme",
        body="Explains the project.",
        auto_confirm=True,
        repo_path=repo.working_dir,
    ))

    assert message == "docs: 📚 add readme\n\nExplains the project."
    assert repo.head.commit.message == message


def test_create_commit_stages_all(engine, repo):
    (Path(repo.working_dir) / "new.txt").write_text("x", encoding="utf-8")

    asyncio.run(engine.create_commit(
        commit_type="feat", subject="add file", stage_all=True, auto_confirm=True, repo_path=repo.working_dir,
    ))

    assert "new.txt" in [blob.path for blob in repo.head.commit.tree.blobs]


def test_create_commit_with_ai_fills_missing_fields(engine, repo):
    message = asyncio.run(engine.create_commit(use_ai=True, dry_run=True, repo_path=repo.working_dir))

    assert message.startswith("feat: ✨ ")
    assert not repo.head.is_valid()


def test_create_commit_rejects_unknown_type(engine):
    with pytest.raises(BuilderStateError) as excinfo:
        asyncio.run(engine.create_commit(commit_type="refactr", subject="x", dry_run=True))

    assert excinfo.value.suggestion == 'Did you mean "refactor"?'


def test_check_latest_commit(engine, repo):
    repo.index.commit("fix: correct typo")

    result = engine.check_commit(repo_path=repo.working_dir)

    assert result.valid


def test_repository_wrapper(repo, tmp_path):
    wrapper = GitRepository(repo.working_dir)

    assert wrapper.is_valid
    assert "README.md" in wrapper.staged_diff()
    sha = wrapper.commit("chore: init")
    assert wrapper.latest_commit_message() == "chore: init"
    assert len(sha) == 40

    with pytest.raises(GitRepositoryError):
        GitRepository(tmp_path / "missing")


def test_latest_commit_in_empty_repository(repo):
    with pytest.raises(GitRepositoryError, match="no commits"):
        GitRepository(repo.working_dir).latest_commit_message()


def test_export_and_reset(engine, local_path, tmp_path):
    exported = engine.export_config(tmp_path / "out.json", "minimal")

    assert set(exported) == {
        "version", "commitTypes", "emojiEnabled", "conventionalCommits", "maxSubjectLength", "maxBodyLength"
    }
    assert engine.reset_config(force=True)
    assert local_path.exists()


def test_import_returns_whether_written(engine, tmp_path, write_json, document):
    document["emojiEnabled"] = False
    source = write_json(tmp_path / "team.json", document)

    assert asyncio.run(engine.import_config(str(source), dry_run=True)) is False
    assert asyncio.run(engine.import_config(str(source), auto_confirm=True)) is True
    assert engine.store.load().emoji_enabled is False


def test_import_preview_hides_secrets(engine, local_path, tmp_path, write_json, document):
    current = default_document()
    current["claude"]["apiKey"] = "sk-ant-LIVE-SECRET"
    write_json(local_path, current)
    document["claude"]["apiKey"] = "sk-ant-NEW-SECRET"
    source = write_json(tmp_path / "team.json", document)

    asyncio.run(engine.import_config(str(source), dry_run=True))

    output = engine.console.console.file.getvalue()
    assert "claude.apiKey" in output
    assert "sk-ant-LIVE-SECRET" not in output
    assert "sk-ant-NEW-SECRET" not in output


def test_full_export_round_trip_keeps_credentials(engine, local_path, tmp_path, write_json):
    current = default_document()
    current["claude"]["apiKey"] = "sk-live"
    write_json(local_path, current)
    exported = tmp_path / "export.json"
    engine.export_config(exported, "full")

    edited = json.loads(exported.read_text(encoding="utf-8"))
    edited["maxSubjectLength"] = 60
    write_json(exported, edited)

    assert asyncio.run(engine.import_config(str(exported), auto_confirm=True))
    config = engine.store.load()
    assert config.claude.api_key == "sk-live"
    assert config.max_subject_length == 60
