"""
Thin Git repository wrapper used by the commit and check commands.
"""

from pathlib import Path
from typing import Optional

from git import GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo
from loguru import logger

from ..exceptions import CommitWeaveError


class GitRepository:
    """Git repository interface."""

    def __init__(self, repo_path: Optional[Path] = None):
        """Initialize Git repository."""
        self.repo_path = repo_path or Path.cwd()
        self.repo: Optional[Repo] = None
        self._initialize_repo()

    def _initialize_repo(self) -> None:
        """Initialize the Git repository object."""
        try:
            self.repo = Repo(self.repo_path, search_parent_directories=True)
            logger.debug(f"Initialized Git repository at {self.repo.working_dir}")
        except (InvalidGitRepositoryError, NoSuchPathError):
            raise GitRepositoryError(f"Not a Git repository: {self.repo_path}")

    @property
    def is_valid(self) -> bool:
        """Check if this is a valid Git repository."""
        return self.repo is not None and not self.repo.bare

    def stage_all(self) -> None:
        """Stage every change in the working tree."""
        try:
            self.repo.git.add('--all')
            logger.info("Staged all changes")
        except GitCommandError as e:
            raise GitRepositoryError(f"Failed to stage files: {e}")

    def staged_diff(self) -> str:
        """Diff of the index against HEAD."""
        try:
            return self.repo.git.diff('--cached')
        except GitCommandError as e:
            raise GitRepositoryError(f"Failed to read staged changes: {e}")

    def commit(self, message: str) -> str:
        """Create a commit with the given message."""
        try:
            commit = self.repo.index.commit(message)
            logger.info(f"Created commit {commit.hexsha[:8]}: {message.splitlines()[0]}")
            return commit.hexsha
        except GitCommandError as e:
            raise GitRepositoryError(f"Failed to create commit: {e}")

    def latest_commit_message(self) -> str:
        """Message of the commit at HEAD."""
        try:
            return self.repo.head.commit.message.strip()
        except ValueError as e:
            raise GitRepositoryError(f"Repository has no commits yet: {e}")


class GitRepositoryError(CommitWeaveError):
    """Custom exception for Git repository operations."""

    default_suggestion = "Ensure you are in a valid Git repository with staged changes"
