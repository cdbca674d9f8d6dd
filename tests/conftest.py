import shutil
import subprocess
from pathlib import Path

import pytest


def _run_git(repo: Path, *args: str) -> str:
    completed = subprocess.run(["git", *args], cwd=repo, check=True, capture_output=True, text=True)
    return completed.stdout.strip()


@pytest.fixture
def git():
    """Run a git command in a repository and return its trimmed stdout."""

    if shutil.which("git") is None:
        pytest.skip("git executable not available")
    return _run_git


@pytest.fixture
def git_repo(tmp_path: Path, git) -> Path:
    repo = tmp_path / "widgets"
    repo.mkdir()
    git(repo, "init", "-q")
    git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
    git(repo, "config", "user.name", "Test User")
    git(repo, "config", "user.email", "test@example.com")
    git(repo, "config", "commit.gpgsign", "false")
    git(repo, "config", "tag.gpgsign", "false")
    (repo / "README.md").write_text("hello\n", encoding="utf-8")
    git(repo, "add", "README.md")
    git(repo, "commit", "-q", "-m", "Initial commit")
    return repo
