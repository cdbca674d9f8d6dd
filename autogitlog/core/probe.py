"""Locate the git working copy for a directory."""

from __future__ import annotations

import pathlib

from autogitlog.core import runner


def is_repository(working_dir: str | pathlib.Path | None = None) -> bool:
    """Return ``True`` when *working_dir* is inside a git working copy.

    A ``.git`` entry directly under the directory answers without spawning
    git; otherwise ``git rev-parse --git-dir`` must succeed with output.
    """

    base = pathlib.Path(working_dir) if working_dir is not None else pathlib.Path.cwd()
    if (base / ".git").exists():
        return True
    result = runner.run_git(["rev-parse", "--git-dir"], cwd=working_dir)
    return result.ok and bool(result.stdout)


def get_root(working_dir: str | pathlib.Path | None = None) -> str:
    """Return the top-level directory of the working copy, or ``""``."""

    return runner.run_git(["rev-parse", "--show-toplevel"], cwd=working_dir).value()
