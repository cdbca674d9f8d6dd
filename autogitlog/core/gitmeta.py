# SPDX-License-Identifier: Apache-2.0
"""Collect git metadata for build artifacts."""

from __future__ import annotations

import logging
import os
import pathlib
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Union

from autogitlog.core import probe, runner
from autogitlog.core.fields import (
    CustomField,
    FieldName,
    field_key,
    parse_field,
    repo_name_from_url,
)

_LOG = logging.getLogger(__name__)

FieldValue = Union[str, bool]
MetadataRecord = Dict[str, FieldValue]

DETACHED_HEAD = "HEAD"


@dataclass
class _ResolveContext:
    cwd: Optional[str]
    root: str = ""

    def git(self, *args: str) -> str:
        return runner.run_git(args, cwd=self.cwd).value()


def resolve(
    fields: Iterable[str],
    working_dir: str | pathlib.Path | None = None,
) -> MetadataRecord:
    """Resolve each requested field against the working copy at *working_dir*.

    Returns an empty record when nothing is requested or the directory is not
    a git working copy. Unknown field names are skipped; fields whose git
    query fails resolve to ``""`` (``False`` for ``isDirty``).
    """

    requested = list(fields)
    if not requested:
        return {}
    parsed = [field for field in map(parse_field, requested) if field is not None]

    cwd = str(working_dir) if working_dir is not None else None
    if not probe.is_repository(cwd):
        _LOG.warning("Not a git repository or .git is not accessible: %s", cwd or os.getcwd())
        return {}

    context = _ResolveContext(cwd=cwd)
    if any(field in (FieldName.REPO, FieldName.ROOT) for field in parsed):
        context.root = probe.get_root(cwd)

    record: MetadataRecord = {}
    for field in parsed:
        key = field_key(field)
        if key in record:
            continue
        if isinstance(field, CustomField):
            record[key] = runner.run_command(field.command, cwd=cwd).value()
        else:
            record[key] = _RESOLVERS[field](context)
    return record


def _resolve_repo(context: _ResolveContext) -> str:
    remote_url = context.git("config", "--get", "remote.origin.url")
    if remote_url:
        return repo_name_from_url(remote_url) or remote_url
    return os.path.basename(context.root) if context.root else ""


def _resolve_branch(context: _ResolveContext) -> str:
    branch = context.git("rev-parse", "--abbrev-ref", "HEAD")
    if branch != DETACHED_HEAD:
        return branch
    # Detached: prefer a tag pointing at HEAD, then the short hash.
    tag = _exact_tag(context)
    if tag:
        return tag
    return context.git("rev-parse", "--short", "HEAD") or DETACHED_HEAD


def _exact_tag(context: _ResolveContext) -> str:
    return context.git("describe", "--tags", "--exact-match", "HEAD")


def _last_commit(placeholder: str) -> Callable[[_ResolveContext], str]:
    def resolver(context: _ResolveContext) -> str:
        return context.git("log", "-1", f"--pretty=format:{placeholder}")

    return resolver


def _resolve_commit_message(context: _ResolveContext) -> str:
    subject = _last_commit("%s")(context)
    return " ".join(line.strip() for line in subject.splitlines() if line.strip())


def _resolve_is_dirty(context: _ResolveContext) -> bool:
    status = runner.run_git(["status", "--porcelain"], cwd=context.cwd)
    return status.ok and bool(status.stdout)


_RESOLVERS: Dict[FieldName, Callable[[_ResolveContext], FieldValue]] = {
    FieldName.REPO: _resolve_repo,
    FieldName.BRANCH: _resolve_branch,
    FieldName.COMMIT: lambda context: context.git("rev-parse", "HEAD"),
    FieldName.COMMIT_SHORT: lambda context: context.git("rev-parse", "--short", "HEAD"),
    FieldName.AUTHOR: _last_commit("%an"),
    FieldName.AUTHOR_EMAIL: _last_commit("%ae"),
    FieldName.COMMIT_TIME: _last_commit("%cI"),
    FieldName.COMMIT_MESSAGE: _resolve_commit_message,
    FieldName.TAG: _exact_tag,
    FieldName.IS_DIRTY: _resolve_is_dirty,
    FieldName.REMOTE_URL: lambda context: context.git("config", "--get", "remote.origin.url"),
    FieldName.ROOT: lambda context: context.root,
}

_MISSING = set(FieldName) - set(_RESOLVERS)
if _MISSING:  # pragma: no cover - guards edits to FieldName
    raise RuntimeError(f"No resolver registered for fields: {sorted(f.value for f in _MISSING)}")
