# SPDX-License-Identifier: Apache-2.0
"""Field identifiers understood by the metadata resolver."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

CUSTOM_PREFIX = "custom:"


class FieldName(str, Enum):
    """Built-in metadata fields."""

    REPO = "repo"
    BRANCH = "branch"
    COMMIT = "commit"
    COMMIT_SHORT = "commitShort"
    AUTHOR = "author"
    AUTHOR_EMAIL = "authorEmail"
    COMMIT_TIME = "commitTime"
    COMMIT_MESSAGE = "commitMessage"
    TAG = "tag"
    IS_DIRTY = "isDirty"
    REMOTE_URL = "remoteUrl"
    ROOT = "root"


@dataclass(frozen=True)
class CustomField:
    """A ``custom:<command>`` request; ``key`` is the field string as requested."""

    key: str
    command: str


Field = Union[FieldName, CustomField]


def parse_field(name: str) -> Optional[Field]:
    """Map a requested field string to its field, or ``None`` when unrecognized."""

    if name.startswith(CUSTOM_PREFIX):
        command = name[len(CUSTOM_PREFIX):]
        if not command.strip():
            return None
        return CustomField(key=name, command=command)
    try:
        return FieldName(name)
    except ValueError:
        return None


def field_key(field: Field) -> str:
    if isinstance(field, CustomField):
        return field.key
    return field.value


def available_fields() -> List[str]:
    return [field.value for field in FieldName]


def repo_name_from_url(url: str) -> str:
    """Extract the short repository name from a remote URL.

    Handles ``https://host/owner/name.git``, ``git@host:owner/name.git``,
    ``ssh://git@host:22/owner/name`` and plain filesystem paths.
    """

    cleaned = url.strip().rstrip("/")
    if cleaned.endswith(".git"):
        cleaned = cleaned[: -len(".git")]
    cleaned = cleaned.rstrip("/").replace("\\", "/")
    name = posixpath.basename(cleaned)
    if ":" in name:
        name = name.rsplit(":", 1)[1]
    return name
