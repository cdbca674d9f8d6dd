# SPDX-License-Identifier: Apache-2.0
"""Output and build options, plus config file loading."""

from __future__ import annotations

import pathlib
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

import yaml

from autogitlog.core.fields import FieldName

DEFAULT_FIELDS: List[str] = [
    FieldName.REPO.value,
    FieldName.BRANCH.value,
    FieldName.COMMIT.value,
    FieldName.COMMIT_SHORT.value,
    FieldName.AUTHOR.value,
    FieldName.AUTHOR_EMAIL.value,
    FieldName.COMMIT_TIME.value,
    FieldName.COMMIT_MESSAGE.value,
    FieldName.IS_DIRTY.value,
]

OUTPUT_KINDS = ("json", "window", "env", "types")

JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


class ConfigError(ValueError):
    """Raised for unreadable or malformed configuration."""


@dataclass(frozen=True)
class JsonOutput:
    file_name: Optional[str] = None


@dataclass(frozen=True)
class WindowOutput:
    var_name: Optional[str] = None
    log_to_console: bool = False


@dataclass(frozen=True)
class EnvOutput:
    prefix: Optional[str] = None
    file: Optional[str] = None


@dataclass(frozen=True)
class TypesOutput:
    file_name: Optional[str] = None
    interface_name: Optional[str] = None


@dataclass(frozen=True)
class OutputSpec:
    """Which emitters run and with what options; ``None`` disables an emitter."""

    json: Optional[JsonOutput] = None
    window: Optional[WindowOutput] = None
    env: Optional[EnvOutput] = None
    types: Optional[TypesOutput] = None

    def is_empty(self) -> bool:
        return all(getattr(self, kind) is None for kind in OUTPUT_KINDS)

    def validate(self) -> "OutputSpec":
        """Check names that end up in generated code before anything is written."""

        if self.window is not None and self.window.var_name is not None:
            check_identifier(self.window.var_name, "outputs.window.varName")
        if self.types is not None and self.types.interface_name is not None:
            check_identifier(self.types.interface_name, "outputs.types.interfaceName")
        return self

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "OutputSpec":
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigError(f"outputs must be a mapping, got {type(data).__name__}")
        unknown = sorted(set(data) - set(OUTPUT_KINDS))
        if unknown:
            raise ConfigError(f"Unknown output kinds: {', '.join(unknown)}")

        json_opts = _section(data, "json")
        window_opts = _section(data, "window")
        env_opts = _section(data, "env")
        types_opts = _section(data, "types")
        spec = cls(
            json=None if json_opts is None else JsonOutput(
                file_name=_optional_str(json_opts, "json", "fileName", "file_name"),
            ),
            window=None if window_opts is None else WindowOutput(
                var_name=_optional_str(window_opts, "window", "varName", "var_name"),
                log_to_console=_optional_bool(window_opts, "window", "console", "logToConsole", "log_to_console"),
            ),
            env=None if env_opts is None else EnvOutput(
                prefix=_optional_str(env_opts, "env", "prefix"),
                file=_optional_str(env_opts, "env", "file", "fileName", "file_name"),
            ),
            types=None if types_opts is None else TypesOutput(
                file_name=_optional_str(types_opts, "types", "fileName", "file_name"),
                interface_name=_optional_str(types_opts, "types", "interfaceName", "interface_name"),
            ),
        )
        return spec.validate()

    @classmethod
    def from_formats(cls, formats: Sequence[str]) -> "OutputSpec":
        """Enable the named emitters with default options."""

        return cls.from_dict({kind: {} for kind in formats})


@dataclass
class BuildOptions:
    fields: List[str] = field(default_factory=lambda: list(DEFAULT_FIELDS))
    outputs: OutputSpec = field(default_factory=OutputSpec)
    cwd: Optional[str] = None


def resolve_options(raw: Optional[Mapping[str, Any]] = None) -> BuildOptions:
    """Turn a raw config mapping into :class:`BuildOptions`, filling defaults."""

    raw = raw or {}
    fields = _parse_fields(raw.get("fields"))
    cwd = raw.get("cwd")
    if cwd is not None and not isinstance(cwd, str):
        raise ConfigError("cwd must be a string")
    return BuildOptions(
        fields=fields if fields else list(DEFAULT_FIELDS),
        outputs=OutputSpec.from_dict(raw.get("outputs")),
        cwd=cwd,
    )


def load_config(path: pathlib.Path) -> Dict[str, Any]:
    """Load a YAML or JSON config file into a mapping."""

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid config file {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def split_fields(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _parse_fields(value: object) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return split_fields(value)
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    raise ConfigError("fields must be a list or a comma-separated string")


def _section(data: Mapping[str, Any], kind: str) -> Optional[Mapping[str, Any]]:
    if kind not in data:
        return None
    value = data[kind]
    if value is False:
        return None
    if value is None or value is True:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError(f"outputs.{kind} must be a mapping, true/false, or empty")
    return value


def _pick(options: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if options.get(key) is not None:
            return options[key]
    return None


def _optional_str(options: Mapping[str, Any], kind: str, *keys: str) -> Optional[str]:
    value = _pick(options, *keys)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"outputs.{kind}.{keys[0]} must be a string")
    return value or None


def _optional_bool(options: Mapping[str, Any], kind: str, *keys: str) -> bool:
    value = _pick(options, *keys)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigError(f"outputs.{kind}.{keys[0]} must be true or false")
    return value


def check_identifier(value: str, label: str) -> str:
    if not JS_IDENTIFIER.match(value):
        raise ConfigError(f"{label} must be a JavaScript identifier, got {value!r}")
    return value
