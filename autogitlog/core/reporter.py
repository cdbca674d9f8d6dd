# SPDX-License-Identifier: Apache-2.0
"""Render git metadata records into build artifacts."""

from __future__ import annotations

import json
import pathlib
from typing import Any, List, Mapping, Optional

from autogitlog.core.options import (
    JS_IDENTIFIER,
    EnvOutput,
    JsonOutput,
    TypesOutput,
    WindowOutput,
    check_identifier,
)

DEFAULT_JSON_FILE = "git-log.json"
DEFAULT_WINDOW_VAR = "__GIT_LOG__"
DEFAULT_ENV_PREFIX = "__GIT_"
DEFAULT_ENV_FILE = ".env.git"
DEFAULT_TYPES_FILE = "git-log.d.ts"
DEFAULT_INTERFACE_NAME = "GitLog"

Record = Mapping[str, Any]


def render_json(record: Record) -> str:
    return json.dumps(record, indent=2, ensure_ascii=False)


def render_window_script(record: Record, options: Optional[WindowOutput] = None) -> str:
    options = options or WindowOutput()
    var_name = _window_var_name(options)
    # "</" would close an inline <script> block early.
    payload = json.dumps(record, indent=2, ensure_ascii=False).replace("</", "<\\/")
    lines: List[str] = [
        "(function() {",
        "  if (typeof window !== 'undefined') {",
        f"    window.{var_name} = {_indent_block(payload, '    ')};",
    ]
    if options.log_to_console:
        lines.append(f"    console.log('[Git Log]', window.{var_name});")
    lines.extend(["  }", "})();"])
    return "\n".join(lines)


def render_env(record: Record, options: Optional[EnvOutput] = None) -> str:
    prefix = (options.prefix if options else None) or DEFAULT_ENV_PREFIX
    lines = [f'{prefix}{key.upper()}="{_escape_env_value(value)}"' for key, value in record.items()]
    return "\n".join(lines)


def render_type_declarations(record: Record, options: Optional[TypesOutput] = None) -> str:
    interface_name = (options.interface_name if options else None) or DEFAULT_INTERFACE_NAME
    check_identifier(interface_name, "interface name")
    lines = [f"export interface {interface_name} {{"]
    for key, value in record.items():
        name = key if JS_IDENTIFIER.match(key) else json.dumps(key)
        lines.append(f"  {name}: {'boolean' if isinstance(value, bool) else 'string'}")
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_json(
    record: Record,
    options: Optional[JsonOutput] = None,
    output_dir: pathlib.Path | str | None = None,
) -> pathlib.Path:
    file_name = (options.file_name if options else None) or DEFAULT_JSON_FILE
    return _write(resolve_target(file_name, output_dir), render_json(record))


def write_window_script(
    record: Record,
    options: Optional[WindowOutput] = None,
    output_dir: pathlib.Path | str | None = None,
) -> str:
    """Write ``<varName>.js`` and return the file name for script references."""

    options = options or WindowOutput()
    file_name = f"{_window_var_name(options)}.js"
    _write(resolve_target(file_name, output_dir), render_window_script(record, options))
    return file_name


def write_env(
    record: Record,
    options: Optional[EnvOutput] = None,
    output_dir: pathlib.Path | str | None = None,
) -> pathlib.Path:
    file_name = (options.file if options else None) or DEFAULT_ENV_FILE
    return _write(resolve_target(file_name, output_dir), render_env(record, options))


def write_type_declarations(
    record: Record,
    options: Optional[TypesOutput] = None,
    output_dir: pathlib.Path | str | None = None,
) -> pathlib.Path:
    file_name = (options.file_name if options else None) or DEFAULT_TYPES_FILE
    return _write(resolve_target(file_name, output_dir), render_type_declarations(record, options))


def resolve_target(file_name: str, output_dir: pathlib.Path | str | None) -> pathlib.Path:
    """Absolute names are used as-is; relative ones land under *output_dir*."""

    target = pathlib.Path(file_name)
    if target.is_absolute() or output_dir is None:
        return target
    return pathlib.Path(output_dir) / target


def _write(path: pathlib.Path, content: str) -> pathlib.Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def _window_var_name(options: WindowOutput) -> str:
    return check_identifier(options.var_name or DEFAULT_WINDOW_VAR, "window variable name")


def _indent_block(text: str, indent: str) -> str:
    head, *rest = text.split("\n")
    return "\n".join([head, *(indent + line for line in rest)])


def _escape_env_value(value: Any) -> str:
    if isinstance(value, bool):
        text = "true" if value else "false"
    else:
        text = str(value)
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\r", "\\r")
        .replace("\n", "\\n")
    )
