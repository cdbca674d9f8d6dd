# SPDX-License-Identifier: Apache-2.0
"""Dispatch a metadata record to the configured emitters."""

from __future__ import annotations

import logging
import pathlib
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from autogitlog.core import reporter
from autogitlog.core.options import JsonOutput, OutputSpec

_LOG = logging.getLogger(__name__)


@dataclass
class EmitResult:
    window_file_name: Optional[str] = None
    paths: List[pathlib.Path] = field(default_factory=list)


def normalize_output_spec(spec: Optional[OutputSpec]) -> OutputSpec:
    """An absent or empty spec means JSON only, never nothing.

    Raises :class:`ConfigError` for invalid generated-code names, so a bad
    spec fails before any artifact is written.
    """

    if spec is None or spec.is_empty():
        return OutputSpec(json=JsonOutput())
    return spec.validate()


def emit(
    record: Mapping[str, Any],
    spec: Optional[OutputSpec] = None,
    output_dir: pathlib.Path | str | None = None,
) -> EmitResult:
    spec = normalize_output_spec(spec)
    result = EmitResult()

    if spec.json is not None:
        result.paths.append(reporter.write_json(record, spec.json, output_dir))

    if spec.window is not None:
        result.window_file_name = reporter.write_window_script(record, spec.window, output_dir)
        result.paths.append(reporter.resolve_target(result.window_file_name, output_dir))

    if spec.env is not None:
        result.paths.append(reporter.write_env(record, spec.env, output_dir))

    if spec.types is not None:
        result.paths.append(reporter.write_type_declarations(record, spec.types, output_dir))

    for path in result.paths:
        _LOG.debug("Wrote %s", path)
    return result
