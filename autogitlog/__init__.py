# SPDX-License-Identifier: Apache-2.0
"""Stamp build outputs with git metadata."""

from .core.gitmeta import resolve
from .core.options import (
    BuildOptions,
    ConfigError,
    EnvOutput,
    JsonOutput,
    OutputSpec,
    TypesOutput,
    WindowOutput,
)
from .core.orchestrator import EmitResult, emit

__all__ = [
    "BuildOptions",
    "ConfigError",
    "EmitResult",
    "EnvOutput",
    "JsonOutput",
    "OutputSpec",
    "TypesOutput",
    "WindowOutput",
    "emit",
    "resolve",
]
