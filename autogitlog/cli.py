# SPDX-License-Identifier: Apache-2.0
"""Command-line interface for writing git metadata artifacts."""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys
from typing import Any, Dict, List

from autogitlog.core import gitmeta, options, orchestrator, reporter
from autogitlog.core.fields import available_fields


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="autogitlog", description="Write git metadata for build pipelines")
    parser.add_argument("-f", "--fields", help=f"Comma-separated fields (available: {', '.join(available_fields())}; custom:<command> runs a command)")
    parser.add_argument("-C", "--cwd", help="Working directory to inspect (defaults to the current directory)")
    parser.add_argument("-c", "--config", type=pathlib.Path, help="YAML or JSON config file with fields, outputs and cwd")
    parser.add_argument("-o", "--out-dir", type=pathlib.Path, help="Directory for generated files (defaults to the working directory)")
    parser.add_argument("--format", action="append", choices=list(options.OUTPUT_KINDS), help="Artifact to emit with default options (repeatable, overrides config outputs)")
    parser.add_argument("--stdout", action="store_true", help="Print the metadata as JSON instead of writing files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every git query")
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[autogitlog] %(levelname)s %(message)s",
    )

    try:
        build_options = _load_build_options(args)
    except options.ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    record = gitmeta.resolve(build_options.fields, build_options.cwd)
    if not record:
        print("Warning: no git repository detected or no git metadata available")
        return 0

    if args.stdout:
        print(reporter.render_json(record))
        return 0

    output_dir = args.out_dir or build_options.cwd
    try:
        result = orchestrator.emit(record, build_options.outputs, output_dir)
    except options.ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Failed to write git metadata: {exc}", file=sys.stderr)
        return 1

    print("Generated git metadata: " + " ".join(str(path) for path in result.paths))
    return 0


def _load_build_options(args: argparse.Namespace) -> options.BuildOptions:
    raw: Dict[str, Any] = options.load_config(args.config) if args.config else {}
    if args.fields:
        raw["fields"] = options.split_fields(args.fields)
    if args.cwd:
        raw["cwd"] = args.cwd
    build_options = options.resolve_options(raw)
    if args.format:
        build_options.outputs = options.OutputSpec.from_formats(args.format)
    return build_options


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
