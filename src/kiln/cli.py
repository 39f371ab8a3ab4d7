"""Command-line entry point: ``kiln [options] [--] [tokens...]``."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from kiln.drivers import InProcessDriver, SubprocessDriver
from kiln.drivers.base import CompilerDriver
from kiln.errors import KilnError
from kiln.orchestrator import DEFAULT_ENTRY_FILE, Orchestrator
from kiln.toolchain import Toolchain
from kiln.workspace import workspace_identity_from_definition

DEFAULT_DEFINITION = "build.jai"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kiln",
        description="Configure the engine workspace and compile its entry file.",
    )
    location = parser.add_mutually_exclusive_group()
    location.add_argument(
        "--project-root",
        type=Path,
        help="Project root directory (defaults to the current directory).",
    )
    location.add_argument(
        "--definition",
        type=Path,
        help=f"Path of the build definition (defaults to <project-root>/{DEFAULT_DEFINITION}).",
    )
    parser.add_argument(
        "--diagnostics",
        action="store_true",
        help="Compile for diagnostics only; no executable is produced.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Record the compiler invocation without running the compiler.",
    )
    parser.add_argument("--compiler", help="Compiler executable (overrides KILN_COMPILER).")
    parser.add_argument("--entry", default=DEFAULT_ENTRY_FILE, help="Entry file relative to the project root.")
    parser.add_argument("--report", type=Path, help="Write a JSON build report to this path.")
    parser.add_argument("--log-json", type=Path, help="Write structured logs as JSON lines.")
    parser.add_argument("tokens", nargs="*", help="Build tokens, e.g. 'release'.")
    return parser


def _definition_path(args: argparse.Namespace) -> Path:
    if args.definition is not None:
        return args.definition
    root = args.project_root if args.project_root is not None else Path.cwd()
    return root / DEFAULT_DEFINITION


def main(argv: Sequence[str] | None = None) -> int:
    args, extra_tokens = build_parser().parse_known_args(argv)
    # Option-like build tokens are treated as unknown build tokens, not CLI errors.
    tokens = [*args.tokens, *extra_tokens]

    toolchain = Toolchain.from_env()
    if args.compiler:
        toolchain = replace(toolchain, compiler=args.compiler)

    try:
        identity = workspace_identity_from_definition(_definition_path(args))
    except KilnError as exc:
        print(f"error[{exc.code}]: {exc}", file=sys.stderr)
        return 1

    driver: CompilerDriver
    if args.dry_run:
        driver = InProcessDriver()
    else:
        driver = SubprocessDriver(compiler=toolchain.compiler, cwd=identity.project_root)

    orchestrator = Orchestrator(
        driver=driver,
        diagnostics=args.diagnostics,
        toolchain=toolchain,
        entry_file=args.entry,
    )
    try:
        submission = orchestrator.configure_and_build(tokens, _definition_path(args))
    except KilnError as exc:
        print(f"error[{exc.code}]: {exc}", file=sys.stderr)
        return 1
    finally:
        if args.log_json is not None:
            orchestrator.logger.to_json_lines(args.log_json)

    if args.report is not None:
        args.report.parent.mkdir(parents=True, exist_ok=True)
        args.report.write_text(
            json.dumps(submission.to_dict(), indent=2, sort_keys=True) + "\n",
            encoding="utf-8",
        )
    options = submission.options
    print(
        f"{submission.identity.name}: {options.backend.value}/{options.optimization_level.value}"
        f" -> {options.output_type.value} in {options.output_path}"
    )
    return 0
