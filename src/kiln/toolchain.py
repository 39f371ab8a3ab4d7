"""Toolchain configuration passed explicitly to the orchestrator."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

COMPILER_ENV = "KILN_COMPILER"
IMPORT_PATH_ENV = "KILN_IMPORT_PATH"
DEFAULT_COMPILER = "jai"


@dataclass(frozen=True, slots=True)
class Toolchain:
    default_import_paths: tuple[Path, ...] = ()
    compiler: str = DEFAULT_COMPILER
    engine_dir: str = "engine"
    bin_dir: str = "bin"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Toolchain:
        env = os.environ if environ is None else environ
        raw_paths = env.get(IMPORT_PATH_ENV, "")
        import_paths = tuple(Path(entry) for entry in raw_paths.split(os.pathsep) if entry)
        return cls(
            default_import_paths=import_paths,
            compiler=env.get(COMPILER_ENV) or DEFAULT_COMPILER,
        )
