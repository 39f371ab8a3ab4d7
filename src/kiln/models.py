"""Typed records for build configuration and submitted builds."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any


class Backend(StrEnum):
    NATIVE = "native"
    OPTIMIZING = "optimizing"


class OptimizationLevel(StrEnum):
    DEBUG = "debug"
    HIGH = "high"
    # No build token selects this level yet.
    SIZE_OPTIMIZED = "size_optimized"


class OutputType(StrEnum):
    EXECUTABLE = "executable"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class WorkspaceIdentity:
    """Name of the compilation workspace and the project root it came from."""

    name: str
    project_root: Path


@dataclass(frozen=True, slots=True)
class BuildOptions:
    """Frozen option set handed to a compiler driver."""

    backend: Backend
    optimization_level: OptimizationLevel
    bounds_checking: bool
    output_type: OutputType
    output_path: Path
    output_name: str
    import_paths: tuple[Path, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "backend": self.backend.value,
            "optimization_level": self.optimization_level.value,
            "bounds_checking": self.bounds_checking,
            "output_type": self.output_type.value,
            "output_path": str(self.output_path),
            "output_name": self.output_name,
            "import_paths": [str(path) for path in self.import_paths],
        }


@dataclass(slots=True)
class BuildConfiguration:
    """Mutable option set, adjusted by argument processing before it is frozen."""

    backend: Backend = Backend.NATIVE
    optimization_level: OptimizationLevel = OptimizationLevel.DEBUG
    bounds_checking: bool = True
    output_type: OutputType = OutputType.EXECUTABLE
    output_path: Path = field(default_factory=Path)
    output_name: str = ""
    import_paths: list[Path] = field(default_factory=list)

    def freeze(self) -> BuildOptions:
        return BuildOptions(
            backend=self.backend,
            optimization_level=self.optimization_level,
            bounds_checking=self.bounds_checking,
            output_type=self.output_type,
            output_path=self.output_path,
            output_name=self.output_name,
            import_paths=tuple(self.import_paths),
        )


@dataclass(frozen=True, slots=True)
class WorkspaceHandle:
    id: int
    name: str


@dataclass(frozen=True, slots=True)
class BuildSubmission:
    identity: WorkspaceIdentity
    options: BuildOptions
    entry_file: Path
    handle: WorkspaceHandle
    driver: str
    unknown_arguments: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "workspace": self.identity.name,
            "project_root": str(self.identity.project_root),
            "entry_file": str(self.entry_file),
            "driver": self.driver,
            "handle": {"id": self.handle.id, "name": self.handle.name},
            "options": self.options.to_dict(),
            "unknown_arguments": list(self.unknown_arguments),
        }
