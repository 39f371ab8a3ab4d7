"""External compiler execution via a subprocess.

Renders the frozen build options into a compiler command line and runs it
when the entry file is submitted. The compiler's own output is not parsed; a
non-zero exit status is reported as a ``CompilationFailure`` and never
retried. The compiler runs in ``cwd`` (the project root when driven by the
CLI) or in the current directory when ``cwd`` is unset.
"""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

from kiln.drivers.base import WorkspaceRegistry
from kiln.errors import CompilationFailure
from kiln.models import BuildOptions, OptimizationLevel, OutputType, WorkspaceHandle
from kiln.toolchain import DEFAULT_COMPILER

_OPTIMIZATION_FLAGS: dict[OptimizationLevel, str] = {
    OptimizationLevel.DEBUG: "debug",
    OptimizationLevel.HIGH: "very_optimized",
    OptimizationLevel.SIZE_OPTIMIZED: "optimized_small",
}


def render_command(
    compiler: str,
    options: BuildOptions,
    entry_file: Path,
    extra_args: list[str] | tuple[str, ...] = (),
) -> list[str]:
    cmd = [
        compiler,
        str(entry_file),
        f"--backend={options.backend.value}",
        f"--optimization={_OPTIMIZATION_FLAGS[options.optimization_level]}",
    ]
    if not options.bounds_checking:
        cmd.append("--no-bounds-check")
    if options.output_type is OutputType.NONE:
        cmd.append("--no-output")
    else:
        cmd.extend([
            f"--output-path={options.output_path}",
            f"--output-name={options.output_name}",
        ])
    for import_path in options.import_paths:
        cmd.append(f"--import-dir={import_path}")
    cmd.extend(extra_args)
    return cmd


@dataclass(slots=True)
class SubprocessDriver:
    name: str = "subprocess"
    compiler: str = DEFAULT_COMPILER
    extra_args: list[str] = field(default_factory=list)
    cwd: Path | None = None
    registry: WorkspaceRegistry = field(default_factory=WorkspaceRegistry)

    def create_workspace(self, name: str) -> WorkspaceHandle:
        return self.registry.create(name)

    def set_options(self, handle: WorkspaceHandle, options: BuildOptions) -> None:
        self.registry.attach_options(handle, options)

    def add_entry_file(self, path: Path, handle: WorkspaceHandle) -> None:
        options = self.registry.options_for(handle)
        self._ensure_compiler_available()
        self.registry.get(handle).entry_files.append(path)

        cmd = render_command(self.compiler, options, path, self.extra_args)
        result = subprocess.run(
            cmd,
            cwd=str(self.cwd) if self.cwd is not None else None,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            raise CompilationFailure(
                "Compiler exited with a failure status.",
                hint="Check the compiler output for details.",
                context={
                    "driver": self.name,
                    "workspace": handle.name,
                    "returncode": str(result.returncode),
                    "stderr": result.stderr[:2000] if result.stderr else "",
                    "command": " ".join(cmd),
                },
            )

    def entry_files_for(self, handle: WorkspaceHandle) -> tuple[Path, ...]:
        return self.registry.entry_files_for(handle)

    def _ensure_compiler_available(self) -> None:
        if shutil.which(self.compiler) is None:
            raise CompilationFailure(
                f"Compiler executable '{self.compiler}' was not found on PATH.",
                hint="Install the compiler or pass --compiler / set KILN_COMPILER.",
                context={"driver": self.name},
            )
