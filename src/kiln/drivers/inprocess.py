"""In-process compiler driver for testing and dry runs.

Records every workspace, option set and entry file without invoking an
external compiler. Suitable for unit tests, ``kiln --dry-run`` and hosts that
only want to inspect the derived configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from kiln.drivers.base import WorkspaceRegistry
from kiln.models import BuildOptions, WorkspaceHandle


@dataclass(slots=True)
class InProcessDriver:
    name: str = "inprocess"
    registry: WorkspaceRegistry = field(default_factory=WorkspaceRegistry)
    submitted: list[tuple[WorkspaceHandle, BuildOptions, Path]] = field(default_factory=list)

    def create_workspace(self, name: str) -> WorkspaceHandle:
        return self.registry.create(name)

    def set_options(self, handle: WorkspaceHandle, options: BuildOptions) -> None:
        self.registry.attach_options(handle, options)

    def add_entry_file(self, path: Path, handle: WorkspaceHandle) -> None:
        options = self.registry.options_for(handle)
        self.registry.get(handle).entry_files.append(path)
        self.submitted.append((handle, options, path))

    def options_for(self, handle: WorkspaceHandle) -> BuildOptions:
        return self.registry.options_for(handle)

    def entry_files_for(self, handle: WorkspaceHandle) -> tuple[Path, ...]:
        return self.registry.entry_files_for(handle)
