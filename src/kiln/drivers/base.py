"""Protocol for compiler drivers and shared workspace bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from kiln.errors import ValidationError
from kiln.models import BuildOptions, WorkspaceHandle


class CompilerDriver(Protocol):
    name: str

    def create_workspace(self, name: str) -> WorkspaceHandle:
        """Open an isolated compilation workspace."""

    def set_options(self, handle: WorkspaceHandle, options: BuildOptions) -> None:
        """Attach the frozen option set to the workspace."""

    def add_entry_file(self, path: Path, handle: WorkspaceHandle) -> None:
        """Submit the entry file for compilation under the workspace."""


@dataclass(slots=True)
class WorkspaceState:
    handle: WorkspaceHandle
    options: BuildOptions | None = None
    entry_files: list[Path] = field(default_factory=list)


@dataclass(slots=True)
class WorkspaceRegistry:
    """Tracks workspaces opened by a driver and enforces call ordering."""

    workspaces: dict[int, WorkspaceState] = field(default_factory=dict)

    def create(self, name: str) -> WorkspaceHandle:
        if not name:
            raise ValidationError("create_workspace() requires a non-empty name.")
        handle = WorkspaceHandle(id=len(self.workspaces) + 1, name=name)
        self.workspaces[handle.id] = WorkspaceState(handle=handle)
        return handle

    def get(self, handle: WorkspaceHandle) -> WorkspaceState:
        state = self.workspaces.get(handle.id)
        if state is None or state.handle != handle:
            raise ValidationError(
                "Unknown workspace handle.",
                hint="Create the workspace with create_workspace() on the same driver.",
                context={"workspace": handle.name, "id": str(handle.id)},
            )
        return state

    def attach_options(self, handle: WorkspaceHandle, options: BuildOptions) -> None:
        state = self.get(handle)
        if state.options is not None:
            raise ValidationError(
                "Build options are already set for this workspace.",
                hint="Options are frozen once submitted; create a new workspace instead.",
                context={"workspace": handle.name},
            )
        state.options = options

    def options_for(self, handle: WorkspaceHandle) -> BuildOptions:
        state = self.get(handle)
        if state.options is None:
            raise ValidationError(
                "add_entry_file() called before set_options().",
                hint="Set build options on the workspace before submitting files.",
                context={"workspace": handle.name},
            )
        return state.options

    def entry_files_for(self, handle: WorkspaceHandle) -> tuple[Path, ...]:
        return tuple(self.get(handle).entry_files)
