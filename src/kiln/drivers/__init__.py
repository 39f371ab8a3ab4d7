"""Compiler driver interfaces and implementations."""

from .base import CompilerDriver, WorkspaceRegistry, WorkspaceState
from .external import SubprocessDriver, render_command
from .inprocess import InProcessDriver

__all__ = [
    "CompilerDriver",
    "InProcessDriver",
    "SubprocessDriver",
    "WorkspaceRegistry",
    "WorkspaceState",
    "render_command",
]
