"""Public package entrypoint for the kiln build orchestrator."""

from .drivers import CompilerDriver, InProcessDriver, SubprocessDriver
from .errors import (
    CompilationFailure,
    ErrorCode,
    FilesystemError,
    KilnError,
    UnrecognizedArgumentWarning,
    ValidationError,
)
from .models import (
    Backend,
    BuildConfiguration,
    BuildOptions,
    BuildSubmission,
    OptimizationLevel,
    OutputType,
    WorkspaceHandle,
    WorkspaceIdentity,
)
from .orchestrator import Orchestrator, derive_configuration
from .toolchain import Toolchain

__all__ = [
    "Backend",
    "BuildConfiguration",
    "BuildOptions",
    "BuildSubmission",
    "CompilationFailure",
    "CompilerDriver",
    "ErrorCode",
    "FilesystemError",
    "InProcessDriver",
    "KilnError",
    "OptimizationLevel",
    "Orchestrator",
    "OutputType",
    "SubprocessDriver",
    "Toolchain",
    "UnrecognizedArgumentWarning",
    "ValidationError",
    "WorkspaceHandle",
    "WorkspaceIdentity",
    "derive_configuration",
]
