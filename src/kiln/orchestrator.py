"""Build orchestration: derive compiler options and submit the entry file."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from kiln.arguments import apply_arguments
from kiln.drivers.base import CompilerDriver
from kiln.errors import FilesystemError
from kiln.models import (
    BuildConfiguration,
    BuildSubmission,
    OutputType,
    WorkspaceIdentity,
)
from kiln.observability import StructuredLogger
from kiln.toolchain import Toolchain
from kiln.workspace import workspace_identity_from_definition

DEFAULT_ENTRY_FILE = "src/main.jai"


def derive_configuration(
    args: Sequence[str],
    *,
    identity: WorkspaceIdentity,
    toolchain: Toolchain,
    diagnostics: bool = False,
    logger: StructuredLogger | None = None,
) -> tuple[BuildConfiguration, tuple[str, ...]]:
    """Build the configuration for ``identity`` without touching disk or driver.

    Returns the configuration together with the tokens that were not
    recognised.
    """
    log = logger if logger is not None else StructuredLogger()
    config = BuildConfiguration(
        output_type=OutputType.NONE if diagnostics else OutputType.EXECUTABLE,
    )
    config.import_paths = [
        *toolchain.default_import_paths,
        identity.project_root / toolchain.engine_dir,
    ]

    unknown = apply_arguments(config, args, logger=log, workspace=identity.name)

    # Diagnostics builds never produce a binary.
    config.output_type = OutputType.NONE if diagnostics else OutputType.EXECUTABLE
    config.output_name = identity.name
    config.output_path = identity.project_root / toolchain.bin_dir
    return config, unknown


def ensure_output_directory(path: Path) -> Path:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(
            "Unable to create the build output directory.",
            hint="Check that the project root is writable.",
            context={"path": str(path), "error": exc.strerror or str(exc)},
        ) from exc
    return path


@dataclass(slots=True)
class Orchestrator:
    """Configures a compiler workspace for one project and submits its entry file."""

    driver: CompilerDriver
    diagnostics: bool = False
    toolchain: Toolchain = field(default_factory=Toolchain)
    entry_file: str = DEFAULT_ENTRY_FILE
    logger: StructuredLogger = field(default_factory=StructuredLogger)

    def configure_and_build(
        self,
        args: Sequence[str],
        definition_path: str | Path,
    ) -> BuildSubmission:
        identity = workspace_identity_from_definition(definition_path)
        self.logger.log(
            operation="configure_start",
            workspace=identity.name,
            stage="configure",
            message="Deriving build configuration.",
            extra={"args": list(args), "diagnostics": self.diagnostics},
        )
        config, unknown = derive_configuration(
            args,
            identity=identity,
            toolchain=self.toolchain,
            diagnostics=self.diagnostics,
            logger=self.logger,
        )
        options = config.freeze()

        ensure_output_directory(options.output_path)
        self.logger.log(
            operation="prepare_output",
            workspace=identity.name,
            stage="prepare",
            message="Output directory ready.",
            extra={"path": str(options.output_path)},
        )

        handle = self.driver.create_workspace(identity.name)
        self.driver.set_options(handle, options)
        entry_path = identity.project_root / self.entry_file
        self.driver.add_entry_file(entry_path, handle)
        self.logger.log(
            operation="submit_entry_file",
            workspace=identity.name,
            stage="submit",
            message="Submitted entry file for compilation.",
            extra={"driver": self.driver.name, "entry_file": str(entry_path)},
        )
        return BuildSubmission(
            identity=identity,
            options=options,
            entry_file=entry_path,
            handle=handle,
            driver=self.driver.name,
            unknown_arguments=unknown,
        )
