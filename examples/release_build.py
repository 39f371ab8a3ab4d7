"""Optimized build of an engine project with an explicit toolchain."""

from pathlib import Path

from kiln import Orchestrator, SubprocessDriver, Toolchain


def build_release(project_root: Path) -> None:
    toolchain = Toolchain(default_import_paths=(Path("/opt/jai/modules"),))
    driver = SubprocessDriver(compiler=toolchain.compiler, extra_args=["-quiet"], cwd=project_root)
    orchestrator = Orchestrator(driver=driver, toolchain=toolchain)
    orchestrator.configure_and_build(["release"], project_root / "build.jai")
    orchestrator.logger.to_json_lines(project_root / "bin" / "build.jsonl")


if __name__ == "__main__":
    build_release(Path.cwd())
