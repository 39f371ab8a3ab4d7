"""Inspect the derived configuration without invoking the compiler."""

import sys
from pathlib import Path

from kiln import InProcessDriver, Orchestrator


def dry_run(project_root: Path, args: list[str]) -> None:
    driver = InProcessDriver()
    submission = Orchestrator(driver=driver).configure_and_build(args, project_root / "build.jai")
    for key, value in submission.options.to_dict().items():
        print(f"{key}: {value}")


if __name__ == "__main__":
    dry_run(Path.cwd(), sys.argv[1:])
