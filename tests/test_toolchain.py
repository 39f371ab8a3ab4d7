import os
from pathlib import Path

from kiln.toolchain import DEFAULT_COMPILER, Toolchain


def test_toolchain_defaults() -> None:
    toolchain = Toolchain()

    assert toolchain.default_import_paths == ()
    assert toolchain.compiler == DEFAULT_COMPILER
    assert toolchain.engine_dir == "engine"
    assert toolchain.bin_dir == "bin"


def test_toolchain_from_env_reads_compiler_and_import_paths() -> None:
    environ = {
        "KILN_COMPILER": "/opt/jai/bin/jai-linux",
        "KILN_IMPORT_PATH": os.pathsep.join(["/opt/jai/modules", "", "/opt/shared"]),
    }

    toolchain = Toolchain.from_env(environ)

    assert toolchain.compiler == "/opt/jai/bin/jai-linux"
    assert toolchain.default_import_paths == (Path("/opt/jai/modules"), Path("/opt/shared"))


def test_toolchain_from_empty_env_uses_defaults() -> None:
    assert Toolchain.from_env({}) == Toolchain()
