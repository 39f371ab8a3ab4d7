from pathlib import Path

import pytest

from kiln.errors import ValidationError
from kiln.workspace import validate_workspace_name, workspace_identity_from_definition


def test_identity_is_named_after_project_root(tmp_path: Path) -> None:
    definition = tmp_path / "my-game" / "build.jai"

    identity = workspace_identity_from_definition(definition)

    assert identity.name == "my-game"
    assert identity.project_root == tmp_path / "my-game"


def test_identity_ignores_definition_extension(tmp_path: Path) -> None:
    first = workspace_identity_from_definition(tmp_path / "engine_demo" / "first.jai")
    second = workspace_identity_from_definition(tmp_path / "engine_demo" / "first")

    assert first == second


def test_identity_is_immutable(tmp_path: Path) -> None:
    identity = workspace_identity_from_definition(tmp_path / "proj" / "build.jai")

    with pytest.raises(AttributeError):
        identity.name = "other"  # type: ignore[misc]


@pytest.mark.parametrize(
    "name", ["game", "My Game", "game_2.0", "a-b", "jeu_été", "game+2", "bad:name"]
)
def test_safe_names_pass_validation(name: str) -> None:
    assert validate_workspace_name(name) == name


@pytest.mark.parametrize("name", ["", ".", "..", "a/b", "a\\b", "nul\0"])
def test_unsafe_names_are_rejected(name: str) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_workspace_name(name)

    assert excinfo.value.code == "E_VALIDATION"
    assert excinfo.value.hint is not None


def test_definition_at_filesystem_root_is_rejected() -> None:
    with pytest.raises(ValidationError):
        workspace_identity_from_definition(Path("/build.jai"))


def test_symlinked_project_is_named_after_the_link(tmp_path: Path) -> None:
    target = tmp_path / "checkout-1234"
    target.mkdir()
    link = tmp_path / "spacegame"
    link.symlink_to(target, target_is_directory=True)

    identity = workspace_identity_from_definition(link / "build.jai")

    assert identity.name == "spacegame"
    assert identity.project_root == link


def test_relative_definition_is_normalised(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "proj" / "tools").mkdir(parents=True)
    monkeypatch.chdir(tmp_path / "proj" / "tools")

    identity = workspace_identity_from_definition(Path("..") / "build.jai")

    assert identity.name == "proj"
    assert identity.project_root == Path.cwd().parent
