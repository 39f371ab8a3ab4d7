"""Workspace identity derivation from the build definition's location."""

from __future__ import annotations

import os
from pathlib import Path

from kiln.errors import ValidationError
from kiln.models import WorkspaceIdentity

_FORBIDDEN_CHARACTERS = frozenset({"/", "\\", "\0"})


def validate_workspace_name(name: str) -> str:
    if not name:
        raise ValidationError(
            "Workspace name must be non-empty.",
            hint="Place the build definition inside a named project directory.",
        )
    if name in {".", ".."} or _FORBIDDEN_CHARACTERS.intersection(name):
        raise ValidationError(
            "Workspace name is not filesystem-safe.",
            hint="Rename the project directory without path separators or NUL characters.",
            context={"name": name.replace("\0", "\\0")},
        )
    return name


def workspace_identity_from_definition(definition_path: str | Path) -> WorkspaceIdentity:
    """Derive the workspace identity from the path of the build definition.

    The definition file lives at the project root, so its parent directory is
    the project root and that directory names the workspace and the produced
    executable. Symlinks are not followed: a linked project is
    named after the link.
    """
    absolute = Path(os.path.normpath(Path(definition_path).expanduser().absolute()))
    project_root = absolute.parent
    return WorkspaceIdentity(
        name=validate_workspace_name(project_root.name),
        project_root=project_root,
    )
