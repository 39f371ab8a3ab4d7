import json
from pathlib import Path

import pytest

from kiln import InProcessDriver, Orchestrator, UnrecognizedArgumentWarning
from kiln.observability import StructuredLogger


def test_build_logs_carry_workspace_and_stage(definition: Path) -> None:
    orchestrator = Orchestrator(driver=InProcessDriver())
    orchestrator.configure_and_build(["release"], definition)

    records = orchestrator.logger.records_for_workspace("spacegame")
    assert [record["operation"] for record in records] == [
        "configure_start",
        "apply_argument",
        "prepare_output",
        "submit_entry_file",
    ]
    for record in records:
        assert record["stage"] in {"configure", "prepare", "submit"}
        assert record["message"]


def test_each_unknown_argument_logs_one_warning(definition: Path) -> None:
    orchestrator = Orchestrator(driver=InProcessDriver())
    with pytest.warns(UnrecognizedArgumentWarning):
        orchestrator.configure_and_build(["foo", "bar", "foo"], definition)

    warnings = orchestrator.logger.records_at_level("warning")
    assert [record["message"] for record in warnings] == [
        "Unknown argument: foo",
        "Unknown argument: bar",
        "Unknown argument: foo",
    ]


def test_json_lines_export(tmp_path: Path) -> None:
    logger = StructuredLogger()
    logger.log(operation="one", workspace="w", stage="configure", message="first")
    logger.log(operation="two", workspace=None, stage=None, message="second", extra={"k": 1})

    output = logger.to_json_lines(tmp_path / "logs" / "build.jsonl")

    lines = output.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["operation"] for line in lines] == ["one", "two"]
    assert json.loads(lines[1])["extra"] == {"k": 1}
