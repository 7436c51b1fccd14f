from __future__ import annotations

import pytest

from jsdoc_cli.analysis.model import BoundInvocation, CLIDescriptor
from jsdoc_cli.commands.execute import execute
from jsdoc_cli.exceptions import NoExportsError
from tests.source_helpers import binding, descriptor, sample_tags


class _Recorder:
    def __init__(self, code: int = 0) -> None:
        self.code = code
        self.invocations: list[BoundInvocation] = []
        self.messages: list[tuple[str, bool]] = []

    def invoke(self, descriptor: CLIDescriptor, invocation: BoundInvocation) -> int:
        self.invocations.append(invocation)
        return self.code

    def echo(self, message: str = "", err: bool = False) -> None:
        self.messages.append((message, err))


def _many():
    return descriptor(
        binding("main", *sample_tags(), description="Main."),
        binding("test", *sample_tags(), description="Test."),
    )


def _run(tokens: list[str], recorder: _Recorder, target=None) -> int:
    return execute(
        target or _many(),
        tokens,
        invoke_fn=recorder.invoke,
        echo=recorder.echo,
        styled=False,
    )


def test_execute_invokes_bound_task() -> None:
    recorder = _Recorder(code=7)

    assert _run(["test", "1", "--arg2", "2"], recorder) == 7
    (invocation,) = recorder.invocations
    assert invocation.target.name == "test"
    assert invocation.arguments == (1, 2)
    assert recorder.messages == []


@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_help_flag_prints_manual(flag: str) -> None:
    recorder = _Recorder()

    assert _run([flag], recorder) == 0
    assert recorder.invocations == []
    assert recorder.messages[0][0].startswith("Usage: index <task> [options]")


def test_task_help_prints_task_manual() -> None:
    recorder = _Recorder()

    assert _run(["main", "--help"], recorder) == 0
    assert recorder.messages[0][0].startswith("Usage: index main <arg1> [options]")


def test_unknown_task_prints_error_and_manual() -> None:
    recorder = _Recorder()

    assert _run(["nope"], recorder) == 1
    assert recorder.messages[0] == ("Unknown task: nope", True)
    assert recorder.messages[1][0].startswith("Usage: index <task>")


def test_no_tokens_with_several_tasks_prints_manual() -> None:
    recorder = _Recorder()

    assert _run([], recorder) == 1
    assert len(recorder.messages) == 1
    assert recorder.messages[0][0].startswith("Usage:")


def test_binding_error_prints_message_and_task_manual() -> None:
    recorder = _Recorder()

    assert _run(["main"], recorder) == 1
    assert recorder.messages[0] == ("Missing required arguments: <arg1>", True)
    assert recorder.messages[1][0].startswith("Usage: index main")
    assert recorder.invocations == []


def test_single_export_runs_without_task_name() -> None:
    recorder = _Recorder()
    single = descriptor(binding("default", *sample_tags()))

    assert _run(["4"], recorder, single) == 0
    assert recorder.invocations[0].arguments == (4,)


def test_no_exports_raises() -> None:
    with pytest.raises(NoExportsError, match="index does not provide any executable exports."):
        _run([], _Recorder(), CLIDescriptor(name="index", entry_file=descriptor().entry_file))
