"""Tests for running command sequences with allow-failure steps."""

import logging
from pathlib import Path

from gush_shared.gateway.process.fake import FakeProcess
from gush_shared.gateway.process.real import RealProcess
from gush_shared.gateway.process.types import CommandOutcome

from gush.core.command_sequence import (
    CommandFailed,
    CommandSequenceResult,
    CommandStep,
    run_command_sequence,
)

CWD = Path("/repo")


def test_all_steps_succeed() -> None:
    process = FakeProcess()
    steps = [CommandStep("git remote update", False), CommandStep("git status", False)]

    result = run_command_sequence(process, CWD, steps)

    assert isinstance(result, CommandSequenceResult)
    assert result.tolerated_failures == ()
    assert process.run_commands == [(CWD, "git remote update"), (CWD, "git status")]


def test_stops_at_first_required_failure() -> None:
    process = FakeProcess(
        outcomes={
            "step-a": CommandOutcome(exit_status=1, output="a broke"),
            "step-c": CommandOutcome(exit_status=2, output="c broke"),
        }
    )
    steps = [
        CommandStep("step-a", allow_failure=True),
        CommandStep("step-b", allow_failure=False),
        CommandStep("step-c", allow_failure=False),
        CommandStep("step-d", allow_failure=False),
    ]

    result = run_command_sequence(process, CWD, steps)

    assert isinstance(result, CommandFailed)
    assert result.step == steps[2]
    assert result.exit_status == 2
    assert result.output == "c broke"
    assert process.run_lines == ["step-a", "step-b", "step-c"]


def test_tolerated_failure_is_recorded_and_logged(caplog) -> None:
    process = FakeProcess(
        outcomes={"git remote add alice url": CommandOutcome(3, "remote alice already exists")}
    )
    steps = [CommandStep("git remote add alice url", True), CommandStep("git remote update", False)]

    with caplog.at_level(logging.WARNING, logger="gush.core.command_sequence"):
        result = run_command_sequence(process, CWD, steps)

    assert isinstance(result, CommandSequenceResult)
    assert len(result.tolerated_failures) == 1
    assert result.tolerated_failures[0].exit_status == 3
    assert result.executed == tuple(steps)
    assert "remote alice already exists" in caplog.text


def test_each_step_runs_once() -> None:
    process = FakeProcess(outcomes={"flaky": CommandOutcome(1, "")})

    run_command_sequence(process, CWD, [CommandStep("flaky", False)])

    assert process.run_lines == ["flaky"]


def test_command_failed_message_includes_output() -> None:
    failure = CommandFailed(CommandStep("git push -u alice x", False), 128, "rejected\n")

    assert failure.message == "Command 'git push -u alice x' failed with exit status 128\nrejected"
    assert failure.error_type == "command-failed"


def test_unparsable_line_fails_the_sequence() -> None:
    steps = [
        CommandStep("git push -u alice it's-fix", False),
        CommandStep("git remote update", False),
    ]

    result = run_command_sequence(RealProcess(), CWD, steps)

    assert isinstance(result, CommandFailed)
    assert result.step == steps[0]
    assert result.exit_status == 2
    assert "No closing quotation" in result.output
