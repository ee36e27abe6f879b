"""Run an ordered list of command lines, tolerating failures where allowed."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from gush_shared.gateway.process.abc import Process
from gush_shared.gateway.process.types import CommandOutcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandStep:
    """A command line and whether its failure may be ignored."""

    line: str
    allow_failure: bool


@dataclass(frozen=True)
class StepFailure:
    """A tolerated failure, kept for diagnostics."""

    step: CommandStep
    exit_status: int
    output: str


@dataclass(frozen=True)
class CommandSequenceResult:
    """Success result: every required step passed."""

    executed: tuple[CommandStep, ...]
    tolerated_failures: tuple[StepFailure, ...]


@dataclass(frozen=True)
class CommandFailed:
    """Error result: a required step failed and the sequence stopped there."""

    step: CommandStep
    exit_status: int
    output: str

    @property
    def error_type(self) -> str:
        return "command-failed"

    @property
    def message(self) -> str:
        message = f"Command '{self.step.line}' failed with exit status {self.exit_status}"
        output = self.output.strip()
        if output:
            message += f"\n{output}"
        return message


def run_command_sequence(
    process: Process, cwd: Path, steps: Sequence[CommandStep]
) -> CommandSequenceResult | CommandFailed:
    """Run steps in order, each exactly once.

    A failing step with allow_failure is logged and skipped over. The first
    failing step without it ends the sequence; later steps never run.
    """
    executed: list[CommandStep] = []
    tolerated: list[StepFailure] = []
    for step in steps:
        outcome: CommandOutcome = process.run_command(cwd, step.line)
        executed.append(step)
        if outcome.succeeded:
            continue
        if not step.allow_failure:
            return CommandFailed(step=step, exit_status=outcome.exit_status, output=outcome.output)
        logger.warning(
            "Ignoring failure of '%s' (exit status %d): %s",
            step.line,
            outcome.exit_status,
            outcome.output.strip(),
        )
        tolerated.append(
            StepFailure(step=step, exit_status=outcome.exit_status, output=outcome.output)
        )
    return CommandSequenceResult(executed=tuple(executed), tolerated_failures=tuple(tolerated))
