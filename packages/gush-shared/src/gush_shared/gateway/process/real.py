"""Production implementation of the process gateway using subprocess."""

import logging
import shlex
import subprocess
from pathlib import Path

from gush_shared.gateway.process.abc import Process
from gush_shared.gateway.process.types import CommandOutcome
from gush_shared.subprocess_utils import copied_env_for_git_subprocess

logger = logging.getLogger(__name__)

# Exit statuses matching POSIX shells: unparsable line, missing executable.
_SYNTAX_ERROR = 2
_COMMAND_NOT_FOUND = 127


class RealProcess(Process):
    """Runs command lines without a shell, merging stderr into the output."""

    def run_command(self, cwd: Path, line: str) -> CommandOutcome:
        try:
            args = shlex.split(line)
        except ValueError as e:
            return CommandOutcome(exit_status=_SYNTAX_ERROR, output=f"Cannot parse {line!r}: {e}")
        logger.debug("Running command line: %s (cwd=%s)", line, cwd)
        try:
            result = subprocess.run(
                args,
                cwd=cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=False,
                env=copied_env_for_git_subprocess(),
            )
        except FileNotFoundError:
            return CommandOutcome(
                exit_status=_COMMAND_NOT_FOUND,
                output=f"{args[0]}: command not found",
            )
        return CommandOutcome(exit_status=result.returncode, output=result.stdout)
