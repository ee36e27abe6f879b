"""Subprocess helpers with consistent error context and debug logging."""

import logging
import os
import subprocess
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


def run_subprocess_with_context(
    cmd: Sequence[str],
    *,
    operation_context: str,
    cwd: Path,
    timeout: float | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command, raising RuntimeError with context when it fails.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human readable description used in error messages
            (e.g. "push branch 'feature' to remote 'alice'")
        cwd: Working directory for the command
        timeout: Optional timeout in seconds

    Returns:
        CompletedProcess with captured text stdout/stderr

    Raises:
        RuntimeError: If the command exits non-zero or times out
        FileNotFoundError: If the executable is not installed
    """
    logger.debug("Running %s (cwd=%s)", " ".join(cmd), cwd)
    try:
        result = subprocess.run(
            list(cmd),
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
            timeout=timeout,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        command = " ".join(cmd)
        message = f"Failed to {operation_context}\nCommand: {command}\nExit code: {e.returncode}"
        if stderr:
            message += f"\nstderr: {stderr}"
        raise RuntimeError(message) from e
    except subprocess.TimeoutExpired as e:
        raise RuntimeError(
            f"Timed out after {timeout}s trying to {operation_context}\nCommand: {' '.join(cmd)}"
        ) from e

    logger.debug("Finished %s with exit code %d", cmd[0], result.returncode)
    return result


def copied_env_for_git_subprocess() -> dict[str, str]:
    """Return a copy of the environment that never blocks on credential prompts."""
    env = os.environ.copy()
    env["GIT_TERMINAL_PROMPT"] = "0"
    return env
