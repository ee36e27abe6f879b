"""Parsing utilities for GitHub operations."""

import json
import re
from pathlib import Path
from typing import Any

from gush_shared.github.types import GitHubRepoId, RemoteApiError
from gush_shared.subprocess_utils import run_subprocess_with_context

# Timeout in seconds for gh calls. Prevents indefinite hangs on network issues.
_GH_TIMEOUT = 60

# Matches git@github.com:owner/repo(.git), https://github.com/owner/repo(.git)
# and ssh://git@github.com/owner/repo(.git)
_REMOTE_URL_PATTERN = re.compile(
    r"github\.com[:/](?P<owner>[^/]+)/(?P<repo>[^/]+?)(?:\.git)?/?$"
)


def parse_git_remote_url(url: str) -> GitHubRepoId:
    """Extract owner and repository name from a GitHub remote URL.

    Raises:
        ValueError: If the URL does not point at a GitHub repository
    """
    match = _REMOTE_URL_PATTERN.search(url.strip())
    if match is None:
        raise ValueError(f"Not a GitHub remote URL: {url}")
    return GitHubRepoId(owner=match.group("owner"), repo=match.group("repo"))


def execute_gh_command(cmd: list[str], cwd: Path, *, operation_context: str) -> str:
    """Execute a gh CLI command and return stdout.

    Raises:
        RemoteApiError: If gh is missing or the command fails
    """
    try:
        result = run_subprocess_with_context(
            cmd,
            operation_context=operation_context,
            cwd=cwd,
            timeout=_GH_TIMEOUT,
        )
    except FileNotFoundError as e:
        raise RemoteApiError("GitHub CLI (gh) is not installed") from e
    except RuntimeError as e:
        raise RemoteApiError(str(e)) from e
    return result.stdout


def parse_gh_json(stdout: str, *, operation_context: str) -> dict[str, Any]:
    """Parse a JSON object printed by `gh api`.

    Raises:
        RemoteApiError: If the output is not a JSON object
    """
    try:
        data = json.loads(stdout)
    except json.JSONDecodeError as e:
        raise RemoteApiError(f"Unexpected response while trying to {operation_context}") from e
    if not isinstance(data, dict):
        raise RemoteApiError(f"Unexpected response while trying to {operation_context}")
    return data
