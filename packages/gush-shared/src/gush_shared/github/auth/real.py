"""Production implementation of GitHub authentication queries."""

import logging
from pathlib import Path

from gush_shared.github.auth.abc import GitHubAuthGateway
from gush_shared.github.parsing import execute_gh_command
from gush_shared.github.types import RemoteApiError

logger = logging.getLogger(__name__)


class RealGitHubAuthGateway(GitHubAuthGateway):
    """Asks the gh CLI for the authenticated user."""

    def get_current_username(self, cwd: Path) -> str | None:
        try:
            stdout = execute_gh_command(
                ["gh", "api", "user", "--jq", ".login"],
                cwd,
                operation_context="get authenticated GitHub user",
            )
        except RemoteApiError as e:
            logger.debug("Could not determine GitHub user: %s", e)
            return None
        login = stdout.strip()
        return login or None
