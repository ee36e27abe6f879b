"""Production implementation of GitHub issue operations."""

from pathlib import Path

from gush_shared.github.issue.abc import GitHubIssueGateway
from gush_shared.github.parsing import execute_gh_command, parse_gh_json
from gush_shared.github.types import IssueComment, RemoteApiError


class RealGitHubIssueGateway(GitHubIssueGateway):
    """Production implementation using the REST API through `gh api`."""

    def add_comment(
        self, cwd: Path, org: str, repo: str, number: int, body: str
    ) -> IssueComment:
        operation_context = f"comment on #{number} of {org}/{repo}"
        cmd = [
            "gh",
            "api",
            f"repos/{org}/{repo}/issues/{number}/comments",
            "-X",
            "POST",
            "-f",
            f"body={body}",
        ]
        stdout = execute_gh_command(cmd, cwd, operation_context=operation_context)
        data = parse_gh_json(stdout, operation_context=operation_context)
        try:
            return IssueComment(
                id=int(data["id"]), body=str(data["body"]), html_url=str(data["html_url"])
            )
        except (KeyError, TypeError, ValueError) as e:
            raise RemoteApiError(f"Incomplete response while trying to {operation_context}") from e
