"""Production implementation of GitHub pull request operations."""

from pathlib import Path

from gush_shared.github.parsing import execute_gh_command, parse_gh_json
from gush_shared.github.pr.abc import GitHubPrGateway
from gush_shared.github.types import CreatedPullRequest, PullRequestDetails, RemoteApiError


class RealGitHubPrGateway(GitHubPrGateway):
    """Production implementation using the REST API through `gh api`."""

    def create_pr(
        self,
        cwd: Path,
        org: str,
        repo: str,
        *,
        base: str,
        head: str,
        title: str,
        body: str,
    ) -> CreatedPullRequest:
        operation_context = f"create pull request {head} -> {base} on {org}/{repo}"
        # -f sends raw strings, so bodies starting with "@" are never read as files
        cmd = [
            "gh",
            "api",
            f"repos/{org}/{repo}/pulls",
            "-X",
            "POST",
            "-f",
            f"base={base}",
            "-f",
            f"head={head}",
            "-f",
            f"title={title}",
            "-f",
            f"body={body}",
        ]
        stdout = execute_gh_command(cmd, cwd, operation_context=operation_context)
        data = parse_gh_json(stdout, operation_context=operation_context)
        try:
            return CreatedPullRequest(number=int(data["number"]), html_url=str(data["html_url"]))
        except (KeyError, TypeError, ValueError) as e:
            raise RemoteApiError(f"Incomplete response while trying to {operation_context}") from e

    def get_pr(self, cwd: Path, org: str, repo: str, number: int) -> PullRequestDetails:
        operation_context = f"fetch pull request #{number} of {org}/{repo}"
        cmd = ["gh", "api", f"repos/{org}/{repo}/pulls/{number}"]
        stdout = execute_gh_command(cmd, cwd, operation_context=operation_context)
        data = parse_gh_json(stdout, operation_context=operation_context)
        try:
            return PullRequestDetails(
                number=int(data["number"]),
                title=str(data["title"]),
                html_url=str(data["html_url"]),
                author_login=str(data["user"]["login"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise RemoteApiError(f"Incomplete response while trying to {operation_context}") from e
