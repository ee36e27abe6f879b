"""Builders for GushContext instances used across command tests."""

from pathlib import Path

from gush_shared.gateway.git.fake import FakeGit
from gush_shared.gateway.process.fake import FakeProcess
from gush_shared.gateway.prompt.fake import FakePrompter
from gush_shared.github.gateway import GitHubGateway, create_fake_github_gateway

from gush.cli.config import GushConfig
from gush.core.context import GushContext

DEFAULT_CWD = Path("/repos/widgets")


def build_repo_test_context(
    *,
    answers: list[str] | None = None,
    username: str | None = "alice",
    branch: str | None = "feature-x",
    origin_url: str | None = "git@github.com:acme/widgets.git",
    process: FakeProcess | None = None,
    github: GitHubGateway | None = None,
    cwd: Path = DEFAULT_CWD,
) -> GushContext:
    """Context for a checkout of acme/widgets on branch feature-x."""
    remote_urls = {(cwd, "origin"): origin_url} if origin_url is not None else {}
    return GushContext.for_test(
        git=FakeGit(current_branches={cwd: branch}, remote_urls=remote_urls),
        github=github or create_fake_github_gateway(),
        process=process or FakeProcess(),
        prompter=FakePrompter(answers=answers),
        cwd=cwd,
        config=GushConfig(github_username=username),
    )
