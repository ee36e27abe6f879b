"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from gush_shared.gateway.git.abc import Git
from gush_shared.gateway.process.abc import Process
from gush_shared.gateway.prompt.abc import Prompter
from gush_shared.github.gateway import GitHubGateway

from gush.cli.config import GushConfig, default_config_path, load_config
from gush.core.pats import Chooser, choose_random


@dataclass(frozen=True)
class GushContext:
    """Immutable context holding all dependencies for gush operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    github: GitHubGateway
    process: Process
    prompter: Prompter
    cwd: Path  # Current working directory at CLI invocation
    config: GushConfig
    choose: Chooser  # Picks one pat template

    @staticmethod
    def for_test(
        *,
        git: Git | None = None,
        github: GitHubGateway | None = None,
        process: Process | None = None,
        prompter: Prompter | None = None,
        cwd: Path | None = None,
        config: GushConfig | None = None,
        choose: Chooser | None = None,
    ) -> "GushContext":
        """Create a context populated with fakes, overriding any given dependency.

        Example:
            >>> prompter = FakePrompter(answers=["", "Add widget"])
            >>> ctx = GushContext.for_test(prompter=prompter, cwd=tmp_path)
        """
        from gush_shared.gateway.git.fake import FakeGit
        from gush_shared.gateway.process.fake import FakeProcess
        from gush_shared.gateway.prompt.fake import FakePrompter
        from gush_shared.github.gateway import create_fake_github_gateway

        return GushContext(
            git=git or FakeGit(),
            github=github or create_fake_github_gateway(),
            process=process or FakeProcess(),
            prompter=prompter or FakePrompter(),
            cwd=cwd or Path("/fake/cwd"),
            config=config or GushConfig(github_username=None),
            choose=choose or choose_random,
        )


def create_context() -> GushContext:
    """Create the production context.

    Raises:
        ConfigError: If the configuration file is unreadable
    """
    from gush_shared.gateway.git.real import RealGit
    from gush_shared.gateway.process.real import RealProcess
    from gush_shared.gateway.prompt.real import RealPrompter
    from gush_shared.github.gateway import create_real_github_gateway

    return GushContext(
        git=RealGit(),
        github=create_real_github_gateway(),
        process=RealProcess(),
        prompter=RealPrompter(),
        cwd=Path.cwd(),
        config=load_config(default_config_path()),
        choose=choose_random,
    )
