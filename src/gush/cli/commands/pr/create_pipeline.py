"""Linear pipeline for opening a pull request.

A sequence of plain functions transforming a frozen CreateState dataclass,
in this fixed order: prepare, collect answers, ask for the title, render the
description, sync the fork remote, create the pull request.

Each step: (GushContext, CreateState) -> CreateState | CreateError
"""

import logging
import shlex
from collections.abc import Callable
from dataclasses import dataclass, replace

import click
from gush_shared.gateway.prompt.types import InputExhausted
from gush_shared.github.types import CreatedPullRequest, RemoteApiError
from gush_shared.output.output import user_output

from gush.core.command_sequence import CommandFailed, CommandStep, run_command_sequence
from gush.core.context import GushContext
from gush.core.markdown_table import render_markdown_table
from gush.core.questionary import (
    AnsweredRow,
    Questionary,
    collect_answers,
    non_empty_validator,
    select_questionary,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_BRANCH = "master"
TITLE_PROMPT = "PR Title: "
TITLE_ATTEMPTS = 3

# ---------------------------------------------------------------------------
# Data Types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CreateState:
    """Immutable state threaded through the create pipeline."""

    org: str
    repo: str
    base_branch: str
    username: str | None
    branch_name: str | None
    questionary: Questionary | None
    rows: tuple[AnsweredRow, ...]
    title: str | None
    description: str | None
    pull_request: CreatedPullRequest | None


@dataclass(frozen=True)
class CreateError:
    """Error result from a pipeline step."""

    phase: str
    error_type: str
    message: str
    details: dict[str, str]


CreateStep = Callable[[GushContext, CreateState], CreateState | CreateError]


# ---------------------------------------------------------------------------
# Pipeline Steps
# ---------------------------------------------------------------------------


def prepare_state(ctx: GushContext, state: CreateState) -> CreateState | CreateError:
    """Resolve the acting GitHub user and the current branch."""
    username = ctx.config.github_username or ctx.github.auth.get_current_username(ctx.cwd)
    if username is None:
        return CreateError(
            phase="prepare",
            error_type="no_username",
            message=(
                "Could not determine your GitHub username. "
                "Set [github] username in ~/.gush/config.toml or run 'gh auth login'."
            ),
            details={},
        )

    branch_name = ctx.git.get_current_branch(ctx.cwd)
    if branch_name is None:
        return CreateError(
            phase="prepare",
            error_type="no_branch",
            message="Not on a branch (detached HEAD state)",
            details={},
        )

    logger.debug("Opening PR as %s from branch %s", username, branch_name)
    return replace(state, username=username, branch_name=branch_name)


def ask_questions(ctx: GushContext, state: CreateState) -> CreateState | CreateError:
    """Ask the questionary selected for this repository."""
    questionary = select_questionary(state.repo)
    user_output(click.style("Describe the pull request", bold=True))
    try:
        rows = collect_answers(ctx.prompter, questionary)
    except InputExhausted as e:
        return CreateError(
            phase="collecting_answers",
            error_type="input_exhausted",
            message=str(e),
            details={"questionary": questionary.kind.value},
        )
    return replace(state, questionary=questionary, rows=tuple(rows))


def ask_title(ctx: GushContext, state: CreateState) -> CreateState | CreateError:
    """Ask for a non-empty pull request title."""
    try:
        title = ctx.prompter.ask(
            TITLE_PROMPT,
            validator=non_empty_validator,
            max_attempts=TITLE_ATTEMPTS,
            default=None,
            autocomplete=None,
        )
    except InputExhausted as e:
        return CreateError(
            phase="collecting_answers",
            error_type="empty_title",
            message=f"You need to provide a non empty title ({e})",
            details={},
        )
    return replace(state, title=title)


def render_description(ctx: GushContext, state: CreateState) -> CreateState | CreateError:
    """Render the collected answers as the PR body."""
    if state.questionary is None:
        return CreateError(
            phase="rendering_description",
            error_type="no_answers",
            message="No questionary answers to render",
            details={},
        )
    description = render_markdown_table(state.questionary.get_headers(), state.rows)
    return replace(state, description=description)


def build_sync_steps(username: str, repo: str, branch_name: str) -> tuple[CommandStep, ...]:
    """Commands that publish the branch to the user's fork.

    The remote may already exist from an earlier run, so adding it may fail.
    Interpolated names are shell-quoted; git allows quotes in branch names.
    """
    remote = shlex.quote(username)
    url = shlex.quote(f"git@github.com:{username}/{repo}.git")
    branch = shlex.quote(branch_name)
    return (
        CommandStep(line=f"git remote add {remote} {url}", allow_failure=True),
        CommandStep(line="git remote update", allow_failure=False),
        CommandStep(line=f"git push -u {remote} {branch}", allow_failure=False),
    )


def sync_remote(ctx: GushContext, state: CreateState) -> CreateState | CreateError:
    """Add the fork remote, update remotes and push the branch."""
    assert state.username is not None
    assert state.branch_name is not None

    user_output(click.style(f"Pushing {state.branch_name} to {state.username}...", dim=True))
    steps = build_sync_steps(state.username, state.repo, state.branch_name)
    result = run_command_sequence(ctx.process, ctx.cwd, steps)
    if isinstance(result, CommandFailed):
        return CreateError(
            phase="syncing_remote",
            error_type=result.error_type,
            message=result.message,
            details={"command": result.step.line, "exit_status": str(result.exit_status)},
        )
    return state


def create_pull_request(ctx: GushContext, state: CreateState) -> CreateState | CreateError:
    """Open the pull request from the fork branch against the organization's base."""
    assert state.title is not None
    assert state.description is not None

    base = f"{state.org}:{state.base_branch}"
    head = f"{state.username}:{state.branch_name}"
    try:
        pull_request = ctx.github.pr.create_pr(
            ctx.cwd,
            state.org,
            state.repo,
            base=base,
            head=head,
            title=state.title,
            body=state.description,
        )
    except RemoteApiError as e:
        return CreateError(
            phase="creating_pull_request",
            error_type="remote_api_error",
            message=str(e),
            details={"base": base, "head": head},
        )
    return replace(state, pull_request=pull_request)


# ---------------------------------------------------------------------------
# Pipeline Runner
# ---------------------------------------------------------------------------

CREATE_PIPELINE: tuple[CreateStep, ...] = (
    prepare_state,
    ask_questions,
    ask_title,
    render_description,
    sync_remote,
    create_pull_request,
)


def run_create_pipeline(ctx: GushContext, state: CreateState) -> CreateState | CreateError:
    """Run the create pipeline, returning final state or first error."""
    for step in CREATE_PIPELINE:
        result = step(ctx, state)
        if isinstance(result, CreateError):
            logger.debug("Create pipeline stopped in %s: %s", result.phase, result.error_type)
            return result
        state = result
    return state


def make_initial_state(*, org: str, repo: str, base_branch: str | None) -> CreateState:
    """Create initial CreateState with only CLI-provided values."""
    return CreateState(
        org=org,
        repo=repo,
        base_branch=base_branch or DEFAULT_BASE_BRANCH,
        username=None,
        branch_name=None,
        questionary=None,
        rows=(),
        title=None,
        description=None,
        pull_request=None,
    )
