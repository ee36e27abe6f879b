"""Post a pat on the back to the author of a pull request."""

from dataclasses import dataclass

from gush.core.context import GushContext
from gush.core.pats import PAT_TEMPLATES, render_pat


@dataclass(frozen=True)
class PatResult:
    """What was posted and where."""

    author: str
    body: str
    pr_url: str
    comment_url: str


def give_pat_on_the_back(ctx: GushContext, org: str, repo: str, pr_number: int) -> PatResult:
    """Post a randomly chosen compliment to the author of a pull request.

    Raises:
        RemoteApiError: If fetching the pull request or posting the comment fails
    """
    pr = ctx.github.pr.get_pr(ctx.cwd, org, repo, pr_number)
    template = ctx.choose(PAT_TEMPLATES)
    body = render_pat(template, {"author": pr.author_login})
    comment = ctx.github.issue.add_comment(ctx.cwd, org, repo, pr_number, body)
    return PatResult(
        author=pr.author_login,
        body=body,
        pr_url=f"https://github.com/{org}/{repo}/pull/{pr_number}",
        comment_url=comment.html_url,
    )
