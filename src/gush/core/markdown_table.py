"""Render answered questions as a GitHub flavored markdown table."""

from collections.abc import Sequence

from gush.core.questionary import AnsweredRow

SEPARATOR_CELL = "---"


def _render_row(cells: Sequence[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def render_markdown_table(headers: Sequence[str], rows: Sequence[AnsweredRow]) -> str:
    """Render headers, a separator row and one row per answer.

    Rows keep the order they are given in. Each row fills the first two
    columns with label and answer; any further header columns stay empty.
    """
    width = len(headers)
    lines = [
        _render_row(headers),
        _render_row([SEPARATOR_CELL] * width),
    ]
    for row in rows:
        cells = [row.label, row.answer]
        cells.extend([""] * (width - len(cells)))
        lines.append(_render_row(cells))
    return "\n".join(lines) + "\n"
