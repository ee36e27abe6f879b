"""Tests for markdown table rendering."""

from gush.core.markdown_table import render_markdown_table
from gush.core.questionary import AnsweredRow


def test_renders_header_separator_and_rows() -> None:
    rows = [
        AnsweredRow(label="Bug fix?", answer="yes"),
        AnsweredRow(label="License", answer="MIT"),
    ]

    table = render_markdown_table(("Q", "A"), rows)

    assert table == (
        "| Q | A |\n"
        "| --- | --- |\n"
        "| Bug fix? | yes |\n"
        "| License | MIT |\n"
    )


def test_separator_matches_header_count() -> None:
    table = render_markdown_table(("Q", "A", "Notes"), [])

    separator = table.splitlines()[1]
    cells = [cell.strip() for cell in separator.strip("|").split("|")]
    assert cells == ["---", "---", "---"]


def test_extra_columns_render_empty() -> None:
    table = render_markdown_table(("Q", "A", "Notes"), [AnsweredRow("Tests pass?", "yes")])

    assert table.splitlines()[2] == "| Tests pass? | yes |  |"


def test_rows_keep_order_and_duplicates() -> None:
    rows = [AnsweredRow("b", "2"), AnsweredRow("a", "1"), AnsweredRow("b", "2")]

    lines = render_markdown_table(("Q", "A"), rows).splitlines()

    assert lines[2:] == ["| b | 2 |", "| a | 1 |", "| b | 2 |"]


def test_rendering_is_deterministic() -> None:
    rows = [AnsweredRow("Bug fix?", "no"), AnsweredRow("Doc PR", "")]

    first = render_markdown_table(("Q", "A"), rows)
    second = render_markdown_table(("Q", "A"), list(rows))

    assert first == second
