"""Question sets asked before opening a pull request.

A questionary is an ordered set of questions plus the headers of the table
its answers are rendered into. Which set is used depends on the repository:
documentation repositories get their own, shorter questionary.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from gush_shared.gateway.prompt.abc import Prompter
from gush_shared.gateway.prompt.types import ValidationError, Validator

YES_NO_ATTEMPTS = 3

_YES = frozenset({"y", "yes"})
_NO = frozenset({"n", "no"})


def non_empty_validator(answer: str) -> str:
    """Trim the answer and reject it when nothing is left."""
    answer = answer.strip()
    if not answer:
        raise ValidationError("empty answer")
    return answer


def yes_no_validator(answer: str) -> str:
    """Normalize y/yes/n/no (any case) to "yes" or "no"."""
    normalized = answer.strip().lower()
    if normalized in _YES:
        return "yes"
    if normalized in _NO:
        return "no"
    raise ValidationError(f"answer 'y' or 'n', got {answer.strip()!r}")


def free_text_validator(answer: str) -> str:
    """Accept anything, including an empty answer."""
    return answer.strip()


@dataclass(frozen=True)
class Question:
    """A single prompt: statement, validation, default and input hints."""

    statement: str
    validator: Validator
    default: str | None = None
    max_attempts: int | None = None
    autocomplete: tuple[str, ...] | None = None

    @property
    def display_prompt(self) -> str:
        if self.default:
            return f"{self.statement} [{self.default}] "
        return f"{self.statement} "


@dataclass(frozen=True)
class AnsweredRow:
    """One collected answer, labelled with the question's statement."""

    label: str
    answer: str


class QuestionaryKind(Enum):
    GENERAL = "general"
    DOCUMENTATION = "documentation"


@dataclass(frozen=True)
class Questionary:
    """Ordered questions plus the table headers their answers render under."""

    kind: QuestionaryKind
    headers: tuple[str, ...]
    questions: tuple[Question, ...]

    def __post_init__(self) -> None:
        if not self.questions:
            raise ValueError("A questionary needs at least one question")

    def get_headers(self) -> tuple[str, ...]:
        return self.headers

    def get_questions(self) -> tuple[Question, ...]:
        return self.questions


def _yes_no(statement: str, default: str) -> Question:
    return Question(
        statement=statement,
        validator=yes_no_validator,
        default=default,
        max_attempts=YES_NO_ATTEMPTS,
        autocomplete=("yes", "no"),
    )


def general_questionary() -> Questionary:
    return Questionary(
        kind=QuestionaryKind.GENERAL,
        headers=("Q", "A"),
        questions=(
            _yes_no("Bug fix?", "n"),
            _yes_no("New feature?", "n"),
            _yes_no("BC breaks?", "n"),
            _yes_no("Deprecations?", "n"),
            _yes_no("Tests pass?", "y"),
            Question("Fixed tickets", non_empty_validator, default="#000"),
            Question("License", non_empty_validator, default="MIT", autocomplete=("MIT",)),
            Question("Doc PR", free_text_validator),
        ),
    )


def documentation_questionary() -> Questionary:
    return Questionary(
        kind=QuestionaryKind.DOCUMENTATION,
        headers=("Q", "A"),
        questions=(
            _yes_no("Doc fix?", "y"),
            _yes_no("New docs?", "n"),
            Question(
                "Applies to",
                non_empty_validator,
                default="2.3+",
                autocomplete=("2.3+", "2.4+", "master"),
            ),
            Question("Fixed tickets", non_empty_validator, default="#000"),
        ),
    )


_QUESTIONARY_FACTORIES: dict[QuestionaryKind, Callable[[], Questionary]] = {
    QuestionaryKind.GENERAL: general_questionary,
    QuestionaryKind.DOCUMENTATION: documentation_questionary,
}


def questionary_kind_for_repo(repo_name: str) -> QuestionaryKind:
    """Documentation repositories are recognized by "docs" in their name."""
    if "docs" in repo_name:
        return QuestionaryKind.DOCUMENTATION
    return QuestionaryKind.GENERAL


def select_questionary(repo_name: str) -> Questionary:
    return _QUESTIONARY_FACTORIES[questionary_kind_for_repo(repo_name)]()


def collect_answers(prompter: Prompter, questionary: Questionary) -> list[AnsweredRow]:
    """Ask every question in order and return the answers in the same order.

    Raises:
        InputExhausted: If a question gets no valid answer within its attempts
    """
    rows: list[AnsweredRow] = []
    for question in questionary.get_questions():
        answer = prompter.ask(
            question.display_prompt,
            validator=question.validator,
            max_attempts=question.max_attempts,
            default=question.default,
            autocomplete=question.autocomplete,
        )
        rows.append(AnsweredRow(label=question.statement, answer=answer))
    return rows
