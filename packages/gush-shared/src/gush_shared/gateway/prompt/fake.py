"""Fake prompter for testing."""

from gush_shared.gateway.prompt.abc import Prompter
from gush_shared.gateway.prompt.attempts import ask_with_attempts
from gush_shared.gateway.prompt.types import (
    InputExhausted,
    PromptCall,
    ValidationError,
    Validator,
)


class FakePrompter(Prompter):
    """In-memory prompter that replays scripted answers in order.

    This class has NO public setup methods. All state is provided via constructor.
    Each raw answer is consumed by one read, so a rejected answer uses up one
    scripted entry exactly like a real user retrying.

    Mutation Tracking:
    -----------------
    - prompt_calls: PromptCall for every ask() in order
    - validation_errors: Messages of every rejected answer
    """

    def __init__(self, *, answers: list[str] | None = None) -> None:
        """Create FakePrompter with scripted answers.

        Args:
            answers: Raw answers returned by successive reads (blank = accept default)
        """
        self._answers = list(answers or [])
        self._prompt_calls: list[PromptCall] = []
        self._validation_errors: list[str] = []

    def ask(
        self,
        prompt: str,
        *,
        validator: Validator,
        max_attempts: int | None,
        default: str | None,
        autocomplete: tuple[str, ...] | None,
    ) -> str:
        self._prompt_calls.append(
            PromptCall(
                prompt=prompt,
                default=default,
                max_attempts=max_attempts,
                autocomplete=autocomplete,
            )
        )

        def read_answer() -> str:
            if not self._answers:
                raise InputExhausted(f"No scripted answer left for prompt {prompt!r}")
            return self._answers.pop(0)

        def on_invalid(error: ValidationError) -> None:
            self._validation_errors.append(str(error))

        return ask_with_attempts(
            read_answer,
            validator=validator,
            max_attempts=max_attempts,
            default=default,
            on_invalid=on_invalid,
        )

    @property
    def prompt_calls(self) -> list[PromptCall]:
        return list(self._prompt_calls)

    @property
    def validation_errors(self) -> list[str]:
        return list(self._validation_errors)

    @property
    def remaining_answers(self) -> list[str]:
        return list(self._answers)
