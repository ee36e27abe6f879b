"""Production prompter reading lines with prompt_toolkit."""

import click
from prompt_toolkit import prompt as pt_prompt
from prompt_toolkit.completion import WordCompleter

from gush_shared.gateway.prompt.abc import Prompter
from gush_shared.gateway.prompt.attempts import ask_with_attempts
from gush_shared.gateway.prompt.types import InputExhausted, ValidationError, Validator
from gush_shared.output.output import user_output


class RealPrompter(Prompter):
    """Reads answers from the terminal, offering autocomplete hints when given."""

    def ask(
        self,
        prompt: str,
        *,
        validator: Validator,
        max_attempts: int | None,
        default: str | None,
        autocomplete: tuple[str, ...] | None,
    ) -> str:
        completer = WordCompleter(list(autocomplete)) if autocomplete else None

        def read_answer() -> str:
            try:
                return pt_prompt(prompt, completer=completer)
            except EOFError as e:
                raise InputExhausted("Input closed before an answer was given") from e

        def on_invalid(error: ValidationError) -> None:
            user_output(click.style(f"  {error}", fg="red"))

        return ask_with_attempts(
            read_answer,
            validator=validator,
            max_attempts=max_attempts,
            default=default,
            on_invalid=on_invalid,
        )
