"""Types shared by prompter implementations."""

from collections.abc import Callable
from dataclasses import dataclass


class ValidationError(ValueError):
    """Raised by a validator when an answer is rejected."""


class InputExhausted(Exception):
    """Raised when no valid answer was obtained within the allowed attempts."""


# A validator normalizes an answer or raises ValidationError.
Validator = Callable[[str], str]


@dataclass(frozen=True)
class PromptCall:
    """One call to Prompter.ask, recorded by the fake for assertions."""

    prompt: str
    default: str | None
    max_attempts: int | None
    autocomplete: tuple[str, ...] | None
