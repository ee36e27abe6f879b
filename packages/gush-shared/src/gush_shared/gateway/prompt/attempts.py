"""Bounded re-prompting shared by every prompter implementation."""

from collections.abc import Callable

from gush_shared.gateway.prompt.types import InputExhausted, ValidationError, Validator


def ask_with_attempts(
    read_answer: Callable[[], str],
    *,
    validator: Validator,
    max_attempts: int | None,
    default: str | None,
    on_invalid: Callable[[ValidationError], None],
) -> str:
    """Read answers until one passes the validator.

    Answers are stripped of surrounding whitespace. An empty answer is replaced
    by the default (when there is one) before validation, so defaults go
    through the same normalization as typed input.

    Args:
        read_answer: Reads one raw answer from the user
        validator: Normalizes the answer or raises ValidationError
        max_attempts: Number of answers to try (at least 1); None means unlimited
        default: Value substituted for an empty answer
        on_invalid: Called with each validation failure before re-prompting

    Returns:
        The validated answer

    Raises:
        ValueError: If max_attempts is less than 1
        InputExhausted: If max_attempts answers were all rejected
    """
    if max_attempts is not None and max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

    attempt = 0
    last_error: ValidationError | None = None
    while max_attempts is None or attempt < max_attempts:
        attempt += 1
        raw = read_answer().strip()
        if raw == "" and default is not None:
            raw = default
        try:
            return validator(raw)
        except ValidationError as e:
            last_error = e
            on_invalid(e)

    raise InputExhausted(f"No valid answer after {max_attempts} attempt(s): {last_error}")
