"""Abstract base class for interactive prompts."""

from abc import ABC, abstractmethod

from gush_shared.gateway.prompt.types import Validator


class Prompter(ABC):
    """Asks the user a question and returns a validated answer.

    Implementations re-prompt on ValidationError up to max_attempts and raise
    InputExhausted once the attempts are used up.
    """

    @abstractmethod
    def ask(
        self,
        prompt: str,
        *,
        validator: Validator,
        max_attempts: int | None,
        default: str | None,
        autocomplete: tuple[str, ...] | None,
    ) -> str:
        """Ask a question and return the validated answer.

        Args:
            prompt: Text displayed to the user, including any default hint
            validator: Normalizes the answer or raises ValidationError
            max_attempts: Maximum answers to try; None means unlimited
            default: Value used when the user enters nothing
            autocomplete: Suggested values offered while typing

        Returns:
            The validated (normalized) answer

        Raises:
            InputExhausted: If no valid answer was given within max_attempts
        """
        ...
