"""Pat-on-the-back message templates."""

import random
from collections.abc import Callable, Mapping, Sequence

# A chooser picks one template; production uses random.choice.
Chooser = Callable[[Sequence[str]], str]

PAT_TEMPLATES: tuple[str, ...] = (
    "Good catch {{ author }}, thanks for the patch.",
    "Thank you {{ author }}.",
    "Good job {{ author }}, keep them coming.",
    "Great work {{ author }}! Thanks for taking the time.",
    "Nice one {{ author }}, this looks really good.",
    "Well done {{ author }}, much appreciated.",
)


def choose_random(templates: Sequence[str]) -> str:
    return random.choice(templates)


def render_pat(template: str, placeholders: Mapping[str, str]) -> str:
    """Replace every "{{ name }}" token with its value.

    Tokens need exactly one space inside each brace pair. Names without a
    value are left as they are.
    """
    rendered = template
    for name, value in placeholders.items():
        rendered = rendered.replace("{{ " + name + " }}", value)
    return rendered
