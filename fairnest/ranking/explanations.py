from __future__ import annotations

from enum import Enum


class ExplanationCategory(str, Enum):
    balanced = "balanced"
    a_favoring = "A-favoring"
    b_favoring = "B-favoring"


def explanation_category(time_a: int, time_b: int, threshold: int = 5) -> ExplanationCategory:
    """Classify a commute pair by how evenly it splits the travel burden."""
    if abs(time_a - time_b) <= threshold:
        return ExplanationCategory.balanced
    if time_a < time_b:
        return ExplanationCategory.a_favoring
    return ExplanationCategory.b_favoring


_TEMPLATES = {
    ExplanationCategory.balanced: (
        "{name} gives both of you an even commute ({time_a} and {time_b} min), "
        "a good fit if fairness matters most to you."
    ),
    ExplanationCategory.a_favoring: (
        "{name} is close to A's workplace ({time_a} min). B's commute is longer "
        "({time_b} min), but the area around the station makes daily life easy."
    ),
    ExplanationCategory.b_favoring: (
        "{name} has good access to B's workplace ({time_b} min). A travels "
        "{time_a} min, and weekend trips together stay convenient."
    ),
}


def explanation_text(name: str, category: ExplanationCategory, time_a: int, time_b: int) -> str:
    return _TEMPLATES[category].format(name=name, time_a=time_a, time_b=time_b)
