"""
motus.strength
Five-level strength taxonomy for the 0-4 score reported by the estimator.
"""

import enum


class PasswordStrength(enum.IntEnum):
    VERY_WEAK = 0
    WEAK = 1
    REASONABLE = 2
    STRONG = 3
    VERY_STRONG = 4

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def color(self) -> str:
        """rich style used when the level is shown in a terminal."""
        return _COLORS[self]

    def __str__(self) -> str:
        return self.label


_LABELS = {
    PasswordStrength.VERY_WEAK: "very weak",
    PasswordStrength.WEAK: "weak",
    PasswordStrength.REASONABLE: "reasonable",
    PasswordStrength.STRONG: "strong",
    PasswordStrength.VERY_STRONG: "very strong",
}

_COLORS = {
    PasswordStrength.VERY_WEAK: "red",
    PasswordStrength.WEAK: "bright_red",
    PasswordStrength.REASONABLE: "yellow",
    PasswordStrength.STRONG: "bright_green",
    PasswordStrength.VERY_STRONG: "green",
}


def classify(score: int) -> PasswordStrength:
    """
    Map an estimator score to its strength level.
    Raises ValueError for anything outside 0..4; scores are never clamped.
    """
    if isinstance(score, bool) or not isinstance(score, int):
        raise ValueError(f"invalid score: {score!r}")
    if not 0 <= score <= 4:
        raise ValueError(f"invalid score: {score}")
    return PasswordStrength(score)


def from_label(label: str) -> PasswordStrength:
    for level, text in _LABELS.items():
        if text == label:
            return level
    raise ValueError(f"unknown strength label: {label!r}")
