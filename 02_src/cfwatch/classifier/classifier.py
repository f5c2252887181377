"""Subject classifier implementation."""

from dataclasses import dataclass, field
from typing import Protocol

from ..models import MessageKind
from .rules import RULES, SubjectRule, short_id


@dataclass(frozen=True)
class Classification:
    """Result of classifying a subject."""

    kind: MessageKind
    display_subject: str
    segments: dict[str, str] = field(default_factory=dict)


class ISubjectClassifier(Protocol):
    """Maps subjects to message kinds."""

    def classify(self, subject: str) -> Classification:
        """Classify a subject. Never fails; unmatched subjects are UNKNOWN."""
        ...


def match_pattern(pattern: list[str], subject: list[str]) -> dict[str, str] | None:
    """Match subject segments against pattern segments.

    Returns the captured segments on a match, None otherwise.
    """
    captures: dict[str, str] = {}

    for i, token in enumerate(pattern):
        if token == ">":
            return captures if i == len(pattern) - 1 and len(subject) > i else None
        if i >= len(subject) or not subject[i]:
            return None
        if token == "*":
            continue
        if token.startswith("<") and token.endswith(">"):
            captures[token[1:-1]] = subject[i]
        elif token != subject[i]:
            return None

    return captures if len(subject) == len(pattern) else None


class SubjectClassifier:
    """Ordered, table-driven subject classifier."""

    def __init__(self, rules: list[SubjectRule] | None = None):
        self._rules = list(RULES if rules is None else rules)

    @property
    def rules(self) -> list[SubjectRule]:
        return list(self._rules)

    def classify(self, subject: str) -> Classification:
        """Return the kind of the first rule matching subject."""
        parts = subject.split(".")

        for rule in self._rules:
            captures = match_pattern(rule.segments, parts)
            if captures is None:
                continue

            display = subject
            if rule.display:
                display = rule.display.format(
                    **{name: short_id(value) for name, value in captures.items()}
                )
            return Classification(
                kind=rule.kind,
                display_subject=display,
                segments=captures,
            )

        return Classification(kind=MessageKind.UNKNOWN, display_subject=subject)
