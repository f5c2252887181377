"""Classifier module."""

from .classifier import Classification, ISubjectClassifier, SubjectClassifier, match_pattern
from .rules import RULES, SubjectRule, short_id

__all__ = [
    "Classification",
    "ISubjectClassifier",
    "RULES",
    "SubjectClassifier",
    "SubjectRule",
    "match_pattern",
    "short_id",
]
