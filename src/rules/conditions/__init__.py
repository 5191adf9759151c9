"""Conditions package for the specification rules.

Each condition validates one part of a pull request and reports failures
by raising RuleViolationError.
"""

from src.rules.conditions.base import BaseCondition
from src.rules.conditions.pull_request import (
    BodyContentCondition,
    TemplateAdjustedCondition,
    TitleLengthCondition,
)

__all__ = [
    "BaseCondition",
    "TitleLengthCondition",
    "BodyContentCondition",
    "TemplateAdjustedCondition",
]
