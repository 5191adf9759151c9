# Rules package

from src.rules.models import (
    PullRequestAction,
    PullRequestEvent,
    PullRequestState,
    RuleOutcome,
    SpecificationConfig,
    Verdict,
)
from src.rules.specification import SpecificationCheck

__all__ = [
    "PullRequestAction",
    "PullRequestEvent",
    "PullRequestState",
    "RuleOutcome",
    "SpecificationCheck",
    "SpecificationConfig",
    "Verdict",
]
