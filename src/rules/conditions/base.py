"""Base condition interface for the specification rules.

This module defines the abstract base class that all conditions must implement.
"""

from abc import ABC, abstractmethod

import structlog

from src.core.errors import RuleViolationError
from src.rules.models import PullRequestEvent, RuleOutcome

logger = structlog.get_logger()


class BaseCondition(ABC):
    """Abstract base class for all condition validators.

    Subclasses receive their configuration fragment on construction and
    implement `evaluate`, raising RuleViolationError when the pull request
    does not satisfy the rule.

    Attributes:
        name: Rule name reported in outcomes and logs.
    """

    name: str = ""

    @abstractmethod
    async def evaluate(self, event: PullRequestEvent, token: str | None = None) -> None:
        """Evaluate the condition against a pull request snapshot.

        Args:
            event: The pull request being checked. Never mutated.
            token: Credentials for conditions that read from GitHub.

        Raises:
            RuleViolationError: If the pull request fails the rule.
        """
        pass

    async def run(self, event: PullRequestEvent, token: str | None = None) -> RuleOutcome:
        """Evaluate and convert a rule failure into an outcome.

        Any exception other than RuleViolationError propagates unchanged.
        """
        try:
            await self.evaluate(event, token)
        except RuleViolationError as e:
            logger.debug("condition_failed", condition=self.name, reason=str(e))
            return RuleOutcome(rule=self.name, passed=False, failure_reason=str(e))
        return RuleOutcome(rule=self.name, passed=True)
