"""
Specification check orchestration.

Runs the title, body and template conditions concurrently against one
pull request, folds their outcomes into a single verdict and reports that
verdict as one commit status.
"""

import asyncio
from typing import Any

import structlog

from src.core.constants import SUCCESS_DESCRIPTION
from src.core.utils.event_filter import filter_pull_request
from src.core.utils.logging import log_operation
from src.integrations.github import GitHubClient, github_client
from src.rules.conditions import (
    BaseCondition,
    BodyContentCondition,
    TemplateAdjustedCondition,
    TitleLengthCondition,
)
from src.rules.models import PullRequestEvent, RuleOutcome, SpecificationConfig, Verdict

logger = structlog.get_logger()


class SpecificationCheck:
    """
    Checks that a pull request is properly specified.

    All conditions must pass for the verdict to succeed. When several fail,
    the reported description follows a fixed priority: title, then body,
    then template.
    """

    TYPE = "specification"
    NAME = "Specification check"

    def __init__(self, client: GitHubClient | None = None):
        self.github_client = client or github_client

    async def execute(
        self, config: dict[str, Any] | None, payload: dict[str, Any], token: str | None
    ) -> Verdict | None:
        """
        Validate a pull request webhook payload and report the result.

        Args:
            config: Repository configuration; only its `specification` section is read
            payload: Raw `pull_request` webhook payload
            token: Access token used for the template read and the status write

        Returns:
            The reported verdict, or None when the event is not eligible.
        """
        if not filter_pull_request(payload).should_process:
            return None

        event = PullRequestEvent.from_payload(payload)
        checks = SpecificationConfig.from_repo_config(config)
        return await self.validate(event, checks, token)

    async def validate(self, event: PullRequestEvent, checks: SpecificationConfig, token: str | None) -> Verdict:
        """Evaluate the pull request and write exactly one commit status."""
        async with log_operation(
            "specification_check",
            {"repo": event.repo_full_name, "pr_number": event.number},
            action=event.action.value,
        ):
            verdict = await self.evaluate(event, checks, token)
            logger.info(
                "specification_verdict",
                repo=event.repo_full_name,
                pr_number=event.number,
                succeeded=verdict.succeeded,
                description=verdict.description,
            )
            await self.github_client.set_commit_status(
                event.repository_owner,
                event.repository_name,
                event.head_sha,
                verdict.to_commit_status(),
                token,
            )
            return verdict

    async def evaluate(self, event: PullRequestEvent, checks: SpecificationConfig, token: str | None) -> Verdict:
        """
        Run all conditions concurrently and aggregate their outcomes.

        Every condition runs to completion. If any of them raised something
        other than a rule violation, that error is re-raised once all have
        settled and no verdict is produced.
        """
        conditions = self._build_conditions(checks)
        results = await asyncio.gather(
            *(condition.run(event, token) for condition in conditions),
            return_exceptions=True,
        )

        outcomes: list[RuleOutcome] = []
        for condition, result in zip(conditions, results, strict=True):
            if isinstance(result, BaseException):
                logger.error(
                    "condition_errored",
                    condition=condition.name,
                    repo=event.repo_full_name,
                    error=str(result),
                )
                raise result
            outcomes.append(result)

        return self._aggregate(outcomes)

    def _build_conditions(self, checks: SpecificationConfig) -> list[BaseCondition]:
        # Order defines failure priority
        return [
            TitleLengthCondition(checks.title),
            BodyContentCondition(checks.body),
            TemplateAdjustedCondition(self.github_client, checks.template),
        ]

    @staticmethod
    def _aggregate(outcomes: list[RuleOutcome]) -> Verdict:
        for outcome in outcomes:
            if not outcome.passed:
                return Verdict(succeeded=False, description=outcome.failure_reason or f"{outcome.rule} check failed")
        return Verdict(succeeded=True, description=SUCCESS_DESCRIPTION)
