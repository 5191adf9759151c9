"""Pull request specification conditions.

This module contains the conditions that validate the title, the body and
the body's departure from the repository's pull request template.
"""

from collections.abc import Callable

import structlog

from src.core.errors import RuleViolationError
from src.core.utils.patterns import contains_issue_number, contains_url, is_long_enough
from src.integrations.github import GitHubClient
from src.rules.conditions.base import BaseCondition
from src.rules.models import BodyChecks, PullRequestEvent, TemplateChecks, TitleChecks

logger = structlog.get_logger()

MINIMUM_LENGTH = "minimum-length"
CONTAINS_URL = "contains-url"
CONTAINS_ISSUE_NUMBER = "contains-issue-number"


class TitleLengthCondition(BaseCondition):
    """Validates that the PR title is longer than the required length."""

    name = "title"

    def __init__(self, checks: TitleChecks | None = None):
        self.checks = checks or TitleChecks()

    async def evaluate(self, event: PullRequestEvent, token: str | None = None) -> None:
        check = self.checks.minimum_length
        if check.enabled and not is_long_enough(event.title, check.length):
            raise RuleViolationError(f"PR's title is too short ({len(event.title)}/{check.length})")


class BodyContentCondition(BaseCondition):
    """
    Validates that the PR body carries some substance.

    The body passes when at least one enabled check succeeds. On failure
    the first failing check is reported in a fixed order: issue number,
    then URL, then minimum length. With no check enabled the body fails.
    """

    name = "body"

    def __init__(self, checks: BodyChecks | None = None):
        self.checks = checks or BodyChecks()

    def _ordered_checks(self, body: str) -> list[tuple[str, bool, Callable[[], bool]]]:
        length_check = self.checks.minimum_length
        return [
            (CONTAINS_ISSUE_NUMBER, self.checks.contains_issue_number, lambda: contains_issue_number(body)),
            (CONTAINS_URL, self.checks.contains_url, lambda: contains_url(body)),
            (MINIMUM_LENGTH, length_check.enabled, lambda: is_long_enough(body, length_check.length)),
        ]

    async def evaluate(self, event: PullRequestEvent, token: str | None = None) -> None:
        succeeded = False
        failed_checks: list[str] = []

        for check_name, enabled, check in self._ordered_checks(event.body):
            if not enabled:
                continue
            if check():
                succeeded = True
            else:
                failed_checks.append(check_name)

        if succeeded:
            return
        if not failed_checks:
            raise RuleViolationError("PR's body failed check: no body checks are enabled")
        raise RuleViolationError(f"PR's body failed check '{failed_checks[0]}'")


class TemplateAdjustedCondition(BaseCondition):
    """
    Validates that the PR body is not just the repository's PR template.

    The template is always fetched; the comparison only happens when
    `was-adjusted` is enabled. A repository without a template passes.
    """

    name = "template"

    def __init__(self, github_client: GitHubClient, checks: TemplateChecks | None = None):
        self.github_client = github_client
        self.checks = checks or TemplateChecks()

    async def evaluate(self, event: PullRequestEvent, token: str | None = None) -> None:
        template = await self.github_client.get_pull_request_template(
            event.repository_owner, event.repository_name, token
        )
        if not template:
            logger.info("pull_request_template_missing", repo=event.repo_full_name)
            return

        if self.checks.was_adjusted and event.body.strip() == template.strip():
            raise RuleViolationError("PR's body is unchanged from template")
