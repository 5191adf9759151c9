"""
Event filtering for pull request webhooks.

Decides whether a pull request event is subject to the specification
check at all. Closing and other intermediate actions are skipped, as are
pull requests that are no longer open.
"""

from dataclasses import dataclass
from typing import Any

import structlog

logger = structlog.get_logger()

PR_ACTIONS_PROCESS = frozenset({"opened", "edited", "reopened", "synchronize"})


@dataclass
class FilterResult:
    """Result of event filter check."""

    should_process: bool
    reason: str = ""


def filter_pull_request(payload: dict[str, Any]) -> FilterResult:
    """
    Determine if a pull request payload should be evaluated.

    Returns FilterResult with should_process=True to process, False to skip.
    Logs filtered events for observability.
    """
    result = _apply_filters(payload)
    if not result.should_process:
        logger.info(
            "event_filtered",
            repo=(payload.get("repository") or {}).get("full_name", ""),
            pr_number=(payload.get("pull_request") or {}).get("number"),
            reason=result.reason,
        )
    return result


def is_eligible(payload: dict[str, Any]) -> bool:
    return filter_pull_request(payload).should_process


def _apply_filters(payload: dict[str, Any]) -> FilterResult:
    action = payload.get("action")
    if action not in PR_ACTIONS_PROCESS:
        return FilterResult(should_process=False, reason=f"PR action '{action}' not processed")

    pr = payload.get("pull_request")
    if not pr:
        return FilterResult(should_process=False, reason="Payload has no pull request")

    state = pr.get("state", "")
    if state != "open":
        return FilterResult(should_process=False, reason=f"PR state '{state}' not open")

    return FilterResult(should_process=True)
