import time

import structlog

from src.core.models import WebhookEvent
from src.core.utils.event_filter import filter_pull_request
from src.event_processors.base import BaseEventProcessor, ProcessingResult, ProcessingState
from src.rules.interface import Check
from src.rules.specification import SpecificationCheck

logger = structlog.get_logger()


class PullRequestProcessor(BaseEventProcessor):
    """Processor for pull request events running the specification check."""

    def __init__(self, *args, check: Check | None = None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.check = check or SpecificationCheck(self.github_client)

    def get_event_type(self) -> str:
        return "pull_request"

    async def process(self, event: WebhookEvent) -> ProcessingResult:
        """
        Run the specification check for one pull request event.

        Ineligible events are skipped before any GitHub call. Errors from
        GitHub (token exchange, config read, template read, status write)
        propagate to the caller.
        """
        start_time = time.time()
        payload = event.payload
        log = logger.bind(
            repo=event.repo_full_name,
            pr_number=(payload.get("pull_request") or {}).get("number"),
            action=payload.get("action"),
        )

        if not filter_pull_request(payload).should_process:
            return ProcessingResult(
                state=ProcessingState.SKIPPED,
                processing_time_ms=int((time.time() - start_time) * 1000),
            )

        if not event.installation_id:
            raise ValueError("No installation ID found in event payload")

        token = await self.github_client.get_installation_access_token(event.installation_id)

        repo_config = await self.config_loader.get_config(event.repo_full_name, token)
        verdict = await self.check.execute(repo_config, payload, token)

        processing_time = int((time.time() - start_time) * 1000)
        if verdict is None:
            return ProcessingResult(state=ProcessingState.SKIPPED, processing_time_ms=processing_time)

        log.info("pr_processing_completed", succeeded=verdict.succeeded, processing_time_ms=processing_time)
        return ProcessingResult(
            state=ProcessingState.PASS if verdict.succeeded else ProcessingState.FAIL,
            description=verdict.description,
            processing_time_ms=processing_time,
        )
