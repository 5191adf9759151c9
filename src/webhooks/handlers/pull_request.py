from functools import lru_cache

import structlog

from src.core.models import EventType, WebhookEvent, WebhookResponse
from src.event_processors.base import ProcessingState
from src.event_processors.pull_request import PullRequestProcessor
from src.webhooks.handlers.base import EventHandler

logger = structlog.get_logger()


# Instantiate processor once but lazily
@lru_cache(maxsize=1)
def get_pr_processor() -> PullRequestProcessor:
    return PullRequestProcessor()


class PullRequestEventHandler(EventHandler):
    """Thin handler for pull request webhook events, delegating to the event processor."""

    def __init__(self, processor: PullRequestProcessor | None = None):
        self._processor = processor

    @property
    def processor(self) -> PullRequestProcessor:
        return self._processor or get_pr_processor()

    async def handle(self, event: WebhookEvent) -> WebhookResponse:
        log = logger.bind(
            event_type="pull_request",
            repo=event.repo_full_name,
            pr_number=(event.payload.get("pull_request") or {}).get("number"),
            action=event.payload.get("action"),
            delivery_id=event.delivery_id,
        )
        log.info("pr_handler_invoked")

        try:
            result = await self.processor.process(event)
        except Exception as e:
            log.error("pr_processing_failed", error=str(e), exc_info=True)
            return WebhookResponse(
                status="error", detail=f"PR processing failed: {str(e)}", event_type=EventType.PULL_REQUEST
            )

        if result.state == ProcessingState.SKIPPED:
            return WebhookResponse(
                status="ignored", detail="Pull request event not eligible", event_type=EventType.PULL_REQUEST
            )
        return WebhookResponse(status="ok", detail=result.description, event_type=EventType.PULL_REQUEST)
