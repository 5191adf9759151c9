from unittest.mock import AsyncMock

import pytest

from src.core.errors import ConfigurationError
from src.core.models import EventType, WebhookEvent
from src.event_processors.base import ProcessingResult, ProcessingState
from src.webhooks.handlers.pull_request import PullRequestEventHandler


@pytest.fixture
def processor() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def event(pr_payload: dict) -> WebhookEvent:
    return WebhookEvent(EventType.PULL_REQUEST, pr_payload, delivery_id="d-1")


class TestPullRequestEventHandler:
    @pytest.mark.asyncio
    async def test_reports_verdict_description(self, processor: AsyncMock, event: WebhookEvent) -> None:
        processor.process.return_value = ProcessingResult(
            state=ProcessingState.FAIL, description="PR's title is too short (3/8)", processing_time_ms=5
        )

        response = await PullRequestEventHandler(processor).handle(event)

        processor.process.assert_awaited_once_with(event)
        assert response.status == "ok"
        assert response.detail == "PR's title is too short (3/8)"
        assert response.event_type == EventType.PULL_REQUEST

    @pytest.mark.asyncio
    async def test_skipped_event_is_ignored(self, processor: AsyncMock, event: WebhookEvent) -> None:
        processor.process.return_value = ProcessingResult(state=ProcessingState.SKIPPED, processing_time_ms=0)

        response = await PullRequestEventHandler(processor).handle(event)

        assert response.status == "ignored"

    @pytest.mark.asyncio
    async def test_processing_error_returns_error_response(self, processor: AsyncMock, event: WebhookEvent) -> None:
        processor.process.side_effect = ConfigurationError("Invalid YAML")

        response = await PullRequestEventHandler(processor).handle(event)

        assert response.status == "error"
        assert "Invalid YAML" in response.detail
