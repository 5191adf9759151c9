from unittest.mock import AsyncMock

import pytest

from src.core.errors import GitHubAPIError
from src.core.models import EventType, WebhookEvent
from src.event_processors.base import ProcessingState
from src.event_processors.pull_request import PullRequestProcessor
from src.rules.models import Verdict


@pytest.fixture
def github_client() -> AsyncMock:
    client = AsyncMock()
    client.get_installation_access_token.return_value = "inst-token"
    return client


@pytest.fixture
def config_loader() -> AsyncMock:
    loader = AsyncMock()
    loader.get_config.return_value = {"specification": {"template": {"was-adjusted": True}}}
    return loader


@pytest.fixture
def check() -> AsyncMock:
    check = AsyncMock()
    check.execute.return_value = Verdict(succeeded=True, description="PR has passed specification checks")
    return check


@pytest.fixture
def processor(github_client, config_loader, check) -> PullRequestProcessor:
    return PullRequestProcessor(github_client, config_loader, check=check)


def _event(payload: dict) -> WebhookEvent:
    return WebhookEvent(event_type=EventType.PULL_REQUEST, payload=payload)


class TestPullRequestProcessor:
    def test_event_type(self, processor: PullRequestProcessor) -> None:
        assert processor.get_event_type() == "pull_request"

    @pytest.mark.asyncio
    async def test_runs_check_with_repo_config_and_token(
        self, processor, github_client, config_loader, check, make_pr_payload
    ) -> None:
        payload = make_pr_payload()

        result = await processor.process(_event(payload))

        github_client.get_installation_access_token.assert_awaited_once_with(99)
        config_loader.get_config.assert_awaited_once_with("octocat/hello-world", "inst-token")
        check.execute.assert_awaited_once_with(config_loader.get_config.return_value, payload, "inst-token")
        assert result.state == ProcessingState.PASS
        assert result.description == "PR has passed specification checks"

    @pytest.mark.asyncio
    async def test_failed_verdict(self, processor, check, make_pr_payload) -> None:
        check.execute.return_value = Verdict(succeeded=False, description="PR's title is too short (3/8)")

        result = await processor.process(_event(make_pr_payload(title="Fix")))

        assert result.state == ProcessingState.FAIL
        assert result.success is False

    @pytest.mark.asyncio
    async def test_ineligible_event_skipped_without_github_calls(
        self, processor, github_client, check, make_pr_payload
    ) -> None:
        result = await processor.process(_event(make_pr_payload(action="closed", state="closed")))

        assert result.state == ProcessingState.SKIPPED
        github_client.get_installation_access_token.assert_not_called()
        check.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_installation_raises(self, processor, make_pr_payload) -> None:
        payload = make_pr_payload()
        del payload["installation"]

        with pytest.raises(ValueError, match="installation ID"):
            await processor.process(_event(payload))

    @pytest.mark.asyncio
    async def test_token_failure_propagates_status(
        self, processor, github_client, config_loader, check, make_pr_payload
    ) -> None:
        github_client.get_installation_access_token.side_effect = GitHubAPIError(401, "Bad credentials")

        with pytest.raises(GitHubAPIError) as exc_info:
            await processor.process(_event(make_pr_payload()))

        assert exc_info.value.status == 401
        config_loader.get_config.assert_not_called()
        check.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_check_errors_propagate(self, processor, check, make_pr_payload) -> None:
        check.execute.side_effect = GitHubAPIError(502, "Bad gateway")

        with pytest.raises(GitHubAPIError):
            await processor.process(_event(make_pr_payload()))
