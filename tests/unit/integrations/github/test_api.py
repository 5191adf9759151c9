from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.core.errors import GitHubAPIError, GitHubRateLimitError
from src.integrations.github.api import GitHubClient


@pytest.fixture
def mock_aiohttp_session():
    mock_session = MagicMock()
    mock_session.closed = False

    # Request methods return the response context manager directly
    mock_session.get = MagicMock()
    mock_session.post = MagicMock()

    def create_mock_response(status, json_data=None, text_data=None):
        mock_response = AsyncMock()
        mock_response.status = status

        async def mock_json():
            return json_data

        mock_response.json = mock_json

        async def mock_text():
            return text_data if text_data is not None else ""

        mock_response.text = mock_text

        # Async context manager for response
        mock_response.__aenter__.return_value = mock_response
        mock_response.__aexit__.return_value = None

        return mock_response

    mock_session.create_mock_response = create_mock_response
    return mock_session


@pytest.fixture
def github_client(mock_aiohttp_session):
    with (
        patch("src.integrations.github.api.GitHubClient._decode_private_key", return_value="mock_key"),
        patch("src.integrations.github.api.GitHubClient._generate_jwt", return_value="mock_jwt_token"),
    ):
        client = GitHubClient()
        client._session = mock_aiohttp_session
        yield client


class TestGetFileContent:
    @pytest.mark.asyncio
    async def test_returns_content(self, github_client, mock_aiohttp_session):
        mock_aiohttp_session.get.return_value = mock_aiohttp_session.create_mock_response(200, text_data="hello")

        content = await github_client.get_file_content("owner/repo", ".zappr.yaml", "token")

        assert content == "hello"
        url = mock_aiohttp_session.get.call_args.args[0]
        headers = mock_aiohttp_session.get.call_args.kwargs["headers"]
        assert url.endswith("/repos/owner/repo/contents/.zappr.yaml")
        assert headers["Authorization"] == "Bearer token"
        assert headers["Accept"] == "application/vnd.github.raw"

    @pytest.mark.asyncio
    async def test_not_found_returns_none(self, github_client, mock_aiohttp_session):
        mock_aiohttp_session.get.return_value = mock_aiohttp_session.create_mock_response(404)

        assert await github_client.get_file_content("owner/repo", "missing.md", "token") is None

    @pytest.mark.asyncio
    async def test_auth_failure_raises(self, github_client, mock_aiohttp_session):
        mock_aiohttp_session.get.return_value = mock_aiohttp_session.create_mock_response(
            401, text_data="Bad credentials"
        )

        with pytest.raises(GitHubAPIError) as exc_info:
            await github_client.get_file_content("owner/repo", "file.md", "token")
        assert exc_info.value.status == 401

    @pytest.mark.asyncio
    async def test_rate_limit_raises_specific_error(self, github_client, mock_aiohttp_session):
        mock_aiohttp_session.get.return_value = mock_aiohttp_session.create_mock_response(
            403, text_data="API rate limit exceeded"
        )

        with pytest.raises(GitHubRateLimitError):
            await github_client.get_file_content("owner/repo", "file.md", "token")


class TestGetPullRequestTemplate:
    @pytest.mark.asyncio
    async def test_first_existing_location_wins(self, github_client, mock_aiohttp_session):
        mock_aiohttp_session.get.side_effect = [
            mock_aiohttp_session.create_mock_response(404),
            mock_aiohttp_session.create_mock_response(200, text_data="## Template"),
        ]

        template = await github_client.get_pull_request_template("owner", "repo", "token")

        assert template == "## Template"
        requested = [call.args[0] for call in mock_aiohttp_session.get.call_args_list]
        assert requested[0].endswith("/contents/.github/PULL_REQUEST_TEMPLATE.md")
        assert requested[1].endswith("/contents/PULL_REQUEST_TEMPLATE.md")

    @pytest.mark.asyncio
    async def test_no_template_returns_none(self, github_client, mock_aiohttp_session):
        mock_aiohttp_session.get.side_effect = [mock_aiohttp_session.create_mock_response(404) for _ in range(3)]

        assert await github_client.get_pull_request_template("owner", "repo", "token") is None
        assert mock_aiohttp_session.get.call_count == 3

    @pytest.mark.asyncio
    async def test_transport_failure_raises(self, github_client, mock_aiohttp_session):
        mock_aiohttp_session.get.return_value = mock_aiohttp_session.create_mock_response(500, text_data="oops")

        with pytest.raises(GitHubAPIError):
            await github_client.get_pull_request_template("owner", "repo", "token")


class TestSetCommitStatus:
    STATUS = {"state": "success", "description": "ok", "context": "zappr/pr/specification"}

    @pytest.mark.asyncio
    async def test_posts_status(self, github_client, mock_aiohttp_session):
        mock_aiohttp_session.post.return_value = mock_aiohttp_session.create_mock_response(201, json_data={"id": 7})

        result = await github_client.set_commit_status("owner", "repo", "abc123", self.STATUS, "token")

        assert result == {"id": 7}
        call = mock_aiohttp_session.post.call_args
        assert call.args[0].endswith("/repos/owner/repo/statuses/abc123")
        assert call.kwargs["json"] == self.STATUS

    @pytest.mark.asyncio
    async def test_failure_raises(self, github_client, mock_aiohttp_session):
        mock_aiohttp_session.post.return_value = mock_aiohttp_session.create_mock_response(
            422, text_data="Validation Failed"
        )

        with pytest.raises(GitHubAPIError):
            await github_client.set_commit_status("owner", "repo", "abc123", self.STATUS, "token")


class TestInstallationToken:
    @pytest.mark.asyncio
    async def test_token_is_cached(self, github_client, mock_aiohttp_session):
        mock_aiohttp_session.post.return_value = mock_aiohttp_session.create_mock_response(
            201, json_data={"token": "inst-token"}
        )

        first = await github_client.get_installation_access_token(99)
        second = await github_client.get_installation_access_token(99)

        assert first == second == "inst-token"
        assert mock_aiohttp_session.post.call_count == 1

    @pytest.mark.asyncio
    async def test_failure_raises_with_status(self, github_client, mock_aiohttp_session):
        mock_aiohttp_session.post.return_value = mock_aiohttp_session.create_mock_response(
            401, text_data="A JSON web token could not be decoded"
        )

        with pytest.raises(GitHubAPIError) as exc_info:
            await github_client.get_installation_access_token(99)

        assert exc_info.value.status == 401
        assert "could not be decoded" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_failure_is_not_cached(self, github_client, mock_aiohttp_session):
        mock_aiohttp_session.post.side_effect = [
            mock_aiohttp_session.create_mock_response(500),
            mock_aiohttp_session.create_mock_response(201, json_data={"token": "inst-token"}),
        ]

        with pytest.raises(GitHubAPIError):
            await github_client.get_installation_access_token(99)

        assert await github_client.get_installation_access_token(99) == "inst-token"
