import base64
import time
from typing import Any

import aiohttp
import jwt
import structlog
from cachetools import TTLCache

from src.core.config import config
from src.core.constants import PULL_REQUEST_TEMPLATE_PATHS
from src.core.errors import GitHubAPIError, GitHubRateLimitError, GitHubResourceNotFoundError

logger = structlog.get_logger()


class GitHubClient:
    """
    A client for the handful of GitHub API calls the specification check needs.

    This client handles the authentication flow for a GitHub App, including
    generating a JWT and exchanging it for an installation access token.
    Tokens are cached to avoid regenerating them for every event.

    No call is retried. Failures other than a missing file surface as
    GitHubAPIError so that callers never mistake them for rule results.
    """

    def __init__(self):
        self._private_key = self._decode_private_key()
        self._app_id = config.github.app_id
        self._session: aiohttp.ClientSession | None = None
        # Cache for installation tokens (TTL: 50 minutes, GitHub tokens expire in 60)
        self._token_cache: TTLCache = TTLCache(maxsize=100, ttl=50 * 60)

    @staticmethod
    def _get_auth_headers(token: str | None, accept: str = "application/vnd.github.v3+json") -> dict[str, str]:
        headers = {"Accept": accept}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def get_installation_access_token(self, installation_id: int) -> str:
        """
        Gets an access token for a specific installation of the GitHub App.
        Caches the token to avoid regenerating it for every request.

        Raises:
            GitHubAPIError: If GitHub refuses the token exchange.
        """
        if installation_id in self._token_cache:
            logger.debug("installation_token_cache_hit", installation_id=installation_id)
            return self._token_cache[installation_id]

        jwt_token = self._generate_jwt()
        headers = {
            "Authorization": f"Bearer {jwt_token}",
            "Accept": "application/vnd.github.v3+json",
        }
        url = f"{config.github.api_base_url}/app/installations/{installation_id}/access_tokens"

        session = await self._get_session()
        async with session.post(url, headers=headers) as response:
            if response.status == 201:
                data = await response.json()
                token = data["token"]
                self._token_cache[installation_id] = token
                logger.info("installation_token_generated", installation_id=installation_id)
                return token
            else:
                error_text = await response.text()
                logger.error(
                    "installation_token_failed",
                    installation_id=installation_id,
                    status=response.status,
                    response_body=error_text,
                )
                raise self._api_error(response.status, error_text)

    async def get_file_content(self, repo_full_name: str, file_path: str, token: str | None) -> str | None:
        """
        Fetches the raw content of a file from a repository.

        Returns:
            The file content, or None if the file does not exist.

        Raises:
            GitHubAPIError: On any response other than 200 or 404.
        """
        headers = self._get_auth_headers(token, accept="application/vnd.github.raw")
        url = f"{config.github.api_base_url}/repos/{repo_full_name}/contents/{file_path}"

        session = await self._get_session()
        async with session.get(url, headers=headers) as response:
            if response.status == 200:
                logger.debug("file_fetched", repo=repo_full_name, path=file_path)
                return await response.text()
            elif response.status == 404:
                logger.debug("file_not_found", repo=repo_full_name, path=file_path)
                return None
            else:
                error_text = await response.text()
                logger.error(
                    "file_fetch_failed",
                    repo=repo_full_name,
                    path=file_path,
                    status=response.status,
                    response_body=error_text,
                )
                raise self._api_error(response.status, error_text)

    async def get_pull_request_template(self, owner: str, repo: str, token: str | None) -> str | None:
        """
        Reads the repository's pull request template.

        Looks in each location GitHub supports and returns the first template
        found, or None when the repository has no template at all.
        """
        repo_full_name = f"{owner}/{repo}"
        for path in PULL_REQUEST_TEMPLATE_PATHS:
            content = await self.get_file_content(repo_full_name, path, token)
            if content is not None:
                logger.info("pull_request_template_found", repo=repo_full_name, path=path)
                return content
        return None

    async def set_commit_status(
        self, owner: str, repo: str, sha: str, status: dict[str, Any], token: str | None
    ) -> dict[str, Any]:
        """
        Creates a commit status for the given sha.

        Args:
            status: Payload with 'state', 'description' and 'context' keys.

        Raises:
            GitHubAPIError: If GitHub does not acknowledge the status.
        """
        headers = self._get_auth_headers(token)
        url = f"{config.github.api_base_url}/repos/{owner}/{repo}/statuses/{sha}"

        session = await self._get_session()
        async with session.post(url, headers=headers, json=status) as response:
            if response.status == 201:
                logger.info(
                    "commit_status_created",
                    repo=f"{owner}/{repo}",
                    sha=sha,
                    state=status.get("state"),
                    context=status.get("context"),
                )
                return await response.json()
            error_text = await response.text()
            logger.error(
                "commit_status_failed",
                repo=f"{owner}/{repo}",
                sha=sha,
                status=response.status,
                response_body=error_text,
            )
            raise self._api_error(response.status, error_text)

    async def close(self):
        """Closes the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()

    @staticmethod
    def _api_error(status: int, error_text: str) -> GitHubAPIError:
        if status == 404:
            return GitHubResourceNotFoundError(status, error_text)
        if status in (403, 429) and "rate limit" in error_text.lower():
            return GitHubRateLimitError(status, error_text)
        return GitHubAPIError(status, error_text)

    async def _get_session(self) -> aiohttp.ClientSession:
        """Initializes and returns the aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    def _generate_jwt(self) -> str:
        """Generates a JSON Web Token (JWT) to authenticate as the GitHub App."""
        payload = {
            "iat": int(time.time()),
            "exp": int(time.time()) + (1 * 60),
            "iss": self._app_id,
        }
        return jwt.encode(payload, self._private_key, algorithm="RS256")

    @staticmethod
    def _decode_private_key() -> str:
        """
        Decodes the base64-encoded private key from the configuration.

        Returns:
            The decoded private key as a string.
        """
        try:
            return base64.b64decode(config.github.private_key).decode("utf-8")
        except Exception as e:
            logger.error("private_key_decode_failed", error=str(e))
            raise ValueError("Invalid private key format. Expected base64-encoded PEM key.") from e


# Global instance
github_client = GitHubClient()
