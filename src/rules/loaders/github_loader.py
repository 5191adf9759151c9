"""
GitHub-based configuration loader.

Loads a repository's policy file from GitHub, implementing the ConfigLoader interface.
"""

from typing import Any

import structlog
import yaml

from src.core.config import config
from src.core.errors import ConfigurationError
from src.integrations.github import GitHubClient
from src.rules.interface import ConfigLoader

logger = structlog.get_logger()


class GitHubConfigLoader(ConfigLoader):
    """
    Loads configuration from a GitHub repository's policy yaml file.

    A missing file, or one that does not hold a mapping, yields an empty
    configuration so every check runs with its defaults.
    """

    def __init__(self, client: GitHubClient):
        self.github_client = client

    async def get_config(self, repository: str, token: str | None) -> dict[str, Any]:
        config_file_path = config.repo_config.config_file

        logger.info("fetching_repo_config", repo=repository, path=config_file_path)
        content = await self.github_client.get_file_content(repository, config_file_path, token)
        if not content:
            logger.info("repo_config_missing", repo=repository, path=config_file_path)
            return {}

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            logger.error("repo_config_invalid", repo=repository, path=config_file_path, error=str(e))
            raise ConfigurationError(f"Invalid YAML in {repository}/{config_file_path}: {e}") from e

        if not isinstance(data, dict):
            logger.warning("repo_config_not_a_mapping", repo=repository, path=config_file_path)
            return {}

        return data

