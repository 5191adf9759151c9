"""
Main configuration class that composes all configs.
"""

import os

from dotenv import load_dotenv

from src.core.config.github_config import GitHubConfig
from src.core.config.logging_config import LoggingConfig
from src.core.config.repo_config import RepoConfig

# Load environment variables from a .env file
load_dotenv()


class Config:
    """Main configuration class."""

    def __init__(self) -> None:
        self.github = GitHubConfig(
            app_id=os.getenv("APP_CLIENT_ID_GITHUB", ""),
            private_key=os.getenv("PRIVATE_KEY_BASE64_GITHUB", ""),
            webhook_secret=os.getenv("WEBHOOK_SECRET_GITHUB", ""),
            api_base_url=os.getenv("API_BASE_URL_GITHUB", "https://api.github.com"),
        )

        self.repo_config = RepoConfig(
            config_file=os.getenv("REPO_CONFIG_FILE", ".zappr.yaml"),
        )

        self.logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format=os.getenv("LOG_FORMAT", "%(asctime)s %(levelname)8s %(message)s"),
        )

        self.environment = os.getenv("ENVIRONMENT", "development")

    def validate(self) -> bool:
        """Validate configuration."""
        errors = []

        if not self.github.app_id:
            errors.append("APP_CLIENT_ID_GITHUB is required")

        if not self.github.private_key:
            errors.append("PRIVATE_KEY_BASE64_GITHUB is required")

        if not self.github.webhook_secret:
            errors.append("WEBHOOK_SECRET_GITHUB is required")

        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")

        return True


# Global config instance
config = Config()
