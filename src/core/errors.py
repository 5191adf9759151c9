"""
Core error classes for the specification check service.
"""


class RuleViolationError(Exception):
    """Raised by a condition when the pull request does not satisfy its rule."""

    pass


class ConfigurationError(Exception):
    """Raised when a repository configuration file cannot be parsed or holds invalid values."""

    pass


class GitHubAPIError(Exception):
    """Raised when a GitHub API call fails for reasons other than a missing resource."""

    def __init__(self, status: int, message: str) -> None:
        self.status = status
        super().__init__(f"GitHub API error ({status}): {message}")


class GitHubResourceNotFoundError(GitHubAPIError):
    """Raised when a specific GitHub resource is not found."""

    pass


class GitHubRateLimitError(GitHubAPIError):
    """Raised when GitHub API rate limit is exceeded."""

    pass
