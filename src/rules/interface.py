from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Check(Protocol):
    """
    Capability interface for anything that can run as a repository check.

    A check receives the repository configuration, the raw webhook payload
    and the credentials to act with, and reports its result on its own.
    """

    async def execute(self, config: dict[str, Any], payload: dict[str, Any], token: str | None) -> Any: ...


class ConfigLoader(ABC):
    """
    Abstract interface for fetching a repository's configuration.

    This interface allows us to swap out different configuration sources
    (GitHub files, database, etc.) without changing the application logic.
    """

    @abstractmethod
    async def get_config(self, repository: str, token: str | None) -> dict[str, Any]:
        """
        Fetch configuration for a specific repository.

        Args:
            repository: The repository in format "owner/repo"
            token: Access token used to read the repository

        Returns:
            The parsed configuration mapping, empty when none is present
        """
        pass
