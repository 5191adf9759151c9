from abc import ABC, abstractmethod
from enum import Enum

from pydantic import BaseModel

from src.core.models import WebhookEvent
from src.integrations.github import GitHubClient, github_client
from src.rules.interface import ConfigLoader
from src.rules.loaders.github_loader import GitHubConfigLoader


class ProcessingState(str, Enum):
    """
    Processing state for event processing results.

    - PASS: Checks passed and a success status was reported
    - FAIL: A check failed and a failure status was reported
    - SKIPPED: The event was not eligible; nothing was reported
    """

    PASS = "pass"
    FAIL = "fail"
    SKIPPED = "skipped"


class ProcessingResult(BaseModel):
    """Result of event processing."""

    state: ProcessingState
    description: str | None = None
    processing_time_ms: int

    @property
    def success(self) -> bool:
        return self.state != ProcessingState.FAIL


class BaseEventProcessor(ABC):
    """Base class for all event processors."""

    def __init__(self, client: GitHubClient | None = None, config_loader: ConfigLoader | None = None):
        self.github_client = client or github_client
        self.config_loader = config_loader or GitHubConfigLoader(self.github_client)

    @abstractmethod
    async def process(self, event: WebhookEvent) -> ProcessingResult:
        """Process the webhook event."""
        raise NotImplementedError("Subclasses must implement process")

    @abstractmethod
    def get_event_type(self) -> str:
        """Get the event type this processor handles."""
        raise NotImplementedError("Subclasses must implement get_event_type")
