from pydantic import BaseModel


class WebhookRepository(BaseModel):
    """Repository fields the check needs to address GitHub."""

    name: str
    full_name: str


class WebhookInstallation(BaseModel):
    id: int


class GitHubEventModel(BaseModel):
    """
    Minimal shape of an accepted webhook payload.

    Unknown fields are ignored; the processor reads the rest of the raw
    payload on its own.
    """

    action: str | None = None
    repository: WebhookRepository
    installation: WebhookInstallation | None = None
