import structlog
from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import ValidationError

from src.core.models import EventType, WebhookEvent
from src.webhooks.auth import verify_github_signature
from src.webhooks.dispatcher import WebhookDispatcher, dispatcher
from src.webhooks.models import GitHubEventModel

logger = structlog.get_logger()
router = APIRouter()


# Dependency provider for the dispatcher instance, overridable in tests.
def get_dispatcher() -> WebhookDispatcher:
    """Returns the shared WebhookDispatcher instance."""
    return dispatcher


@router.post("/github", summary="Endpoint for all GitHub webhooks")
async def github_webhook_endpoint(
    request: Request,
    is_verified: bool = Depends(verify_github_signature),
    dispatcher_instance: WebhookDispatcher = Depends(get_dispatcher),
):
    """
    Receives events from the configured GitHub App.

    - The signature dependency rejects unsigned or tampered requests.
    - Unsupported event types are acknowledged and ignored.
    - Supported events are validated and handed to the dispatcher.
    """
    event_name = request.headers.get("X-GitHub-Event")
    if not event_name:
        raise HTTPException(status_code=400, detail="Missing X-GitHub-Event header")

    try:
        event_type = EventType(event_name.split(".")[0])
    except ValueError:
        logger.info("webhook_event_unsupported", event_name=event_name)
        return {"status": "ignored", "detail": f"Event type '{event_name}' is not supported"}

    payload = await request.json()
    try:
        GitHubEventModel.model_validate(payload)
    except ValidationError as e:
        logger.warning("webhook_payload_invalid", event_name=event_name, errors=e.errors())
        raise HTTPException(status_code=400, detail="Invalid webhook payload structure") from e

    event = WebhookEvent(
        event_type=event_type,
        payload=payload,
        delivery_id=request.headers.get("X-GitHub-Delivery"),
    )
    logger.info("webhook_validated", event_type=event_type.value, repo=event.repo_full_name)

    result = await dispatcher_instance.dispatch(event)
    return {"status": "ok", "event_type": event_type.value, "result": result}
