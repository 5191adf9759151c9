from typing import Any

import structlog

from src.core.models import EventType, WebhookEvent
from src.webhooks.handlers.base import EventHandler

logger = structlog.get_logger()


class WebhookDispatcher:
    """Routes each webhook event to the handler registered for its type."""

    def __init__(self):
        self._handlers: dict[EventType, EventHandler] = {}

    def register_handler(self, event_type: EventType, handler: EventHandler):
        self._handlers[event_type] = handler
        logger.info("handler_registered", event_type=event_type.value, handler=type(handler).__name__)

    async def dispatch(self, event: WebhookEvent) -> dict[str, Any]:
        """
        Run the registered handler for the event.

        Returns:
            `{"status": "processed", "handler", "result"}` with the handler's
            serialized response, or `{"status": "skipped", "reason"}` when no
            handler is registered for the event type.
        """
        handler = self._handlers.get(event.event_type)
        if handler is None:
            logger.warning("handler_missing", event_type=event.event_type.value)
            return {"status": "skipped", "reason": f"No handler for event type {event.event_type.value}"}

        response = await handler.handle(event)
        return {"status": "processed", "handler": type(handler).__name__, "result": response.model_dump(mode="json")}


dispatcher = WebhookDispatcher()
