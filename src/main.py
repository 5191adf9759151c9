from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from src.core.config import config
from src.core.models import EventType
from src.core.utils.logging import configure_logging
from src.integrations.github import github_client
from src.webhooks.dispatcher import dispatcher
from src.webhooks.handlers.pull_request import PullRequestEventHandler
from src.webhooks.router import router as webhook_router

# --- Application Setup ---

configure_logging(config.logging)
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Validate configuration and register event handlers on startup; release the GitHub session on shutdown."""
    config.validate()
    dispatcher.register_handler(EventType.PULL_REQUEST, PullRequestEventHandler())
    logger.info("application_started", environment=config.environment)
    yield
    await github_client.close()
    logger.info("application_stopped")


app = FastAPI(
    title="PR Specification Check",
    description="Reports whether pull requests are properly specified.",
    version="0.1.0",
    lifespan=lifespan,
)

# --- Include Routers ---

app.include_router(webhook_router, prefix="/webhooks", tags=["GitHub Webhooks"])

# --- Root Endpoint ---


@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the service is running."""
    return {"status": "ok", "message": "Specification check is running."}
