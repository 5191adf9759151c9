import hashlib
import hmac

import structlog
from fastapi import HTTPException, Request

from src.core.config import config

logger = structlog.get_logger()


async def verify_github_signature(request: Request) -> bool:
    """
    FastAPI dependency that verifies the GitHub webhook signature.

    Compares the 'X-Hub-Signature-256' header against an HMAC-SHA256 of the
    raw request body keyed with the configured webhook secret.

    Raises:
        HTTPException: If the signature is missing or invalid.
    """
    signature = request.headers.get("X-Hub-Signature-256")
    if not signature:
        logger.warning("webhook_signature_missing")
        raise HTTPException(status_code=401, detail="Missing GitHub webhook signature.")

    payload = await request.body()
    mac = hmac.new(config.github.webhook_secret.encode(), msg=payload, digestmod=hashlib.sha256)
    expected_signature = f"sha256={mac.hexdigest()}"

    if not hmac.compare_digest(signature, expected_signature):
        logger.error("webhook_signature_invalid")
        raise HTTPException(status_code=401, detail="Invalid GitHub webhook signature.")

    return True
