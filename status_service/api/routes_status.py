"""Health check endpoint."""

import logging

from fastapi import APIRouter

logger = logging.getLogger(__name__)

router = APIRouter(tags=["status"])

STATUS_PAYLOAD = {"status": "Running"}


@router.get("/status")
async def status():
    """Report that the service is up and accepting connections."""
    logger.info("status called")
    return STATUS_PAYLOAD
