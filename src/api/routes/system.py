"""Catalog and service health routes"""

import time

from fastapi import APIRouter, Depends

from src.depends import ServiceContainer, get_container
from src.domain.base import utc_now

router = APIRouter(tags=["System"])


@router.get("/products")
async def products(container: ServiceContainer = Depends(get_container)):
    return {
        "userPanels": [p.to_document() for p in container.catalog.user_panels()],
        "adminPanels": [p.to_document() for p in container.catalog.admin_panels()],
    }


@router.get("/health")
async def health(container: ServiceContainer = Depends(get_container)):
    return {
        "status": "OK",
        "timestamp": utc_now().isoformat(),
        "uptime": container.uptime(),
        "activeTransactions": len(await container.manager.list_active()),
        "environment": container.config.ENVIRONMENT,
    }


@router.get("/ping")
async def ping():
    return {
        "success": True,
        "message": "pong",
        "timestamp": int(time.time() * 1000),
        "server": "Auto Buy Panel",
    }
