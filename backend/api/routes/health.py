"""Liveness plus a check that the contacts file can be read."""

import os
from datetime import datetime, timezone

from fastapi import APIRouter

from config import get_settings

import store

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    settings = get_settings()
    path = store.get_contact_store().path
    readable = path.is_file() and os.access(path, os.R_OK)
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.APP_VERSION,
        "storage": "ok" if readable else "unavailable",
        "path": str(path),
    }
