"""
Contacts Backend API
Endpoints for listing, reading, creating and deleting contacts.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import contacts_router, health_router
from config import get_settings

import store

settings = get_settings()
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    contact_store = store.get_contact_store()
    if contact_store.ensure_file().ok:
        logger.info("Serving contacts from %s", contact_store.path)
    else:
        logger.warning("Contacts storage at %s is unavailable; requests will return 503", contact_store.path)
    yield


app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(contacts_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
