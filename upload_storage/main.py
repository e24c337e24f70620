"""
Upload Storage
- /api/files/upload : validate and store an uploaded file
- /api/files        : list stored files, or wipe them (DELETE)
- /api/files/{name} : download a stored file
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from upload_storage.api.routes.files import router as files_router
from upload_storage.core.config import settings
from upload_storage.core.logging import configure_logging
from upload_storage.services.filestore import get_storage

configure_logging()

@asynccontextmanager
async def lifespan(app: FastAPI):
    storage = get_storage()
    if settings.STORAGE_RESET_ON_STARTUP:
        logging.info("Resetting storage root on startup")
        storage.delete_all()
    storage.init()
    logging.info(f"Storage root ready at {storage.root_location}")
    yield

app = FastAPI(title="Upload Storage", version="0.1.0", lifespan=lifespan)

app.include_router(files_router, prefix="/api/files", tags=["files"])

@app.get("/health")
def health():
    return {"status": "ok"}
