import logging
from typing import Dict, List, Type

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from pydantic import BaseModel
from starlette.responses import FileResponse

from upload_storage.services.errors import (
    BadFileTypeError,
    DuplicateFileError,
    EmptyFileError,
    FileTooLargeError,
    InvalidFilenameError,
    PathTraversalError,
    StorageError,
    StorageFileNotFoundError,
    StorageServiceError,
)
from upload_storage.services.filestore import FileSystemStorageService, UploadPayload, get_storage

router = APIRouter()

_STATUS: Dict[Type[StorageServiceError], int] = {
    EmptyFileError: 400,
    FileTooLargeError: 413,
    BadFileTypeError: 415,
    InvalidFilenameError: 400,
    DuplicateFileError: 409,
    PathTraversalError: 400,
    StorageFileNotFoundError: 404,
    StorageError: 500,
}

class StoredFile(BaseModel):
    filename: str
    size: int

class FileListing(BaseModel):
    files: List[str]

def _to_http(e: StorageServiceError) -> HTTPException:
    status = _STATUS.get(type(e), 500)
    if status >= 500:
        logging.error(f"Storage failure: {e}")
    return HTTPException(status_code=status, detail=str(e))

def _payload_from_upload(upload: UploadFile) -> UploadPayload:
    # Size from the spooled file itself; UploadFile.size is not always set.
    stream = upload.file
    stream.seek(0, 2)
    size = stream.tell()
    stream.seek(0)
    return UploadPayload(filename=upload.filename or "", size=size, content=stream)

@router.post("/upload", response_model=StoredFile)
def upload(file: UploadFile = File(...), storage: FileSystemStorageService = Depends(get_storage)):
    payload = _payload_from_upload(file)
    try:
        storage.store(payload)
    except StorageServiceError as e:
        raise _to_http(e)
    return StoredFile(filename=payload.filename, size=payload.size)

@router.get("", response_model=FileListing)
def list_files(storage: FileSystemStorageService = Depends(get_storage)):
    try:
        names = [str(p) for p in storage.load_all()]
    except StorageServiceError as e:
        raise _to_http(e)
    return FileListing(files=names)

@router.get("/{filename}")
def download(filename: str, storage: FileSystemStorageService = Depends(get_storage)):
    try:
        path = storage.load_as_resource(filename)
    except StorageServiceError as e:
        raise _to_http(e)
    if not path.is_file():
        raise HTTPException(status_code=404, detail=f"Could not read file: {filename}")
    headers = {"Content-Disposition": f'attachment; filename="{path.name}"'}
    return FileResponse(path, media_type="application/octet-stream", headers=headers)

@router.delete("")
def delete_all(storage: FileSystemStorageService = Depends(get_storage)):
    try:
        storage.delete_all()
        storage.init()
    except StorageServiceError as e:
        raise _to_http(e)
    return {"status": "deleted"}
