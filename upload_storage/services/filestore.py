# upload_storage/services/filestore.py
"""
Filesystem-backed upload storage.

Files live flat under a single root directory, named by their original
filename. There is no metadata store: existence, size and content are
whatever the filesystem reports.
"""

from __future__ import annotations

import logging
import os
import shutil
from contextlib import closing
from dataclasses import dataclass
from functools import lru_cache
from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Iterator

from upload_storage.core.config import StorageProperties, settings
from upload_storage.services.errors import (
    BadFileTypeError,
    ConfigurationError,
    DuplicateFileError,
    EmptyFileError,
    FileTooLargeError,
    InvalidFilenameError,
    PathTraversalError,
    StorageError,
    StorageErrorKind,
    StorageFileNotFoundError,
)

MAX_FILE_SIZE = 5000 * 1024
DISALLOWED_SUFFIX = ".txt"


@dataclass
class UploadPayload:
    filename: str
    size: int
    content: BinaryIO

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    @classmethod
    def from_bytes(cls, filename: str, data: bytes) -> "UploadPayload":
        return cls(filename=filename, size=len(data), content=BytesIO(data))


class FileSystemStorageService:
    def __init__(self, properties: StorageProperties):
        if not properties.location or not properties.location.strip():
            raise ConfigurationError("File upload location can not be empty.")
        self.root_location = Path(properties.location)
        self._root_absolute = Path(os.path.normpath(os.path.abspath(self.root_location)))

    def init(self) -> None:
        try:
            self.root_location.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logging.error(f"Could not initialize storage at {self.root_location}: {e}")
            raise StorageError("Could not initialize storage", StorageErrorKind.INITIALIZATION_FAILED, e) from e

    def store(self, payload: UploadPayload) -> Path:
        """
        Validate the payload and write it under the root directory.

        Checks run in a fixed order and the first failure wins; nothing touches
        the filesystem until all of them pass. The content stream is closed on
        every exit path.
        """
        with closing(payload.content):
            self._validate(payload)
            destination = self._resolve_destination(payload.filename)
            self._write(payload.content, destination)
        logging.info(f"Stored {payload.filename} ({payload.size} bytes)")
        return destination

    def _validate(self, payload: UploadPayload) -> None:
        filename = payload.filename
        if payload.is_empty:
            raise EmptyFileError("Failed to store empty file.")
        if payload.size > MAX_FILE_SIZE:
            raise FileTooLargeError(f"File size exceeds the allowed limit of {MAX_FILE_SIZE} bytes.")
        if filename.endswith(DISALLOWED_SUFFIX):
            raise BadFileTypeError("Invalid or disallowed file type.")
        if " " in filename:
            raise InvalidFilenameError("Invalid filename.")

    def _resolve_destination(self, filename: str) -> Path:
        # Lexical normalization only; symlinks are not followed.
        destination = Path(os.path.normpath(self._root_absolute / filename))
        if destination.parent != self._root_absolute:
            logging.warning(f"Rejected upload escaping storage root: {filename!r}")
            raise PathTraversalError("Cannot store file outside current directory.")
        if destination.exists():
            raise DuplicateFileError("A file with the same name already exists.")
        return destination

    def _write(self, content: BinaryIO, destination: Path) -> None:
        created = False
        try:
            # "x" mode: a racing store of the same name fails instead of overwriting.
            with open(destination, "xb") as out:
                created = True
                shutil.copyfileobj(content, out)
        except FileExistsError as e:
            raise DuplicateFileError("A file with the same name already exists.") from e
        except (OSError, ValueError) as e:
            logging.error(f"Failed to store {destination.name}: {e}")
            if created:
                self._discard(destination)
            raise StorageError("Failed to store file.", StorageErrorKind.WRITE_FAILED, e) from e

    @staticmethod
    def _discard(path: Path) -> None:
        try:
            path.unlink()
        except OSError as e:
            logging.warning(f"Could not remove partial file {path}: {e}")

    def load_all(self) -> Iterator[Path]:
        """Shallow listing of the root, as paths relative to it.

        The directory is read once, here; the returned iterator can be
        consumed a single time.
        """
        try:
            names = sorted(os.listdir(self.root_location))
        except OSError as e:
            logging.error(f"Failed to read stored files in {self.root_location}: {e}")
            raise StorageError("Failed to read stored files", StorageErrorKind.LIST_FAILED, e) from e
        return iter([Path(name) for name in names])

    def load(self, filename: str) -> Path:
        return self.root_location / filename

    def load_as_resource(self, filename: str) -> Path:
        file = self.load(filename)
        if file.exists() or os.access(file, os.R_OK):
            return file
        raise StorageFileNotFoundError(f"Could not read file: {filename}")

    def delete_all(self) -> None:
        try:
            shutil.rmtree(self.root_location)
        except FileNotFoundError:
            logging.info(f"Storage root {self.root_location} already absent, nothing to delete")
        except OSError as e:
            logging.exception(f"Failed to delete storage root {self.root_location}")
            raise StorageError("Could not delete stored files", StorageErrorKind.DELETE_FAILED, e) from e
        else:
            logging.info(f"Deleted storage root {self.root_location}")


@lru_cache()
def get_storage() -> FileSystemStorageService:
    return FileSystemStorageService(settings.storage_properties())
