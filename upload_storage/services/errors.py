# upload_storage/services/errors.py
from enum import Enum
from typing import Optional


class StorageErrorKind(str, Enum):
    INITIALIZATION_FAILED = "initialization_failed"
    WRITE_FAILED = "write_failed"
    LIST_FAILED = "list_failed"
    DELETE_FAILED = "delete_failed"


class StorageServiceError(Exception):
    """Base class for everything the storage service raises."""


class ConfigurationError(StorageServiceError):
    pass


class UploadRejectedError(StorageServiceError):
    """An upload failed validation; nothing was written."""


class EmptyFileError(UploadRejectedError):
    pass


class FileTooLargeError(UploadRejectedError):
    pass


class BadFileTypeError(UploadRejectedError):
    pass


class InvalidFilenameError(UploadRejectedError):
    pass


class DuplicateFileError(UploadRejectedError):
    pass


class PathTraversalError(UploadRejectedError):
    pass


class StorageFileNotFoundError(StorageServiceError):
    pass


class StorageError(StorageServiceError):
    """
    Wraps an underlying filesystem failure.

    `kind` tells which operation failed, `cause` is the original exception
    (also chained as __cause__ by the raiser).
    """

    def __init__(self, message: str, kind: StorageErrorKind, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.kind = kind
        self.cause = cause

    def __str__(self) -> str:
        base = super().__str__()
        if self.cause is not None:
            return f"{base} ({self.kind.value}: {self.cause})"
        return f"{base} ({self.kind.value})"
