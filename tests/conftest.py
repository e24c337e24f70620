"""
Shared fixtures: a storage service rooted in a per-test temp directory and a
TestClient whose storage dependency points at it.
"""

import os
import tempfile

# Keep application logs and the default root out of the working tree.
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="upload-storage-logs-"))
os.environ.setdefault("STORAGE_LOCATION", tempfile.mkdtemp(prefix="upload-storage-root-"))

import pytest
from fastapi.testclient import TestClient

from upload_storage.core.config import StorageProperties
from upload_storage.main import app
from upload_storage.services.filestore import FileSystemStorageService, get_storage


@pytest.fixture
def root(tmp_path):
    return tmp_path / "upload-dir"


@pytest.fixture
def storage(root):
    service = FileSystemStorageService(StorageProperties(location=str(root)))
    service.init()
    return service


@pytest.fixture
def client(storage):
    app.dependency_overrides[get_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()
