"""
Unit Tests: configuration
"""

from upload_storage.core.config import Settings, StorageProperties, _env_flag


def test_storage_properties_from_settings():
    settings = Settings(STORAGE_LOCATION="/srv/uploads")
    assert settings.storage_properties() == StorageProperties(location="/srv/uploads")


def test_default_location():
    assert StorageProperties().location == "upload-dir"


def test_env_flag(monkeypatch):
    monkeypatch.setenv("STORAGE_RESET_ON_STARTUP", "True")
    assert _env_flag("STORAGE_RESET_ON_STARTUP") is True
    monkeypatch.setenv("STORAGE_RESET_ON_STARTUP", "0")
    assert _env_flag("STORAGE_RESET_ON_STARTUP") is False
    monkeypatch.delenv("STORAGE_RESET_ON_STARTUP")
    assert _env_flag("STORAGE_RESET_ON_STARTUP") is False
