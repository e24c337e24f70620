
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv(override=True)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class StorageProperties:
    # Root directory for uploaded files.
    location: str = "upload-dir"


@dataclass
class Settings:
    STORAGE_LOCATION: str = os.getenv("STORAGE_LOCATION", "upload-dir")
    STORAGE_RESET_ON_STARTUP: bool = _env_flag("STORAGE_RESET_ON_STARTUP")
    LOG_DIR: str = os.getenv("LOG_DIR", "logs")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    def storage_properties(self) -> StorageProperties:
        return StorageProperties(location=self.STORAGE_LOCATION)

settings = Settings()
