
import logging
import os

from upload_storage.core.config import settings

def configure_logging(log_dir: str = settings.LOG_DIR, level: str = settings.LOG_LEVEL):
    logger = logging.getLogger()
    if logger.hasHandlers():
        return
    os.makedirs(log_dir, exist_ok=True)
    logger.setLevel(level)

    fmt = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")

    fh = logging.FileHandler(os.path.join(log_dir, "app.log"))
    fh.setFormatter(fmt)
    fh.setLevel(level)

    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    ch.setLevel(level)

    logger.addHandler(fh)
    logger.addHandler(ch)
