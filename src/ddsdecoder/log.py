"""Logging setup for the ddsdecoder command line"""
import logging
import logging.handlers
import os
from typing import Optional

logger = logging.getLogger("ddsdecoder")

# 10 MB max per log file, keep 3 rotated backups
_LOG_MAX_BYTES = 10 * 1024 * 1024
_LOG_BACKUP_COUNT = 3


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None, force: bool = False):
    """Configure logging without clobbering host-app handlers by default."""
    fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    handlers = [logging.StreamHandler()]
    if log_file:
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            log_file, maxBytes=_LOG_MAX_BYTES, backupCount=_LOG_BACKUP_COUNT,
            encoding="utf-8",
        ))
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        print(f"Warning: Invalid log level '{level}', defaulting to WARNING")
        numeric_level = logging.WARNING

    root = logging.getLogger()
    if force or not root.handlers:
        logging.basicConfig(
            level=numeric_level,
            format=fmt,
            handlers=handlers,
            force=force,
        )
        logger.setLevel(numeric_level)
        return

    # Embedded mode: only touch the ddsdecoder logger hierarchy
    logger.setLevel(numeric_level)
    if log_file:
        existing_files = {
            getattr(h, "baseFilename", None)
            for h in logger.handlers
            if isinstance(h, logging.FileHandler)
        }
        file_handler = handlers[1]
        if file_handler.baseFilename not in existing_files:
            file_handler.setFormatter(logging.Formatter(fmt))
            logger.addHandler(file_handler)
        else:
            file_handler.close()
