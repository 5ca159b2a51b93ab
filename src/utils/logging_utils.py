"""Per-module loggers for the topology server."""
import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _file_handler(formatter: logging.Formatter) -> logging.Handler:
    logs_dir = Path(settings.LOG_DIR)
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / f"topo_server_{datetime.now():%Y%m%d_%H%M%S}.log"
    handler = logging.FileHandler(log_file)
    handler.setLevel(settings.LOG_FILE_LEVEL)
    handler.setFormatter(formatter)
    return handler


def setup_logger(name: str) -> logging.Logger:
    """Return the logger for name, attaching handlers on first use.

    Console output honours LOG_LEVEL; a per-run file under LOG_DIR is
    written when LOG_FILE_ENABLED is set.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(settings.LOG_LEVEL)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.LOG_FILE_ENABLED:
        logger.addHandler(_file_handler(formatter))

    return logger
