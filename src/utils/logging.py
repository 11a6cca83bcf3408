import logging
import sys
from pathlib import Path
from typing import Optional, Union
from src.config.settings import settings

SERVICE_LOGGER = "professor_rag"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def _resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO

def configure_logging(
    level: Union[str, int] = settings.LOG_LEVEL,
    logs_dir: Optional[Path] = settings.LOGS_DIR
) -> logging.Logger:
    """Attach console and file handlers to the service logger.

    Existing handlers are replaced, so calling this again (e.g. from the CLI
    with a different level) never duplicates output. Pass ``logs_dir=None``
    to log to stdout only.
    """
    service_logger = logging.getLogger(SERVICE_LOGGER)
    for handler in list(service_logger.handlers):
        service_logger.removeHandler(handler)
        handler.close()

    level = _resolve_level(level)
    service_logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    service_logger.addHandler(console_handler)

    if logs_dir is not None:
        try:
            logs_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(logs_dir / "app.log")
            file_handler.setFormatter(formatter)
            service_logger.addHandler(file_handler)
        except OSError as e:
            service_logger.warning(f"Could not setup file logging in {logs_dir}: {e}")

    return service_logger

def get_logger(component: str) -> logging.Logger:
    """Return the logger for one part of the service, e.g. ``get_logger("vector")``."""
    service_logger = logging.getLogger(SERVICE_LOGGER)
    if not service_logger.handlers:
        configure_logging()
    return service_logger.getChild(component)
