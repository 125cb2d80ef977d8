"""Logging setup: console plus an appending log file under the data dir."""

from __future__ import annotations

import logging

from teammate.settings import TeamMateSettings


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(settings: TeamMateSettings) -> None:
    """Install console and file handlers on the root logger once per process."""
    global _configured
    if _configured:
        return
    _configured = True

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(settings.log_level)
    console.setFormatter(formatter)
    root.addHandler(console)

    log_path = settings.log_path
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    except OSError:
        logger.warning("Failed to open log file %s, console logging only", log_path, exc_info=True)
        return

    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)
    logger.info("Logging to %s", log_path)
