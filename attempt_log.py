from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional

from config import CFG

LOGGER_NAME = "generator.attempt_log"


def _log_file_path() -> Optional[Path]:
    configured = os.environ.get("PCP_ATTEMPT_LOG") or CFG.ATTEMPT_LOG
    if configured:
        return Path(configured)
    return None


def _init_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    log_path = _log_file_path()
    if log_path is None:
        return logger
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    except OSError:
        # An unwritable log location leaves the logger disabled.
        logger.handlers.clear()
    return logger


ATTEMPT_LOGGER = _init_logger()


def _log_enabled() -> bool:
    return bool(ATTEMPT_LOGGER.handlers)


def fmt_seconds(seconds: Optional[float]) -> Optional[str]:
    if seconds is None:
        return None
    try:
        return f"{float(seconds):.3f}s"
    except (TypeError, ValueError):
        return None


def log_attempt_detail(event: str, **fields: Any) -> None:
    """Write ``event | key=value ...`` to the attempt log when it is enabled."""
    if not _log_enabled():
        return
    extras = [
        f"{key}={value}"
        for key, value in fields.items()
        if value is not None and value != ""
    ]
    try:
        if extras:
            ATTEMPT_LOGGER.info("%s | %s", event, " ".join(extras))
        else:
            ATTEMPT_LOGGER.info("%s", event)
    except Exception:
        # Logging failures must never bubble back to callers.
        pass


__all__ = ["ATTEMPT_LOGGER", "LOGGER_NAME", "fmt_seconds", "log_attempt_detail"]
