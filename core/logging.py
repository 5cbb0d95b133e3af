# core/logging.py
# -*- coding: utf-8 -*-
"""
Logging for the gazette review backend.

- logger: "diario_atos" terminal logger, level from LOG_LEVEL (.env)
- log_event(session_id, event, **fields):
    one JSONL line per analysis event in LOG_DIR/<session_id>.jsonl
    (analysis_start / analysis_success / analysis_error / analysis_superseded / analysis_reset)
- utc_now(): timezone-aware UTC timestamp shared by the event log and session state
"""

import sys
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .config import EVENT_LOG_ENABLED, LOG_DIR, LOG_LEVEL

LOGGER_NAME = "diario_atos"


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.INFO


def configure_logger(name: str = LOGGER_NAME, level: str = LOG_LEVEL) -> logging.Logger:
    """Terminal logger; calling it again only updates the level."""
    log = logging.getLogger(name)
    log.setLevel(_resolve_level(level))

    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] [%(levelname)s] %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        log.addHandler(handler)
        log.propagate = False
    return log


logger = configure_logger()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def event_log_path(session_id: str) -> Path:
    return LOG_DIR / f"{session_id}.jsonl"


def log_event(session_id: str, event: str, **fields: Any) -> None:
    """
    Append one analysis event for post-hoc review.
    Acts and summaries are not written, only counts and group names.
    """
    if not EVENT_LOG_ENABLED:
        return

    record = {
        "timestamp": utc_now().isoformat(),
        "session_id": session_id,
        "type": event,
        **fields,
    }

    try:
        with event_log_path(session_id).open("a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False, default=str) + "\n")
    except OSError as e:
        # a full disk must not fail the analysis itself
        logger.warning(f"[event_log] could not write {session_id}: {e}")
