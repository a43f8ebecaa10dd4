"""
Structured logging for the catalog CLI.

One JSON object per event, keys: ts, level, event, message, module (+ extra).
LOG_LEVEL selects the threshold (default WARNING); records go to stderr so
they never interleave with REPL output on stdout.
"""
from __future__ import annotations

import datetime
import json
import logging
import os
import sys
from typing import Any, Dict, Optional

_log = logging.getLogger("catalog")

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def resolve_log_level(raw: Optional[str]) -> int:
    """Unknown or empty names fall back to WARNING."""
    return _LEVELS.get((raw or "").strip().lower(), logging.WARNING)


def configure_logging() -> None:
    if _log.handlers or logging.getLogger().handlers:
        return
    logging.basicConfig(
        level=resolve_log_level(os.getenv("LOG_LEVEL")),
        stream=sys.stderr,
        format="%(message)s",
    )


def _now_iso() -> str:
    return datetime.datetime.now(datetime.timezone.utc).replace(microsecond=0).isoformat()


def emit(level: str, event: str, message: str, module: str, **extra: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "ts": _now_iso(),
        "level": level.lower(),
        "message": message,
        "event": event,
        "module": module,
    }
    payload.update(extra)
    _log.log(_LEVELS.get(level.lower(), logging.INFO), json.dumps(payload, ensure_ascii=False, default=str))
    return payload
