# feedcanon/core/logging.py
from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

import structlog

from feedcanon.core.config import get_settings


# -------- Processors ---------------------------------------------------------

def _add_ts(_: Any, __: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    # ISO 8601 UTC, millisecond precision
    event_dict.setdefault("ts", datetime.now(timezone.utc).isoformat(timespec="milliseconds"))
    return event_dict

def _add_level(_: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    level = event_dict.get("level") or method_name or "info"
    event_dict["level"] = str(level).lower()
    return event_dict

def _add_service(service_name: str):
    def _inner(_: Any, __: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict
    return _inner


# -------- Public API ---------------------------------------------------------

_logger: structlog.BoundLogger | None = None

def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO

def configure_logging(service_name: str | None = None, *, level: int | str | None = None) -> None:
    """
    Configure the process-wide structlog stack (JSON lines on stderr).

    Defaults come from Settings (FEEDCANON_SERVICE_NAME / FEEDCANON_LOG_LEVEL).
    """
    global _logger

    settings = get_settings()
    service = service_name or settings.SERVICE_NAME
    numeric_level = _resolve_level(level if level is not None else settings.LOG_LEVEL)

    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        stream=sys.stderr,
    )

    processors = [
        _add_ts,
        _add_level,
        _add_service(service),
        structlog.processors.EventRenamer("event"),
        structlog.processors.dict_tracebacks,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    _logger = structlog.get_logger()

def get_logger() -> structlog.BoundLogger:
    global _logger
    if _logger is None:
        configure_logging()
    return _logger
