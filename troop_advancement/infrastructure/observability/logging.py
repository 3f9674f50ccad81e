"""structlog configuration for the advancement engine.

Services log domain values directly (record and member UUIDs, dates, Rank
and AdvancementStatus members). The processor chain turns them into the
plain strings used in the troop document, so a production JSON line reads:

    {
        "event": "review_completed",
        "level": "info",
        "timestamp": "2026-03-14T18:02:11.204518Z",
        "troop": "7514",
        "service": "AdvancementWorkflowService",
        "operation": "complete_review",
        "record_id": "5d2f1f0e-2c4b-47f5-8b8e-0b9e1d2c3a44",
        "rank": "Life",
        "member_rank": "Eagle",
        ...
    }

Usage:
    from troop_advancement.infrastructure.observability import configure_structlog

    configure_structlog(environment="production", troop="7514")
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from datetime import date
from enum import Enum
from typing import Any
from uuid import UUID

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def _get_log_level() -> int:
    """Read the log level name from LOG_LEVEL (default INFO)."""
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.INFO


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_plain(item) for item in value]
    if isinstance(value, Mapping):
        return {str(key): _plain(item) for key, item in value.items()}
    return value


def render_domain_values(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Render UUIDs, dates and enum members as their document strings."""
    return {key: _plain(value) for key, value in event_dict.items()}


def configure_structlog(
    environment: str = "production",
    troop: str | None = None,
) -> None:
    """Configure structlog for the engine. Call once at startup.

    Args:
        environment: 'production' for JSON lines, anything else for console.
        troop: Troop whose document this process serves. Bound to every
            event in the current context when given.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        render_domain_values,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if environment == "production":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.clear_contextvars()
    if troop is not None:
        structlog.contextvars.bind_contextvars(troop=troop)
