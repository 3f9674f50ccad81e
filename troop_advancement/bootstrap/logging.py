"""Bootstrap wiring for logging.

Environment Variables:
- ADVANCEMENT_ENVIRONMENT: 'production' (JSON lines) or 'development' (default: production)
- ADVANCEMENT_TROOP: Troop bound to every log event (default: unset)
"""

from __future__ import annotations

import os

from troop_advancement.infrastructure.observability import configure_structlog

ENVIRONMENT_ENV = "ADVANCEMENT_ENVIRONMENT"
TROOP_ENV = "ADVANCEMENT_TROOP"


def configure_logging(
    environment: str | None = None,
    troop: str | None = None,
) -> None:
    """Configure structlog, falling back to the environment for unset arguments."""
    configure_structlog(
        environment=environment or os.environ.get(ENVIRONMENT_ENV, "production"),
        troop=troop or os.environ.get(TROOP_ENV) or None,
    )


__all__ = ["configure_logging"]
