"""Observability infrastructure: structured logging."""

from troop_advancement.infrastructure.observability.logging import (
    configure_structlog,
    render_domain_values,
)

__all__: list[str] = ["configure_structlog", "render_domain_values"]
