"""Service logging mixin.

Every application service logs through a structlog logger bound with its
class name and component. Each operation adds its own name and the ids it
works on, so all events from one call can be picked out of the log.

Usage:
    class MyService(LoggingMixin):
        def __init__(self, record_store: AdvancementRecordStoreProtocol) -> None:
            self._record_store = record_store
            self._init_logger()

        async def do_something(self, record_id: UUID) -> None:
            log = self._log_operation("do_something", record_id=record_id)
            log.info("something_done")

Ids, dates and enum members may be passed as they are; the configured
processor chain renders them as plain strings.
"""

from __future__ import annotations

import structlog


class LoggingMixin:
    """Mixin providing structured logging for advancement services.

    Attributes:
        _log: The structlog BoundLogger for this service instance.
    """

    _log: structlog.typing.FilteringBoundLogger

    def _init_logger(self, component: str = "advancement") -> None:
        """Bind the logger to the service name and component.

        Call from __init__ after the dependencies are set.
        """
        self._log = structlog.get_logger().bind(
            service=self.__class__.__name__,
            component=component,
        )

    def _log_operation(
        self,
        operation: str,
        **context: object,
    ) -> structlog.typing.FilteringBoundLogger:
        """Return a logger bound to one operation and its context."""
        return self._log.bind(operation=operation, **context)
