"""State transition errors for the advancement status state machine.

Status values only ever move forward, one step at a time. Anything else
is rejected before the record is touched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from troop_advancement.domain.exceptions import AdvancementError

if TYPE_CHECKING:
    from troop_advancement.domain.models.advancement_status import (
        AdvancementStatus,
    )


class InvalidTransitionError(AdvancementError):
    """Raised when a requested status is not the immediate successor.

    Covers skipping ahead, moving backwards, re-entering the current
    status, and asking for Awarded outside the rank progression cascade.

    Attributes:
        from_status: Current status of the record.
        to_status: Requested target status.
        allowed_transitions: Statuses the record may move to instead.
    """

    def __init__(
        self,
        from_status: AdvancementStatus,
        to_status: AdvancementStatus,
        allowed_transitions: list[AdvancementStatus] | None = None,
        reason: str | None = None,
    ) -> None:
        """Initialize invalid transition error.

        Args:
            from_status: Current record status.
            to_status: Attempted target status.
            allowed_transitions: Valid targets from the current status (optional).
            reason: Extra explanation appended to the message (optional).
        """
        self.from_status = from_status
        self.to_status = to_status
        self.allowed_transitions = allowed_transitions or []

        allowed_str = (
            f" Valid transitions: {[s.value for s in self.allowed_transitions]}"
            if self.allowed_transitions
            else ""
        )
        reason_str = f" {reason}" if reason else ""
        super().__init__(
            f"Invalid status transition: {from_status.value} -> "
            f"{to_status.value}.{allowed_str}{reason_str}"
        )


class UnknownStatusError(AdvancementError):
    """Raised when a status value is not one of the six defined statuses.

    Attributes:
        value: The rejected input.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown advancement status: {value!r}")
