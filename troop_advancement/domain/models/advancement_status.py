"""Advancement status enumeration and its successor table.

State Machine (forward only, one step at a time):
    IN_PROGRESS -> READY_FOR_CONFERENCE
    READY_FOR_CONFERENCE -> CONFERENCE_COMPLETE
    CONFERENCE_COMPLETE -> READY_FOR_REVIEW
    READY_FOR_REVIEW -> REVIEW_COMPLETE
    REVIEW_COMPLETE -> AWARDED

Terminal State:
    AWARDED. It is reached only through the rank progression cascade.
"""

from __future__ import annotations

from enum import Enum

from troop_advancement.domain.errors.state_transition import UnknownStatusError


class AdvancementStatus(Enum):
    """Status of one member's attempt at one rank.

    Values are the labels stored in troop documents.

    States:
        IN_PROGRESS: Requirements are being worked on
        READY_FOR_CONFERENCE: Waiting for the scoutmaster conference
        CONFERENCE_COMPLETE: Scoutmaster conference held
        READY_FOR_REVIEW: Waiting for the board of review
        REVIEW_COMPLETE: Board of review held
        AWARDED: Rank granted (terminal)
    """

    IN_PROGRESS = "In Progress"
    READY_FOR_CONFERENCE = "Ready for SM Conference"
    CONFERENCE_COMPLETE = "SM Conference Complete"
    READY_FOR_REVIEW = "Ready for Board of Review"
    REVIEW_COMPLETE = "Board of Review Complete"
    AWARDED = "Awarded"

    @property
    def position(self) -> int:
        """Zero-based index of this status in the forward order."""
        return STATUS_ORDER.index(self)

    def is_terminal(self) -> bool:
        """Check if this is the terminal status (AWARDED)."""
        return self is AdvancementStatus.AWARDED

    def successor(self) -> AdvancementStatus | None:
        """Return the only status this one may move to, or None if terminal."""
        return STATUS_SUCCESSORS[self]

    def has_reached(self, other: AdvancementStatus) -> bool:
        """Check whether this status is ``other`` or later in the order."""
        return self.position >= other.position

    @classmethod
    def parse(cls, value: AdvancementStatus | str) -> AdvancementStatus:
        """Resolve a status from a member, stored label or enum name.

        Raises:
            UnknownStatusError: If the value names none of the six statuses.
        """
        if isinstance(value, AdvancementStatus):
            return value
        if isinstance(value, str):
            for status in cls:
                if value == status.value or value == status.name:
                    return status
        raise UnknownStatusError(value)


STATUS_ORDER: tuple[AdvancementStatus, ...] = tuple(AdvancementStatus)

INITIAL_STATUS = AdvancementStatus.IN_PROGRESS

# Successor table: each status maps to exactly one next status
STATUS_SUCCESSORS: dict[AdvancementStatus, AdvancementStatus | None] = {
    status: STATUS_ORDER[index + 1] if index + 1 < len(STATUS_ORDER) else None
    for index, status in enumerate(STATUS_ORDER)
}
