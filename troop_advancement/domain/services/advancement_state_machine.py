"""Advancement status state machine.

transition() is the only way a record's status changes outside the rank
progression cascade. It validates the requested step against the
successor table and stamps the milestone date that belongs to it.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from types import MappingProxyType
from typing import Mapping

from troop_advancement.domain.errors.state_transition import InvalidTransitionError
from troop_advancement.domain.models.advancement_record import AdvancementRecord
from troop_advancement.domain.models.advancement_status import AdvancementStatus

# Status -> milestone date fields stamped when the status is entered
MILESTONE_STAMPS: Mapping[AdvancementStatus, tuple[str, ...]] = MappingProxyType(
    {
        AdvancementStatus.CONFERENCE_COMPLETE: ("scoutmaster_conference_date",),
        AdvancementStatus.REVIEW_COMPLETE: ("board_of_review_date", "date_completed"),
    }
)


def validate_transition(
    current: AdvancementStatus,
    target: AdvancementStatus | str,
) -> AdvancementStatus:
    """Check that ``target`` is the immediate successor of ``current``.

    Returns:
        The parsed target status.

    Raises:
        UnknownStatusError: If ``target`` is not one of the six statuses.
        InvalidTransitionError: If ``target`` skips, regresses, repeats, or
            is AWARDED (reachable only through the rank progression cascade).
    """
    resolved = AdvancementStatus.parse(target)
    successor = current.successor()
    allowed = [successor] if successor is not None else []

    if resolved is not successor:
        raise InvalidTransitionError(
            from_status=current,
            to_status=resolved,
            allowed_transitions=allowed,
        )
    if resolved is AdvancementStatus.AWARDED:
        raise InvalidTransitionError(
            from_status=current,
            to_status=resolved,
            reason="Awarded is only reached by completing the board of review.",
        )
    return resolved


def transition(
    record: AdvancementRecord,
    target_status: AdvancementStatus | str,
    today: date,
) -> AdvancementRecord:
    """Move a record one step forward.

    Args:
        record: Record to advance. It is not modified.
        target_status: Requested status; must be the immediate successor.
        today: Date used to stamp milestone fields.

    Returns:
        New record with the target status and any milestone date stamped.

    Raises:
        UnknownStatusError: If ``target_status`` is not a known status.
        InvalidTransitionError: If the step is not allowed.
    """
    target = validate_transition(record.status, target_status)
    stamps = {field_name: today for field_name in MILESTONE_STAMPS.get(target, ())}
    return replace(record, status=target, **stamps)
