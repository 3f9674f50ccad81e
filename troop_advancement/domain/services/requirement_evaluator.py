"""Requirement checklist evaluator.

Pure functions over a record and a requirement set. Results are advisory:
a fully satisfied checklist suggests the next status but never moves the
record on its own.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from troop_advancement.domain.models.advancement_record import AdvancementRecord
from troop_advancement.domain.models.advancement_status import AdvancementStatus


@dataclass(frozen=True, eq=True)
class ChecklistStatus:
    """Completion summary for one record's requirement checklist.

    Attributes:
        completed_count: Requirements in the set marked complete.
        total_count: Size of the requirement set.
        percentage: Completion percentage, 0-100, rounded half up.
        is_fully_satisfied: Every requirement complete and the set non-empty.
    """

    completed_count: int
    total_count: int
    percentage: int
    is_fully_satisfied: bool


def evaluate(
    record: AdvancementRecord,
    requirement_set: Iterable[str],
) -> ChecklistStatus:
    """Summarize how much of ``requirement_set`` the record has completed.

    Ids missing from ``record.requirements`` count as incomplete. The
    record is not modified.

    Args:
        record: The advancement record to inspect.
        requirement_set: Requirement ids of the record's rank.

    Returns:
        ChecklistStatus for the record.
    """
    requirement_ids = tuple(dict.fromkeys(requirement_set))
    total = len(requirement_ids)
    completed = sum(
        1
        for requirement_id in requirement_ids
        if record.requirements.get(requirement_id) is True
    )
    return ChecklistStatus(
        completed_count=completed,
        total_count=total,
        percentage=_percentage(completed, total),
        is_fully_satisfied=total > 0 and completed == total,
    )


def _percentage(completed: int, total: int) -> int:
    if total == 0:
        return 0
    # Integer half-up rounding of 100 * completed / total
    return (200 * completed + total) // (2 * total)


def suggest_next_status(
    record: AdvancementRecord,
    checklist: ChecklistStatus,
) -> AdvancementStatus | None:
    """Suggest the status a leader would most likely move the record to next.

    IN_PROGRESS only suggests READY_FOR_CONFERENCE once the checklist is
    fully satisfied. REVIEW_COMPLETE and AWARDED suggest nothing: the
    former is finished by the rank progression cascade and the latter is
    terminal.

    Args:
        record: The advancement record.
        checklist: Result of evaluate() for the record.

    Returns:
        The suggested status, or None when no action is suggested.
    """
    if record.status is AdvancementStatus.IN_PROGRESS:
        if checklist.is_fully_satisfied:
            return AdvancementStatus.READY_FOR_CONFERENCE
        return None
    if record.status in (
        AdvancementStatus.REVIEW_COMPLETE,
        AdvancementStatus.AWARDED,
    ):
        return None
    return record.status.successor()
