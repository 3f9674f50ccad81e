"""Rank progression: completing the board of review.

Completing the review awards the record and, when the rank has a
successor, promotes the member to it. A record already stamped
REVIEW_COMPLETE (an award interrupted before the member was updated)
is finished the same way and keeps its dates. This module only decides the
outcome; committing the record and member together is the job of the
record store's commit_pair().
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date

from troop_advancement.application.ports.rank_catalog import RankCatalogProtocol
from troop_advancement.domain.errors.state_transition import InvalidTransitionError
from troop_advancement.domain.models.advancement_record import AdvancementRecord
from troop_advancement.domain.models.advancement_status import AdvancementStatus
from troop_advancement.domain.models.member import Member
from troop_advancement.domain.models.rank import DEFAULT_RANK_CATALOG, Rank


# Statuses from which the board of review can be completed
REVIEWABLE_STATUSES = frozenset(
    {AdvancementStatus.READY_FOR_REVIEW, AdvancementStatus.REVIEW_COMPLETE}
)


@dataclass(frozen=True)
class RankProgression:
    """Outcome of completing a board of review.

    Attributes:
        record: The awarded record.
        member: The member, promoted if the rank had a successor.
        previous_rank: Member's rank before the review (None if unranked).
        promoted: Whether the member's rank changed.
    """

    record: AdvancementRecord
    member: Member
    previous_rank: Rank | None
    promoted: bool


def complete_review(
    record: AdvancementRecord,
    member: Member,
    today: date,
    catalog: RankCatalogProtocol = DEFAULT_RANK_CATALOG,
) -> RankProgression:
    """Award the record and compute the member's new rank.

    If ``record.rank`` has a successor the member moves to it; at the
    highest rank the member is left as is and the record still documents
    the award. A REVIEW_COMPLETE record keeps the dates it already has.

    Args:
        record: Record waiting for its board of review, or one whose review
            was stamped complete without the award being applied.
        member: Member the record belongs to.
        today: Date stamped as the board of review and completion date.
        catalog: Rank catalog used to find the successor rank.

    Returns:
        RankProgression with the new record and member.

    Raises:
        InvalidTransitionError: If the record is neither READY_FOR_REVIEW nor
            REVIEW_COMPLETE.
        ValueError: If ``member`` is not the record's member.
    """
    if record.status not in REVIEWABLE_STATUSES:
        raise InvalidTransitionError(
            from_status=record.status,
            to_status=AdvancementStatus.AWARDED,
            reason="The board of review can only be completed from "
            f"{AdvancementStatus.READY_FOR_REVIEW.value} or "
            f"{AdvancementStatus.REVIEW_COMPLETE.value}.",
        )
    if member.id != record.member_id:
        raise ValueError(
            f"Record {record.id} belongs to member {record.member_id}, not {member.id}"
        )

    next_rank = catalog.successor(record.rank)
    awarded = replace(
        record,
        status=AdvancementStatus.AWARDED,
        board_of_review_date=record.board_of_review_date or today,
        date_completed=record.date_completed or today,
    )
    updated_member = member.with_rank(next_rank) if next_rank is not None else member

    return RankProgression(
        record=awarded,
        member=updated_member,
        previous_rank=member.rank,
        promoted=next_rank is not None,
    )
