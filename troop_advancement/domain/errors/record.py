"""Advancement record lookup and uniqueness errors."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from troop_advancement.domain.exceptions import AdvancementError

if TYPE_CHECKING:
    from troop_advancement.domain.models.rank import Rank


class RecordNotFoundError(AdvancementError):
    """Raised when an advancement record does not exist in the store.

    Attributes:
        record_id: ID of the missing record.
    """

    def __init__(self, record_id: UUID) -> None:
        self.record_id = record_id
        super().__init__(f"Advancement record not found: {record_id}")


class DuplicateAwardError(AdvancementError):
    """Raised when a second record for the same member and rank would be awarded.

    Attributes:
        member_id: Member the award belongs to.
        rank: Rank already awarded to the member.
        existing_record_id: The record that already holds the award.
    """

    def __init__(self, member_id: UUID, rank: Rank, existing_record_id: UUID) -> None:
        self.member_id = member_id
        self.rank = rank
        self.existing_record_id = existing_record_id
        super().__init__(
            f"Rank {rank.value} already awarded to member {member_id} "
            f"by record {existing_record_id}"
        )
