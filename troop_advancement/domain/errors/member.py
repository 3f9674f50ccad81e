"""Member lookup errors."""

from __future__ import annotations

from uuid import UUID

from troop_advancement.domain.exceptions import AdvancementError


class MemberNotFoundError(AdvancementError):
    """Raised when a referenced member does not exist in the directory.

    Aborts the whole coordinated operation; nothing is committed.

    Attributes:
        member_id: ID of the missing member.
    """

    def __init__(self, member_id: UUID) -> None:
        self.member_id = member_id
        super().__init__(f"Member not found: {member_id}")


class InactiveMemberError(AdvancementError):
    """Raised when tracking is started for a member who is not active.

    Attributes:
        member_id: ID of the inactive member.
    """

    def __init__(self, member_id: UUID) -> None:
        self.member_id = member_id
        super().__init__(f"Member {member_id} is not active")
