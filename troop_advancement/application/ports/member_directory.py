"""Member directory port.

The directory owns members. The advancement engine reads a member's rank
and writes a new one; it never creates or deletes members.

Developer Golden Rules:
1. FAIL LOUD - Directory raises on conflicting writes, never overwrites
2. CONDITIONAL WRITES - Every write names the version it was based on
3. PAIRED RANK CHANGES - Rank changes caused by a board of review go
   through AdvancementRecordStoreProtocol.commit_pair(), not set_rank()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from troop_advancement.domain.models.member import Member
    from troop_advancement.domain.models.rank import Rank


class MemberDirectoryProtocol(Protocol):
    """Protocol for member reads and rank writes.

    Methods:
        get: Retrieve a member by ID
        list_all: List every member
        set_rank: Conditionally change a member's current rank
    """

    async def get(self, member_id: UUID) -> Member | None:
        """Retrieve a member by ID.

        Args:
            member_id: The unique member identifier.

        Returns:
            The member if found, None otherwise.
        """
        ...

    async def list_all(self) -> list[Member]:
        """List every member in the directory."""
        ...

    async def set_rank(
        self,
        member_id: UUID,
        rank: Rank,
        expected_version: int,
    ) -> Member:
        """Change a member's current rank if nobody wrote it since it was read.

        Args:
            member_id: The member to update.
            rank: The new current rank.
            expected_version: Version of the member the caller read.

        Returns:
            The updated member with its new version.

        Raises:
            MemberNotFoundError: If the member doesn't exist.
            VersionConflictError: If the stored version differs.
        """
        ...
