"""Member directory backed by the shared troop document."""

from __future__ import annotations

from dataclasses import replace
from uuid import UUID

from troop_advancement.application.ports.member_directory import (
    MemberDirectoryProtocol,
)
from troop_advancement.domain.errors.member import MemberNotFoundError
from troop_advancement.domain.models.member import Member
from troop_advancement.domain.models.rank import Rank
from troop_advancement.infrastructure.adapters.persistence.troop_document_store import (
    TroopDocumentStore,
)


class DocumentMemberDirectory(MemberDirectoryProtocol):
    """MemberDirectoryProtocol over a TroopDocumentStore.

    Attributes:
        _document: The shared troop document.
    """

    def __init__(self, document: TroopDocumentStore) -> None:
        self._document = document

    async def get(self, member_id: UUID) -> Member | None:
        return self._document.get_member(member_id)

    async def list_all(self) -> list[Member]:
        return self._document.list_members()

    async def set_rank(
        self,
        member_id: UUID,
        rank: Rank,
        expected_version: int,
    ) -> Member:
        """Conditionally change a member's rank.

        Raises:
            MemberNotFoundError: If the member doesn't exist.
            VersionConflictError: If the stored version differs.
        """
        current = self._document.get_member(member_id)
        if current is None:
            raise MemberNotFoundError(member_id)
        # Apply to the version the caller read so a stale read conflicts
        based_on = replace(current, rank=rank, version=expected_version)
        _, members = await self._document.write(members=[based_on])
        return members[0]
