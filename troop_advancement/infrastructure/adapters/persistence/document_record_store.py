"""Advancement record store backed by the shared troop document."""

from __future__ import annotations

from uuid import UUID

from troop_advancement.application.ports.advancement_record_store import (
    AdvancementRecordStoreProtocol,
)
from troop_advancement.domain.models.advancement_record import AdvancementRecord
from troop_advancement.domain.models.member import Member
from troop_advancement.infrastructure.adapters.persistence.troop_document_store import (
    TroopDocumentStore,
)


class DocumentAdvancementRecordStore(AdvancementRecordStoreProtocol):
    """AdvancementRecordStoreProtocol over a TroopDocumentStore.

    commit_pair() is a single conditional write of both entities, so the
    member's rank and the record's status change together or not at all.

    Attributes:
        _document: The shared troop document.
    """

    def __init__(self, document: TroopDocumentStore) -> None:
        self._document = document

    async def get(self, record_id: UUID) -> AdvancementRecord | None:
        return self._document.get_record(record_id)

    async def list_for_member(self, member_id: UUID) -> list[AdvancementRecord]:
        return [
            record
            for record in self._document.list_records()
            if record.member_id == member_id
        ]

    async def list_all(self) -> list[AdvancementRecord]:
        return self._document.list_records()

    async def save(self, record: AdvancementRecord) -> AdvancementRecord:
        """Create (version 0) or conditionally update one record.

        Raises:
            VersionConflictError: If the stored version differs.
            DuplicateAwardError: If another record already awarded this rank.
        """
        records, _ = await self._document.write(records=[record], create_records=True)
        return records[0]

    async def commit_pair(
        self,
        record: AdvancementRecord,
        member: Member,
    ) -> tuple[AdvancementRecord, Member]:
        """Atomically commit a record and its member.

        Raises:
            VersionConflictError: If either stored version differs.
            MemberNotFoundError: If the member no longer exists.
            RecordNotFoundError: If the record no longer exists.
            DuplicateAwardError: If another record already awarded this rank.
        """
        records, members = await self._document.write(
            records=[record], members=[member]
        )
        return records[0], members[0]
