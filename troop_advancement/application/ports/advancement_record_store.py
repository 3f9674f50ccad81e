"""Advancement record store port.

Records and members may live in one shared document, so every write is a
conditional write keyed on the version the caller read. Whole-document
read-modify-write is not an acceptable implementation: two writers
touching different records would silently discard each other's changes.

Developer Golden Rules:
1. FAIL LOUD - Store raises VersionConflictError, caller re-reads and retries
2. SLICE WRITES - Only the entities being written change, nothing else
3. PAIRED COMMIT - commit_pair() writes record + member atomically or not at all
4. ONE AWARD - At most one record per (member, rank) may be AWARDED
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from troop_advancement.domain.models.advancement_record import (
        AdvancementRecord,
    )
    from troop_advancement.domain.models.member import Member


class AdvancementRecordStoreProtocol(Protocol):
    """Protocol for advancement record storage operations.

    Methods:
        get: Retrieve a record by ID
        list_for_member: Records of one member
        list_all: Every record
        save: Conditionally create or update one record
        commit_pair: Atomically commit a record together with its member
    """

    async def get(self, record_id: UUID) -> AdvancementRecord | None:
        """Retrieve a record by ID.

        Args:
            record_id: The unique record identifier.

        Returns:
            The record if found, None otherwise.
        """
        ...

    async def list_for_member(self, member_id: UUID) -> list[AdvancementRecord]:
        """List the records belonging to one member."""
        ...

    async def list_all(self) -> list[AdvancementRecord]:
        """List every record in the store."""
        ...

    async def save(self, record: AdvancementRecord) -> AdvancementRecord:
        """Create or update one record.

        A record with version 0 is created; it must not exist yet. Any other
        version must match the stored version.

        Args:
            record: The record to write, carrying the version it was read at.

        Returns:
            The stored record with its new version.

        Raises:
            VersionConflictError: If the stored version differs, or a
                version 0 record already exists.
            DuplicateAwardError: If another record already awarded this rank.
        """
        ...

    async def commit_pair(
        self,
        record: AdvancementRecord,
        member: Member,
    ) -> tuple[AdvancementRecord, Member]:
        """Atomically commit a record and its member.

        Either both writes are applied or neither is. Readers never observe
        one without the other.

        Args:
            record: The updated record, carrying the version it was read at.
            member: The updated member, carrying the version it was read at.

        Returns:
            Tuple of the stored record and member with their new versions.

        Raises:
            VersionConflictError: If either stored version differs.
            MemberNotFoundError: If the member no longer exists.
            RecordNotFoundError: If the record no longer exists.
            DuplicateAwardError: If another record already awarded this rank.
        """
        ...
