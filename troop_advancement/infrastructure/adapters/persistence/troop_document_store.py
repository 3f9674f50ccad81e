"""Shared troop document holding members and advancement records.

Members and advancement records live side by side in one document, the
shape the troop data has always been stored in:

    {"revision": 7, "scouts": [...], "advancements": [...]}

Writers never replace the whole document. write() applies only the
entities it is given, after checking each one against the version the
caller read, and does so under a single lock so a multi-entity write is
all-or-nothing. Two writers touching different entities therefore both
succeed; two writers touching the same entity get one success and one
VersionConflictError.

Readers do not take the lock. Entities are frozen dataclasses, so a
reader sees either the state before a write or the state after it.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from dataclasses import replace
from typing import Any
from uuid import UUID

from structlog import get_logger

from troop_advancement.domain.errors.concurrent_modification import (
    VersionConflictError,
)
from troop_advancement.domain.errors.member import MemberNotFoundError
from troop_advancement.domain.errors.record import (
    DuplicateAwardError,
    RecordNotFoundError,
)
from troop_advancement.domain.models.advancement_record import AdvancementRecord
from troop_advancement.domain.models.advancement_status import AdvancementStatus
from troop_advancement.domain.models.member import Member

logger = get_logger(__name__)


class TroopDocumentStore:
    """In-memory troop document with per-entity versioned writes.

    Attributes:
        _members: Member ID -> Member.
        _records: Record ID -> AdvancementRecord.
        _revision: Document revision, bumped on every committed write.
    """

    def __init__(
        self,
        members: Iterable[Member] = (),
        records: Iterable[AdvancementRecord] = (),
    ) -> None:
        """Initialize the document, optionally seeded with existing entities."""
        self._members: dict[UUID, Member] = {m.id: m for m in members}
        self._records: dict[UUID, AdvancementRecord] = {r.id: r for r in records}
        self._revision = 0
        # Single writer lock: every write is applied atomically
        self._write_lock = asyncio.Lock()

    @property
    def revision(self) -> int:
        return self._revision

    def get_member(self, member_id: UUID) -> Member | None:
        return self._members.get(member_id)

    def get_record(self, record_id: UUID) -> AdvancementRecord | None:
        return self._records.get(record_id)

    def list_members(self) -> list[Member]:
        return list(self._members.values())

    def list_records(self) -> list[AdvancementRecord]:
        return list(self._records.values())

    def add_member(self, member: Member) -> None:
        """Register a member (roster management, outside the engine).

        Raises:
            ValueError: If the member already exists.
        """
        if member.id in self._members:
            raise ValueError(f"Member already exists: {member.id}")
        self._members[member.id] = member

    async def write(
        self,
        records: Iterable[AdvancementRecord] = (),
        members: Iterable[Member] = (),
        create_records: bool = False,
    ) -> tuple[list[AdvancementRecord], list[Member]]:
        """Conditionally write records and members as one unit.

        Every entity carries the version the caller read. All checks run
        before anything is applied; if any check fails nothing changes.

        Args:
            records: Records to write.
            members: Members to write. Members must already exist.
            create_records: Allow records with version 0 that are not stored yet.

        Returns:
            Tuple of (stored records, stored members) with bumped versions.

        Raises:
            VersionConflictError: If a stored version differs from the given one.
            RecordNotFoundError: If a record is missing and creation is not allowed.
            MemberNotFoundError: If a member is missing.
            DuplicateAwardError: If an awarded record duplicates an existing award.
        """
        records = list(records)
        members = list(members)

        async with self._write_lock:
            for record in records:
                self._check_record(record, create_records)
            for member in members:
                self._check_member(member)
            self._check_awards(records)

            stored_records = [replace(r, version=r.version + 1) for r in records]
            stored_members = [replace(m, version=m.version + 1) for m in members]
            for record in stored_records:
                self._records[record.id] = record
            for member in stored_members:
                self._members[member.id] = member
            self._revision += 1

        logger.bind(component="persistence", revision=self._revision).debug(
            "troop_document_written",
            record_ids=[r.id for r in stored_records],
            member_ids=[m.id for m in stored_members],
        )
        return stored_records, stored_members

    def _check_record(self, record: AdvancementRecord, create: bool) -> None:
        current = self._records.get(record.id)
        if current is None:
            if not create:
                raise RecordNotFoundError(record.id)
            if record.version != 0:
                raise VersionConflictError("record", record.id, record.version, 0)
            return
        if current.version != record.version:
            raise VersionConflictError(
                "record", record.id, record.version, current.version
            )
        if current.member_id != record.member_id or current.rank != record.rank:
            raise ValueError(
                f"Record {record.id} cannot change its member or rank once set"
            )
        if record.status.position < current.status.position:
            raise ValueError(
                f"Record {record.id} cannot move back from "
                f"{current.status.value} to {record.status.value}"
            )

    def _check_member(self, member: Member) -> None:
        current = self._members.get(member.id)
        if current is None:
            raise MemberNotFoundError(member.id)
        if current.version != member.version:
            raise VersionConflictError(
                "member", member.id, member.version, current.version
            )

    def _check_awards(self, records: list[AdvancementRecord]) -> None:
        for record in records:
            if record.status is not AdvancementStatus.AWARDED:
                continue
            for existing in self._records.values():
                if (
                    existing.id != record.id
                    and existing.member_id == record.member_id
                    and existing.rank == record.rank
                    and existing.status is AdvancementStatus.AWARDED
                ):
                    raise DuplicateAwardError(record.member_id, record.rank, existing.id)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the whole document (for export and snapshots)."""
        return {
            "revision": self._revision,
            "scouts": [m.to_dict() for m in self._members.values()],
            "advancements": [r.to_dict() for r in self._records.values()],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TroopDocumentStore:
        """Load a document previously produced by to_dict().

        Raises:
            UnknownRankError: If an entity names an unknown rank.
            UnknownStatusError: If a record carries an unknown status.
        """
        store = cls(
            members=[Member.from_dict(m) for m in data.get("scouts") or []],
            records=[
                AdvancementRecord.from_dict(r) for r in data.get("advancements") or []
            ],
        )
        store._revision = int(data.get("revision", 0))
        return store
