"""Read-only views over members and their advancement records.

Nothing here writes; queries may run concurrently with the workflow
service without coordination.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

from troop_advancement.application.services.base import LoggingMixin
from troop_advancement.domain.errors.member import MemberNotFoundError
from troop_advancement.domain.models.advancement_record import AdvancementRecord
from troop_advancement.domain.models.advancement_status import AdvancementStatus
from troop_advancement.domain.models.member import Member
from troop_advancement.domain.models.rank import DEFAULT_RANK_CATALOG, Rank, RankCatalog

if TYPE_CHECKING:
    from troop_advancement.application.ports.advancement_record_store import (
        AdvancementRecordStoreProtocol,
    )
    from troop_advancement.application.ports.member_directory import (
        MemberDirectoryProtocol,
    )


@dataclass(frozen=True)
class MemberProgress:
    """One member's advancement records, lowest rank first.

    Attributes:
        member: The member.
        records: The member's records sorted by rank order.
    """

    member: Member
    records: tuple[AdvancementRecord, ...]

    @property
    def awarded_count(self) -> int:
        return sum(1 for r in self.records if r.status is AdvancementStatus.AWARDED)

    @property
    def total_count(self) -> int:
        return len(self.records)


class AdvancementQueryService(LoggingMixin):
    """Progress overviews for leaders."""

    def __init__(
        self,
        record_store: AdvancementRecordStoreProtocol,
        member_directory: MemberDirectoryProtocol,
        catalog: RankCatalog = DEFAULT_RANK_CATALOG,
    ) -> None:
        self._record_store = record_store
        self._member_directory = member_directory
        self._catalog = catalog
        self._init_logger()

    async def member_progress(self, member_id: UUID) -> MemberProgress:
        """Return one member's records, lowest rank first.

        Raises:
            MemberNotFoundError: If the member doesn't exist.
        """
        member = await self._member_directory.get(member_id)
        if member is None:
            raise MemberNotFoundError(member_id)
        records = await self._record_store.list_for_member(member_id)
        return MemberProgress(member=member, records=self._sorted(records))

    async def progress_by_member(
        self,
        rank: Rank | str | None = None,
    ) -> list[MemberProgress]:
        """Group records by member, optionally keeping only one rank.

        Members without any matching record are left out, and so are records
        whose member is no longer in the directory. Groups are ordered by
        member name.

        Args:
            rank: Only include records for this rank (optional).

        Raises:
            UnknownRankError: If ``rank`` is not in the catalog.
        """
        rank_filter = Rank.parse(rank) if rank is not None else None
        members = {m.id: m for m in await self._member_directory.list_all()}

        grouped: dict[UUID, list[AdvancementRecord]] = {}
        orphaned: list[UUID] = []
        for record in await self._record_store.list_all():
            if rank_filter is not None and record.rank is not rank_filter:
                continue
            if record.member_id not in members:
                orphaned.append(record.id)
                continue
            grouped.setdefault(record.member_id, []).append(record)

        if orphaned:
            self._log_operation("progress_by_member", rank=rank_filter).warning(
                "records_without_member_skipped", record_ids=orphaned
            )

        progress = [
            MemberProgress(member=members[member_id], records=self._sorted(records))
            for member_id, records in grouped.items()
        ]
        progress.sort(key=lambda p: (p.member.last_name, p.member.first_name))
        return progress

    async def rank_distribution(self) -> dict[Rank, int]:
        """Count active members at each rank, every rank present, lowest first."""
        counts = {rank: 0 for rank in self._catalog.ranks}
        for member in await self._member_directory.list_all():
            if member.active and member.rank in counts:
                counts[member.rank] += 1
        return counts

    def _sorted(self, records: list[AdvancementRecord]) -> tuple[AdvancementRecord, ...]:
        order = {rank: index for index, rank in enumerate(self._catalog.ranks)}
        return tuple(sorted(records, key=lambda r: order.get(r.rank, len(order))))
