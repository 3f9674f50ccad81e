"""Advancement workflow service.

Entry point for everything that changes an advancement record: starting
to track a rank, updating the requirement checklist, requesting status
transitions, and completing the board of review.

Every write is a conditional write on the version that was read. When a
write loses a race the service re-reads, re-applies the same change and
tries again, with exponential backoff, up to the configured number of
attempts.

Developer Golden Rules:
1. PURE RULES - Status and rank decisions come from troop_advancement.domain.services
2. ATOMIC PAIR - Record status and member rank are committed with commit_pair()
3. ADVISORY CHECKLIST - A complete checklist never moves a record by itself
4. FAIL LOUD - Every failure is logged and re-raised; nothing is swallowed
"""

from __future__ import annotations

import asyncio
import random
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, TypeVar
from uuid import UUID

from troop_advancement.application.services.base import LoggingMixin
from troop_advancement.config.advancement_config import (
    DEFAULT_ADVANCEMENT_CONFIG,
    AdvancementConfig,
)
from troop_advancement.domain.errors.concurrent_modification import (
    CommitRetriesExhaustedError,
    VersionConflictError,
)
from troop_advancement.domain.errors.member import (
    InactiveMemberError,
    MemberNotFoundError,
)
from troop_advancement.domain.errors.record import RecordNotFoundError
from troop_advancement.domain.models.advancement_record import AdvancementRecord
from troop_advancement.domain.models.advancement_status import AdvancementStatus
from troop_advancement.domain.models.member import rank_label
from troop_advancement.domain.models.rank import DEFAULT_RANK_CATALOG, Rank
from troop_advancement.domain.services import rank_progression
from troop_advancement.domain.services.advancement_state_machine import transition
from troop_advancement.domain.services.rank_progression import RankProgression
from troop_advancement.domain.services.requirement_evaluator import (
    ChecklistStatus,
    evaluate,
    suggest_next_status,
)

if TYPE_CHECKING:
    from troop_advancement.application.ports.advancement_record_store import (
        AdvancementRecordStoreProtocol,
    )
    from troop_advancement.application.ports.member_directory import (
        MemberDirectoryProtocol,
    )
    from troop_advancement.application.ports.rank_catalog import (
        RankCatalogProtocol,
    )

T = TypeVar("T")


@dataclass(frozen=True)
class AdvancementProgress:
    """A record together with its checklist summary and next-step hint.

    Attributes:
        record: The advancement record.
        checklist: Completion summary of the record's requirements.
        suggested_status: Status a leader would most likely move to next, if any.
    """

    record: AdvancementRecord
    checklist: ChecklistStatus
    suggested_status: AdvancementStatus | None


class AdvancementWorkflowService(LoggingMixin):
    """Drives advancement records through the workflow.

    Example:
        >>> service = AdvancementWorkflowService(
        ...     record_store=record_store,
        ...     member_directory=member_directory,
        ... )
        >>> record = await service.start_advancement(member.id, Rank.LIFE, today)
        >>> progression = await service.complete_review(record.id, today)
        >>> progression.member.rank
        <Rank.EAGLE: 'Eagle'>
    """

    def __init__(
        self,
        record_store: AdvancementRecordStoreProtocol,
        member_directory: MemberDirectoryProtocol,
        catalog: RankCatalogProtocol = DEFAULT_RANK_CATALOG,
        config: AdvancementConfig = DEFAULT_ADVANCEMENT_CONFIG,
    ) -> None:
        """Initialize the workflow service.

        Args:
            record_store: Gateway for advancement records.
            member_directory: Gateway for members.
            catalog: Rank order and requirement sets.
            config: Commit retry policy.
        """
        self._record_store = record_store
        self._member_directory = member_directory
        self._catalog = catalog
        self._config = config
        self._init_logger()

    async def start_advancement(
        self,
        member_id: UUID,
        rank: Rank | str,
        today: date,
        prefilled: Mapping[str, bool] | None = None,
        notes: str = "",
    ) -> AdvancementRecord:
        """Start tracking a member's attempt at a rank.

        Args:
            member_id: Member pursuing the rank.
            rank: Target rank.
            today: Start date.
            prefilled: Requirements already known to be complete (optional).
            notes: Free text (optional).

        Returns:
            The stored record in IN_PROGRESS.

        Raises:
            UnknownRankError: If the rank is not in the catalog.
            UnknownRequirementError: If ``prefilled`` names an unknown requirement.
            MemberNotFoundError: If the member doesn't exist.
            InactiveMemberError: If the member is not active.
        """
        target = Rank.parse(rank)
        log = self._log_operation("start_advancement", member_id=member_id, rank=target)

        member = await self._member_directory.get(member_id)
        if member is None:
            log.warning("advancement_start_rejected", reason="member_not_found")
            raise MemberNotFoundError(member_id)
        if not member.active:
            log.warning("advancement_start_rejected", reason="member_inactive")
            raise InactiveMemberError(member_id)

        record = AdvancementRecord.start(
            member_id=member_id,
            rank=target,
            today=today,
            prefilled=prefilled,
            notes=notes,
        )
        stored = await self._record_store.save(record)
        log.info("advancement_started", record_id=stored.id)
        return stored

    async def set_requirement(
        self,
        record_id: UUID,
        requirement_id: str,
        done: bool,
    ) -> AdvancementRecord:
        """Mark one requirement complete or incomplete. Status is preserved.

        Raises:
            RecordNotFoundError: If the record doesn't exist.
            UnknownRequirementError: If the id is not defined for the record's rank.
            CommitRetriesExhaustedError: If every save attempt conflicted.
        """
        return await self._update_record(
            record_id,
            lambda record: record.with_requirement(requirement_id, done),
            operation="set_requirement",
        )

    async def toggle_requirement(
        self,
        record_id: UUID,
        requirement_id: str,
    ) -> AdvancementRecord:
        """Flip one requirement flag. Status is preserved."""
        return await self._update_record(
            record_id,
            lambda record: record.with_requirement_toggled(requirement_id),
            operation="toggle_requirement",
        )

    async def update_notes(self, record_id: UUID, notes: str) -> AdvancementRecord:
        """Replace a record's notes. Status is preserved.

        Raises:
            RecordNotFoundError: If the record doesn't exist.
            CommitRetriesExhaustedError: If every save attempt conflicted.
        """
        return await self._update_record(
            record_id,
            lambda record: record.with_notes(notes),
            operation="update_notes",
        )

    async def request_transition(
        self,
        record_id: UUID,
        target_status: AdvancementStatus | str,
        today: date,
    ) -> AdvancementRecord:
        """Move a record one step forward in the workflow.

        A request to complete the board of review (REVIEW_COMPLETE) runs the
        rank progression cascade, so the returned record is AWARDED and the
        member's rank has been updated in the same commit.

        Args:
            record_id: Record to advance.
            target_status: Requested status; must be the immediate successor.
            today: Date used to stamp milestone fields.

        Returns:
            The stored record.

        Raises:
            UnknownStatusError: If the target is not a known status.
            InvalidTransitionError: If the step is not allowed.
            RecordNotFoundError: If the record doesn't exist.
            MemberNotFoundError: If the cascade cannot find the member.
            CommitRetriesExhaustedError: If every commit attempt conflicted.
        """
        target = AdvancementStatus.parse(target_status)
        if target is AdvancementStatus.REVIEW_COMPLETE:
            progression = await self.complete_review(record_id, today)
            return progression.record

        stored = await self._update_record(
            record_id,
            lambda record: transition(record, target, today),
            operation="transition",
        )
        self._log_operation("transition", record_id=record_id).info(
            "advancement_status_changed", status=stored.status, version=stored.version
        )
        return stored

    async def complete_review(self, record_id: UUID, today: date) -> RankProgression:
        """Complete the board of review and award the rank.

        The awarded record and the member's new rank are committed together.
        Nothing is committed if the member cannot be found.

        Args:
            record_id: Record waiting for its board of review.
            today: Board of review and completion date.

        Returns:
            RankProgression holding the stored record and member.

        Raises:
            RecordNotFoundError: If the record doesn't exist.
            MemberNotFoundError: If the record's member doesn't exist.
            InvalidTransitionError: If the record is neither READY_FOR_REVIEW nor
                REVIEW_COMPLETE.
            CommitRetriesExhaustedError: If every commit attempt conflicted.
        """
        log = self._log_operation("complete_review", record_id=record_id)

        async def attempt() -> RankProgression:
            record = await self._load_record(record_id)
            member = await self._member_directory.get(record.member_id)
            if member is None:
                log.error(
                    "review_completion_aborted",
                    member_id=record.member_id,
                    reason="member_not_found",
                )
                raise MemberNotFoundError(record.member_id)

            outcome = rank_progression.complete_review(
                record, member, today, catalog=self._catalog
            )
            stored_record, stored_member = await self._record_store.commit_pair(
                outcome.record, outcome.member
            )
            return RankProgression(
                record=stored_record,
                member=stored_member,
                previous_rank=outcome.previous_rank,
                promoted=outcome.promoted,
            )

        progression = await self._with_retry(record_id, attempt, "complete_review")
        log.info(
            "review_completed",
            member_id=progression.member.id,
            rank=progression.record.rank,
            previous_member_rank=rank_label(progression.previous_rank),
            member_rank=rank_label(progression.member.rank),
            promoted=progression.promoted,
        )
        return progression

    async def get_progress(self, record_id: UUID) -> AdvancementProgress:
        """Return a record with its checklist summary and next-step hint.

        Read-only; never changes the record.

        Raises:
            RecordNotFoundError: If the record doesn't exist.
        """
        record = await self._load_record(record_id)
        checklist = evaluate(record, self._catalog.requirements_for(record.rank))
        return AdvancementProgress(
            record=record,
            checklist=checklist,
            suggested_status=suggest_next_status(record, checklist),
        )

    async def _load_record(self, record_id: UUID) -> AdvancementRecord:
        record = await self._record_store.get(record_id)
        if record is None:
            raise RecordNotFoundError(record_id)
        return record

    async def _update_record(
        self,
        record_id: UUID,
        change: Callable[[AdvancementRecord], AdvancementRecord],
        operation: str,
    ) -> AdvancementRecord:
        """Re-read, apply ``change`` and save, retrying on version conflicts."""

        async def attempt() -> AdvancementRecord:
            record = await self._load_record(record_id)
            return await self._record_store.save(change(record))

        return await self._with_retry(record_id, attempt, operation)

    async def _with_retry(
        self,
        record_id: UUID,
        attempt: Callable[[], Awaitable[T]],
        operation: str,
    ) -> T:
        max_attempts = self._config.commit_max_attempts
        log = self._log_operation(operation, record_id=record_id)
        last_conflict: VersionConflictError | None = None

        for attempt_number in range(1, max_attempts + 1):
            try:
                return await attempt()
            except VersionConflictError as e:
                last_conflict = e
                if attempt_number >= max_attempts:
                    break
                delay = self._backoff_delay(attempt_number)
                log.warning(
                    "commit_conflict_retry",
                    entity=e.entity,
                    entity_id=e.entity_id,
                    attempt=attempt_number,
                    delay_seconds=round(delay, 3),
                )
                await asyncio.sleep(delay)

        log.error("commit_retries_exhausted", attempts=max_attempts)
        raise CommitRetriesExhaustedError(record_id, max_attempts) from last_conflict

    def _backoff_delay(self, attempt: int) -> float:
        delay = min(
            self._config.backoff_max_seconds,
            self._config.backoff_base_seconds * (2 ** (attempt - 1)),
        )
        jitter = delay * random.uniform(0.1, 0.25)
        return delay + jitter
