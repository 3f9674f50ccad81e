"""Concurrent modification errors for conditional (versioned) writes.

Every gateway write is conditional on the version the caller read. A
mismatch means another writer got there first; the caller re-reads,
re-applies its change and tries again, a bounded number of times.
"""

from __future__ import annotations

from uuid import UUID

from troop_advancement.domain.exceptions import AdvancementError


class VersionConflictError(AdvancementError):
    """Raised when a conditional write finds a newer version in the store.

    This is a recoverable error - the caller should re-read the entity
    and decide whether to retry or abort.

    Attributes:
        entity: Kind of entity ("record" or "member").
        entity_id: ID of the entity that was being written.
        expected_version: Version the caller read.
        actual_version: Version currently stored.
    """

    def __init__(
        self,
        entity: str,
        entity_id: UUID,
        expected_version: int,
        actual_version: int,
    ) -> None:
        self.entity = entity
        self.entity_id = entity_id
        self.expected_version = expected_version
        self.actual_version = actual_version
        super().__init__(
            f"Concurrent modification detected for {entity} {entity_id}: "
            f"expected version {expected_version}, found {actual_version}"
        )


class CommitRetriesExhaustedError(AdvancementError):
    """Raised when a commit keeps conflicting after every allowed attempt.

    Attributes:
        record_id: Record whose commit failed.
        attempts: Number of attempts made.
    """

    def __init__(self, record_id: UUID, attempts: int) -> None:
        self.record_id = record_id
        self.attempts = attempts
        super().__init__(
            f"Gave up committing advancement record {record_id} "
            f"after {attempts} conflicting attempts"
        )
