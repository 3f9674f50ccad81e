"""Advancement record domain model.

One record tracks one member's attempt at one rank: the requirement
checklist, the status in the advancement workflow, and the dates on which
each milestone was reached.

Invariants enforced on every instance:
- requirement ids are a subset of the rank's requirement set
- a milestone date is never set before its status is reached, and is set
  once it is reached (date_started excepted: leaders may leave it blank)
- member_id and rank never change (no with_* method touches them)
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from types import MappingProxyType
from typing import Any, Mapping
from uuid import UUID, uuid4

from troop_advancement.domain.models.identifiers import parse_identifier

from troop_advancement.domain.models.advancement_status import (
    INITIAL_STATUS,
    AdvancementStatus,
)
from troop_advancement.domain.models.rank import DEFAULT_RANK_CATALOG, Rank

# Milestone date field -> status at which it is stamped
MILESTONE_DATE_FIELDS: Mapping[str, AdvancementStatus] = MappingProxyType(
    {
        "date_started": AdvancementStatus.IN_PROGRESS,
        "scoutmaster_conference_date": AdvancementStatus.CONFERENCE_COMPLETE,
        "board_of_review_date": AdvancementStatus.REVIEW_COMPLETE,
        "date_completed": AdvancementStatus.REVIEW_COMPLETE,
    }
)

# Milestone dates that may stay unset after their status is reached
OPTIONAL_MILESTONE_DATES = frozenset({"date_started"})


@dataclass(frozen=True, eq=True)
class AdvancementRecord:
    """One member's attempt at one rank.

    Frozen: every change produces a new instance. The version is owned by
    the record store and is bumped on each committed write.

    Attributes:
        id: Unique record identifier.
        member_id: Member pursuing the rank.
        rank: Target rank.
        status: Position in the advancement workflow.
        requirements: Requirement id -> completed flag (read-only mapping).
        date_started: When tracking began, if recorded.
        scoutmaster_conference_date: When the scoutmaster conference was completed.
        board_of_review_date: When the board of review was completed.
        date_completed: When the rank was completed.
        notes: Free text.
        version: Store version.
    """

    id: UUID
    member_id: UUID
    rank: Rank
    date_started: date | None
    status: AdvancementStatus = field(default=INITIAL_STATUS)
    requirements: Mapping[str, bool] = field(default_factory=dict)
    scoutmaster_conference_date: date | None = field(default=None)
    board_of_review_date: date | None = field(default=None)
    date_completed: date | None = field(default=None)
    notes: str = field(default="")
    version: int = field(default=0)

    def __post_init__(self) -> None:
        """Validate record fields and freeze the requirement mapping."""
        if not isinstance(self.rank, Rank):
            raise TypeError(f"rank must be a Rank, got {type(self.rank).__name__}")
        if not isinstance(self.status, AdvancementStatus):
            raise TypeError(
                f"status must be an AdvancementStatus, got {type(self.status).__name__}"
            )
        if self.version < 0:
            raise ValueError(f"version must be non-negative, got {self.version}")

        frozen: dict[str, bool] = {}
        for requirement_id, done in self.requirements.items():
            DEFAULT_RANK_CATALOG.check_requirement(self.rank, requirement_id)
            if not isinstance(done, bool):
                raise TypeError(
                    f"Requirement {requirement_id!r} must be True or False, got {done!r}"
                )
            frozen[requirement_id] = done
        object.__setattr__(self, "requirements", MappingProxyType(frozen))

        for field_name, milestone in MILESTONE_DATE_FIELDS.items():
            reached = self.status.has_reached(milestone)
            is_set = getattr(self, field_name) is not None
            if reached and not is_set and field_name not in OPTIONAL_MILESTONE_DATES:
                raise ValueError(
                    f"{field_name} must be set once status reaches {milestone.value}"
                )
            if is_set and not reached:
                raise ValueError(
                    f"{field_name} cannot be set before status reaches {milestone.value}"
                )

    @classmethod
    def start(
        cls,
        member_id: UUID,
        rank: Rank,
        today: date,
        prefilled: Mapping[str, bool] | None = None,
        notes: str = "",
        record_id: UUID | None = None,
    ) -> AdvancementRecord:
        """Create a new record in the initial status.

        Every requirement of the rank starts as False; ``prefilled`` values
        are laid over the top.

        Raises:
            UnknownRequirementError: If ``prefilled`` names an id outside the rank.
        """
        requirements = {
            requirement_id: False
            for requirement_id in DEFAULT_RANK_CATALOG.requirements_for(rank)
        }
        for requirement_id, done in (prefilled or {}).items():
            DEFAULT_RANK_CATALOG.check_requirement(rank, requirement_id)
            requirements[requirement_id] = done
        return cls(
            id=record_id or uuid4(),
            member_id=member_id,
            rank=rank,
            date_started=today,
            requirements=requirements,
            notes=notes,
        )

    def with_requirement(self, requirement_id: str, done: bool) -> AdvancementRecord:
        """Create new record with one requirement flag set. Status is preserved.

        Raises:
            UnknownRequirementError: If the id is not defined for the rank.
        """
        DEFAULT_RANK_CATALOG.check_requirement(self.rank, requirement_id)
        requirements = dict(self.requirements)
        requirements[requirement_id] = done
        return replace(self, requirements=requirements)

    def with_requirement_toggled(self, requirement_id: str) -> AdvancementRecord:
        """Create new record with one requirement flag flipped."""
        return self.with_requirement(
            requirement_id, not self.requirements.get(requirement_id, False)
        )

    def with_notes(self, notes: str) -> AdvancementRecord:
        """Create new record with the notes replaced. Status is preserved."""
        return replace(self, notes=notes)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the stored document shape (ISO dates, status labels)."""
        return {
            "id": str(self.id),
            "scout_id": str(self.member_id),
            "rank": self.rank.value,
            "status": self.status.value,
            "requirements": dict(self.requirements),
            "date_started": _iso(self.date_started),
            "scoutmaster_conference_date": _iso(self.scoutmaster_conference_date),
            "board_of_review_date": _iso(self.board_of_review_date),
            "date_completed": _iso(self.date_completed),
            "notes": self.notes,
            "version": self.version,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AdvancementRecord:
        """Deserialize from the stored document shape.

        Empty date strings are read as unset and legacy string ids are mapped
        to stable UUIDs (see parse_identifier).

        Raises:
            UnknownRankError: If the stored rank is not in the catalog.
            UnknownStatusError: If the stored status is not a known label.
        """
        return cls(
            id=parse_identifier(data["id"]),
            member_id=parse_identifier(data["scout_id"]),
            rank=Rank.parse(data["rank"]),
            status=AdvancementStatus.parse(data.get("status") or INITIAL_STATUS.value),
            requirements=dict(data.get("requirements") or {}),
            date_started=_parse_date(data.get("date_started")),
            scoutmaster_conference_date=_parse_date(
                data.get("scoutmaster_conference_date")
            ),
            board_of_review_date=_parse_date(data.get("board_of_review_date")),
            date_completed=_parse_date(data.get("date_completed")),
            notes=data.get("notes") or "",
            version=int(data.get("version", 0)),
        )


def _iso(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def _parse_date(value: str | None) -> date | None:
    if not value:
        return None
    return date.fromisoformat(value)
