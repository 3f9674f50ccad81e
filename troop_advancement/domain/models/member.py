"""Member domain model.

Members are owned by the member directory. The advancement engine only
reads a member's current rank and writes a new one.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any
from uuid import UUID

from troop_advancement.domain.models.identifiers import parse_identifier
from troop_advancement.domain.models.rank import Rank

# Stored label for a member who has not earned any rank yet
UNRANKED_LABEL = "Unranked"


def rank_label(rank: Rank | None) -> str:
    return rank.value if rank is not None else UNRANKED_LABEL


@dataclass(frozen=True, eq=True)
class Member:
    """A person whose rank progress is tracked.

    Attributes:
        id: Unique member identifier.
        first_name: Given name.
        last_name: Family name.
        rank: Current rank, or None while unranked.
        active: Whether the member is on the active roster.
        version: Store version, bumped on every committed write.
    """

    id: UUID
    first_name: str
    last_name: str
    rank: Rank | None = field(default=Rank.SCOUT)
    active: bool = field(default=True)
    version: int = field(default=0)

    def __post_init__(self) -> None:
        """Validate member fields."""
        if self.rank is not None and not isinstance(self.rank, Rank):
            raise TypeError(f"rank must be a Rank, got {type(self.rank).__name__}")
        if self.version < 0:
            raise ValueError(f"version must be non-negative, got {self.version}")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def with_rank(self, rank: Rank) -> Member:
        """Create new member with a different current rank.

        The version is left alone; the store bumps it on commit.
        """
        return replace(self, rank=rank)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the stored document shape."""
        return {
            "id": str(self.id),
            "first_name": self.first_name,
            "last_name": self.last_name,
            "rank": rank_label(self.rank),
            "active": self.active,
            "version": self.version,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Member:
        """Deserialize from the stored document shape.

        Legacy string ids are mapped to stable UUIDs and "Unranked" is read
        as no rank. Extra keys (troop, patrol, ...) are ignored.

        Raises:
            UnknownRankError: If the stored rank is not in the catalog.
        """
        stored_rank = data.get("rank") or Rank.SCOUT.value
        return cls(
            id=parse_identifier(data["id"]),
            first_name=data.get("first_name", ""),
            last_name=data.get("last_name", ""),
            rank=None if stored_rank == UNRANKED_LABEL else Rank.parse(stored_rank),
            active=bool(data.get("active", True)),
            version=int(data.get("version", 0)),
        )
