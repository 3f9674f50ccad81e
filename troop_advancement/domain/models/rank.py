"""Rank catalog: the fixed rank order and the requirement set of each rank.

Immutable reference data. This module is the single source for both the
rank order and the requirement ids; the checklist evaluator and the rank
progression cascade both read it.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from troop_advancement.domain.errors.catalog import (
    UnknownRankError,
    UnknownRequirementError,
)


class Rank(Enum):
    """A step in the rank progression, lowest first.

    Values are the display names used in stored documents. Members of the
    enum compare by position in the progression, so ``Rank.SCOUT <
    Rank.EAGLE`` holds.
    """

    SCOUT = "Scout"
    TENDERFOOT = "Tenderfoot"
    SECOND_CLASS = "Second Class"
    FIRST_CLASS = "First Class"
    STAR = "Star"
    LIFE = "Life"
    EAGLE = "Eagle"

    @property
    def position(self) -> int:
        """Zero-based index of this rank in the progression."""
        return RANK_ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.position < other.position

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.position <= other.position

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.position > other.position

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.position >= other.position

    @classmethod
    def parse(cls, value: Rank | str) -> Rank:
        """Resolve a rank from a member, display name or enum name.

        Raises:
            UnknownRankError: If the value names no rank.
        """
        if isinstance(value, Rank):
            return value
        if isinstance(value, str):
            for rank in cls:
                if value == rank.value or value == rank.name:
                    return rank
        raise UnknownRankError(value)


RANK_ORDER: tuple[Rank, ...] = tuple(Rank)


def _ids(*ids: str) -> tuple[str, ...]:
    return tuple(ids)


RANK_REQUIREMENTS: Mapping[Rank, tuple[str, ...]] = MappingProxyType(
    {
        Rank.SCOUT: _ids("1a", "1b", "1c", "2", "3", "4", "5", "6", "7"),
        Rank.TENDERFOOT: _ids(
            "1a", "1b", "1c", "1d",
            "2a", "2b", "2c", "2d", "2e", "2f",
            "3a", "3b", "3c", "3d",
            "4a", "4b",
        ),
        Rank.SECOND_CLASS: _ids(
            "1a", "1b", "1c",
            "2a", "2b", "2c", "2d", "2e", "2f", "2g",
            "3a", "3b", "3c", "3d",
            "4",
            "5a", "5b", "5c", "5d",
            "6a", "6b", "6c", "6d",
            "7a", "7b",
        ),
        Rank.FIRST_CLASS: _ids(
            "1a", "1b",
            "2a", "2b", "2c", "2d", "2e", "2f",
            "3a", "3b", "3c", "3d",
            "4a", "4b",
            "5a", "5b", "5c",
            "6a", "6b", "6c", "6d",
            "7a", "7b", "7c", "7d",
            "8a", "8b", "8c", "8d", "8e",
        ),
        Rank.STAR: _ids("1", "2", "3", "4", "5", "6"),
        Rank.LIFE: _ids("1", "2", "3", "4", "5", "6", "7"),
        Rank.EAGLE: _ids("1", "2", "3", "4", "5", "6", "7", "8"),
    }
)


class RankCatalog:
    """Lookup over the rank order and requirement sets.

    Implements RankCatalogProtocol. The default instance wraps the
    module-level tables; tests may build one over a smaller table.

    Example:
        >>> DEFAULT_RANK_CATALOG.successor(Rank.LIFE)
        <Rank.EAGLE: 'Eagle'>
        >>> DEFAULT_RANK_CATALOG.successor(Rank.EAGLE) is None
        True
    """

    def __init__(
        self,
        order: tuple[Rank, ...] = RANK_ORDER,
        requirements: Mapping[Rank, tuple[str, ...]] = RANK_REQUIREMENTS,
    ) -> None:
        for rank, ids in requirements.items():
            if len(set(ids)) != len(ids):
                raise ValueError(f"Duplicate requirement ids for rank {rank.value}")
        self._order = tuple(order)
        self._requirements = MappingProxyType(dict(requirements))

    @property
    def ranks(self) -> tuple[Rank, ...]:
        """All ranks, lowest first."""
        return self._order

    @property
    def highest(self) -> Rank:
        """The top rank of the progression."""
        return self._order[-1]

    def requirements_for(self, rank: Rank | str) -> tuple[str, ...]:
        """Return the ordered requirement ids for a rank.

        Raises:
            UnknownRankError: If the rank is not in this catalog.
        """
        resolved = Rank.parse(rank)
        try:
            return self._requirements[resolved]
        except KeyError:
            raise UnknownRankError(rank) from None

    def successor(self, rank: Rank | str) -> Rank | None:
        """Return the rank after ``rank``, or None for the highest rank.

        Raises:
            UnknownRankError: If the rank is not in this catalog.
        """
        resolved = Rank.parse(rank)
        if resolved not in self._order:
            raise UnknownRankError(rank)
        index = self._order.index(resolved)
        if index + 1 >= len(self._order):
            return None
        return self._order[index + 1]

    def check_requirement(self, rank: Rank, requirement_id: str) -> None:
        """Raise UnknownRequirementError if ``requirement_id`` is not defined for ``rank``."""
        if requirement_id not in self.requirements_for(rank):
            raise UnknownRequirementError(rank, requirement_id)


DEFAULT_RANK_CATALOG = RankCatalog()
