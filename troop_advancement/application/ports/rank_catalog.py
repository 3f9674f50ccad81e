"""Rank catalog port.

The catalog is static reference data; the domain ships the default
implementation (troop_advancement.domain.models.rank.RankCatalog).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from troop_advancement.domain.models.rank import Rank


class RankCatalogProtocol(Protocol):
    """Protocol for rank order and requirement set lookups.

    Methods:
        requirements_for: Ordered requirement ids of a rank
        successor: The next rank, or None at the top
    """

    def requirements_for(self, rank: Rank | str) -> tuple[str, ...]:
        """Return the ordered requirement ids for a rank.

        Raises:
            UnknownRankError: If the rank is not in the catalog.
        """
        ...

    def successor(self, rank: Rank | str) -> Rank | None:
        """Return the rank after ``rank``, or None for the highest rank.

        Raises:
            UnknownRankError: If the rank is not in the catalog.
        """
        ...
