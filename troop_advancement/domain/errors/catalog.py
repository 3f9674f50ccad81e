"""Rank catalog lookup errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

from troop_advancement.domain.exceptions import AdvancementError

if TYPE_CHECKING:
    from troop_advancement.domain.models.rank import Rank


class UnknownRankError(AdvancementError):
    """Raised when a rank name is not part of the rank catalog.

    Attributes:
        value: The rejected input.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown rank: {value!r}")


class UnknownRequirementError(AdvancementError):
    """Raised when a requirement id is not defined for a rank.

    Attributes:
        rank: Rank whose requirement set was consulted.
        requirement_id: The rejected requirement id.
    """

    def __init__(self, rank: Rank, requirement_id: str) -> None:
        self.rank = rank
        self.requirement_id = requirement_id
        super().__init__(
            f"Requirement {requirement_id!r} is not defined for rank {rank.value}"
        )
