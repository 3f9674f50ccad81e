"""Domain errors for the advancement engine.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from AdvancementError.
"""

from troop_advancement.domain.errors.catalog import (
    UnknownRankError,
    UnknownRequirementError,
)
from troop_advancement.domain.errors.concurrent_modification import (
    CommitRetriesExhaustedError,
    VersionConflictError,
)
from troop_advancement.domain.errors.member import (
    InactiveMemberError,
    MemberNotFoundError,
)
from troop_advancement.domain.errors.record import (
    DuplicateAwardError,
    RecordNotFoundError,
)
from troop_advancement.domain.errors.state_transition import (
    InvalidTransitionError,
    UnknownStatusError,
)

__all__: list[str] = [
    "CommitRetriesExhaustedError",
    "DuplicateAwardError",
    "InactiveMemberError",
    "InvalidTransitionError",
    "MemberNotFoundError",
    "RecordNotFoundError",
    "UnknownRankError",
    "UnknownRequirementError",
    "UnknownStatusError",
    "VersionConflictError",
]
