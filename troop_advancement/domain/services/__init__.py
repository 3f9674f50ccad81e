"""Domain services: pure workflow rules for advancement records."""

from troop_advancement.domain.services.advancement_state_machine import (
    MILESTONE_STAMPS,
    transition,
    validate_transition,
)
from troop_advancement.domain.services.rank_progression import (
    RankProgression,
    complete_review,
)
from troop_advancement.domain.services.requirement_evaluator import (
    ChecklistStatus,
    evaluate,
    suggest_next_status,
)

__all__: list[str] = [
    "ChecklistStatus",
    "MILESTONE_STAMPS",
    "RankProgression",
    "complete_review",
    "evaluate",
    "suggest_next_status",
    "transition",
    "validate_transition",
]
