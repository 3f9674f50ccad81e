"""Application services for the advancement workflow."""

from troop_advancement.application.services.advancement_query_service import (
    AdvancementQueryService,
    MemberProgress,
)
from troop_advancement.application.services.advancement_workflow_service import (
    AdvancementProgress,
    AdvancementWorkflowService,
)

__all__: list[str] = [
    "AdvancementProgress",
    "AdvancementQueryService",
    "AdvancementWorkflowService",
    "MemberProgress",
]
