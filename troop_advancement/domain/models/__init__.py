"""Domain models for rank advancement."""

from troop_advancement.domain.models.advancement_record import (
    MILESTONE_DATE_FIELDS,
    AdvancementRecord,
)
from troop_advancement.domain.models.advancement_status import (
    INITIAL_STATUS,
    STATUS_ORDER,
    STATUS_SUCCESSORS,
    AdvancementStatus,
)
from troop_advancement.domain.models.identifiers import parse_identifier
from troop_advancement.domain.models.member import UNRANKED_LABEL, Member, rank_label
from troop_advancement.domain.models.rank import (
    DEFAULT_RANK_CATALOG,
    RANK_ORDER,
    RANK_REQUIREMENTS,
    Rank,
    RankCatalog,
)

__all__: list[str] = [
    "AdvancementRecord",
    "AdvancementStatus",
    "DEFAULT_RANK_CATALOG",
    "INITIAL_STATUS",
    "MILESTONE_DATE_FIELDS",
    "Member",
    "RANK_ORDER",
    "RANK_REQUIREMENTS",
    "Rank",
    "RankCatalog",
    "STATUS_ORDER",
    "STATUS_SUCCESSORS",
    "UNRANKED_LABEL",
    "parse_identifier",
    "rank_label",
]
