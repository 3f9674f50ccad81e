"""Ports: the gateway contracts the advancement services depend on."""

from troop_advancement.application.ports.advancement_record_store import (
    AdvancementRecordStoreProtocol,
)
from troop_advancement.application.ports.member_directory import (
    MemberDirectoryProtocol,
)
from troop_advancement.application.ports.rank_catalog import RankCatalogProtocol

__all__: list[str] = [
    "AdvancementRecordStoreProtocol",
    "MemberDirectoryProtocol",
    "RankCatalogProtocol",
]
