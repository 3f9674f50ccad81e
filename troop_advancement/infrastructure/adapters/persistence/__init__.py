"""Persistence adapters over the shared troop document."""

from troop_advancement.infrastructure.adapters.persistence.document_member_directory import (
    DocumentMemberDirectory,
)
from troop_advancement.infrastructure.adapters.persistence.document_record_store import (
    DocumentAdvancementRecordStore,
)
from troop_advancement.infrastructure.adapters.persistence.troop_document_store import (
    TroopDocumentStore,
)

__all__: list[str] = [
    "DocumentAdvancementRecordStore",
    "DocumentMemberDirectory",
    "TroopDocumentStore",
]
