"""Bootstrap wiring for advancement dependencies.

Holds module-level singletons so every caller in a process shares the
same troop document, and therefore the same write lock.
"""

from __future__ import annotations

from structlog import get_logger

from troop_advancement.application.ports.advancement_record_store import (
    AdvancementRecordStoreProtocol,
)
from troop_advancement.application.ports.member_directory import (
    MemberDirectoryProtocol,
)
from troop_advancement.application.services.advancement_query_service import (
    AdvancementQueryService,
)
from troop_advancement.application.services.advancement_workflow_service import (
    AdvancementWorkflowService,
)
from troop_advancement.config.advancement_config import AdvancementConfig
from troop_advancement.infrastructure.adapters.persistence import (
    DocumentAdvancementRecordStore,
    DocumentMemberDirectory,
    TroopDocumentStore,
)

logger = get_logger()

_troop_document: TroopDocumentStore | None = None
_record_store: AdvancementRecordStoreProtocol | None = None
_member_directory: MemberDirectoryProtocol | None = None
_advancement_config: AdvancementConfig | None = None


def get_troop_document() -> TroopDocumentStore:
    """Get the shared troop document, creating an empty one on first use."""
    global _troop_document
    if _troop_document is None:
        _troop_document = TroopDocumentStore()
        logger.info("troop_document_created")
    return _troop_document


def set_troop_document(document: TroopDocumentStore) -> None:
    """Set the shared troop document (for loading data and testing).

    Gateways built on the previous document are dropped so both are rebuilt
    on this one; commit_pair() relies on them sharing a document.
    """
    global _troop_document, _record_store, _member_directory
    _troop_document = document
    _record_store = None
    _member_directory = None


def get_record_store() -> AdvancementRecordStoreProtocol:
    global _record_store
    if _record_store is None:
        _record_store = DocumentAdvancementRecordStore(get_troop_document())
    return _record_store


def set_record_store(store: AdvancementRecordStoreProtocol) -> None:
    global _record_store
    _record_store = store


def get_member_directory() -> MemberDirectoryProtocol:
    global _member_directory
    if _member_directory is None:
        _member_directory = DocumentMemberDirectory(get_troop_document())
    return _member_directory


def set_member_directory(directory: MemberDirectoryProtocol) -> None:
    global _member_directory
    _member_directory = directory


def get_advancement_config() -> AdvancementConfig:
    """Get advancement config, read from the environment on first use."""
    global _advancement_config
    if _advancement_config is None:
        _advancement_config = AdvancementConfig.from_environment()
    return _advancement_config


def set_advancement_config(config: AdvancementConfig) -> None:
    global _advancement_config
    _advancement_config = config


def get_advancement_workflow_service() -> AdvancementWorkflowService:
    """Build a workflow service over the shared gateways."""
    return AdvancementWorkflowService(
        record_store=get_record_store(),
        member_directory=get_member_directory(),
        config=get_advancement_config(),
    )


def get_advancement_query_service() -> AdvancementQueryService:
    """Build a query service over the shared gateways."""
    return AdvancementQueryService(
        record_store=get_record_store(),
        member_directory=get_member_directory(),
    )


def reset_advancement_dependencies() -> None:
    """Reset all singletons (for testing)."""
    global _troop_document, _record_store, _member_directory, _advancement_config
    _troop_document = None
    _record_store = None
    _member_directory = None
    _advancement_config = None
