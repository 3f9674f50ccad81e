"""Reading entity ids from stored troop documents.

Older troop documents use free-form ids such as ``scout-1700000000000``.
Those are mapped to a UUID derived from the id text, so the same legacy id
always yields the same UUID and a record's ``scout_id`` still points at its
member after loading.
"""

from __future__ import annotations

from uuid import UUID, uuid5

# Namespace for UUIDs derived from legacy document ids
LEGACY_ID_NAMESPACE = UUID("6f1c2a9e-3b7d-5e80-9a41-2d5c7b8e0f13")


def parse_identifier(value: object) -> UUID:
    """Read a stored id as a UUID.

    UUID strings are used as they are; any other id is mapped to a stable
    UUID in LEGACY_ID_NAMESPACE.
    """
    if isinstance(value, UUID):
        return value
    text = str(value)
    try:
        return UUID(text)
    except ValueError:
        return uuid5(LEGACY_ID_NAMESPACE, text)
