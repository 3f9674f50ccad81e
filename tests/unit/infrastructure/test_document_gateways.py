"""Unit tests for the document-backed member directory and record store."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from troop_advancement.domain.errors import MemberNotFoundError, VersionConflictError
from troop_advancement.domain.models.advancement_record import AdvancementRecord
from troop_advancement.domain.models.advancement_status import AdvancementStatus
from troop_advancement.domain.models.member import Member
from troop_advancement.domain.models.rank import Rank
from troop_advancement.infrastructure.adapters.persistence import (
    DocumentAdvancementRecordStore,
    DocumentMemberDirectory,
    TroopDocumentStore,
)


@pytest.fixture
def members(make_member: Callable[..., Member]) -> list[Member]:
    return [
        make_member(rank=Rank.STAR, first_name="Ana"),
        make_member(rank=Rank.SCOUT, first_name="Ben"),
    ]


@pytest.fixture
def document(members: list[Member]) -> TroopDocumentStore:
    return TroopDocumentStore(members=members)


@pytest.fixture
def directory(document: TroopDocumentStore) -> DocumentMemberDirectory:
    return DocumentMemberDirectory(document)


@pytest.fixture
def store(document: TroopDocumentStore) -> DocumentAdvancementRecordStore:
    return DocumentAdvancementRecordStore(document)


class TestDocumentMemberDirectory:
    """Tests for DocumentMemberDirectory."""

    @pytest.mark.asyncio
    async def test_get_and_list(
        self, directory: DocumentMemberDirectory, members: list[Member]
    ) -> None:
        assert await directory.get(members[0].id) == members[0]
        assert await directory.list_all() == members

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(
        self, directory: DocumentMemberDirectory, make_member: Callable[..., Member]
    ) -> None:
        assert await directory.get(make_member().id) is None

    @pytest.mark.asyncio
    async def test_set_rank(
        self, directory: DocumentMemberDirectory, members: list[Member]
    ) -> None:
        updated = await directory.set_rank(members[0].id, Rank.LIFE, expected_version=0)

        assert updated.rank is Rank.LIFE
        assert updated.version == 1
        assert (await directory.get(members[0].id)) == updated

    @pytest.mark.asyncio
    async def test_set_rank_stale_version(
        self, directory: DocumentMemberDirectory, members: list[Member]
    ) -> None:
        await directory.set_rank(members[0].id, Rank.LIFE, expected_version=0)

        with pytest.raises(VersionConflictError):
            await directory.set_rank(members[0].id, Rank.EAGLE, expected_version=0)

    @pytest.mark.asyncio
    async def test_set_rank_missing_member(
        self, directory: DocumentMemberDirectory, make_member: Callable[..., Member]
    ) -> None:
        with pytest.raises(MemberNotFoundError):
            await directory.set_rank(make_member().id, Rank.LIFE, expected_version=0)


class TestDocumentAdvancementRecordStore:
    """Tests for DocumentAdvancementRecordStore."""

    @pytest.mark.asyncio
    async def test_save_and_get(
        self,
        store: DocumentAdvancementRecordStore,
        members: list[Member],
        make_record: Callable[..., AdvancementRecord],
    ) -> None:
        record = make_record(members[0].id, rank=Rank.STAR)

        saved = await store.save(record)

        assert saved.version == 1
        assert await store.get(record.id) == saved

    @pytest.mark.asyncio
    async def test_list_for_member(
        self,
        store: DocumentAdvancementRecordStore,
        members: list[Member],
        make_record: Callable[..., AdvancementRecord],
    ) -> None:
        mine = await store.save(make_record(members[0].id, rank=Rank.STAR))
        await store.save(make_record(members[1].id, rank=Rank.SCOUT))

        assert await store.list_for_member(members[0].id) == [mine]
        assert len(await store.list_all()) == 2

    @pytest.mark.asyncio
    async def test_commit_pair(
        self,
        store: DocumentAdvancementRecordStore,
        directory: DocumentMemberDirectory,
        members: list[Member],
        make_record: Callable[..., AdvancementRecord],
    ) -> None:
        saved = await store.save(
            make_record(
                members[0].id,
                rank=Rank.STAR,
                status=AdvancementStatus.READY_FOR_CONFERENCE,
            )
        )

        record, member = await store.commit_pair(
            saved.with_notes("conference booked"), members[0].with_rank(Rank.LIFE)
        )

        assert record.version == 2
        assert member.version == 1
        assert (await directory.get(members[0].id)) == member
        assert (await store.get(saved.id)) == record

    @pytest.mark.asyncio
    async def test_commit_pair_stale_record(
        self,
        store: DocumentAdvancementRecordStore,
        directory: DocumentMemberDirectory,
        members: list[Member],
        make_record: Callable[..., AdvancementRecord],
    ) -> None:
        saved = await store.save(make_record(members[0].id))
        await store.save(saved.with_requirement("1a", True))

        with pytest.raises(VersionConflictError) as exc_info:
            await store.commit_pair(saved, members[0].with_rank(Rank.LIFE))

        assert exc_info.value.entity == "record"
        assert (await directory.get(members[0].id)) == members[0]
