"""
Pytest configuration and shared fixtures for advancement tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async port mocking
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from datetime import date
from uuid import UUID, uuid4

import pytest

from troop_advancement.domain.models.advancement_record import AdvancementRecord
from troop_advancement.domain.models.advancement_status import AdvancementStatus
from troop_advancement.domain.models.member import Member
from troop_advancement.domain.models.rank import Rank


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from troop_advancement import __version__

    return __version__


@pytest.fixture
def today() -> date:
    return date(2026, 3, 14)


@pytest.fixture
def make_member() -> Callable[..., Member]:
    """Factory for members with sensible defaults."""

    def _make(
        rank: Rank | None = Rank.SCOUT,
        active: bool = True,
        first_name: str = "Alex",
        last_name: str = "Rivera",
        member_id: UUID | None = None,
    ) -> Member:
        return Member(
            id=member_id or uuid4(),
            first_name=first_name,
            last_name=last_name,
            rank=rank,
            active=active,
        )

    return _make


@pytest.fixture
def make_record() -> Callable[..., AdvancementRecord]:
    """Factory for records already at a given status.

    Milestone dates for every reached milestone are filled in with
    ``milestone_date`` so the record satisfies its date invariants.
    """

    def _make(
        member_id: UUID,
        rank: Rank = Rank.SCOUT,
        status: AdvancementStatus = AdvancementStatus.IN_PROGRESS,
        milestone_date: date = date(2026, 1, 10),
        requirements: dict[str, bool] | None = None,
    ) -> AdvancementRecord:
        record = AdvancementRecord.start(
            member_id=member_id,
            rank=rank,
            today=milestone_date,
            prefilled=requirements,
        )
        stamps: dict[str, date] = {}
        if status.has_reached(AdvancementStatus.CONFERENCE_COMPLETE):
            stamps["scoutmaster_conference_date"] = milestone_date
        if status.has_reached(AdvancementStatus.REVIEW_COMPLETE):
            stamps["board_of_review_date"] = milestone_date
            stamps["date_completed"] = milestone_date
        return replace(record, status=status, **stamps)

    return _make
