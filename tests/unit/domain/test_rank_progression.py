"""Unit tests for completing the board of review (rank progression).

Tests cover:
- Promotion to the successor rank
- No promotion at the highest rank
- Milestone stamping
- Finishing a record left at REVIEW_COMPLETE
- Rejection from any other status
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

import pytest

from troop_advancement.domain.errors import InvalidTransitionError
from troop_advancement.domain.models.advancement_record import AdvancementRecord
from troop_advancement.domain.models.advancement_status import AdvancementStatus
from troop_advancement.domain.models.member import Member
from troop_advancement.domain.models.rank import RANK_ORDER, Rank, RankCatalog
from troop_advancement.domain.services.rank_progression import complete_review


class TestCompleteReview:
    """Tests for complete_review()."""

    def test_life_review_promotes_to_eagle(
        self,
        make_member: Callable[..., Member],
        make_record: Callable[..., AdvancementRecord],
        today: date,
    ) -> None:
        member = make_member(rank=Rank.LIFE)
        record = make_record(
            member.id, rank=Rank.LIFE, status=AdvancementStatus.READY_FOR_REVIEW
        )

        outcome = complete_review(record, member, today)

        assert outcome.member.rank is Rank.EAGLE
        assert outcome.record.status is AdvancementStatus.AWARDED
        assert outcome.record.date_completed == today
        assert outcome.record.board_of_review_date == today
        assert outcome.previous_rank is Rank.LIFE
        assert outcome.promoted is True

    def test_eagle_review_leaves_rank_unchanged(
        self,
        make_member: Callable[..., Member],
        make_record: Callable[..., AdvancementRecord],
        today: date,
    ) -> None:
        member = make_member(rank=Rank.EAGLE)
        record = make_record(
            member.id, rank=Rank.EAGLE, status=AdvancementStatus.READY_FOR_REVIEW
        )

        outcome = complete_review(record, member, today)

        assert outcome.member == member
        assert outcome.member.rank is Rank.EAGLE
        assert outcome.record.status is AdvancementStatus.AWARDED
        assert outcome.promoted is False

    @pytest.mark.parametrize("rank", RANK_ORDER[:-1])
    def test_member_moves_to_successor_of_record_rank(
        self,
        make_member: Callable[..., Member],
        make_record: Callable[..., AdvancementRecord],
        today: date,
        rank: Rank,
    ) -> None:
        member = make_member(rank=rank)
        record = make_record(member.id, rank=rank, status=AdvancementStatus.READY_FOR_REVIEW)

        outcome = complete_review(record, member, today)

        assert outcome.member.rank is RANK_ORDER[rank.position + 1]

    def test_successor_follows_record_rank_not_member_rank(
        self,
        make_member: Callable[..., Member],
        make_record: Callable[..., AdvancementRecord],
        today: date,
    ) -> None:
        member = make_member(rank=Rank.SCOUT)
        record = make_record(
            member.id, rank=Rank.STAR, status=AdvancementStatus.READY_FOR_REVIEW
        )

        assert complete_review(record, member, today).member.rank is Rank.LIFE

    def test_inputs_unchanged(
        self,
        make_member: Callable[..., Member],
        make_record: Callable[..., AdvancementRecord],
        today: date,
    ) -> None:
        member = make_member(rank=Rank.STAR)
        record = make_record(
            member.id, rank=Rank.STAR, status=AdvancementStatus.READY_FOR_REVIEW
        )

        complete_review(record, member, today)

        assert member.rank is Rank.STAR
        assert record.status is AdvancementStatus.READY_FOR_REVIEW

    @pytest.mark.parametrize(
        "status",
        [
            AdvancementStatus.IN_PROGRESS,
            AdvancementStatus.READY_FOR_CONFERENCE,
            AdvancementStatus.CONFERENCE_COMPLETE,
            AdvancementStatus.AWARDED,
        ],
    )
    def test_rejected_before_review_or_after_award(
        self,
        make_member: Callable[..., Member],
        make_record: Callable[..., AdvancementRecord],
        today: date,
        status: AdvancementStatus,
    ) -> None:
        member = make_member()
        record = make_record(member.id, status=status)

        with pytest.raises(InvalidTransitionError):
            complete_review(record, member, today)

    def test_review_complete_record_is_awarded_with_its_dates(
        self,
        make_member: Callable[..., Member],
        make_record: Callable[..., AdvancementRecord],
        today: date,
    ) -> None:
        member = make_member(rank=Rank.LIFE)
        record = make_record(
            member.id,
            rank=Rank.LIFE,
            status=AdvancementStatus.REVIEW_COMPLETE,
            milestone_date=date(2026, 2, 20),
        )

        outcome = complete_review(record, member, today)

        assert outcome.record.status is AdvancementStatus.AWARDED
        assert outcome.record.board_of_review_date == date(2026, 2, 20)
        assert outcome.record.date_completed == date(2026, 2, 20)
        assert outcome.member.rank is Rank.EAGLE
        assert outcome.promoted is True

    def test_unranked_member_earns_tenderfoot(
        self,
        make_member: Callable[..., Member],
        make_record: Callable[..., AdvancementRecord],
        today: date,
    ) -> None:
        member = make_member(rank=None)
        record = make_record(member.id, status=AdvancementStatus.READY_FOR_REVIEW)

        outcome = complete_review(record, member, today)

        assert outcome.previous_rank is None
        assert outcome.member.rank is Rank.TENDERFOOT

    def test_rejects_other_member(
        self,
        make_member: Callable[..., Member],
        make_record: Callable[..., AdvancementRecord],
        today: date,
    ) -> None:
        owner, other = make_member(), make_member()
        record = make_record(owner.id, status=AdvancementStatus.READY_FOR_REVIEW)

        with pytest.raises(ValueError, match="belongs to member"):
            complete_review(record, other, today)

    def test_uses_given_catalog(
        self,
        make_member: Callable[..., Member],
        make_record: Callable[..., AdvancementRecord],
        today: date,
    ) -> None:
        short = RankCatalog(order=(Rank.SCOUT, Rank.TENDERFOOT, Rank.SECOND_CLASS))
        member = make_member(rank=Rank.SECOND_CLASS)
        record = make_record(
            member.id, rank=Rank.SECOND_CLASS, status=AdvancementStatus.READY_FOR_REVIEW
        )

        outcome = complete_review(record, member, today, catalog=short)

        assert outcome.promoted is False
        assert outcome.member.rank is Rank.SECOND_CLASS
