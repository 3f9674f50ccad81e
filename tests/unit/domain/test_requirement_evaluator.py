"""Unit tests for the requirement checklist evaluator.

Tests cover:
- Counts, percentage and the fully-satisfied flag
- Missing keys counted as incomplete
- Empty requirement sets
- Purity (no mutation, idempotent)
- Next-status suggestions
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from uuid import uuid4

import pytest

from troop_advancement.domain.models.advancement_record import AdvancementRecord
from troop_advancement.domain.models.advancement_status import AdvancementStatus
from troop_advancement.domain.models.rank import DEFAULT_RANK_CATALOG, Rank
from troop_advancement.domain.services.requirement_evaluator import (
    ChecklistStatus,
    evaluate,
    suggest_next_status,
)

SCOUT_SET = DEFAULT_RANK_CATALOG.requirements_for(Rank.SCOUT)


class TestEvaluate:
    """Tests for evaluate()."""

    def test_all_scout_requirements_complete(
        self, make_record: Callable[..., AdvancementRecord]
    ) -> None:
        """9/9 Scout requirements complete gives 100% and a satisfied checklist."""
        record = make_record(uuid4(), requirements={r: True for r in SCOUT_SET})

        result = evaluate(record, SCOUT_SET)

        assert result == ChecklistStatus(
            completed_count=9,
            total_count=9,
            percentage=100,
            is_fully_satisfied=True,
        )
        assert record.status is AdvancementStatus.IN_PROGRESS

    def test_partial_completion(
        self, make_record: Callable[..., AdvancementRecord]
    ) -> None:
        record = make_record(uuid4(), requirements={"1a": True, "1b": True, "2": True})

        result = evaluate(record, SCOUT_SET)

        assert result.completed_count == 3
        assert result.total_count == 9
        assert result.percentage == 33
        assert result.is_fully_satisfied is False

    @pytest.mark.parametrize(
        "completed,total,expected",
        [(1, 8, 13), (3, 8, 38), (1, 6, 17), (5, 6, 83), (0, 7, 0), (7, 7, 100)],
    )
    def test_percentage_rounds_half_up(
        self,
        make_record: Callable[..., AdvancementRecord],
        completed: int,
        total: int,
        expected: int,
    ) -> None:
        rank = {8: Rank.EAGLE, 6: Rank.STAR, 7: Rank.LIFE}[total]
        ids = DEFAULT_RANK_CATALOG.requirements_for(rank)
        record = make_record(
            uuid4(), rank=rank, requirements={i: True for i in ids[:completed]}
        )

        assert evaluate(record, ids).percentage == expected

    def test_missing_keys_count_as_incomplete(self, today: date) -> None:
        record = AdvancementRecord(
            id=uuid4(),
            member_id=uuid4(),
            rank=Rank.STAR,
            date_started=today,
            requirements={"1": True},
        )

        result = evaluate(record, DEFAULT_RANK_CATALOG.requirements_for(Rank.STAR))

        assert result.completed_count == 1
        assert result.total_count == 6

    def test_empty_requirement_set(
        self, make_record: Callable[..., AdvancementRecord]
    ) -> None:
        record = make_record(uuid4())

        result = evaluate(record, ())

        assert result == ChecklistStatus(0, 0, 0, False)

    def test_ids_outside_set_ignored(
        self, make_record: Callable[..., AdvancementRecord]
    ) -> None:
        record = make_record(uuid4(), requirements={r: True for r in SCOUT_SET})

        result = evaluate(record, ("1a", "1b"))

        assert result.completed_count == 2
        assert result.total_count == 2

    def test_pure_and_idempotent(
        self, make_record: Callable[..., AdvancementRecord]
    ) -> None:
        record = make_record(uuid4(), requirements={"4": True})
        before = record.to_dict()

        first = evaluate(record, SCOUT_SET)
        second = evaluate(record, SCOUT_SET)

        assert first == second
        assert record.to_dict() == before

    def test_counts_within_bounds_for_every_prefix(
        self, make_record: Callable[..., AdvancementRecord]
    ) -> None:
        for done in range(len(SCOUT_SET) + 1):
            record = make_record(
                uuid4(), requirements={r: True for r in SCOUT_SET[:done]}
            )
            result = evaluate(record, SCOUT_SET)
            assert 0 <= result.completed_count <= result.total_count
            assert 0 <= result.percentage <= 100


class TestSuggestNextStatus:
    """Tests for suggest_next_status()."""

    def test_in_progress_incomplete_suggests_nothing(
        self, make_record: Callable[..., AdvancementRecord]
    ) -> None:
        record = make_record(uuid4())
        assert suggest_next_status(record, evaluate(record, SCOUT_SET)) is None

    def test_in_progress_complete_suggests_conference(
        self, make_record: Callable[..., AdvancementRecord]
    ) -> None:
        record = make_record(uuid4(), requirements={r: True for r in SCOUT_SET})
        assert (
            suggest_next_status(record, evaluate(record, SCOUT_SET))
            is AdvancementStatus.READY_FOR_CONFERENCE
        )

    @pytest.mark.parametrize(
        "status,expected",
        [
            (
                AdvancementStatus.READY_FOR_CONFERENCE,
                AdvancementStatus.CONFERENCE_COMPLETE,
            ),
            (AdvancementStatus.CONFERENCE_COMPLETE, AdvancementStatus.READY_FOR_REVIEW),
            (AdvancementStatus.READY_FOR_REVIEW, AdvancementStatus.REVIEW_COMPLETE),
            (AdvancementStatus.REVIEW_COMPLETE, None),
            (AdvancementStatus.AWARDED, None),
        ],
    )
    def test_later_statuses(
        self,
        make_record: Callable[..., AdvancementRecord],
        status: AdvancementStatus,
        expected: AdvancementStatus | None,
    ) -> None:
        record = make_record(uuid4(), status=status)
        assert suggest_next_status(record, evaluate(record, SCOUT_SET)) is expected
