"""Tests for itemized vs legacy cost resolution."""

from __future__ import annotations

from roomcost.costing.aggregator import RoomAggregate
from roomcost.costing.resolver import latest_legacy_totals, resolve
from roomcost.models.bom import LegacyRoomCost
from roomcost.models.enums import CostSource


def _agg(room_type: str, total: float) -> RoomAggregate:
    return RoomAggregate(room_type=room_type, total_cost=total)


class TestResolve:
    def test_legacy_fills_missing_room_type(self) -> None:
        rooms = resolve({}, [LegacyRoomCost(room_type="Boardroom", total_cost=5000)])
        assert len(rooms) == 1
        assert rooms[0].room_type == "Boardroom"
        assert rooms[0].total_cost == 5000
        assert rooms[0].source == CostSource.LEGACY

    def test_itemized_wins_over_legacy(self) -> None:
        rooms = resolve(
            {"Lobby": _agg("Lobby", 1200)},
            [LegacyRoomCost(room_type="Lobby", total_cost=900)],
        )
        assert [(r.room_type, r.total_cost, r.source) for r in rooms] == [
            ("Lobby", 1200, CostSource.ITEMIZED)
        ]

    def test_itemized_zero_still_wins(self) -> None:
        rooms = resolve(
            {"Lobby": _agg("Lobby", 0.0)},
            [LegacyRoomCost(room_type="Lobby", total_cost=900)],
        )
        assert rooms[0].total_cost == 0.0
        assert rooms[0].source == CostSource.ITEMIZED

    def test_union_without_duplicates(self) -> None:
        itemized = {"Lobby": _agg("Lobby", 10), "Huddle": _agg("Huddle", 20)}
        legacy = [
            LegacyRoomCost(room_type="Huddle", total_cost=1),
            LegacyRoomCost(room_type="Boardroom", total_cost=2),
            LegacyRoomCost(room_type="Training", total_cost=3),
        ]
        rooms = resolve(itemized, legacy)
        names = [r.room_type for r in rooms]
        assert names == ["Lobby", "Huddle", "Boardroom", "Training"]
        assert len(names) == len(set(names))

    def test_duplicate_legacy_rows_keep_highest_id(self) -> None:
        rooms = resolve(
            {},
            [
                LegacyRoomCost(id=9, room_type="Boardroom", total_cost=7000),
                LegacyRoomCost(id=4, room_type="Boardroom", total_cost=5000),
            ],
        )
        assert len(rooms) == 1
        assert rooms[0].total_cost == 7000


class TestLatestLegacyTotals:
    def test_records_without_id_keep_first(self) -> None:
        latest = latest_legacy_totals(
            [
                LegacyRoomCost(room_type="Lobby", total_cost=1),
                LegacyRoomCost(room_type="Lobby", total_cost=2),
            ]
        )
        assert latest["Lobby"].total_cost == 1

    def test_id_replaces_record_without_id(self) -> None:
        latest = latest_legacy_totals(
            [
                LegacyRoomCost(room_type="Lobby", total_cost=1),
                LegacyRoomCost(id=2, room_type="Lobby", total_cost=2),
            ]
        )
        assert latest["Lobby"].total_cost == 2

    def test_unparseable_legacy_total_is_zero(self) -> None:
        record = LegacyRoomCost.model_validate({"room_type": "Lobby", "total_cost": "n/a"})
        assert record.total_cost == 0.0
