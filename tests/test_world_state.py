from __future__ import annotations

import pytest

from factories import build_graph, build_state
from rift_bot.models import TurnRecord
from rift_bot.world import NEUTRAL, JsonlTurnRecorder, SnapshotError, TurnHistory, WorldState, ZoneIndexError, ZoneSnapshot


def test_snapshot_covers_every_zone() -> None:
    state = build_state([NEUTRAL, 0, 1], platinum=40, pods={1: (3, 0, 0, 0), 2: (0, 2, 0, 0)})

    assert state.zone_count == 3
    assert [state.owner(zone) for zone in range(3)] == [NEUTRAL, 0, 1]
    assert state.pods_at(0) == (0, 0, 0, 0)
    assert state.pods(1, 0) == 3
    assert state.pods(2, 1) == 2
    assert state.is_neutral(0)
    assert not state.is_neutral(1)


def test_snapshot_rows_may_arrive_in_any_order() -> None:
    rows = [
        ZoneSnapshot(zone_id=1, owner=0, pods=(1, 0, 0, 0)),
        ZoneSnapshot(zone_id=0, owner=NEUTRAL, pods=(0, 0, 0, 0)),
    ]
    state = WorldState.from_zones(20, rows, zone_count=2)

    assert state.owner(1) == 0
    assert state.owner(0) == NEUTRAL


def test_missing_zone_is_rejected() -> None:
    rows = [ZoneSnapshot(zone_id=0, owner=NEUTRAL, pods=(0, 0, 0, 0))]

    with pytest.raises(SnapshotError, match="missing"):
        WorldState.from_zones(0, rows, zone_count=2)


def test_repeated_zone_is_rejected() -> None:
    row = ZoneSnapshot(zone_id=0, owner=NEUTRAL, pods=(0, 0, 0, 0))

    with pytest.raises(SnapshotError, match="twice"):
        WorldState.from_zones(0, [row, row], zone_count=1)


@pytest.mark.parametrize(
    "row",
    [
        ZoneSnapshot(zone_id=0, owner=2, pods=(0, 0, 0, 0)),
        ZoneSnapshot(zone_id=0, owner=-2, pods=(0, 0, 0, 0)),
        ZoneSnapshot(zone_id=0, owner=0, pods=(0, -1, 0, 0)),
        ZoneSnapshot(zone_id=4, owner=0, pods=(0, 0, 0, 0)),
    ],
)
def test_invalid_rows_are_rejected(row: ZoneSnapshot) -> None:
    with pytest.raises(SnapshotError):
        WorldState.from_zones(0, [row], zone_count=1, player_count=2)


def test_negative_platinum_is_rejected() -> None:
    with pytest.raises(SnapshotError):
        build_state([NEUTRAL], platinum=-1)


def test_out_of_range_queries_fail_fast() -> None:
    state = build_state([NEUTRAL, NEUTRAL], platinum=0)

    with pytest.raises(ZoneIndexError):
        state.owner(2)
    with pytest.raises(IndexError):
        state.pods(0, 4)


def test_derived_queries() -> None:
    graph = build_graph([3, 5, 7])
    state = build_state([0, 1, 0], platinum=0, pods={0: (2, 0, 0, 0), 2: (4, 1, 0, 0)})

    assert state.zones_owned_by(0) == [0, 2]
    assert state.total_pods(0) == 6
    assert state.total_pods(1) == 1
    assert state.income(graph, 0) == 10
    assert state.income(graph, 1) == 5


def test_copy_is_independent_and_equal() -> None:
    state = build_state([NEUTRAL, 0], platinum=20)
    clone = state.copy()

    assert clone == state
    assert clone is not state


def test_history_is_bounded_and_newest_first() -> None:
    history = TurnHistory(max_turns=3)
    for turn in range(1, 6):
        history.append(TurnRecord(turn=turn, platinum=0, owned_zones=0, income=0))

    assert len(history) == 3
    assert history.latest().turn == 5
    assert [record.turn for record in history.list_recent(10)] == [5, 4, 3]


def test_history_requires_positive_size() -> None:
    with pytest.raises(ValueError):
        TurnHistory(max_turns=0)


def test_jsonl_recorder_appends_records(tmp_path) -> None:
    recorder = JsonlTurnRecorder(tmp_path / "logs" / "turns.jsonl")
    recorder.append(TurnRecord(turn=1, platinum=40, owned_zones=0, income=0, purchases=[3, 1]))
    recorder.append(TurnRecord(turn=2, platinum=20, owned_zones=2, income=6, purchases=[4], moves=1))

    records = recorder.read_all()

    assert [record.turn for record in records] == [1, 2]
    assert records[0].purchases == [3, 1]
    assert records[1].moves == 1
