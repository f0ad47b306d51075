"""Small builders shared by the test modules."""

from __future__ import annotations

from rift_bot.world import WorldGraph, WorldState, ZoneSnapshot


def build_graph(yields: list[int], links: list[tuple[int, int]] = ()) -> WorldGraph:
    graph = WorldGraph(len(yields))
    for zone, value in enumerate(yields):
        graph.set_resource_yield(zone, value)
    for a, b in links:
        graph.add_link(a, b)
    return graph


def build_state(
    owners: list[int],
    platinum: int,
    pods: dict[int, tuple[int, int, int, int]] | None = None,
    player_count: int = 4,
) -> WorldState:
    pods = pods or {}
    rows = [
        ZoneSnapshot(zone_id=zone, owner=owner, pods=pods.get(zone, (0, 0, 0, 0)))
        for zone, owner in enumerate(owners)
    ]
    return WorldState.from_zones(platinum, rows, zone_count=len(owners), player_count=player_count)
