"""Static zone topology: adjacency and per-zone platinum yield."""

from __future__ import annotations

MAP_SIZE = 154


class ZoneIndexError(IndexError):
    """Raised when a zone index falls outside the graph."""


class WorldGraph:
    """Undirected zone graph built once from the initialization message.

    Neighbor lists keep link insertion order and are only ever extended in
    pairs, so adjacency stays symmetric. Duplicate links are not filtered.
    """

    def __init__(self, zone_count: int = MAP_SIZE) -> None:
        if not 0 <= zone_count <= MAP_SIZE:
            raise ZoneIndexError(f"Zone count {zone_count} outside [0, {MAP_SIZE}]")
        self._zone_count = zone_count
        self._yields: list[int] = [0] * zone_count
        self._neighbors: list[list[int]] = [[] for _ in range(zone_count)]
        self._link_count = 0

    @property
    def zone_count(self) -> int:
        return self._zone_count

    @property
    def zones(self) -> range:
        return range(self._zone_count)

    @property
    def link_count(self) -> int:
        return self._link_count

    def neighbors(self, zone: int) -> tuple[int, ...]:
        """Return adjacent zones in the order their links were added."""
        self._check(zone)
        return tuple(self._neighbors[zone])

    def degree(self, zone: int) -> int:
        self._check(zone)
        return len(self._neighbors[zone])

    def resource_yield(self, zone: int) -> int:
        self._check(zone)
        return self._yields[zone]

    def total_yield(self) -> int:
        return sum(self._yields)

    def add_link(self, a: int, b: int) -> None:
        self._check(a)
        self._check(b)
        self._neighbors[a].append(b)
        self._neighbors[b].append(a)
        self._link_count += 1

    def set_resource_yield(self, zone: int, value: int) -> None:
        self._check(zone)
        self._yields[zone] = value

    def _check(self, zone: int) -> None:
        if not 0 <= zone < self._zone_count:
            raise ZoneIndexError(f"Zone {zone} outside [0, {self._zone_count})")

    def __repr__(self) -> str:
        return f"WorldGraph(zone_count={self._zone_count}, link_count={self._link_count})"
