"""Per-turn observable snapshot of zone ownership, pods and platinum."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from rift_bot.world.graph import WorldGraph, ZoneIndexError

NEUTRAL = -1
MAP_PLAYER = 4


class SnapshotError(ValueError):
    """Raised when a turn snapshot is incomplete or inconsistent."""


@dataclass(slots=True, frozen=True)
class ZoneSnapshot:
    """One zone row of a turn message."""

    zone_id: int
    owner: int
    pods: tuple[int, int, int, int]


class WorldState:
    """Full observable state for one turn.

    Instances are built from a complete set of zone rows and are not mutated
    afterwards; strategies that need to simulate use :meth:`copy` or track
    their own pending changes.
    """

    __slots__ = ("_platinum", "_owners", "_pods")

    def __init__(self, platinum: int, owners: list[int], pods: list[tuple[int, ...]]) -> None:
        self._platinum = platinum
        self._owners = owners
        self._pods = pods

    @classmethod
    def from_zones(
        cls,
        platinum: int,
        zones: Iterable[ZoneSnapshot],
        *,
        zone_count: int,
        player_count: int = MAP_PLAYER,
    ) -> WorldState:
        if platinum < 0:
            raise SnapshotError(f"Negative platinum: {platinum}")

        owners: list[int | None] = [None] * zone_count
        pods: list[tuple[int, ...]] = [(0,) * MAP_PLAYER] * zone_count
        for row in zones:
            if not 0 <= row.zone_id < zone_count:
                raise SnapshotError(f"Zone {row.zone_id} outside [0, {zone_count})")
            if owners[row.zone_id] is not None:
                raise SnapshotError(f"Zone {row.zone_id} reported twice")
            if row.owner != NEUTRAL and not 0 <= row.owner < player_count:
                raise SnapshotError(f"Zone {row.zone_id} has invalid owner {row.owner}")
            if len(row.pods) != MAP_PLAYER or any(count < 0 for count in row.pods):
                raise SnapshotError(f"Zone {row.zone_id} has invalid pod counts {row.pods}")
            owners[row.zone_id] = row.owner
            pods[row.zone_id] = tuple(row.pods)

        missing = [zone for zone, owner in enumerate(owners) if owner is None]
        if missing:
            raise SnapshotError(f"Snapshot is missing {len(missing)} zone(s), first: {missing[0]}")
        return cls(platinum, owners, pods)  # type: ignore[arg-type]

    @property
    def platinum(self) -> int:
        return self._platinum

    @property
    def zone_count(self) -> int:
        return len(self._owners)

    def owner(self, zone: int) -> int:
        self._check(zone)
        return self._owners[zone]

    def is_neutral(self, zone: int) -> bool:
        return self.owner(zone) == NEUTRAL

    def pods(self, zone: int, player: int) -> int:
        self._check(zone)
        if not 0 <= player < MAP_PLAYER:
            raise IndexError(f"Player slot {player} outside [0, {MAP_PLAYER})")
        return self._pods[zone][player]

    def pods_at(self, zone: int) -> tuple[int, ...]:
        self._check(zone)
        return self._pods[zone]

    def zones_owned_by(self, player: int) -> list[int]:
        return [zone for zone, owner in enumerate(self._owners) if owner == player]

    def total_pods(self, player: int) -> int:
        return sum(counts[player] for counts in self._pods)

    def income(self, graph: WorldGraph, player: int) -> int:
        """Platinum the player's zones yield per turn."""
        return sum(graph.resource_yield(zone) for zone in self.zones_owned_by(player))

    def copy(self) -> WorldState:
        return WorldState(self._platinum, list(self._owners), list(self._pods))

    def _check(self, zone: int) -> None:
        if not 0 <= zone < len(self._owners):
            raise ZoneIndexError(f"Zone {zone} outside [0, {len(self._owners)})")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WorldState):
            return NotImplemented
        return (self._platinum, self._owners, self._pods) == (other._platinum, other._owners, other._pods)

    def __repr__(self) -> str:
        return f"WorldState(platinum={self._platinum}, zone_count={len(self._owners)})"
