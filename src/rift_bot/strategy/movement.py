"""Movement policies run before the acquisition phase."""

from __future__ import annotations

from typing import Protocol

from rift_bot.models import MoveCommand
from rift_bot.world import WorldGraph, WorldState


class MovementPolicy(Protocol):
    """Plans pod movements for the local player."""

    def plan(self, graph: WorldGraph, state: WorldState, my_id: int) -> list[MoveCommand]:
        """Return the moves to issue this turn, possibly none."""


class HoldPositionPolicy:
    """Keeps every pod where it is."""

    def plan(self, graph: WorldGraph, state: WorldState, my_id: int) -> list[MoveCommand]:
        return []


class FrontierMovementPolicy:
    """Pushes each stack of pods into the richest adjacent zone it does not own.

    Stacks surrounded only by friendly zones hold position.
    """

    def plan(self, graph: WorldGraph, state: WorldState, my_id: int) -> list[MoveCommand]:
        moves: list[MoveCommand] = []
        for zone in graph.zones:
            count = state.pods(zone, my_id)
            if count <= 0:
                continue

            targets = [n for n in graph.neighbors(zone) if n != zone and state.owner(n) != my_id]
            if not targets:
                continue

            target = min(targets, key=lambda n: (-graph.resource_yield(n), n))
            moves.append(MoveCommand(pods=count, from_zone=zone, to_zone=target))
        return moves


MOVEMENT_POLICIES: dict[str, type[MovementPolicy]] = {
    "hold": HoldPositionPolicy,
    "frontier": FrontierMovementPolicy,
}


def create_movement_policy(name: str) -> MovementPolicy:
    try:
        return MOVEMENT_POLICIES[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown movement policy {name!r}; expected one of {sorted(MOVEMENT_POLICIES)}") from None
