"""Per-turn decision contracts and the greedy reference engine."""

from __future__ import annotations

import logging
import random
from typing import Protocol

from rift_bot.models import CommandSet, PurchaseCommand
from rift_bot.strategy.movement import HoldPositionPolicy, MovementPolicy
from rift_bot.strategy.registry import register_engine
from rift_bot.world import NEUTRAL, TurnHistory, WorldGraph, WorldState

POD_COST = 20


class DecisionEngine(Protocol):
    """Turns one observed turn into the commands to send back."""

    def decide(
        self,
        graph: WorldGraph,
        state: WorldState,
        *,
        history: TurnHistory | None = None,
    ) -> CommandSet:
        """Return movement and purchase commands for the current turn."""


@register_engine("greedy")
class GreedyDecisionEngine:
    """Single-ply greedy engine.

    Movement is delegated to a pluggable policy. Platinum is then spent one pod
    at a time on the neutral zone with the highest yield, lowest index first on
    ties. Zones bought earlier in the same pass are tracked in a pending set so
    they are not chosen twice; the input state is never modified.

    When no neutral zone yields anything, a zone is drawn at random from the
    remaining neutral zones, then from the player's own zones. The pass ends
    when platinum drops below the pod cost or the fallback pool is empty.
    """

    def __init__(
        self,
        my_id: int,
        *,
        rng: random.Random | None = None,
        movement: MovementPolicy | None = None,
        pod_cost: int = POD_COST,
        logger: logging.Logger | None = None,
    ) -> None:
        if pod_cost <= 0:
            raise ValueError(f"Pod cost must be positive, got {pod_cost}")
        self.my_id = my_id
        self._rng = rng or random.Random()
        self._movement = movement or HoldPositionPolicy()
        self._pod_cost = pod_cost
        self._logger = logger or logging.getLogger("rift_bot.strategy")

    @property
    def movement(self) -> MovementPolicy:
        return self._movement

    def decide(
        self,
        graph: WorldGraph,
        state: WorldState,
        *,
        history: TurnHistory | None = None,
    ) -> CommandSet:
        moves = self._movement.plan(graph, state, self.my_id)
        purchases, remaining = self._acquire(graph, state)
        return CommandSet(moves=moves, purchases=purchases, remaining_platinum=remaining)

    def _acquire(self, graph: WorldGraph, state: WorldState) -> tuple[list[PurchaseCommand], int]:
        platinum = state.platinum
        pending: set[int] = set()
        purchases: list[PurchaseCommand] = []

        while platinum >= self._pod_cost:
            zone = self._best_neutral_zone(graph, state, pending)
            if zone is None:
                zone = self._fallback_zone(graph, state, pending)
            if zone is None:
                self._logger.debug("acquisition_pool_exhausted", extra={"platinum": platinum})
                break

            purchases.append(PurchaseCommand(zone=zone))
            pending.add(zone)
            platinum -= self._pod_cost

        return purchases, platinum

    @staticmethod
    def _best_neutral_zone(graph: WorldGraph, state: WorldState, pending: set[int]) -> int | None:
        best: int | None = None
        best_value = 0
        for zone in graph.zones:
            if zone in pending or state.owner(zone) != NEUTRAL:
                continue
            value = graph.resource_yield(zone)
            if value > best_value:
                best = zone
                best_value = value
        return best

    def _fallback_zone(self, graph: WorldGraph, state: WorldState, pending: set[int]) -> int | None:
        neutral = [zone for zone in graph.zones if zone not in pending and state.owner(zone) == NEUTRAL]
        pool = neutral or [zone for zone in graph.zones if zone not in pending and state.owner(zone) == self.my_id]
        if not pool:
            return None

        zone = self._rng.choice(pool)
        self._logger.debug(
            "acquisition_fallback",
            extra={"zone": zone, "pool": "neutral" if neutral else "owned", "pool_size": len(pool)},
        )
        return zone
