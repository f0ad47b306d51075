from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class MoveCommand:
    pods: int
    from_zone: int
    to_zone: int


@dataclass(slots=True, frozen=True)
class PurchaseCommand:
    zone: int
    pods: int = 1


@dataclass(slots=True)
class CommandSet:
    """Commands for one turn plus the engine's view of leftover platinum."""

    moves: list[MoveCommand] = field(default_factory=list)
    purchases: list[PurchaseCommand] = field(default_factory=list)
    remaining_platinum: int = 0

    @property
    def purchased_zones(self) -> list[int]:
        return [purchase.zone for purchase in self.purchases]


@dataclass(slots=True)
class TurnRecord:
    turn: int
    platinum: int
    owned_zones: int
    income: int
    purchases: list[int] = field(default_factory=list)
    moves: int = 0
    elapsed_ms: float = 0.0
