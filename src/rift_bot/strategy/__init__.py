"""Decision engine boundaries and the reference greedy strategy."""

from .engine import POD_COST, DecisionEngine, GreedyDecisionEngine
from .movement import FrontierMovementPolicy, HoldPositionPolicy, MovementPolicy, create_movement_policy
from .registry import create_engine, register_engine, registered_engines, resolve_engine_class

__all__ = [
    "POD_COST",
    "DecisionEngine",
    "FrontierMovementPolicy",
    "GreedyDecisionEngine",
    "HoldPositionPolicy",
    "MovementPolicy",
    "create_engine",
    "create_movement_policy",
    "register_engine",
    "registered_engines",
    "resolve_engine_class",
]
