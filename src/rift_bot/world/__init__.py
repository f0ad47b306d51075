"""Zone graph, per-turn state and turn history."""

from .graph import MAP_SIZE, WorldGraph, ZoneIndexError
from .history import JsonlTurnRecorder, TurnHistory, TurnRecorder
from .state import MAP_PLAYER, NEUTRAL, SnapshotError, WorldState, ZoneSnapshot

__all__ = [
    "MAP_PLAYER",
    "MAP_SIZE",
    "NEUTRAL",
    "JsonlTurnRecorder",
    "SnapshotError",
    "TurnHistory",
    "TurnRecorder",
    "WorldGraph",
    "WorldState",
    "ZoneIndexError",
    "ZoneSnapshot",
]
