"""Text codec for the referee protocol.

Input is read as whitespace separated integers, one line at a time, so a
turn can be decided as soon as its last row arrives. Output is always two
lines: movements (or ``WAIT``) and pod purchases (possibly empty).
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TextIO

from rift_bot.models import CommandSet
from rift_bot.world import MAP_PLAYER, MAP_SIZE, NEUTRAL, WorldGraph, WorldState, ZoneSnapshot

WAIT = "WAIT"


class ProtocolError(ValueError):
    """Raised when the referee sends a malformed or out-of-range message."""


class TransportClosed(EOFError):
    """Raised when input ends; ``mid_message`` is set if a message was cut short."""

    def __init__(self, message: str, *, mid_message: bool = False) -> None:
        super().__init__(message)
        self.mid_message = mid_message


@dataclass(slots=True)
class GameSetup:
    """Everything the initialization message tells us."""

    graph: WorldGraph
    player_count: int
    my_id: int


class TokenReader:
    """Pulls integer tokens from a text stream, reading lines on demand."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._tokens: deque[str] = deque()

    def next_int(self, what: str) -> int:
        while not self._tokens:
            line = self._stream.readline()
            if not line:
                raise TransportClosed(f"End of input while reading {what}")
            self._tokens.extend(line.split())

        token = self._tokens.popleft()
        try:
            return int(token)
        except ValueError:
            raise ProtocolError(f"Expected integer for {what}, got {token!r}") from None


def _bounded(value: int, low: int, high: int, what: str) -> int:
    if not low <= value < high:
        raise ProtocolError(f"{what} {value} outside [{low}, {high})")
    return value


def read_initialization(reader: TokenReader) -> GameSetup:
    player_count = _bounded(reader.next_int("player count"), 1, MAP_PLAYER + 1, "Player count")
    my_id = _bounded(reader.next_int("my id"), 0, player_count, "My id")
    zone_count = _bounded(reader.next_int("zone count"), 0, MAP_SIZE + 1, "Zone count")
    link_count = reader.next_int("link count")
    if link_count < 0:
        raise ProtocolError(f"Negative link count: {link_count}")

    graph = WorldGraph(zone_count)
    for _ in range(zone_count):
        zone = _bounded(reader.next_int("zone id"), 0, zone_count, "Zone id")
        graph.set_resource_yield(zone, reader.next_int("platinum source"))

    for _ in range(link_count):
        a = _bounded(reader.next_int("link start"), 0, zone_count, "Link zone")
        b = _bounded(reader.next_int("link end"), 0, zone_count, "Link zone")
        graph.add_link(a, b)

    return GameSetup(graph=graph, player_count=player_count, my_id=my_id)


def read_turn(reader: TokenReader, graph: WorldGraph, player_count: int = MAP_PLAYER) -> WorldState:
    """Read one turn message covering every zone of ``graph``.

    Raises :class:`TransportClosed` when input ends before the turn starts, and
    the same error with ``mid_message=True`` when it ends partway through.
    """
    platinum = reader.next_int("platinum")

    rows: list[ZoneSnapshot] = []
    try:
        for _ in range(graph.zone_count):
            zone = _bounded(reader.next_int("zone id"), 0, graph.zone_count, "Zone id")
            owner = reader.next_int("owner id")
            if owner != NEUTRAL:
                _bounded(owner, 0, player_count, "Owner id")
            pods = tuple(reader.next_int(f"pods of player {p}") for p in range(MAP_PLAYER))
            rows.append(ZoneSnapshot(zone_id=zone, owner=owner, pods=pods))  # type: ignore[arg-type]
    except TransportClosed as exc:
        raise TransportClosed(
            f"Turn message truncated after {len(rows)} of {graph.zone_count} zone rows",
            mid_message=True,
        ) from exc

    return WorldState.from_zones(platinum, rows, zone_count=graph.zone_count, player_count=player_count)


def format_commands(commands: CommandSet) -> tuple[str, str]:
    moves = " ".join(f"{move.pods} {move.from_zone} {move.to_zone}" for move in commands.moves)
    purchases = " ".join(f"{purchase.pods} {purchase.zone}" for purchase in commands.purchases)
    return moves or WAIT, purchases


def write_commands(stream: TextIO, commands: CommandSet) -> None:
    movement_line, purchase_line = format_commands(commands)
    stream.write(f"{movement_line}\n{purchase_line}\n")
    stream.flush()
