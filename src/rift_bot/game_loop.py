"""Turn loop wiring the protocol codec to a decision engine."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, TextIO

from rift_bot.models import TurnRecord
from rift_bot.protocol import GameSetup, TokenReader, TransportClosed, read_initialization, read_turn, write_commands
from rift_bot.strategy import DecisionEngine
from rift_bot.telemetry import Telemetry
from rift_bot.world import TurnHistory, TurnRecorder

EngineFactory = Callable[[GameSetup], DecisionEngine]


@dataclass(slots=True)
class LoopStats:
    turns: int = 0
    over_budget: int = 0
    truncated: bool = False


class GameLoop:
    """Reads the topology once, then answers every turn until input ends.

    The engine is built from the :class:`GameSetup` because it needs the local
    player id. Each turn's :class:`WorldState` is discarded after use; only a
    bounded :class:`TurnHistory` survives between turns.
    """

    def __init__(
        self,
        reader: TokenReader,
        writer: TextIO,
        engine_factory: EngineFactory,
        *,
        history_size: int = 10,
        turn_budget_ms: float = 95.0,
        recorder: TurnRecorder | None = None,
        telemetry: Telemetry | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._reader = reader
        self._writer = writer
        self._engine_factory = engine_factory
        self._history = TurnHistory(max_turns=history_size)
        self._turn_budget_ms = turn_budget_ms
        self._recorder = recorder
        self._telemetry = telemetry
        self._logger = logger or logging.getLogger("rift_bot.game_loop")

        self._setup: GameSetup | None = None
        self._engine: DecisionEngine | None = None
        self._turn = 0

    @property
    def history(self) -> TurnHistory:
        return self._history

    @property
    def setup(self) -> GameSetup | None:
        return self._setup

    def initialize(self) -> GameSetup:
        """Consume the initialization message and build the engine."""
        setup = read_initialization(self._reader)
        self._setup = setup
        self._engine = self._engine_factory(setup)
        self._logger.info(
            "game_initialized",
            extra={
                "player_count": setup.player_count,
                "my_id": setup.my_id,
                "zone_count": setup.graph.zone_count,
                "link_count": setup.graph.link_count,
            },
        )
        return setup

    def play_turn(self) -> TurnRecord:
        """Read, decide and answer a single turn."""
        if self._setup is None or self._engine is None:
            raise RuntimeError("GameLoop.initialize() must run before play_turn()")

        setup = self._setup
        state = read_turn(self._reader, setup.graph, setup.player_count)
        started = time.perf_counter()
        commands = self._engine.decide(setup.graph, state, history=self._history)
        write_commands(self._writer, commands)
        elapsed_ms = (time.perf_counter() - started) * 1000.0

        self._turn += 1
        record = TurnRecord(
            turn=self._turn,
            platinum=state.platinum,
            owned_zones=len(state.zones_owned_by(setup.my_id)),
            income=state.income(setup.graph, setup.my_id),
            purchases=commands.purchased_zones,
            moves=len(commands.moves),
            elapsed_ms=round(elapsed_ms, 3),
        )
        self._history.append(record)
        if self._recorder is not None:
            self._recorder.append(record)

        self._logger.debug(
            "turn_decided",
            extra={
                "turn": record.turn,
                "platinum": record.platinum,
                "purchases": record.purchases,
                "remaining_platinum": commands.remaining_platinum,
                "elapsed_ms": record.elapsed_ms,
            },
        )
        if self._telemetry is not None:
            self._telemetry.emit("turn_decided", {"turn": record.turn, "elapsed_ms": record.elapsed_ms})
        return record

    def run(self) -> LoopStats:
        """Play until the referee closes the input stream."""
        stats = LoopStats()
        try:
            self.initialize()
        except TransportClosed:
            self._logger.warning("transport_closed_before_setup")
            return stats

        while True:
            try:
                record = self.play_turn()
            except TransportClosed as exc:
                if exc.mid_message:
                    stats.truncated = True
                    self._logger.warning("turn_truncated", extra={"turn": self._turn + 1, "reason": str(exc)})
                else:
                    self._logger.info("transport_closed", extra={"turns": stats.turns})
                break

            stats.turns += 1
            if record.elapsed_ms > self._turn_budget_ms:
                stats.over_budget += 1
                self._logger.warning(
                    "turn_over_budget",
                    extra={"turn": record.turn, "elapsed_ms": record.elapsed_ms, "budget_ms": self._turn_budget_ms},
                )

        return stats
