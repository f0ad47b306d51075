"""CLI startup entrypoint for rift-bot."""

from __future__ import annotations

import logging
import random
import sys
from pathlib import Path
from typing import TextIO

import typer
from rich import print

from rift_bot.config import settings
from rift_bot.game_loop import EngineFactory, GameLoop, LoopStats
from rift_bot.protocol import GameSetup, ProtocolError, TokenReader
from rift_bot.strategy import DecisionEngine, create_engine, create_movement_policy, registered_engines
from rift_bot.strategy.movement import MOVEMENT_POLICIES
from rift_bot.telemetry import LoggingTelemetry, configure_logging
from rift_bot.world import JsonlTurnRecorder, SnapshotError, ZoneIndexError

app = typer.Typer(help="rift-bot zone-control agent")

logger = logging.getLogger("rift_bot.main")


def _build_engine_factory(*, engine: str, movement_policy: str, seed: int | None) -> EngineFactory:
    # fail on bad names before any input is read
    create_movement_policy(movement_policy)
    if engine.lower() not in registered_engines():
        raise ValueError(f"Unknown engine {engine!r}; expected one of {registered_engines()}")

    def _factory(setup: GameSetup) -> DecisionEngine:
        return create_engine(
            engine,
            setup.my_id,
            rng=random.Random(seed),
            movement=create_movement_policy(movement_policy),
            pod_cost=settings.pod_cost,
        )

    return _factory


def _run_loop(source: TextIO, sink: TextIO, *, seed: int | None, movement_policy: str | None) -> LoopStats:
    try:
        factory = _build_engine_factory(
            engine=settings.engine,
            movement_policy=movement_policy or settings.movement_policy,
            seed=seed if seed is not None else settings.seed,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    recorder = JsonlTurnRecorder(settings.turn_log_path) if settings.turn_log_path else None
    loop = GameLoop(
        TokenReader(source),
        sink,
        factory,
        history_size=settings.history_size,
        turn_budget_ms=settings.turn_budget_ms,
        recorder=recorder,
        telemetry=LoggingTelemetry() if settings.telemetry_enabled else None,
    )
    try:
        return loop.run()
    except (ProtocolError, SnapshotError, ZoneIndexError) as exc:
        logger.error("protocol_violation", extra={"error": f"{type(exc).__name__}: {exc}"})
        print({"error": f"{type(exc).__name__}: {exc}"}, file=sys.stderr)
        raise typer.Exit(code=1)


@app.command()
def play(
    seed: int = typer.Option(None, help="Seed for the fallback random choice"),
    movement_policy: str = typer.Option(None, help="Movement policy: hold/frontier"),
    log_level: str = typer.Option(None, help="Override RIFT_BOT_LOG_LEVEL"),
) -> None:
    """Play against the referee over stdin/stdout."""
    configure_logging(log_level or settings.log_level)
    _run_loop(sys.stdin, sys.stdout, seed=seed, movement_policy=movement_policy)


@app.command()
def replay(
    transcript: Path = typer.Argument(..., help="File holding the initialization and turn messages"),
    seed: int = typer.Option(None, help="Seed for the fallback random choice"),
    movement_policy: str = typer.Option(None, help="Movement policy: hold/frontier"),
    log_level: str = typer.Option(None, help="Override RIFT_BOT_LOG_LEVEL"),
) -> None:
    """Run the bot over a recorded transcript and print its answers."""
    if not transcript.exists():
        raise typer.BadParameter(f"Transcript not found: {transcript}")

    configure_logging(log_level or settings.log_level)
    with transcript.open("r", encoding="utf-8") as handle:
        stats = _run_loop(handle, sys.stdout, seed=seed, movement_policy=movement_policy)
    print({"turns": stats.turns, "over_budget": stats.over_budget, "truncated": stats.truncated}, file=sys.stderr)


@app.command("show-config")
def show_config() -> None:
    """Show effective runtime configuration."""
    print(
        {
            **settings.model_dump(),
            "engines": registered_engines(),
            "movement_policies": sorted(MOVEMENT_POLICIES),
        }
    )


if __name__ == "__main__":
    app()
