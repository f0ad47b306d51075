"""Bounded turn history and optional on-disk turn log."""

from __future__ import annotations

import json
from collections import deque
from dataclasses import asdict
from pathlib import Path
from typing import Protocol

from rift_bot.models import TurnRecord


class TurnRecorder(Protocol):
    """Persistence contract for finished turn summaries."""

    def append(self, record: TurnRecord) -> None:
        """Persist a finished turn record."""


class TurnHistory:
    """Rolling window of the most recent turns, newest first."""

    def __init__(self, max_turns: int = 10) -> None:
        if max_turns < 1:
            raise ValueError(f"History must hold at least one turn, got {max_turns}")
        self._records: deque[TurnRecord] = deque(maxlen=max_turns)

    @property
    def max_turns(self) -> int:
        return self._records.maxlen or 0

    def append(self, record: TurnRecord) -> None:
        self._records.appendleft(record)

    def latest(self) -> TurnRecord | None:
        return self._records[0] if self._records else None

    def list_recent(self, limit: int) -> list[TurnRecord]:
        return list(self._records)[:limit]

    def __len__(self) -> int:
        return len(self._records)


class JsonlTurnRecorder:
    """Appends one JSON line per turn."""

    def __init__(self, file_path: str | Path) -> None:
        self._path = Path(file_path)
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        return self._path

    def append(self, record: TurnRecord) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(asdict(record)) + "\n")

    def read_all(self) -> list[TurnRecord]:
        if not self._path.exists():
            return []

        records: list[TurnRecord] = []
        with self._path.open("r", encoding="utf-8") as handle:
            for line in handle:
                if not line.strip():
                    continue
                records.append(TurnRecord(**json.loads(line)))
        return records
