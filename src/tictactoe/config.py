"""Game configuration.

Environment-first: ``TTT_HUMAN_MARK`` picks the human's mark (X moves first).
Command-line flags override the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .board import Cell


def parse_mark(raw: str) -> Cell:
    s = raw.strip().upper()
    if s not in ("X", "O"):
        raise ValueError(f"Mark must be X or O, got {raw!r}")
    return Cell(s)


@dataclass
class GameConfig:
    human: Cell = Cell.X
    engine: Cell = field(init=False)

    def __post_init__(self) -> None:
        assert self.human is not Cell.EMPTY, "human needs a mark"
        self.engine = self.human.opponent()

    @classmethod
    def from_env(cls, human: str | None = None) -> "GameConfig":
        raw = human if human is not None else os.getenv("TTT_HUMAN_MARK")
        if not raw:
            return cls()
        return cls(human=parse_mark(raw))
