from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import Direction

WIDTH = 8
HEIGHT = 10


class Position(BaseModel):
    """Grid coordinate (0-based). Bounds are checked by the rules, not here."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int

    def translate(self, dx: int, dy: int) -> Position:
        return Position(x=self.x + dx, y=self.y + dy)

    def step(self, direction: Direction) -> Position:
        dx, dy = direction.delta
        return self.translate(dx, dy)

    def manhattan(self, other: Position) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Board(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: int = Field(default=WIDTH, ge=1)
    height: int = Field(default=HEIGHT, ge=1)

    def in_bounds(self, p: Position) -> bool:
        return 0 <= p.x < self.width and 0 <= p.y < self.height

    @property
    def start(self) -> Position:
        return Position(x=0, y=0)

    @property
    def opposite_corner(self) -> Position:
        return Position(x=self.width - 1, y=self.height - 1)


DEFAULT_BOARD = Board(width=WIDTH, height=HEIGHT)


class ValidMoves(BaseModel):
    """Which directions are legal from one position; always covers all four."""

    model_config = ConfigDict(frozen=True)

    up: bool
    down: bool
    left: bool
    right: bool

    @model_validator(mode="before")
    @classmethod
    def _from_moves(cls, data: Any) -> Any:
        # accept ValidMoves(moves={Direction.UP: ..., ...}) as well as the four fields
        if isinstance(data, dict) and "moves" in data:
            moves = data["moves"]
            missing = [d.value for d in Direction if d not in moves]
            if missing:
                raise ValueError(f"missing directions: {', '.join(missing)}")
            return {d.value: moves[d] for d in Direction}
        return data

    @property
    def moves(self) -> Mapping[Direction, bool]:
        return MappingProxyType({d: getattr(self, d.value) for d in Direction})

    def __getitem__(self, direction: Direction) -> bool:
        return getattr(self, Direction(direction).value)

    def allowed(self) -> list[Direction]:
        return [d for d in Direction if self[d]]

    def any(self) -> bool:
        return any(self[d] for d in Direction)
