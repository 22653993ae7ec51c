from __future__ import annotations

import time

from pydantic import BaseModel, ConfigDict, Field

from .common import Position, ValidMoves
from .enums import Direction, EventKind


def now() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


class _Event(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: int = Field(default_factory=now)

    @property
    def property_name(self) -> str:
        return type(self).__name__


# ----- Events (discriminated union) -----


class MoveEvent(_Event):
    """The piece moved; valid_moves describes new_position."""

    kind: EventKind = EventKind.MOVE
    direction: Direction
    new_position: Position
    valid_moves: ValidMoves


class InvalidMoveEvent(_Event):
    """The move would leave the board; the piece stayed at current_position."""

    kind: EventKind = EventKind.INVALID_MOVE
    current_position: Position
    attempted_direction: Direction


class NewGameEvent(_Event):
    kind: EventKind = EventKind.NEW_GAME
    start_position: Position
    valid_moves: ValidMoves


GameEvent = MoveEvent | InvalidMoveEvent | NewGameEvent
