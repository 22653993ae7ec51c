"""The computer-controlled piece.

Internal to the engine: GameState owns the only NPCAgent and nothing outside
``gridgame.engine`` should hold one. The NPC never publishes events.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..errors import BoardInvariantError
from ..models.common import DEFAULT_BOARD, Board, Position
from ..models.enums import Direction
from .rules import legal_directions

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeekPolicy:
    """Chance that a turn seeks the player instead of wandering."""

    seek_probability: float = 0.5

    def __post_init__(self) -> None:
        if not 0.0 <= self.seek_probability <= 1.0:
            raise ValueError(
                f"seek_probability must be within [0, 1], got {self.seek_probability}"
            )


DEFAULT_POLICY = SeekPolicy()


@dataclass(frozen=True)
class NPCMove:
    direction: Direction
    new_position: Position
    seeking: bool


def _horizontal(dx: int) -> list[Direction]:
    if dx > 0:
        return [Direction.RIGHT]
    if dx < 0:
        return [Direction.LEFT]
    return []


def _vertical(dy: int) -> list[Direction]:
    if dy > 0:
        return [Direction.DOWN]
    if dy < 0:
        return [Direction.UP]
    return []


def preferred_directions(dx: int, dy: int) -> list[Direction]:
    """Directions closing the gap (dx, dy), larger axis first; ties go horizontal."""
    if abs(dx) >= abs(dy):
        return _horizontal(dx) + _vertical(dy)
    return _vertical(dy) + _horizontal(dx)


class NPCAgent:
    def __init__(
        self,
        board: Board = DEFAULT_BOARD,
        policy: SeekPolicy = DEFAULT_POLICY,
        rng: random.Random | None = None,
        start: Position | None = None,
    ):
        self.board = board
        self.policy = policy
        self.rng = rng or random.Random()
        self.start = start or board.opposite_corner
        if not board.in_bounds(self.start):
            raise BoardInvariantError(f"NPC start {self.start} is off the board")
        self._position = self.start

    @property
    def position(self) -> Position:
        return self._position

    def reset(self) -> None:
        self._position = self.start

    def advance(self, player: Position) -> NPCMove:
        """Take one turn: seek the player or wander, always onto a legal cell."""
        legal = legal_directions(self._position, self.board)
        if not legal:
            raise BoardInvariantError(
                f"NPC at {self._position} has no legal move on "
                f"{self.board.width}x{self.board.height} board"
            )
        seeking = self.rng.random() < self.policy.seek_probability
        if seeking:
            chosen = self._seek(legal, player)
        else:
            chosen = self.rng.choice(legal)
        self._position = self._position.step(chosen)
        logger.debug(
            "npc %s -> %s (%s)",
            chosen.value,
            self._position,
            "seek" if seeking else "wander",
        )
        return NPCMove(direction=chosen, new_position=self._position, seeking=seeking)

    def _seek(self, legal: Sequence[Direction], target: Position) -> Direction:
        prefs = preferred_directions(target.x - self._position.x, target.y - self._position.y)
        for d in prefs:
            if d in legal:
                return d
        # Nothing closes the gap (e.g. already on the player's cell)
        return self.rng.choice(legal)
