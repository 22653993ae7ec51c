from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from ..errors import BoardInvariantError, ChannelClosedError
from ..events import EventChannel
from ..models.common import DEFAULT_BOARD, Board
from ..models.enums import Direction
from ..models.events import InvalidMoveEvent, MoveEvent, NewGameEvent, now
from .npc import NPCAgent
from .rules import explain_move, is_valid, valid_moves

if TYPE_CHECKING:
    import random
    from collections.abc import Callable

    from ..events import Subscription
    from ..models.events import GameEvent
    from .npc import NPCMove

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GameState:
    """The player's piece on a bounded board, plus the NPC it shares the board with.

    Every move() and new_game() publishes exactly one event before returning.
    The valid-move map only ever leaves this object inside MoveEvent and
    NewGameEvent, so it always describes the position reported alongside it.
    """

    def __init__(
        self,
        board: Board = DEFAULT_BOARD,
        channel: EventChannel | None = None,
        npc: NPCAgent | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], int] = now,
    ):
        self._board = board
        self._channel = channel or EventChannel()
        if npc is None:
            npc = NPCAgent(board=board, rng=rng)
        elif rng is not None:
            raise ValueError("pass rng to the NPCAgent, not alongside one")
        elif npc.board != board:
            raise BoardInvariantError(
                f"NPC board {npc.board.width}x{npc.board.height} does not match "
                f"game board {board.width}x{board.height}"
            )
        self._npc = npc
        self._clock = clock
        self._position = board.start

    @property
    def board(self) -> Board:
        return self._board

    # ----- observers -----

    def subscribe(
        self,
        observer: Callable[[T], None],
        event_type: type[T] | None = None,
        *,
        on_close: Callable[[], None] | None = None,
    ) -> Subscription:
        return self._channel.subscribe(observer, event_type, on_close=on_close)

    def unsubscribe(self, observer: Callable[[Any], None]) -> bool:
        return self._channel.unsubscribe(observer)

    def close(self) -> None:
        self._channel.close()

    # ----- player -----

    def move(self, direction: Direction) -> GameEvent:
        if not isinstance(direction, Direction):
            raise TypeError(f"direction must be a Direction, got {direction!r}")
        self._ensure_open()
        if not is_valid(self._position, direction, self._board):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "rejected %s from %s: %s",
                    direction.value,
                    self._position,
                    explain_move(self._position, direction, self._board)["reason"],
                )
            return self._publish(
                InvalidMoveEvent(
                    current_position=self._position,
                    attempted_direction=direction,
                    timestamp=self._clock(),
                )
            )
        self._position = self._position.step(direction)
        return self._publish(
            MoveEvent(
                direction=direction,
                new_position=self._position,
                valid_moves=valid_moves(self._position, self._board),
                timestamp=self._clock(),
            )
        )

    def move_up(self) -> GameEvent:
        return self.move(Direction.UP)

    def move_down(self) -> GameEvent:
        return self.move(Direction.DOWN)

    def move_left(self) -> GameEvent:
        return self.move(Direction.LEFT)

    def move_right(self) -> GameEvent:
        return self.move(Direction.RIGHT)

    def new_game(self) -> GameEvent:
        self._ensure_open()
        self._position = self._board.start
        return self._publish(
            NewGameEvent(
                start_position=self._position,
                valid_moves=valid_moves(self._position, self._board),
                timestamp=self._clock(),
            )
        )

    # ----- npc (not published; the orchestrating caller decides) -----

    def advance_npc(self) -> NPCMove:
        return self._npc.advance(self._position)

    def reset_npc(self) -> None:
        self._npc.reset()

    def _ensure_open(self) -> None:
        if self._channel.closed:
            raise ChannelClosedError()

    def _publish(self, event: GameEvent) -> GameEvent:
        logger.debug("publish %s", event.property_name)
        self._channel.publish(event)
        return event
