from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .models.events import GameEvent, InvalidMoveEvent, MoveEvent, NewGameEvent

if TYPE_CHECKING:
    from .engine.game import GameState
    from .events import EventChannel, Subscription

event_logger = logging.getLogger("gridgame.events")


def _on_game_event(ev: GameEvent) -> None:
    if isinstance(ev, MoveEvent):
        event_logger.info(
            "moved %s to %s; allowed: %s",
            ev.direction.value,
            ev.new_position,
            ",".join(d.value for d in ev.valid_moves.allowed()),
        )
    elif isinstance(ev, InvalidMoveEvent):
        event_logger.warning(
            "invalid move %s from %s", ev.attempted_direction.value, ev.current_position
        )
    elif isinstance(ev, NewGameEvent):
        event_logger.info("new game at %s", ev.start_position)
    else:
        raise TypeError(f"unknown event {type(ev).__name__}")


def register_listeners(target: GameState | EventChannel) -> Subscription:
    return target.subscribe(_on_game_event)
