from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from ..config import Settings, configure_logging, load_settings
from ..logging_listeners import register_listeners
from ..models.events import MoveEvent
from .game import GameState
from .npc import NPCAgent, SeekPolicy

if TYPE_CHECKING:
    from ..models.enums import Direction
    from ..models.events import GameEvent

logger = logging.getLogger(__name__)


class GameSession:
    """Application-level owner of the one GameState.

    Build one of these at the entry point and hand ``session.state`` to the
    view and controller; they subscribe and issue moves through it.
    """

    def __init__(self, settings: Settings | None = None, state: GameState | None = None):
        self.settings = settings or load_settings()
        configure_logging(self.settings.log_level)
        if state is None:
            npc = NPCAgent(
                policy=SeekPolicy(self.settings.npc_seek_probability),
                rng=random.Random(self.settings.npc_seed),
            )
            state = GameState(npc=npc)
        self.state = state
        self.turn = 0
        if self.settings.log_events:
            register_listeners(self.state)

    def new_game(self) -> GameEvent:
        self.state.reset_npc()
        self.turn = 0
        return self.state.new_game()

    def play(self, direction: Direction) -> GameEvent:
        """Move the player; a legal move also gives the NPC its turn."""
        ev = self.state.move(direction)
        if isinstance(ev, MoveEvent):
            self.turn += 1
            npc_move = self.state.advance_npc()
            logger.debug(
                "turn %d: npc %s to %s",
                self.turn,
                npc_move.direction.value,
                npc_move.new_position,
            )
        return ev

    def close(self) -> None:
        self.state.close()
