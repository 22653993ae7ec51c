"""Grid game simulation core.

A player piece and one computer-controlled piece on a bounded board. State
changes are published as immutable events through an EventChannel. The NPC
itself is internal to ``gridgame.engine`` and is not exported here.
"""

from .config import Settings, configure_logging, load_settings
from .engine.game import GameState
from .engine.rules import explain_move, is_valid, legal_directions, valid_moves
from .engine.session import GameSession
from .errors import BoardInvariantError, ChannelClosedError, GridGameError
from .events import EventChannel, Subscription
from .logging_listeners import register_listeners
from .models.common import DEFAULT_BOARD, HEIGHT, WIDTH, Board, Position, ValidMoves
from .models.enums import Direction, EventKind
from .models.events import GameEvent, InvalidMoveEvent, MoveEvent, NewGameEvent

__all__ = [
    "DEFAULT_BOARD",
    "HEIGHT",
    "WIDTH",
    "Board",
    "BoardInvariantError",
    "ChannelClosedError",
    "Direction",
    "EventChannel",
    "EventKind",
    "GameEvent",
    "GameSession",
    "GameState",
    "GridGameError",
    "InvalidMoveEvent",
    "MoveEvent",
    "NewGameEvent",
    "Position",
    "Settings",
    "Subscription",
    "ValidMoves",
    "configure_logging",
    "explain_move",
    "is_valid",
    "legal_directions",
    "load_settings",
    "register_listeners",
    "valid_moves",
]
