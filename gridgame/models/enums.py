from enum import Enum

Delta = tuple[int, int]  # (dx, dy)


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Delta:
        return _DELTAS[self]


# y grows downwards: row 0 is the top edge of the board
_DELTAS: dict[Direction, Delta] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class EventKind(str, Enum):
    MOVE = "move"
    INVALID_MOVE = "invalid_move"
    NEW_GAME = "new_game"
