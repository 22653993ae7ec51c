from __future__ import annotations

from typing import Any

from ..models.common import DEFAULT_BOARD, Board, Position, ValidMoves
from ..models.enums import Direction


def is_valid(p: Position, direction: Direction, board: Board = DEFAULT_BOARD) -> bool:
    """True iff one step from p in direction stays on the board."""
    return board.in_bounds(p.step(direction))


def legal_directions(p: Position, board: Board = DEFAULT_BOARD) -> list[Direction]:
    return [d for d in Direction if is_valid(p, d, board)]


def valid_moves(p: Position, board: Board = DEFAULT_BOARD) -> ValidMoves:
    return ValidMoves(moves={d: is_valid(p, d, board) for d in Direction})


def explain_move(
    p: Position, direction: Direction, board: Board = DEFAULT_BOARD
) -> dict[str, Any]:
    to = p.step(direction)
    ok = board.in_bounds(to)
    return {
        "from": p.model_dump(),
        "to": to.model_dump(),
        "direction": direction.value,
        "checks": {
            "x_in_bounds": 0 <= to.x < board.width,
            "y_in_bounds": 0 <= to.y < board.height,
            "width": board.width,
            "height": board.height,
        },
        "result": ok,
        "reason": None if ok else "Destination out of bounds",
    }
