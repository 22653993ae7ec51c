import logging

import pytest

from gridgame.engine.game import GameState
from gridgame.engine.npc import NPCAgent
from gridgame.engine.rules import valid_moves
from gridgame.errors import BoardInvariantError, ChannelClosedError
from gridgame.models.common import Board, Position
from gridgame.models.enums import Direction
from gridgame.models.events import InvalidMoveEvent, MoveEvent, NewGameEvent


def _walk(game, direction, n):
    for _ in range(n):
        game.move(direction)


def test_new_game_event_at_origin(game, recorder):
    ev = recorder.last
    assert isinstance(ev, NewGameEvent)
    assert ev.start_position == Position(x=0, y=0)
    assert ev.valid_moves.moves == {
        Direction.UP: False,
        Direction.DOWN: True,
        Direction.LEFT: False,
        Direction.RIGHT: True,
    }
    assert ev.timestamp == 1_000


def test_construction_publishes_nothing(recorder):
    g = GameState()
    g.subscribe(recorder)
    assert recorder.events == []


def test_move_right_from_origin(game, recorder):
    ev = game.move_right()
    assert ev is recorder.last
    assert isinstance(ev, MoveEvent)
    assert ev.direction == Direction.RIGHT
    assert ev.new_position == Position(x=1, y=0)
    assert ev.valid_moves.moves == {
        Direction.UP: False,
        Direction.DOWN: True,
        Direction.LEFT: True,
        Direction.RIGHT: True,
    }


def test_each_wrapper_delegates(game, recorder):
    game.move_down()
    game.move_up()
    game.move_right()
    game.move_left()
    assert [e.direction for e in recorder.events[1:]] == [
        Direction.DOWN,
        Direction.UP,
        Direction.RIGHT,
        Direction.LEFT,
    ]
    assert recorder.last.new_position == Position(x=0, y=0)


def test_move_up_from_origin_is_invalid(game, recorder):
    ev = game.move_up()
    assert isinstance(ev, InvalidMoveEvent)
    assert ev.current_position == Position(x=0, y=0)
    assert ev.attempted_direction == Direction.UP
    # position unchanged: a legal move still starts from the origin
    assert game.move_down().new_position == Position(x=0, y=1)


def test_invalid_move_at_right_edge(game, recorder):
    _walk(game, Direction.RIGHT, 7)
    assert recorder.last.new_position == Position(x=7, y=0)
    ev = game.move_right()
    assert isinstance(ev, InvalidMoveEvent)
    assert ev.current_position == Position(x=7, y=0)
    assert ev.attempted_direction == Direction.RIGHT


def test_invalid_move_at_bottom_edge(game, recorder):
    _walk(game, Direction.DOWN, 10)
    ev = recorder.last
    assert isinstance(ev, InvalidMoveEvent)
    assert ev.current_position == Position(x=0, y=9)
    assert ev.attempted_direction == Direction.DOWN


def test_repeated_invalid_moves_are_identical(game, recorder):
    first = game.move_left()
    second = game.move_left()
    assert first == second
    assert first is not second
    assert game.move_right().new_position == Position(x=1, y=0)


def test_exactly_one_event_per_call(game, recorder):
    start = len(recorder.events)
    game.move_up()
    game.move_right()
    game.new_game()
    assert len(recorder.events) == start + 3


def test_valid_moves_always_match_reported_position(game, recorder):
    seq = [Direction.RIGHT] * 9 + [Direction.DOWN] * 11 + [Direction.LEFT, Direction.UP] * 3
    for d in seq:
        game.move(d)
    for ev in recorder.events:
        if isinstance(ev, MoveEvent):
            assert ev.valid_moves == valid_moves(ev.new_position)
        elif isinstance(ev, NewGameEvent):
            assert ev.valid_moves == valid_moves(ev.start_position)


def test_bottom_right_corner_valid_moves(game, recorder):
    _walk(game, Direction.RIGHT, 7)
    _walk(game, Direction.DOWN, 9)
    ev = recorder.last
    assert ev.new_position == Position(x=7, y=9)
    assert ev.valid_moves.allowed() == [Direction.UP, Direction.LEFT]


def test_complex_sequence(game, recorder):
    for d in (Direction.RIGHT, Direction.RIGHT, Direction.DOWN, Direction.DOWN, Direction.LEFT, Direction.UP):
        game.move(d)
    assert recorder.last.new_position == Position(x=1, y=1)


def test_new_game_resets_and_keeps_observers(game, recorder):
    _walk(game, Direction.RIGHT, 3)
    _walk(game, Direction.DOWN, 5)
    ev = game.new_game()
    assert recorder.last is ev
    assert ev.start_position == Position(x=0, y=0)
    game.move_down()
    assert recorder.last.new_position == Position(x=0, y=1)


def test_bad_direction_fails_fast(game, recorder):
    count = len(recorder.events)
    with pytest.raises(TypeError):
        game.move(None)
    with pytest.raises(TypeError):
        game.move("up")
    assert len(recorder.events) == count


def test_custom_board(recorder):
    g = GameState(board=Board(width=2, height=3))
    g.subscribe(recorder)
    g.move_right()
    assert isinstance(g.move_right(), InvalidMoveEvent)
    assert g.board.height == 3


def test_unsubscribe_and_typed_subscription(game, recorder):
    moves = []
    game.subscribe(moves.append, MoveEvent)
    assert game.unsubscribe(recorder) is True
    game.move_up()
    game.move_down()
    assert [type(e) for e in moves] == [MoveEvent]
    assert len(recorder.events) == 1


def test_close_ends_the_game(game, recorder):
    game.close()
    assert recorder.closed == 1
    with pytest.raises(ChannelClosedError):
        game.move_down()


def test_npc_is_independent_of_player(game, recorder):
    count = len(recorder.events)
    for _ in range(50):
        mv = game.advance_npc()
        assert game.board.in_bounds(mv.new_position)
    # npc turns never publish
    assert len(recorder.events) == count
    game.reset_npc()
    assert game.advance_npc().new_position.manhattan(game.board.opposite_corner) == 1


def test_injected_npc_must_share_the_board():
    with pytest.raises(BoardInvariantError):
        GameState(board=Board(width=3, height=3), npc=NPCAgent())
    g = GameState(board=Board(width=3, height=3), npc=NPCAgent(board=Board(width=3, height=3)))
    assert g.advance_npc().new_position.manhattan(Position(x=2, y=2)) == 1


def test_rng_alongside_npc_is_rejected(rng):
    with pytest.raises(ValueError):
        GameState(npc=NPCAgent(), rng=rng)


def test_invalid_move_skips_explanation_unless_debugging(game, monkeypatch, caplog):
    calls = []

    def fake_explain(*args):
        calls.append(args)
        return {"reason": "Destination out of bounds"}

    monkeypatch.setattr("gridgame.engine.game.explain_move", fake_explain)
    caplog.set_level(logging.INFO, logger="gridgame.engine.game")
    game.move_up()
    assert calls == []
    caplog.set_level(logging.DEBUG, logger="gridgame.engine.game")
    game.move_up()
    assert len(calls) == 1
    assert "rejected up from (0, 0): Destination out of bounds" in caplog.messages
