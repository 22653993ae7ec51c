import random

import pytest

from gridgame.engine.game import GameState
from gridgame.models.events import GameEvent


class Recorder:
    """Observer that keeps every event it is handed."""

    def __init__(self) -> None:
        self.events: list[GameEvent] = []
        self.closed = 0

    def __call__(self, ev: GameEvent) -> None:
        self.events.append(ev)

    def on_close(self) -> None:
        self.closed += 1

    @property
    def last(self) -> GameEvent:
        assert self.events, "no events received"
        return self.events[-1]


@pytest.fixture()
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def game(recorder: Recorder, rng: random.Random) -> GameState:
    g = GameState(rng=rng, clock=lambda: 1_000)
    g.subscribe(recorder, on_close=recorder.on_close)
    g.new_game()
    return g
