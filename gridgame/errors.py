class GridGameError(Exception):
    """Base class for programming errors raised by the simulation core."""


class ChannelClosedError(GridGameError):
    def __init__(self) -> None:
        super().__init__("event channel is closed")


class BoardInvariantError(GridGameError):
    pass
