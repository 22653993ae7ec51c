from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar, cast

from .errors import ChannelClosedError

if TYPE_CHECKING:
    from collections.abc import Callable

    from .models.events import GameEvent

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(eq=False)
class Subscription:
    """Handle for one registration on an EventChannel."""

    channel: EventChannel | None
    observer: Callable[[Any], None]
    event_type: type[Any] | None = None
    on_close: Callable[[], None] | None = field(default=None, repr=False)

    @property
    def active(self) -> bool:
        return self.channel is not None

    def accepts(self, event: Any) -> bool:
        return self.event_type is None or isinstance(event, self.event_type)

    def cancel(self) -> None:
        if self.channel is not None:
            self.channel._remove(self)


class EventChannel:
    """Synchronous in-process fan-out of game events.

    Observers are called in registration order on the publishing thread, and
    publish() returns once every one of them has returned. Observers must not
    call back into the GameState that owns the channel.
    """

    def __init__(self) -> None:
        self._subs: list[Subscription] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def observer_count(self) -> int:
        return len(self._subs)

    def subscribe(
        self,
        observer: Callable[[T], None],
        event_type: type[T] | None = None,
        *,
        on_close: Callable[[], None] | None = None,
    ) -> Subscription:
        if not callable(observer):
            raise TypeError(f"observer must be callable, got {type(observer).__name__}")
        if self._closed:
            logger.warning("subscribe on closed channel; observer not registered")
            if on_close is not None:
                on_close()
            return Subscription(None, cast("Callable[[Any], None]", observer), event_type)
        sub = Subscription(
            self, cast("Callable[[Any], None]", observer), event_type, on_close
        )
        self._subs.append(sub)
        return sub

    def unsubscribe(self, observer: Callable[[Any], None]) -> bool:
        mine = [s for s in self._subs if s.observer == observer]
        for s in mine:
            self._remove(s)
        return bool(mine)

    def publish(self, event: GameEvent) -> None:
        if self._closed:
            raise ChannelClosedError()
        # snapshot: observers may cancel themselves while being notified
        for s in tuple(self._subs):
            if s.active and s.accepts(event):
                # Let exceptions propagate; callers decide how to handle them
                s.observer(event)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        subs, self._subs = self._subs, []
        for s in subs:
            s.channel = None
            if s.on_close is not None:
                s.on_close()

    def _remove(self, sub: Subscription) -> None:
        if sub in self._subs:
            self._subs.remove(sub)
        sub.channel = None
