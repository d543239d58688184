from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")

Callback = Callable[[T], None]
Unsubscribe = Callable[[], None]


class Channel(Generic[T]):
    """Publish/subscribe holder that replays its latest value to new subscribers.

    A channel starts empty. Subscribers attached before the first emission
    receive nothing until something is emitted; subscribers attached later
    are called back immediately with the latest value, never the history.
    """

    def __init__(self, name: str = ""):
        self.name = name
        self._subscribers: List[Callback] = []
        self._has_value = False
        self._value: Optional[T] = None

    @property
    def has_value(self) -> bool:
        return self._has_value

    @property
    def value(self) -> Optional[T]:
        return self._value

    def subscribe(self, callback: Callback) -> Unsubscribe:
        self._subscribers.append(callback)
        if self._has_value:
            callback(self._value)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def emit(self, value: T):
        self._value = value
        self._has_value = True
        # Copy so a callback may unsubscribe itself while we iterate
        for callback in list(self._subscribers):
            callback(value)

    def subscriber_count(self) -> int:
        return len(self._subscribers)


class StateChannel(Channel[T]):
    """A channel that always holds a value, seeded at construction."""

    def __init__(self, initial: T, name: str = ""):
        super().__init__(name)
        self.emit(initial)

    def get(self) -> T:
        return self._value

    def set(self, value: T):
        self.emit(value)
