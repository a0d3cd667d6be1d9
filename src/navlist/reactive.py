"""Observable cells with replay-latest semantics.

A BehaviorSubject holds a value that can be replaced wholesale. A Computed
cell derives its value from one or more sources and is recomputed at most
once per source change. Subscribing to either delivers the current value
immediately and then every new value after each write to an underlying
subject, synchronously and in subscription order.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Subscription:
    """Handle returned by Observable.subscribe()."""

    __slots__ = ("_closed", "_unsubscribers")

    def __init__(self, unsubscribers: list[Callable[[], None]]) -> None:
        self._unsubscribers = unsubscribers
        self._closed = False

    @property
    def closed(self) -> bool:
        """Whether the listener has been detached."""
        return self._closed

    def unsubscribe(self) -> None:
        """Detach the listener. Calling this more than once is a no-op."""
        if self._closed:
            return
        self._closed = True
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.unsubscribe()


class Observable(ABC, Generic[T]):
    """Readable value that notifies subscribers when it changes."""

    @property
    @abstractmethod
    def value(self) -> T:
        """Current value."""

    @abstractmethod
    def _subjects(self) -> list["BehaviorSubject[Any]"]:
        """Writable cells this value ultimately depends on."""

    def subscribe(self, listener: Callable[[T], None]) -> Subscription:
        """Register a listener and replay the current value to it.

        The listener reads the latest value at notification time, so a
        write made from inside another listener is never followed by a
        stale notification.

        Args:
            listener: Called with the current value now and after each change

        Returns:
            Subscription used to detach the listener

        Raises:
            Exception: Whatever the listener raises on replay; the listener
                is detached before the exception propagates
        """

        def notify() -> None:
            listener(self.value)

        subscription = Subscription(
            [subject._add_watcher(notify) for subject in self._subjects()],
        )
        try:
            notify()
        except Exception:
            subscription.unsubscribe()
            raise
        return subscription

    def map(self, transform: Callable[[T], U]) -> "Computed[U]":
        """Derive a new observable by applying ``transform`` to this value."""
        return Computed([self], transform)


class BehaviorSubject(Observable[T]):
    """Writable cell holding the latest value."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._version = 0
        self._watchers: dict[int, Callable[[], None]] = {}
        self._next_token = 0

    @property
    def value(self) -> T:
        return self._value

    @property
    def version(self) -> int:
        """Number of writes so far."""
        return self._version

    def set(self, value: T) -> None:
        """Replace the value and notify watchers.

        Watchers detached during notification are skipped. Exceptions
        raised by a listener propagate to the caller.
        """
        self._value = value
        self._version += 1
        for token, watcher in list(self._watchers.items()):
            if token in self._watchers:
                watcher()

    def _subjects(self) -> list["BehaviorSubject[Any]"]:
        return [self]

    def _add_watcher(self, watcher: Callable[[], None]) -> Callable[[], None]:
        token = self._next_token
        self._next_token += 1
        self._watchers[token] = watcher

        def remove() -> None:
            self._watchers.pop(token, None)

        return remove


class Computed(Observable[T]):
    """Cell derived from other observables."""

    def __init__(
        self,
        sources: Sequence[Observable[Any]],
        compute: Callable[..., T],
    ) -> None:
        """Initialize derived cell.

        Args:
            sources: Observables whose values are passed to ``compute``
            compute: Called with the source values, in order
        """
        self._sources = tuple(sources)
        self._compute = compute
        subjects: list[BehaviorSubject[Any]] = []
        for source in self._sources:
            for subject in source._subjects():
                if not any(subject is known for known in subjects):
                    subjects.append(subject)
        self._subject_list = subjects
        self._cached_versions: tuple[int, ...] | None = None
        self._cached: T | None = None

    @property
    def value(self) -> T:
        versions = tuple(subject.version for subject in self._subject_list)
        if versions != self._cached_versions:
            self._cached = self._compute(*(source.value for source in self._sources))
            self._cached_versions = versions
        return self._cached  # type: ignore[return-value]

    def _subjects(self) -> list["BehaviorSubject[Any]"]:
        return list(self._subject_list)


def combine(sources: Sequence[Observable[Any]], compute: Callable[..., T]) -> Computed[T]:
    """Derive an observable from several sources.

    Example: ``combine([items, role], filter_by_role)``
    """
    return Computed(sources, compute)
