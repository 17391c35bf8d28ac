"""
Live queries over the local store

A ChangeNotifier keeps a version counter per table and wakes waiting
subscribers whenever a write bumps one of them. LiveQuery turns that into a
lazy, restartable stream of snapshots: every iteration starts a fresh
subscription that yields the current result, then a new result after each
change to the watched tables, until it is closed.
"""

import threading
from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class ChangeNotifier:
    """Per-table change counters with blocking waits"""

    def __init__(self):
        self._cond = threading.Condition()
        self._versions: dict[str, int] = {}

    def notify(self, *tables: str) -> None:
        """Record a change to each table and wake all waiters"""
        with self._cond:
            for table in tables:
                self._versions[table] = self._versions.get(table, 0) + 1
            self._cond.notify_all()

    def snapshot(self, tables: tuple[str, ...]) -> tuple[int, ...]:
        """Current versions of the given tables"""
        with self._cond:
            return tuple(self._versions.get(table, 0) for table in tables)

    def wake_all(self) -> None:
        """Wake every waiter so it can re-check its stop event"""
        with self._cond:
            self._cond.notify_all()

    def wait_for_change(
        self,
        tables: tuple[str, ...],
        seen: tuple[int, ...],
        timeout: float | None = None,
        stop: threading.Event | None = None,
    ) -> bool:
        """
        Block until any of the tables moves past the seen versions.

        Returns:
            True if a change happened, False on timeout or stop
        """
        with self._cond:
            def ready():
                if stop is not None and stop.is_set():
                    return True
                return self._current(tables) != seen

            self._cond.wait_for(ready, timeout=timeout)
            return self._current(tables) != seen

    def _current(self, tables: tuple[str, ...]) -> tuple[int, ...]:
        return tuple(self._versions.get(table, 0) for table in tables)


class LiveQuery(Generic[T]):
    """
    Observable query result.

    Iterating yields the current snapshot immediately, then one snapshot per
    change to the watched tables. Iterating again starts a new subscription.
    close() ends every open subscription; no snapshot is delivered after it.

    Usage:
        favorites = repository.list_favorites()
        for photos in favorites:
            render(photos)
    """

    def __init__(
        self,
        notifier: ChangeNotifier,
        tables: tuple[str, ...],
        fetch: Callable[[], T],
        timeout: float | None = None,
    ):
        self._notifier = notifier
        self._tables = tables
        self._fetch = fetch
        self._timeout = timeout
        self._closed = threading.Event()

    def snapshot(self) -> T:
        """One-shot read of the current value"""
        return self._fetch()

    def close(self) -> None:
        """Unsubscribe all iterators of this query"""
        self._closed.set()
        self._notifier.wake_all()

    def __iter__(self) -> Iterator[T]:
        return self._subscribe()

    def _subscribe(self) -> Iterator[T]:
        seen = None
        while not self._closed.is_set():
            current = self._notifier.snapshot(self._tables)
            if current != seen:
                seen = current
                value = self._fetch()
                if self._closed.is_set():
                    return
                yield value
                continue

            changed = self._notifier.wait_for_change(
                self._tables, seen, timeout=self._timeout, stop=self._closed
            )
            if not changed and self._timeout is not None and not self._closed.is_set():
                # Idle subscriber with a timeout ends its stream
                return
