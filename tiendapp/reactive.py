"""
Observable state holders and live table queries

Observable keeps a current value and pushes every change to its observers.
LiveQuery re-runs a table query after each committed mutation and multicasts
the fresh snapshot to all of its observers on the event loop they
subscribed from.
"""
import asyncio
import logging
import threading
from typing import AsyncIterator, Callable, Dict, Generic, Iterable, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _deliver(callback: Callable, value) -> None:
    """Call an observer, logging instead of propagating its failure"""
    try:
        callback(value)
    except Exception:
        logger.exception("Observer %r failed", callback)


class Subscription:
    """Handle returned by subscribe(); cancel() detaches the observer"""

    def __init__(self, on_cancel: Callable[[], None]):
        self._on_cancel = on_cancel
        self.active = True

    def cancel(self) -> None:
        if not self.active:
            return
        self.active = False
        self._on_cancel()


class Observable(Generic[T]):
    """Current value plus change notifications"""

    def __init__(self, initial: T):
        self._value = initial
        self._observers: List[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        # Equal values are conflated
        if new_value == self._value:
            return
        self._value = new_value
        for observer in list(self._observers):
            _deliver(observer, new_value)

    def subscribe(self, observer: Callable[[T], None]) -> Subscription:
        """Register observer and deliver the current value to it right away"""
        self._observers.append(observer)
        observer(self._value)
        return Subscription(lambda: self._discard(observer))

    def _discard(self, observer: Callable[[T], None]) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def __repr__(self):
        return f"<Observable(value={self._value!r})>"


class ChangeNotifier:
    """Per-table registry of listeners fired after each committed mutation"""

    def __init__(self):
        self._lock = threading.Lock()
        self._listeners: Dict[str, List[Callable[[], None]]] = {}

    def add_listener(self, table: str, listener: Callable[[], None]) -> Subscription:
        with self._lock:
            self._listeners.setdefault(table, []).append(listener)

        def remove():
            with self._lock:
                listeners = self._listeners.get(table, [])
                if listener in listeners:
                    listeners.remove(listener)

        return Subscription(remove)

    def publish(self, table: str) -> None:
        with self._lock:
            listeners = list(self._listeners.get(table, []))
        for listener in listeners:
            listener()

    def listener_count(self, table: str) -> int:
        with self._lock:
            return len(self._listeners.get(table, []))


class _Observer:
    __slots__ = ("on_next", "on_error")

    def __init__(self, on_next: Callable, on_error: Optional[Callable[[Exception], None]]):
        self.on_next = on_next
        self.on_error = on_error


class LiveQuery(Generic[T]):
    """
    Reactive sequence of query results

    fetch is a blocking callable returning the full current result; it runs
    on a worker thread. The first observer attaches the query to the tables
    it depends on, the last one to leave detaches it. Refreshes triggered by
    rapid successive writes are coalesced, so observers always end on the
    snapshot taken after the most recent completed write. A failed fetch is
    reported to every observer's on_error callback.
    """

    def __init__(self, notifier: ChangeNotifier, tables: Iterable[str], fetch: Callable[[], List[T]]):
        self._notifier = notifier
        self._tables = tuple(tables)
        self._fetch = fetch
        self._lock = threading.Lock()
        self._observers: List[_Observer] = []
        self._table_subscriptions: List[Subscription] = []
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._refresh_task: Optional[asyncio.Task] = None
        self._dirty = False
        self.latest: Optional[List[T]] = None

    async def snapshot(self) -> List[T]:
        """One-shot read of the current result"""
        return await asyncio.to_thread(self._fetch)

    def subscribe(
        self,
        observer: Callable[[List[T]], None],
        on_error: Optional[Callable[[Exception], None]] = None,
    ) -> Subscription:
        """
        Register observer; must be called from a running event loop

        The observer receives the current snapshot first and then one list
        per relevant change. on_error receives the exception of any failed
        refresh.
        """
        loop = asyncio.get_running_loop()
        entry = _Observer(observer, on_error)
        with self._lock:
            if self._loop is not None and self._loop.is_closed():
                # Observers left behind by a finished loop
                for subscription in self._table_subscriptions:
                    subscription.cancel()
                self._table_subscriptions = []
                self._observers.clear()
                self._loop = None
                self.latest = None
                self._refresh_task = None
            if self._loop is not None and self._loop is not loop:
                raise RuntimeError("LiveQuery is already bound to another event loop")
            first = not self._observers
            self._observers.append(entry)
            if first:
                self._loop = loop
                self._table_subscriptions = [
                    self._notifier.add_listener(table, self._on_table_changed)
                    for table in self._tables
                ]
        if first or self.latest is None:
            self._schedule_refresh()
        else:
            _deliver(observer, self.latest)
        return Subscription(lambda: self._discard(entry))

    async def stream(self) -> AsyncIterator[List[T]]:
        """Iterate over snapshots as they are emitted; a failed refresh ends the iteration by raising"""
        queue: asyncio.Queue = asyncio.Queue()
        subscription = self.subscribe(queue.put_nowait, on_error=queue.put_nowait)
        try:
            while True:
                item = await queue.get()
                if isinstance(item, Exception):
                    raise item
                yield item
        finally:
            subscription.cancel()

    async def idle(self) -> None:
        """Wait until every pending refresh has been delivered"""
        await asyncio.sleep(0)
        while self._refresh_task is not None and not self._refresh_task.done():
            await asyncio.wait([self._refresh_task])
            await asyncio.sleep(0)

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def _discard(self, entry: _Observer) -> None:
        with self._lock:
            if entry in self._observers:
                self._observers.remove(entry)
            if self._observers:
                return
            subscriptions, self._table_subscriptions = self._table_subscriptions, []
            self._loop = None
            self.latest = None
        for subscription in subscriptions:
            subscription.cancel()
        if self._refresh_task is not None and not self._refresh_task.done():
            self._refresh_task.cancel()

    def _on_table_changed(self) -> None:
        # May be called from any thread
        loop = self._loop
        if loop is None or loop.is_closed():
            return
        loop.call_soon_threadsafe(self._schedule_refresh)

    def _schedule_refresh(self) -> None:
        self._dirty = True
        if self._loop is None:
            return
        if self._refresh_task is None or self._refresh_task.done():
            self._refresh_task = self._loop.create_task(self._refresh())

    async def _refresh(self) -> None:
        while self._dirty and self._observers:
            self._dirty = False
            try:
                rows = await asyncio.to_thread(self._fetch)
            except Exception as e:
                logger.exception("Live query refresh failed for tables %s", ", ".join(self._tables))
                for entry in list(self._observers):
                    if entry.on_error is not None:
                        _deliver(entry.on_error, e)
                return
            if self._dirty:
                # A newer write landed while fetching
                continue
            self.latest = rows
            for entry in list(self._observers):
                _deliver(entry.on_next, rows)
