"""
Base class for view-state objects
"""
import asyncio
import logging
from typing import Awaitable, List, Optional, Set, TypeVar

from tiendapp.exceptions import StorageError
from tiendapp.reactive import LiveQuery, Observable, Subscription

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ViewState:
    """
    UI-framework-agnostic holder of a screen's state

    Must be constructed on the event loop that drives the presentation
    layer. Commands never block that loop: storage work is launched as a
    task, and storage failures are logged and published on ``error``
    instead of being raised.
    """

    def __init__(self):
        self._loop = asyncio.get_running_loop()
        self._tasks: Set[asyncio.Task] = set()
        self._subscriptions: List[Subscription] = []
        self.message: Observable[Optional[str]] = Observable(None)
        self.error: Observable[Optional[str]] = Observable(None)

    def launch(self, coro: Awaitable[T]) -> "asyncio.Task[Optional[T]]":
        """Run coro as a task owned by this object"""
        task = self._loop.create_task(self._guarded(coro))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _guarded(self, coro: Awaitable[T]) -> Optional[T]:
        try:
            return await coro
        except StorageError as e:
            logger.exception("%s operation failed", type(self).__name__)
            self.error.value = str(e)
            return None

    def collect(self, query: LiveQuery[T], initial: Optional[List[T]] = None) -> Observable[List[T]]:
        """Mirror a live query into an observable list; failed refreshes land on error"""
        target: Observable[List[T]] = Observable(initial if initial is not None else [])
        self._subscriptions.append(query.subscribe(self._setter(target), on_error=self._report_failure))
        return target

    def _report_failure(self, error: Exception) -> None:
        self.error.value = str(error)

    @staticmethod
    def _setter(target: Observable):
        def set_value(value):
            target.value = value
        return set_value

    def clear_message(self) -> None:
        self.message.value = None

    def clear_error(self) -> None:
        self.error.value = None

    async def join(self) -> None:
        """Wait for every launched command to finish"""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def close(self) -> None:
        """Detach live queries and cancel pending commands"""
        for subscription in self._subscriptions:
            subscription.cancel()
        self._subscriptions.clear()
        for task in list(self._tasks):
            task.cancel()
