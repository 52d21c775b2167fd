import asyncio
import logging
import threading
from typing import Any

from Info_app.errors import SubscriberClosed

log = logging.getLogger(__name__)


class Subscriber:
    """One live connection's outbound queue.

    ``offer`` never blocks: when the queue is full the oldest pending message
    is dropped. It is safe to call from any thread; off-loop calls are handed
    to the owning event loop.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop, maxsize: int = 100):
        self._loop = loop
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=maxsize)
        self.closed = False
        self.dropped = 0

    def offer(self, message: Any) -> None:
        if self.closed:
            raise SubscriberClosed("subscriber is closed")
        if self._on_loop():
            self._put(message)
        else:
            # RuntimeError here means the loop is gone; the caller treats it as a dead subscriber
            self._loop.call_soon_threadsafe(self._put, message)

    async def get(self) -> Any:
        return await self._queue.get()

    def pending(self) -> int:
        return self._queue.qsize()

    def close(self) -> None:
        self.closed = True

    def _on_loop(self) -> bool:
        try:
            return asyncio.get_running_loop() is self._loop
        except RuntimeError:
            return False

    def _put(self, message: Any) -> None:
        if self.closed:
            return
        if self._queue.full():
            self._queue.get_nowait()
            self.dropped += 1
            log.debug("subscriber %#x queue full, dropped oldest message", id(self))
        self._queue.put_nowait(message)


class Broadcaster:
    """단일 프로세스용 pub/sub: the set of live subscribers.

    Membership is keyed by object identity. ``broadcast`` copies the member
    set under the lock and offers outside it, so a slow or dead subscriber
    never holds the lock.
    """

    def __init__(self, queue_size: int = 100):
        self.queue_size = queue_size
        self._subscribers: set = set()
        self._lock = threading.Lock()

    def subscribe(self, loop: asyncio.AbstractEventLoop | None = None) -> Subscriber:
        sub = Subscriber(loop or asyncio.get_running_loop(), maxsize=self.queue_size)
        self.add(sub)
        return sub

    def add(self, subscriber) -> None:
        with self._lock:
            self._subscribers.add(subscriber)

    def remove(self, subscriber) -> None:
        with self._lock:
            self._subscribers.discard(subscriber)

    def broadcast(self, message: Any) -> int:
        """Offer ``message`` to every subscriber; return how many accepted it.

        A subscriber whose offer fails is dropped from the set and skipped.
        Failures are never raised to the caller.
        """
        with self._lock:
            targets = list(self._subscribers)

        delivered = 0
        for sub in targets:
            try:
                sub.offer(message)
            except Exception as e:
                log.debug("dropping subscriber %#x after failed offer: %s", id(sub), e)
                self.remove(sub)
                continue
            delivered += 1
        return delivered

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def __contains__(self, subscriber) -> bool:
        with self._lock:
            return subscriber in self._subscribers
