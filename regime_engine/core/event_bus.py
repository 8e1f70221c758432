import asyncio
import logging
from datetime import datetime, timezone
from typing import Awaitable, Callable, Dict, List

from .models import Event, EventType


EventHandler = Callable[[Event], Awaitable[None]]


class EventBus:
    def __init__(self) -> None:
        self._queue: "asyncio.Queue[Event]" = asyncio.Queue()
        self._subscribers: Dict[EventType, List[EventHandler]] = {}
        self._log = logging.getLogger("event_bus")

    def subscribe(self, event_type: EventType, handler: EventHandler) -> None:
        handlers = self._subscribers.setdefault(event_type, [])
        handlers.append(handler)

    async def publish(self, event: Event) -> None:
        await self._queue.put(event)

    async def publish_now(self, event_type: EventType, payload: object) -> None:
        await self.publish(self._make_event(event_type, payload))

    def emit(self, event_type: EventType, payload: object) -> None:
        """Queues an event from synchronous code (timer callbacks, state mutations)."""
        self._queue.put_nowait(self._make_event(event_type, payload))

    def pending(self) -> int:
        return self._queue.qsize()

    async def dispatch_pending(self) -> int:
        """Delivers every queued event and returns how many were handled."""
        count = 0
        while not self._queue.empty():
            await self._dispatch(self._queue.get_nowait())
            count += 1
        return count

    async def run(self) -> None:
        while True:
            event = await self._queue.get()
            await self._dispatch(event)

    async def _dispatch(self, event: Event) -> None:
        handlers = list(self._subscribers.get(event.type, []))
        for handler in handlers:
            try:
                await handler(event)
            except Exception:
                # Keep the bus running
                self._log.error("Error handling event %s", event.type.value, exc_info=True)

    @staticmethod
    def _make_event(event_type: EventType, payload: object) -> Event:
        return Event(type=event_type, payload=payload, timestamp=datetime.now(timezone.utc))
