from __future__ import annotations

import asyncio
import inspect
import logging
from collections import defaultdict
from typing import Any, DefaultDict, List, Set

from ..contracts.events import EventName, Events
from .types import EventHandler, Subscription

logger = logging.getLogger(__name__)


class EventBus:
    """
    Simple in-memory, synchronous event bus.

    - deterministic order by priority
    - emit() returns whether any listener existed
    - error isolation per handler
    - emits system event on handler failure
    - async handlers are scheduled fire-and-forget on the running loop

    With no running loop an async handler is run to completion with
    asyncio.run(), so emit() blocks until it settles. Drive the client from
    inside a loop to keep emission non-blocking.
    """

    def __init__(self) -> None:
        self._subscriptions: DefaultDict[str, List[Subscription]] = defaultdict(list)
        # strong refs so scheduled listener tasks are not collected mid-flight
        self._pending: Set["asyncio.Task[Any]"] = set()

    def subscribe(self, sub: Subscription) -> None:
        self._subscriptions[sub.name].append(sub)
        self._subscriptions[sub.name].sort(key=lambda s: s.priority)

        logger.debug(
            "Subscribed handler=%s to event=%s priority=%s",
            sub.handler,
            sub.name,
            sub.priority,
        )

    def unsubscribe(self, name: EventName, handler: EventHandler) -> int:
        """
        Remove subscriptions for event name and handler.
        Returns number of removed subscriptions.
        """
        subs = self._subscriptions.get(name, [])
        if not subs:
            return 0

        before = len(subs)
        subs = [s for s in subs if s.handler is not handler]
        removed = before - len(subs)

        if subs:
            self._subscriptions[name] = subs
        else:
            self._subscriptions.pop(name, None)

        return removed

    def listener_count(self, name: EventName) -> int:
        return len(self._subscriptions.get(name, ()))

    def emit(self, name: EventName, *args: Any) -> bool:
        subs = list(self._subscriptions.get(name, []))

        if not subs:
            logger.debug("No subscribers for event %s", name)
            return False

        for sub in subs:
            if sub.once:
                self._remove(sub)

            try:
                self._invoke(sub.handler, args)

            except Exception as exc:
                logger.exception("Error in handler=%s for event=%s", sub.handler, name)

                if sub.isolate_errors:
                    if name != Events.HANDLER_ERROR:
                        self._emit_internal(
                            Events.HANDLER_ERROR,
                            {
                                "failed_event": name,
                                "handler": repr(sub.handler),
                                "error_type": type(exc).__name__,
                                "error_message": str(exc),
                            },
                        )

                    if sub.stop_on_error:
                        break
                    continue

                raise

        return True

    def _invoke(self, handler: EventHandler, args: tuple) -> None:
        result = handler(*args)
        if not inspect.isawaitable(result):
            return

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # no loop: nothing can settle it later, run it here
            asyncio.run(_await(result))
            return

        task = loop.create_task(_await(result))
        self._pending.add(task)
        task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: "asyncio.Task[Any]") -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Error in async handler task", exc_info=exc)

    def _remove(self, sub: Subscription) -> None:
        subs = self._subscriptions.get(sub.name, [])
        if sub in subs:
            subs.remove(sub)
        if not subs:
            self._subscriptions.pop(sub.name, None)

    def _emit_internal(self, name: EventName, payload: dict) -> None:
        subs = list(self._subscriptions.get(name, []))
        for sub in subs:
            try:
                self._invoke(sub.handler, (payload,))
            except Exception:
                logger.exception("Error in system handler=%s for event=%s", sub.handler, name)
                # swallow


async def _await(awaitable: Any) -> Any:
    return await awaitable
