from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from ..contracts.events import EventName


# sync or async; awaitables returned by a listener are scheduled, not awaited
EventHandler = Callable[..., Any]


@dataclass(frozen=True)
class Subscription:
    name: EventName
    handler: EventHandler
    # lower is earlier
    priority: int = 100
    # whether handler failures should stop further processing
    stop_on_error: bool = False
    # isolation: errors are captured and emitted as system events by bus
    isolate_errors: bool = True
    once: bool = False
