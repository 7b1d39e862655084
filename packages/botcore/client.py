from __future__ import annotations

from typing import Any, Optional

from .actions.manager import ActionsManager
from .cache.channels import ChannelCache
from .config.loader import ClientConfig
from .contracts.events import EventName
from .diagnostics import DiagnosticTemplates
from .events.bus import EventBus
from .events.types import EventHandler, Subscription
from .registry.structures import StructureRegistry


class Client:
    """
    Context handed to every structure and action.
    Owns the event bus, channel cache and a reference to the structure registry.
    """

    def __init__(
        self,
        *,
        structures: StructureRegistry,
        config: Optional[ClientConfig] = None,
        bus: Optional[EventBus] = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.structures = structures
        self.bus = bus or EventBus()
        self.channels = ChannelCache(partials_enabled=self.config.partial_channels)
        self.diagnostics = DiagnosticTemplates(self.config.diagnostic_templates)
        self.actions = ActionsManager(self)

    def emit(self, name: EventName, *args: Any) -> bool:
        return self.bus.emit(name, *args)

    def on(self, name: EventName, handler: EventHandler, *, priority: int = 100) -> EventHandler:
        self.bus.subscribe(Subscription(name=name, handler=handler, priority=priority))
        return handler

    def once(self, name: EventName, handler: EventHandler, *, priority: int = 100) -> EventHandler:
        self.bus.subscribe(Subscription(name=name, handler=handler, priority=priority, once=True))
        return handler

    def off(self, name: EventName, handler: EventHandler) -> int:
        return self.bus.unsubscribe(name, handler)
