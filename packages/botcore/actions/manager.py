from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from ..contracts.events import Events
from .base import Action
from .interaction_create import InteractionCreateAction

if TYPE_CHECKING:
    from ..client import Client

logger = logging.getLogger(__name__)


class ActionsManager:
    """
    Routes decoded gateway packets (`t` name + `d` payload) to actions.
    """

    def __init__(self, client: "Client") -> None:
        self.client = client
        self._actions: Dict[str, Action] = {}
        self.interaction_create = self.register("INTERACTION_CREATE", InteractionCreateAction(client))

    def register(self, packet_name: str, action: Action) -> Any:
        self._actions[packet_name] = action
        return action

    def get(self, packet_name: str) -> Optional[Action]:
        return self._actions.get(packet_name)

    def handle_packet(self, packet: Mapping[str, Any]) -> bool:
        """
        Returns False when no action handles the packet.
        """
        name = packet.get("t")
        action = self._actions.get(name) if isinstance(name, str) else None
        if action is None:
            logger.debug("No action for packet t=%s", name)
            self.client.emit(Events.DEBUG, f"[ACTIONS] Unhandled packet: {name}")
            return False

        action.handle(packet.get("d") or {})
        return True
