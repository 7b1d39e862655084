from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Mapping, Optional, Union

from ..contracts.errors import UnrecognizedDiscriminant
from ..contracts.events import Events
from ..contracts.payloads import (
    ApplicationCommandType,
    InteractionType,
    MessageComponentType,
    RawPayload,
    coerce_enum,
    interaction_kind,
    payload_data,
)
from ..runtime.deprecation import INTERACTION_ALIAS_NOTICE, DeprecationNotice
from .base import Action

if TYPE_CHECKING:
    from ..client import Client

logger = logging.getLogger(__name__)


# (kind) -> structure name, for kinds that need no second lookup
DIRECT_STRUCTURES: Mapping[InteractionType, str] = {
    InteractionType.APPLICATION_COMMAND_AUTOCOMPLETE: "AutocompleteInteraction",
    InteractionType.MODAL_SUBMIT: "ModalSubmitInteraction",
}

# (APPLICATION_COMMAND, data.type) -> structure name
COMMAND_STRUCTURES: Mapping[ApplicationCommandType, str] = {
    ApplicationCommandType.CHAT_INPUT: "CommandInteraction",
    ApplicationCommandType.USER: "UserContextMenuInteraction",
    ApplicationCommandType.MESSAGE: "MessageContextMenuInteraction",
}

# (MESSAGE_COMPONENT, data.component_type) -> structure name
COMPONENT_STRUCTURES: Mapping[MessageComponentType, str] = {
    MessageComponentType.BUTTON: "ButtonInteraction",
    MessageComponentType.SELECT_MENU: "SelectMenuInteraction",
}


def resolve_structure_name(data: RawPayload) -> Union[str, UnrecognizedDiscriminant]:
    """
    Two-level discriminant lookup: interaction type, then the command or
    component type nested in `data` for the kinds that fan out.
    """
    raw_kind = interaction_kind(data)
    kind = coerce_enum(InteractionType, raw_kind)

    if kind is InteractionType.APPLICATION_COMMAND:
        raw_sub = payload_data(data).get("type")
        name = COMMAND_STRUCTURES.get(coerce_enum(ApplicationCommandType, raw_sub))  # type: ignore[arg-type]
        if name is None:
            return UnrecognizedDiscriminant(scope="command", field="data.type", value=raw_sub)
        return name

    if kind is InteractionType.MESSAGE_COMPONENT:
        raw_sub = payload_data(data).get("component_type")
        name = COMPONENT_STRUCTURES.get(coerce_enum(MessageComponentType, raw_sub))  # type: ignore[arg-type]
        if name is None:
            return UnrecognizedDiscriminant(scope="component", field="data.component_type", value=raw_sub)
        return name

    if kind is not None and kind in DIRECT_STRUCTURES:
        return DIRECT_STRUCTURES[kind]

    return UnrecognizedDiscriminant(scope="interaction", field="type", value=raw_kind)


class InteractionCreateAction(Action):
    """
    INTERACTION_CREATE: resolve the structure, build it through the client's
    structure registry and emit it on `interactionCreate` (+ deprecated `interaction`).
    """

    def __init__(self, client: "Client", *, alias_notice: Optional[DeprecationNotice] = None) -> None:
        super().__init__(client)
        self._alias_notice = alias_notice or INTERACTION_ALIAS_NOTICE

    def handle(self, data: RawPayload) -> None:
        client = self.client

        # resolve and cache partial channels for Interaction.channel
        self.get_channel(data)

        resolved = resolve_structure_name(data)
        if isinstance(resolved, UnrecognizedDiscriminant):
            message = client.diagnostics.describe(resolved)
            logger.debug("%s", message, extra={"event": Events.DEBUG, "scope": resolved.scope})
            client.emit(Events.DEBUG, message)
            return

        structure = client.structures.get(resolved)
        interaction = structure(client, data)

        client.emit(Events.INTERACTION_CREATE, interaction)

        if not client.config.emit_deprecated_alias:
            return

        if client.emit(Events.INTERACTION, interaction) and not self._alias_notice.emitted:
            if self._alias_notice.fire():
                client.emit(Events.WARN, f"{self._alias_notice.label}: {self._alias_notice.message}")
