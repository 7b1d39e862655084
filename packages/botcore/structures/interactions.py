from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Mapping, Optional

from ..contracts.payloads import (
    ApplicationCommandType,
    InteractionType,
    MessageComponentType,
    as_list,
    as_mapping,
    coerce_enum,
    interaction_kind,
    payload_data,
    payload_user,
)
from .base import Base

if TYPE_CHECKING:
    from ..cache.channels import PartialChannel


class Interaction(Base):
    """
    Common surface of every interaction. Only ids and discriminants are read;
    everything else stays available through `raw`.
    """

    def __init__(self, client, data: Mapping[str, Any]) -> None:
        super().__init__(client, data)
        self.type = coerce_enum(InteractionType, interaction_kind(data))
        self.application_id = data.get("application_id")
        self.channel_id = data.get("channel_id")
        self.guild_id = data.get("guild_id")
        self.token = data.get("token")
        self.version = data.get("version")
        self.locale = data.get("locale")

        self.user_id: Optional[str] = payload_user(data).get("id")

    @property
    def channel(self) -> Optional["PartialChannel"]:
        if self.channel_id is None:
            return None
        return self.client.channels.get(str(self.channel_id))

    def in_guild(self) -> bool:
        return self.guild_id is not None

    def is_command(self) -> bool:
        return self.type is InteractionType.APPLICATION_COMMAND

    def is_autocomplete(self) -> bool:
        return self.type is InteractionType.APPLICATION_COMMAND_AUTOCOMPLETE

    def is_message_component(self) -> bool:
        return self.type is InteractionType.MESSAGE_COMPONENT

    def is_modal_submit(self) -> bool:
        return self.type is InteractionType.MODAL_SUBMIT


class BaseCommandInteraction(Interaction):
    def __init__(self, client, data: Mapping[str, Any]) -> None:
        super().__init__(client, data)
        inner = payload_data(data)
        self.command_id = inner.get("id")
        self.command_name = inner.get("name")
        self.command_type = coerce_enum(ApplicationCommandType, inner.get("type"))
        self.options: List[Mapping[str, Any]] = as_list(inner.get("options"))


class CommandInteraction(BaseCommandInteraction):
    pass


class ContextMenuInteraction(BaseCommandInteraction):
    def __init__(self, client, data: Mapping[str, Any]) -> None:
        super().__init__(client, data)
        self.target_id = payload_data(data).get("target_id")


class UserContextMenuInteraction(ContextMenuInteraction):
    pass


class MessageContextMenuInteraction(ContextMenuInteraction):
    pass


class AutocompleteInteraction(Interaction):
    def __init__(self, client, data: Mapping[str, Any]) -> None:
        super().__init__(client, data)
        inner = payload_data(data)
        self.command_id = inner.get("id")
        self.command_name = inner.get("name")
        self.options: List[Mapping[str, Any]] = as_list(inner.get("options"))

    def focused_option(self) -> Optional[Mapping[str, Any]]:
        for opt in self.options:
            if isinstance(opt, Mapping) and opt.get("focused"):
                return opt
        return None


class MessageComponentInteraction(Interaction):
    def __init__(self, client, data: Mapping[str, Any]) -> None:
        super().__init__(client, data)
        inner = payload_data(data)
        self.custom_id = inner.get("custom_id")
        self.component_type = coerce_enum(MessageComponentType, inner.get("component_type"))
        message = as_mapping(data.get("message"))
        self.message_id = message.get("id")


class ButtonInteraction(MessageComponentInteraction):
    pass


class SelectMenuInteraction(MessageComponentInteraction):
    def __init__(self, client, data: Mapping[str, Any]) -> None:
        super().__init__(client, data)
        self.values: List[str] = as_list(payload_data(data).get("values"))


class ModalSubmitInteraction(Interaction):
    def __init__(self, client, data: Mapping[str, Any]) -> None:
        super().__init__(client, data)
        inner = payload_data(data)
        self.custom_id = inner.get("custom_id")
        self.components: List[Mapping[str, Any]] = as_list(inner.get("components"))

    def field_value(self, custom_id: str) -> Optional[str]:
        """
        Value of a text input by custom_id, searched through action rows.
        """
        for row in self.components:
            for comp in as_list(as_mapping(row).get("components")):
                if isinstance(comp, Mapping) and comp.get("custom_id") == custom_id:
                    return comp.get("value")
        return None
