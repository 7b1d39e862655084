from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Literal, Mapping, Optional, Tuple, Type

from .. import structures as s
from ..contracts.errors import InvalidArgument, StructureContractViolation, UnknownStructure

logger = logging.getLogger(__name__)

ExtendableStructure = Literal[
    "GuildEmoji",
    "DMChannel",
    "PartialGroupDMChannel",
    "TextChannel",
    "VoiceChannel",
    "CategoryChannel",
    "NewsChannel",
    "StageChannel",
    "ThreadChannel",
    "GuildMember",
    "ThreadMember",
    "Guild",
    "Message",
    "MessageReaction",
    "Presence",
    "ClientPresence",
    "VoiceState",
    "Role",
    "User",
    "BaseCommandInteraction",
    "CommandInteraction",
    "ButtonInteraction",
    "SelectMenuInteraction",
    "ContextMenuInteraction",
    "MessageContextMenuInteraction",
    "UserContextMenuInteraction",
    "AutocompleteInteraction",
    "MessageComponentInteraction",
    "ModalSubmitInteraction",
    "StageInstance",
]

Extender = Callable[[Type[Any]], Any]


DEFAULT_STRUCTURES: Mapping[str, Type[s.Base]] = {
    "GuildEmoji": s.GuildEmoji,
    "DMChannel": s.DMChannel,
    "PartialGroupDMChannel": s.PartialGroupDMChannel,
    "TextChannel": s.TextChannel,
    "VoiceChannel": s.VoiceChannel,
    "CategoryChannel": s.CategoryChannel,
    "NewsChannel": s.NewsChannel,
    "StageChannel": s.StageChannel,
    "ThreadChannel": s.ThreadChannel,
    "GuildMember": s.GuildMember,
    "ThreadMember": s.ThreadMember,
    "Guild": s.Guild,
    "Message": s.Message,
    "MessageReaction": s.MessageReaction,
    "Presence": s.Presence,
    "ClientPresence": s.ClientPresence,
    "VoiceState": s.VoiceState,
    "Role": s.Role,
    "User": s.User,
    "BaseCommandInteraction": s.BaseCommandInteraction,
    "CommandInteraction": s.CommandInteraction,
    "ButtonInteraction": s.ButtonInteraction,
    "SelectMenuInteraction": s.SelectMenuInteraction,
    "ContextMenuInteraction": s.ContextMenuInteraction,
    "MessageContextMenuInteraction": s.MessageContextMenuInteraction,
    "UserContextMenuInteraction": s.UserContextMenuInteraction,
    "AutocompleteInteraction": s.AutocompleteInteraction,
    "MessageComponentInteraction": s.MessageComponentInteraction,
    "ModalSubmitInteraction": s.ModalSubmitInteraction,
    "StageInstance": s.StageInstance,
}

# published extension surface, stable order
EXTENDABLE_STRUCTURES: Tuple[str, ...] = tuple(DEFAULT_STRUCTURES)


def _describe(cls: type) -> str:
    name = getattr(cls, "__name__", None) or "unnamed"
    bases = [b.__name__ for b in cls.__bases__ if b is not object]
    return f"{name} extends {', '.join(bases)}" if bases else name


class StructureRegistry:
    """
    Name -> structure class bindings for everything the client constructs.

    The key set is closed: it is fixed when the registry is built and only
    `extend` can rebind a key, always to the current class or a subclass of it.
    Extend before instantiating the client; instances built earlier keep
    their original class.
    """

    def __init__(self, defaults: Optional[Mapping[str, type]] = None) -> None:
        # key: structure name -> default class (never rebound)
        self._defaults: Dict[str, type] = dict(DEFAULT_STRUCTURES if defaults is None else defaults)

        # key: structure name -> currently bound class
        self._bound: Dict[str, type] = dict(self._defaults)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._bound

    def names(self) -> Tuple[str, ...]:
        return tuple(self._bound)

    def mapping(self) -> Mapping[str, type]:
        return dict(self._bound)

    def get(self, name: str) -> type:
        """
        Retrieve the class currently bound to a structure name.
        """
        if not isinstance(name, str):
            raise InvalidArgument(f'"name" argument must be a string (received {type(name).__name__})')

        cls = self._bound.get(name)
        if cls is None:
            raise UnknownStructure(f'"{name}" is not a valid extensible structure.')
        return cls

    def default(self, name: str) -> type:
        self.get(name)
        return self._defaults[name]

    def extend(self, name: str, extender: Extender) -> type:
        """
        Rebind `name` to the class returned by `extender(current_class)`.

        Example:
            def cool_guild(Guild):
                class CoolGuild(Guild):
                    def __init__(self, client, data):
                        super().__init__(client, data)
                        self.cool = True
                return CoolGuild

            registry.extend("Guild", cool_guild)
        """
        if name not in self:
            if not isinstance(name, str):
                raise InvalidArgument(f'"name" argument must be a string (received {type(name).__name__})')
            raise UnknownStructure(f'"{name}" is not a valid extensible structure.')

        if not callable(extender):
            raise InvalidArgument(
                '"extender" argument must be a callable that returns the extended structure class '
                f"(received {type(extender).__name__})."
            )

        current = self._bound[name]
        extended = extender(current)

        if not isinstance(extended, type):
            raise InvalidArgument(
                "The extender must return the extended structure class "
                f"(received {type(extended).__name__})."
            )

        if not issubclass(extended, current):
            raise StructureContractViolation(
                "The class returned from the extender must extend the existing structure class "
                f"(received class {_describe(extended)}; expected extension of {current.__name__})."
            )

        self._bound[name] = extended
        logger.info("Extended structure=%s %s -> %s", name, current.__name__, extended.__name__)
        return extended


def build_default_registry() -> StructureRegistry:
    return StructureRegistry()
